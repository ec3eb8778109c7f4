"""Canonical player and metric models."""

from .metrics import (
    BreakoutMetrics,
    BreakoutTier,
    EPDMetrics,
    EPDTier,
    OpportunityComponents,
    PlayerWithMetrics,
    TalentComponents,
)
from .player import ContractType, InjuryHistory, PlayerData

__all__ = [
    "BreakoutMetrics",
    "BreakoutTier",
    "ContractType",
    "EPDMetrics",
    "EPDTier",
    "InjuryHistory",
    "OpportunityComponents",
    "PlayerData",
    "PlayerWithMetrics",
    "TalentComponents",
]
