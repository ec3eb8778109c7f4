"""Fixed weight and threshold tables for the scoring engines."""

from .weights import (
    AVAILABILITY_STEPS,
    CONFIDENCE_STEPS,
    DEFAULT_WEIGHTS,
    EPD_TIER_THRESHOLDS,
    POSITION_SCARCITY,
    MetricWeights,
    OpportunityWeights,
    ProductionWeights,
    TalentWeights,
)

__all__ = [
    "AVAILABILITY_STEPS",
    "CONFIDENCE_STEPS",
    "DEFAULT_WEIGHTS",
    "EPD_TIER_THRESHOLDS",
    "POSITION_SCARCITY",
    "MetricWeights",
    "OpportunityWeights",
    "ProductionWeights",
    "TalentWeights",
]
