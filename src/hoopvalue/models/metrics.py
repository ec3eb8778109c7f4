"""Derived metric models produced by the scoring engines."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from .player import PlayerData


EPDTier = Literal["Elite", "Great", "Good", "Average", "Below Average", "Poor"]
BreakoutTier = Literal["Imminent", "High Potential", "Developing", "Long-term", "Established"]

_METRIC_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class EPDMetrics(BaseModel):
    """Effectiveness Per Dollar breakdown for one player."""

    player_id: str
    raw_production: float
    age_adjusted_production: float
    availability_multiplier: float
    replaceability_factor: float
    epd: float
    epd_per_million: float
    tier: EPDTier
    # Step function of games played, not a statistical interval.
    confidence: float

    model_config = _METRIC_CONFIG


class TalentComponents(BaseModel):
    age_adjusted_production: float
    improvement_velocity: float
    efficiency_markers: float
    skills_assessment: float

    model_config = _METRIC_CONFIG


class OpportunityComponents(BaseModel):
    minutes_available: float
    team_investment: float
    team_situation: float
    role_clarity: float

    model_config = _METRIC_CONFIG


class BreakoutMetrics(BaseModel):
    """Talent/opportunity breakdown and breakout classification."""

    player_id: str
    talent_score: float
    talent_components: TalentComponents
    opportunity_score: float
    opportunity_components: OpportunityComponents
    breakout_score: float
    breakout_tier: BreakoutTier
    ceiling: str
    floor: str

    model_config = _METRIC_CONFIG


class PlayerWithMetrics(PlayerData):
    """Input record enriched with both engines' output."""

    epd: EPDMetrics
    breakout: BreakoutMetrics
