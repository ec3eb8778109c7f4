"""Weight and threshold tables consumed by the EPD and breakout engines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Tuple


@dataclass(frozen=True)
class ProductionWeights:
    points: float = 1.5
    rebounds: float = 0.6
    assists: float = 1.0
    steals: float = 0.8
    blocks: float = 0.8
    turnovers: float = -0.8
    per: float = 2.0
    win_shares: float = 3.0
    vorp: float = 2.5
    bpm: float = 2.0
    efficiency: float = 0.5


@dataclass(frozen=True)
class TalentWeights:
    age_adjusted_production: float = 0.35
    improvement_velocity: float = 0.25
    efficiency_markers: float = 0.20
    skills_assessment: float = 0.20


@dataclass(frozen=True)
class OpportunityWeights:
    minutes_available: float = 0.30
    team_investment: float = 0.25
    team_situation: float = 0.25
    role_clarity: float = 0.20


@dataclass(frozen=True)
class MetricWeights:
    """Bundle of every linear weight table the engines read."""

    production: ProductionWeights = field(default_factory=ProductionWeights)
    talent: TalentWeights = field(default_factory=TalentWeights)
    opportunity: OpportunityWeights = field(default_factory=OpportunityWeights)


DEFAULT_WEIGHTS = MetricWeights()

# (minimum, label) pairs, checked top-down against epd per million.
EPD_TIER_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (12.0, "Elite"),
    (7.0, "Great"),
    (4.0, "Good"),
    (2.0, "Average"),
    (1.0, "Below Average"),
)

# (minimum games played, confidence)
CONFIDENCE_STEPS: Tuple[Tuple[float, float], ...] = (
    (70, 0.95),
    (55, 0.85),
    (40, 0.7),
    (25, 0.5),
)

# (minimum share of an 82 game season, multiplier)
AVAILABILITY_STEPS: Tuple[Tuple[float, float], ...] = (
    (0.9, 1.0),
    (0.8, 0.95),
    (0.7, 0.85),
    (0.6, 0.72),
    (0.5, 0.58),
)

POSITION_SCARCITY: Mapping[str, float] = {
    "G": 0.95,
    "F": 1.05,
    "C": 0.9,
}

SEASON_GAMES = 82
SALARY_FLOOR = 0.5
