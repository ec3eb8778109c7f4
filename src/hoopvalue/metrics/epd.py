"""Effectiveness Per Dollar (EPD) engine.

EPD relates on-court production to contract cost::

    epd = raw production x age x availability x replaceability x production floor
    epd_per_million = epd / max(salary, 0.5)

Every stage is a pure function of a single :class:`PlayerData`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Tuple

from hoopvalue.config.weights import (
    AVAILABILITY_STEPS,
    CONFIDENCE_STEPS,
    DEFAULT_WEIGHTS,
    EPD_TIER_THRESHOLDS,
    POSITION_SCARCITY,
    SALARY_FLOOR,
    SEASON_GAMES,
    MetricWeights,
    ProductionWeights,
)
from hoopvalue.models import EPDMetrics, PlayerData

from .rules import step_at_least


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillPremium:
    """Multiplicative replaceability bonus for a scarce skill."""

    name: str
    multiplier: float
    applies: Callable[[PlayerData], bool]


# Premiums stack: every matching entry multiplies the factor.
SKILL_PREMIUMS: Tuple[SkillPremium, ...] = (
    SkillPremium(
        "elite_shooter",
        1.1,
        lambda p: p.fg3_percentage > 40 and p.points_per_game > 15,
    ),
    SkillPremium("elite_playmaker", 1.08, lambda p: p.assists_per_game > 7),
    SkillPremium("rim_protector", 1.12, lambda p: p.blocks_per_game > 2),
    SkillPremium("perimeter_defender", 1.05, lambda p: p.steals_per_game > 1.5),
    SkillPremium("two_way", 1.1, lambda p: p.per > 20 and p.bpm > 3),
)

# (points per game below, multiplier)
PRODUCTION_FLOOR_STEPS: Tuple[Tuple[float, float], ...] = (
    (12.0, 0.7),
    (15.0, 0.85),
)


def estimate_true_shooting(player: PlayerData) -> float:
    """Rough shooting-efficiency blend; not the standard TS% formula."""

    return (
        player.fg_percentage
        + 1.5 * player.fg3_percentage * 0.33
        + player.ft_percentage * 0.44
    ) / 2


def annualized_win_shares(player: PlayerData) -> float:
    """Win shares scaled to an 82 game pace."""

    if player.games_played <= 0:
        logger.debug("Player %s has no games played; win shares pace is 0", player.player_id)
        return 0.0
    return player.win_shares / (player.games_played / SEASON_GAMES)


def calculate_raw_production(
    player: PlayerData, weights: ProductionWeights | None = None
) -> float:
    w = weights or DEFAULT_WEIGHTS.production
    return (
        player.points_per_game * w.points
        + player.rebounds_per_game * w.rebounds
        + player.assists_per_game * w.assists
        + player.steals_per_game * w.steals
        + player.blocks_per_game * w.blocks
        + player.turnovers_per_game * w.turnovers
        + player.per * w.per
        + annualized_win_shares(player) * w.win_shares
        + player.vorp * w.vorp
        + player.bpm * w.bpm
        + estimate_true_shooting(player) * w.efficiency
    )


def get_age_multiplier(age: int) -> float:
    """Production multiplier peaking at 1.0 for ages 25-29."""

    if 25 <= age <= 29:
        return 1.0
    if age < 25:
        return 0.9 + (25 - age) * 0.03
    if 30 <= age < 33:
        return 0.95 - (age - 30) * 0.03
    if 33 <= age < 36:
        return 0.86 - (age - 33) * 0.04
    return max(0.6, 0.74 - (age - 36) * 0.05)


def get_availability_multiplier(games_played: int, total_possible: int = SEASON_GAMES) -> float:
    return step_at_least(games_played / total_possible, AVAILABILITY_STEPS, 0.4)


def get_replaceability_factor(player: PlayerData) -> float:
    factor = 1.0
    factor *= POSITION_SCARCITY.get(player.position, 1.0)
    for premium in SKILL_PREMIUMS:
        if premium.applies(player):
            factor *= premium.multiplier
    return factor


def get_production_floor_multiplier(points_per_game: float) -> float:
    """Penalty for low-volume scorers, applied after replaceability."""

    for ceiling, multiplier in PRODUCTION_FLOOR_STEPS:
        if points_per_game < ceiling:
            return multiplier
    return 1.0


def get_epd_tier(epd_per_million: float) -> str:
    return step_at_least(epd_per_million, EPD_TIER_THRESHOLDS, "Poor")


def get_confidence(games_played: int) -> float:
    return step_at_least(games_played, CONFIDENCE_STEPS, 0.3)


def calculate_epd(player: PlayerData, weights: MetricWeights | None = None) -> EPDMetrics:
    weights = weights or DEFAULT_WEIGHTS
    raw_production = calculate_raw_production(player, weights.production)
    age_adjusted_production = raw_production * get_age_multiplier(player.age)
    availability_multiplier = get_availability_multiplier(player.games_played)
    replaceability_factor = get_replaceability_factor(player)
    production_floor = get_production_floor_multiplier(player.points_per_game)

    epd = (
        age_adjusted_production
        * availability_multiplier
        * replaceability_factor
        * production_floor
    )
    epd_per_million = epd / max(player.salary, SALARY_FLOOR)

    return EPDMetrics(
        player_id=player.player_id,
        raw_production=raw_production,
        age_adjusted_production=age_adjusted_production,
        availability_multiplier=availability_multiplier,
        replaceability_factor=replaceability_factor,
        epd=epd,
        epd_per_million=epd_per_million,
        tier=get_epd_tier(epd_per_million),
        confidence=get_confidence(player.games_played),
    )


__all__ = [
    "SKILL_PREMIUMS",
    "SkillPremium",
    "calculate_epd",
    "calculate_raw_production",
    "estimate_true_shooting",
    "get_age_multiplier",
    "get_availability_multiplier",
    "get_confidence",
    "get_epd_tier",
    "get_production_floor_multiplier",
    "get_replaceability_factor",
]
