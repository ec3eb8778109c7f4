"""Breakout engine: talent and opportunity combined by geometric mean."""

from __future__ import annotations

import logging
import math
from typing import Tuple

from hoopvalue.config.weights import (
    DEFAULT_WEIGHTS,
    MetricWeights,
    OpportunityWeights,
    TalentWeights,
)
from hoopvalue.models import (
    BreakoutMetrics,
    OpportunityComponents,
    PlayerData,
    TalentComponents,
)

from .rules import Rule, clamp, first_match, step_above


logger = logging.getLogger(__name__)


# (production per minute above, base score)
PRODUCTION_RATE_STEPS: Tuple[Tuple[float, float], ...] = (
    (0.8, 90.0),
    (0.6, 75.0),
    (0.45, 60.0),
)

# Players who have already broken out are caught before the score rules.
BREAKOUT_TIER_RULES: Tuple[Rule[str], ...] = (
    Rule("Established", lambda p, score: p.points_per_game >= 20),
    Rule("Established", lambda p, score: p.points_per_game >= 18 and p.usage_rate >= 22),
    Rule("Established", lambda p, score: p.points_per_game >= 15 and p.minutes_per_game >= 28),
    Rule("Established", lambda p, score: p.age > 27),
    Rule("Imminent", lambda p, score: score >= 70),
    Rule("High Potential", lambda p, score: score >= 55),
    Rule("Developing", lambda p, score: score >= 40),
)

CEILING_RULES: Tuple[Rule[str], ...] = (
    Rule("All-NBA", lambda p, talent: talent >= 80 and p.age <= 25),
    Rule("All-Star", lambda p, talent: talent >= 70 and p.age <= 27),
    Rule("Quality Starter", lambda p, talent: talent >= 55),
    Rule("Rotation Player", lambda p, talent: talent >= 40),
)

FLOOR_RULES: Tuple[Rule[str], ...] = (
    Rule("Quality Starter", lambda p, opportunity: opportunity >= 70 and p.per > 15),
    Rule("Rotation Player", lambda p, opportunity: opportunity >= 50),
)


def production_per_minute(player: PlayerData) -> float:
    if player.minutes_per_game <= 0:
        logger.debug("Player %s has no minutes; production rate is 0", player.player_id)
        return 0.0
    return (
        player.points_per_game
        + player.assists_per_game * 0.8
        + player.rebounds_per_game * 0.5
    ) / player.minutes_per_game


def _age_adjusted_production(player: PlayerData) -> float:
    score = step_above(production_per_minute(player), PRODUCTION_RATE_STEPS, 50.0)
    if player.age <= 23:
        score = min(100.0, score * 1.15)
    elif player.age <= 25:
        score = min(100.0, score * 1.05)
    elif player.age >= 30:
        score *= 0.8
    return score


def _improvement_velocity(player: PlayerData) -> float:
    if player.age <= 24:
        velocity = 70.0 + (24 - player.age) * 5
        if player.per > 18:
            velocity += 10
        return velocity
    if player.age >= 28:
        return 30.0
    return 50.0


def _efficiency_markers(player: PlayerData) -> float:
    score = 50.0
    if player.fg_percentage > 50:
        score += 15
    if player.fg3_percentage > 37:
        score += 15
    if player.ft_percentage > 80:
        score += 10
    if player.turnovers_per_game < 2:
        score += 10
    return score


def _skills_assessment(player: PlayerData) -> float:
    score = 50.0
    multidimensional = player.points_per_game > 10 and (
        player.assists_per_game > 3 or player.rebounds_per_game > 5
    )
    if multidimensional:
        score += 20
    if player.steals_per_game > 1 or player.blocks_per_game > 1:
        score += 15
    return score


def calculate_talent_components(player: PlayerData) -> TalentComponents:
    return TalentComponents(
        age_adjusted_production=clamp(_age_adjusted_production(player)),
        improvement_velocity=clamp(_improvement_velocity(player)),
        efficiency_markers=clamp(_efficiency_markers(player)),
        skills_assessment=clamp(_skills_assessment(player)),
    )


def calculate_opportunity_components(player: PlayerData) -> OpportunityComponents:
    mpg = player.minutes_per_game

    # Fewer minutes now means more room to grow into.
    if mpg < 20:
        minutes_available = 90.0
    elif mpg < 25:
        minutes_available = 75.0
    elif mpg < 30:
        minutes_available = 60.0
    elif mpg >= 35:
        minutes_available = 30.0
    else:
        minutes_available = 50.0

    if player.contract_type == "rookie":
        team_investment = 70.0
    elif player.contract_type in ("max", "supermax"):
        team_investment = 40.0
    elif player.contract_type == "minimum":
        team_investment = 30.0
    else:
        team_investment = 50.0

    if player.usage_rate > 25:
        team_situation = 30.0
    elif player.usage_rate < 18 and player.per > 15:
        team_situation = 80.0
    else:
        team_situation = 50.0

    if mpg > 30 and player.usage_rate > 24:
        role_clarity = 85.0
    elif mpg < 25:
        role_clarity = 40.0
    else:
        role_clarity = 60.0

    return OpportunityComponents(
        minutes_available=clamp(minutes_available),
        team_investment=clamp(team_investment),
        team_situation=clamp(team_situation),
        role_clarity=clamp(role_clarity),
    )


def talent_score(components: TalentComponents, weights: TalentWeights) -> float:
    return (
        components.age_adjusted_production * weights.age_adjusted_production
        + components.improvement_velocity * weights.improvement_velocity
        + components.efficiency_markers * weights.efficiency_markers
        + components.skills_assessment * weights.skills_assessment
    )


def opportunity_score(components: OpportunityComponents, weights: OpportunityWeights) -> float:
    return (
        components.minutes_available * weights.minutes_available
        + components.team_investment * weights.team_investment
        + components.team_situation * weights.team_situation
        + components.role_clarity * weights.role_clarity
    )


def combine_scores(talent: float, opportunity: float) -> float:
    """Geometric mean; a zero on either axis yields zero."""

    return math.sqrt(talent * opportunity)


def get_breakout_tier(player: PlayerData, breakout_score: float) -> str:
    return first_match(BREAKOUT_TIER_RULES, player, breakout_score, default="Long-term")


def project_ceiling(player: PlayerData, talent: float) -> str:
    return first_match(CEILING_RULES, player, talent, default="End of Bench")


def project_floor(player: PlayerData, opportunity: float) -> str:
    return first_match(FLOOR_RULES, player, opportunity, default="Out of Rotation")


def calculate_breakout(player: PlayerData, weights: MetricWeights | None = None) -> BreakoutMetrics:
    weights = weights or DEFAULT_WEIGHTS
    talent_components = calculate_talent_components(player)
    opportunity_components = calculate_opportunity_components(player)

    talent = talent_score(talent_components, weights.talent)
    opportunity = opportunity_score(opportunity_components, weights.opportunity)
    breakout_score = combine_scores(talent, opportunity)

    return BreakoutMetrics(
        player_id=player.player_id,
        talent_score=talent,
        talent_components=talent_components,
        opportunity_score=opportunity,
        opportunity_components=opportunity_components,
        breakout_score=breakout_score,
        breakout_tier=get_breakout_tier(player, breakout_score),
        ceiling=project_ceiling(player, talent),
        floor=project_floor(player, opportunity),
    )


__all__ = [
    "BREAKOUT_TIER_RULES",
    "CEILING_RULES",
    "FLOOR_RULES",
    "calculate_breakout",
    "calculate_opportunity_components",
    "calculate_talent_components",
    "combine_scores",
    "get_breakout_tier",
    "opportunity_score",
    "production_per_minute",
    "project_ceiling",
    "project_floor",
    "talent_score",
]
