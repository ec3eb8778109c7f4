import math

import pytest

from hoopvalue.config import MetricWeights, TalentWeights
from hoopvalue.metrics.breakout import (
    calculate_breakout,
    calculate_opportunity_components,
    calculate_talent_components,
    combine_scores,
    get_breakout_tier,
    production_per_minute,
    project_ceiling,
    project_floor,
)


@pytest.fixture
def prospect(make_player):
    return make_player(
        player_id="prospect",
        age=21,
        points_per_game=12.0,
        rebounds_per_game=6.0,
        assists_per_game=2.0,
        minutes_per_game=22.0,
        steals_per_game=1.2,
        blocks_per_game=1.1,
        turnovers_per_game=1.2,
        fg_percentage=52.0,
        fg3_percentage=38.0,
        ft_percentage=81.0,
        per=19.0,
        usage_rate=17.0,
        contract_type="rookie",
    )


def test_talent_components_for_veteran(make_player):
    components = calculate_talent_components(make_player())

    assert production_per_minute(make_player()) == pytest.approx(0.69)
    assert components.age_adjusted_production == 75.0
    assert components.improvement_velocity == 50.0
    assert components.efficiency_markers == 50.0
    assert components.skills_assessment == 70.0


def test_talent_components_for_prospect(prospect):
    components = calculate_talent_components(prospect)

    assert components.age_adjusted_production == pytest.approx(86.25)
    assert components.improvement_velocity == 95.0
    assert components.efficiency_markers == 100.0
    assert components.skills_assessment == 85.0


def test_opportunity_components_for_prospect(prospect):
    components = calculate_opportunity_components(prospect)

    assert components.minutes_available == 75.0
    assert components.team_investment == 70.0
    assert components.team_situation == 80.0
    assert components.role_clarity == 40.0


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [(15.0, 90.0), (20.0, 75.0), (27.0, 60.0), (30.0, 50.0), (34.9, 50.0), (35.0, 30.0)],
)
def test_minutes_available_bands(make_player, minutes, expected):
    assert calculate_opportunity_components(make_player(minutes_per_game=minutes)).minutes_available == expected


@pytest.mark.parametrize(
    ("contract", "expected"),
    [("rookie", 70.0), ("max", 40.0), ("supermax", 40.0), ("minimum", 30.0), ("veteran", 50.0), ("mid-level", 50.0)],
)
def test_team_investment_by_contract(make_player, contract, expected):
    assert calculate_opportunity_components(make_player(contract_type=contract)).team_investment == expected


def test_star_role_clarity_and_situation(make_player):
    components = calculate_opportunity_components(make_player(minutes_per_game=34.0, usage_rate=30.0))

    assert components.role_clarity == 85.0
    assert components.team_situation == 30.0


def test_young_player_improvement_velocity_is_clamped(make_player):
    components = calculate_talent_components(make_player(age=18, per=22.0))

    assert components.improvement_velocity == 100.0


def test_older_player_production_discount(make_player):
    components = calculate_talent_components(make_player(age=31))

    assert components.age_adjusted_production == pytest.approx(60.0)
    assert components.improvement_velocity == 30.0


def test_zero_minutes_falls_back_to_base_production(make_player):
    player = make_player(minutes_per_game=0.0)

    assert production_per_minute(player) == 0.0
    assert calculate_talent_components(player).age_adjusted_production == 50.0


def test_calculate_breakout_for_veteran(make_player):
    metrics = calculate_breakout(make_player())

    assert metrics.talent_score == pytest.approx(62.75)
    assert metrics.opportunity_score == pytest.approx(52.0)
    assert metrics.breakout_score == pytest.approx(math.sqrt(62.75 * 52.0))
    assert metrics.breakout_tier == "Established"
    assert metrics.ceiling == "Quality Starter"
    assert metrics.floor == "Rotation Player"


def test_calculate_breakout_for_prospect(prospect):
    metrics = calculate_breakout(prospect)

    assert metrics.player_id == "prospect"
    assert metrics.talent_score == pytest.approx(90.9375)
    assert metrics.opportunity_score == pytest.approx(68.0)
    assert metrics.breakout_score == pytest.approx(math.sqrt(90.9375 * 68.0))
    assert metrics.breakout_tier == "Imminent"
    assert metrics.ceiling == "All-NBA"
    assert metrics.floor == "Rotation Player"


def test_high_usage_young_guard_is_established(make_player):
    player = make_player(
        age=24,
        position="G",
        points_per_game=18.0,
        rebounds_per_game=4.0,
        assists_per_game=6.0,
        minutes_per_game=32.0,
        usage_rate=23.0,
        per=19.0,
        salary=8.0,
        games_played=78,
        contract_type="rookie",
    )
    metrics = calculate_breakout(player)

    assert metrics.talent_components.age_adjusted_production == pytest.approx(78.75)
    assert metrics.talent_components.improvement_velocity == 80.0
    assert metrics.breakout_tier == "Established"


def test_established_rules_override_score(make_player):
    veteran_scorer = make_player(age=35, points_per_game=25.0)

    assert get_breakout_tier(veteran_scorer, 95.0) == "Established"


@pytest.mark.parametrize(
    "overrides",
    [
        {"points_per_game": 20.0, "minutes_per_game": 20.0},
        {"points_per_game": 18.0, "usage_rate": 22.0, "minutes_per_game": 20.0},
        {"points_per_game": 15.0, "minutes_per_game": 28.0},
        {"points_per_game": 8.0, "minutes_per_game": 15.0, "age": 28},
    ],
)
def test_each_established_rule(make_player, overrides):
    player = make_player(**({"age": 22} | overrides))

    assert get_breakout_tier(player, 90.0) == "Established"


@pytest.mark.parametrize(
    ("score", "tier"),
    [
        (70.0, "Imminent"),
        (69.999, "High Potential"),
        (55.0, "High Potential"),
        (54.999, "Developing"),
        (40.0, "Developing"),
        (39.999, "Long-term"),
        (0.0, "Long-term"),
    ],
)
def test_breakout_tier_boundaries(make_player, score, tier):
    player = make_player(age=22, points_per_game=9.0, minutes_per_game=18.0)

    assert get_breakout_tier(player, score) == tier


@pytest.mark.parametrize(
    ("age", "talent", "ceiling"),
    [
        (25, 80.0, "All-NBA"),
        (26, 80.0, "All-Star"),
        (27, 70.0, "All-Star"),
        (28, 79.0, "Quality Starter"),
        (30, 55.0, "Quality Starter"),
        (30, 40.0, "Rotation Player"),
        (30, 39.9, "End of Bench"),
    ],
)
def test_project_ceiling(make_player, age, talent, ceiling):
    assert project_ceiling(make_player(age=age), talent) == ceiling


@pytest.mark.parametrize(
    ("per", "opportunity", "floor"),
    [
        (16.0, 70.0, "Quality Starter"),
        (15.0, 70.0, "Rotation Player"),
        (16.0, 50.0, "Rotation Player"),
        (16.0, 49.9, "Out of Rotation"),
    ],
)
def test_project_floor(make_player, per, opportunity, floor):
    assert project_floor(make_player(per=per), opportunity) == floor


def test_geometric_mean_collapses_on_zero():
    assert combine_scores(0.0, 100.0) == 0.0
    assert combine_scores(100.0, 0.0) == 0.0
    assert combine_scores(64.0, 100.0) == pytest.approx(80.0)


def test_zero_talent_weights_collapse_breakout(prospect):
    weights = MetricWeights(talent=TalentWeights(0.0, 0.0, 0.0, 0.0))
    metrics = calculate_breakout(prospect, weights)

    assert metrics.talent_score == 0.0
    assert metrics.opportunity_score == pytest.approx(68.0)
    assert metrics.breakout_score == 0.0
    assert metrics.breakout_tier == "Long-term"
    assert metrics.ceiling == "End of Bench"


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"age": 18, "per": 30.0, "minutes_per_game": 5.0, "points_per_game": 10.0},
        {"age": 40, "minutes_per_game": 40.0, "usage_rate": 35.0},
        {"minutes_per_game": 0.0, "games_played": 0},
        {"age": 19, "fg_percentage": 60.0, "fg3_percentage": 45.0, "ft_percentage": 90.0, "turnovers_per_game": 0.5},
    ],
)
def test_scores_stay_in_range(make_player, overrides):
    metrics = calculate_breakout(make_player(**overrides))
    talent = metrics.talent_components
    opportunity = metrics.opportunity_components

    values = [
        talent.age_adjusted_production,
        talent.improvement_velocity,
        talent.efficiency_markers,
        talent.skills_assessment,
        opportunity.minutes_available,
        opportunity.team_investment,
        opportunity.team_situation,
        opportunity.role_clarity,
        metrics.talent_score,
        metrics.opportunity_score,
        metrics.breakout_score,
    ]
    assert all(0.0 <= value <= 100.0 for value in values)


def test_calculate_breakout_is_deterministic(prospect):
    assert calculate_breakout(prospect) == calculate_breakout(prospect)
