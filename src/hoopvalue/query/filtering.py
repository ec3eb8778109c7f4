"""Helpers for slicing a scored roster by common criteria."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Literal, Mapping, Sequence

from hoopvalue.models import PlayerWithMetrics


SortDirection = Literal["asc", "desc"]

SORT_FIELDS: Mapping[str, Callable[[PlayerWithMetrics], float | str]] = {
    "name": lambda p: p.name.casefold(),
    "epd": lambda p: p.epd.epd,
    "epdPerMillion": lambda p: p.epd.epd_per_million,
    "salary": lambda p: p.salary,
    "breakoutScore": lambda p: p.breakout.breakout_score,
    "pointsPerGame": lambda p: p.points_per_game,
    "per": lambda p: p.per,
    "age": lambda p: p.age,
    "talentScore": lambda p: p.breakout.talent_score,
    "opportunityScore": lambda p: p.breakout.opportunity_score,
}


@dataclass(frozen=True)
class RosterFilter:
    """Filtering configuration; empty/None fields do not filter."""

    search: str | None = None
    team_codes: tuple[str, ...] = ()
    positions: tuple[str, ...] = ()
    tiers: tuple[str, ...] = ()
    min_salary: float | None = None
    max_salary: float | None = None
    min_age: int | None = None
    max_age: int | None = None


def _passes_filter(player: PlayerWithMetrics, criteria: RosterFilter) -> bool:
    if criteria.search:
        needle = criteria.search.lower()
        haystacks = (player.name, player.team, player.team_code)
        if not any(needle in value.lower() for value in haystacks):
            return False
    if criteria.team_codes and player.team_code not in criteria.team_codes:
        return False
    if criteria.positions and player.position not in criteria.positions:
        return False
    if criteria.tiers and player.epd.tier not in criteria.tiers:
        return False
    if criteria.min_salary is not None and player.salary < criteria.min_salary:
        return False
    if criteria.max_salary is not None and player.salary > criteria.max_salary:
        return False
    if criteria.min_age is not None and player.age < criteria.min_age:
        return False
    if criteria.max_age is not None and player.age > criteria.max_age:
        return False
    return True


def filter_players(
    players: Iterable[PlayerWithMetrics], criteria: RosterFilter
) -> list[PlayerWithMetrics]:
    return [player for player in players if _passes_filter(player, criteria)]


def sort_players(
    players: Iterable[PlayerWithMetrics],
    sort_by: str = "epdPerMillion",
    direction: SortDirection = "desc",
) -> list[PlayerWithMetrics]:
    if sort_by not in SORT_FIELDS:
        raise ValueError(f"Unknown sort field {sort_by!r}; expected one of {', '.join(SORT_FIELDS)}")
    if direction not in ("asc", "desc"):
        raise ValueError(f"Sort direction must be 'asc' or 'desc', got {direction!r}")
    return sorted(players, key=SORT_FIELDS[sort_by], reverse=direction == "desc")


def top_value_players(players: Sequence[PlayerWithMetrics], limit: int = 20) -> list[PlayerWithMetrics]:
    return sort_players(players, "epdPerMillion", "desc")[:limit]


def top_breakout_players(
    players: Sequence[PlayerWithMetrics], limit: int = 20
) -> list[PlayerWithMetrics]:
    """Highest breakout scores among players still inside the development window."""

    candidates = [
        player
        for player in players
        if player.breakout.breakout_tier != "Established" and player.age <= 27
    ]
    return sort_players(candidates, "breakoutScore", "desc")[:limit]
