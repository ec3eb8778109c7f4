"""Aggregate views of a scored roster."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean
from typing import Sequence

from hoopvalue.models import PlayerWithMetrics


@dataclass(frozen=True)
class TeamSummary:
    team_code: str
    team: str
    player_count: int
    total_salary: float
    average_epd: float
    top_player_id: str
    top_player_name: str


@dataclass(frozen=True)
class LeagueSummary:
    total_players: int
    total_salary: float
    average_epd: float | None
    elite_players: int


def summarize_teams(players: Sequence[PlayerWithMetrics]) -> list[TeamSummary]:
    """One summary per team code, in order of first appearance."""

    rosters: dict[str, list[PlayerWithMetrics]] = {}
    for player in players:
        rosters.setdefault(player.team_code, []).append(player)

    summaries: list[TeamSummary] = []
    for team_code, roster in rosters.items():
        top = max(roster, key=lambda p: p.epd.epd)
        summaries.append(
            TeamSummary(
                team_code=team_code,
                team=roster[0].team,
                player_count=len(roster),
                total_salary=sum(p.salary for p in roster),
                average_epd=fmean(p.epd.epd for p in roster),
                top_player_id=top.player_id,
                top_player_name=top.name,
            )
        )
    return summaries


def summarize_league(players: Sequence[PlayerWithMetrics]) -> LeagueSummary:
    return LeagueSummary(
        total_players=len(players),
        total_salary=sum(p.salary for p in players),
        average_epd=fmean(p.epd.epd for p in players) if players else None,
        elite_players=sum(1 for p in players if p.epd.tier == "Elite"),
    )
