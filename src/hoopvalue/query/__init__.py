"""Stateless roster queries over computed metrics (filter, sort, summaries)."""

from .filtering import (
    SORT_FIELDS,
    RosterFilter,
    filter_players,
    sort_players,
    top_breakout_players,
    top_value_players,
)
from .summary import LeagueSummary, TeamSummary, summarize_league, summarize_teams

__all__ = [
    "SORT_FIELDS",
    "LeagueSummary",
    "RosterFilter",
    "TeamSummary",
    "filter_players",
    "sort_players",
    "summarize_league",
    "summarize_teams",
    "top_breakout_players",
    "top_value_players",
]
