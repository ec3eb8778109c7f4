"""Roster provider adapters that produce validated player records."""

from .roster import (
    DEFAULT_ROSTER_MAPPING,
    RosterLoadError,
    load_roster,
    load_roster_csv,
    load_roster_json,
    parse_players,
)

__all__ = [
    "DEFAULT_ROSTER_MAPPING",
    "RosterLoadError",
    "load_roster",
    "load_roster_csv",
    "load_roster_json",
    "parse_players",
]
