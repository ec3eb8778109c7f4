"""Scoring engines for player value and breakout potential."""

from .aggregate import compute_all_metrics, compute_all_players_metrics
from .breakout import calculate_breakout, get_breakout_tier, project_ceiling, project_floor
from .epd import calculate_epd, get_epd_tier

__all__ = [
    "calculate_breakout",
    "calculate_epd",
    "compute_all_metrics",
    "compute_all_players_metrics",
    "get_breakout_tier",
    "get_epd_tier",
    "project_ceiling",
    "project_floor",
]
