"""Pydantic models for API I/O."""

from .roster import LeagueSummaryResponse, MetricsRequest, TeamSummaryResponse

__all__ = [
    "LeagueSummaryResponse",
    "MetricsRequest",
    "TeamSummaryResponse",
]
