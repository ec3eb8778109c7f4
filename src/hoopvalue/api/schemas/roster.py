from __future__ import annotations

from typing import List

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from hoopvalue.models import PlayerData


class MetricsRequest(BaseModel):
    players: List[PlayerData]


class TeamSummaryResponse(BaseModel):
    team_code: str
    team: str
    player_count: int
    total_salary: float
    average_epd: float
    top_player_id: str
    top_player_name: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LeagueSummaryResponse(BaseModel):
    total_players: int
    total_salary: float
    average_epd: float | None
    elite_players: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
