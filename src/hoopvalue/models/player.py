"""Season record for a single player, as supplied by a roster feed."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


ContractType = Literal["rookie", "veteran", "max", "supermax", "minimum", "mid-level"]
InjuryHistory = Literal["clean", "minor", "moderate", "significant"]


class PlayerData(BaseModel):
    """Box-score, advanced, contract and availability data for one season.

    Field names are snake_case; roster feeds use the camelCase aliases
    (``pointsPerGame``, ``fg3Percentage``, ...) and both are accepted.
    Percentages are on a 0-100 scale and salary is in millions.
    """

    player_id: str = Field(..., alias="id", min_length=1)
    nba_id: Optional[int] = None
    name: str
    team: str
    team_code: str
    position: str
    age: int

    games_played: int
    minutes_per_game: float
    points_per_game: float
    rebounds_per_game: float
    assists_per_game: float
    steals_per_game: float
    blocks_per_game: float
    turnovers_per_game: float
    fg_percentage: float
    fg3_percentage: float
    ft_percentage: float

    per: float
    win_shares: float
    vorp: float
    bpm: float
    usage_rate: float

    salary: float
    contract_years: int
    contract_type: ContractType

    games_available: int
    # Descriptive only; no formula reads it.
    injury_history: InjuryHistory = "clean"

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
