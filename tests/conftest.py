from __future__ import annotations

from typing import Any, Callable

import pytest

from hoopvalue.models import PlayerData


BASE_PLAYER: dict[str, Any] = {
    "player_id": "p1",
    "name": "Test Player",
    "team": "Testville Hoopers",
    "team_code": "TST",
    "position": "G",
    "age": 27,
    "games_played": 70,
    "minutes_per_game": 30.0,
    "points_per_game": 15.0,
    "rebounds_per_game": 5.0,
    "assists_per_game": 4.0,
    "steals_per_game": 1.0,
    "blocks_per_game": 0.5,
    "turnovers_per_game": 2.0,
    "fg_percentage": 46.0,
    "fg3_percentage": 36.0,
    "ft_percentage": 78.0,
    "per": 16.0,
    "win_shares": 5.0,
    "vorp": 1.5,
    "bpm": 1.0,
    "usage_rate": 21.0,
    "salary": 10.0,
    "contract_years": 3,
    "contract_type": "veteran",
    "games_available": 75,
    "injury_history": "clean",
}


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def make_player() -> Callable[..., PlayerData]:
    def _make(**overrides: Any) -> PlayerData:
        return PlayerData(**(BASE_PLAYER | overrides))

    return _make
