"""REST API exposing player value and breakout metrics."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import List, Sequence

from fastapi import FastAPI, HTTPException, Query

from hoopvalue.api.schemas import LeagueSummaryResponse, MetricsRequest, TeamSummaryResponse
from hoopvalue.ingest import load_roster
from hoopvalue.metrics import compute_all_players_metrics
from hoopvalue.models import PlayerData, PlayerWithMetrics
from hoopvalue.query import (
    RosterFilter,
    filter_players,
    sort_players,
    summarize_league,
    summarize_teams,
    top_breakout_players,
    top_value_players,
)


logger = logging.getLogger(__name__)

ROSTER_ENV_VAR = "HOOPVALUE_ROSTER"


def _initial_players(players: Sequence[PlayerData] | None, roster_path: Path | None) -> List[PlayerData]:
    if players is not None:
        return list(players)
    if roster_path is None and os.environ.get(ROSTER_ENV_VAR):
        roster_path = Path(os.environ[ROSTER_ENV_VAR])
    if roster_path is None:
        logger.info("No roster configured; starting with an empty player list")
        return []
    return load_roster(roster_path)


def create_app(
    players: Sequence[PlayerData] | None = None,
    roster_path: Path | None = None,
) -> FastAPI:
    app = FastAPI(title="hoopvalue metrics")
    scored = compute_all_players_metrics(_initial_players(players, roster_path))
    app.state.players = scored
    logger.info("Loaded %d players", len(scored))

    def _players() -> list[PlayerWithMetrics]:
        return app.state.players

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/players", response_model=List[PlayerWithMetrics])
    async def list_players(
        search: str | None = None,
        team: List[str] | None = Query(None),
        position: List[str] | None = Query(None),
        tier: List[str] | None = Query(None),
        min_salary: float | None = None,
        max_salary: float | None = None,
        min_age: int | None = None,
        max_age: int | None = None,
        sort_by: str = "epdPerMillion",
        direction: str = "desc",
        limit: int | None = Query(None, ge=1),
    ) -> list[PlayerWithMetrics]:
        criteria = RosterFilter(
            search=search,
            team_codes=tuple(team or ()),
            positions=tuple(position or ()),
            tiers=tuple(tier or ()),
            min_salary=min_salary,
            max_salary=max_salary,
            min_age=min_age,
            max_age=max_age,
        )
        try:
            result = sort_players(filter_players(_players(), criteria), sort_by, direction)  # type: ignore[arg-type]
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return result[:limit] if limit is not None else result

    @app.get("/players/top-value", response_model=List[PlayerWithMetrics])
    async def top_value(limit: int = Query(20, ge=1, le=500)) -> list[PlayerWithMetrics]:
        return top_value_players(_players(), limit)

    @app.get("/players/top-breakout", response_model=List[PlayerWithMetrics])
    async def top_breakout(limit: int = Query(20, ge=1, le=500)) -> list[PlayerWithMetrics]:
        return top_breakout_players(_players(), limit)

    @app.get("/players/{player_id}", response_model=PlayerWithMetrics)
    async def get_player(player_id: str) -> PlayerWithMetrics:
        for player in _players():
            if player.player_id == player_id:
                return player
        raise HTTPException(status_code=404, detail="Player not found")

    @app.get("/teams", response_model=List[TeamSummaryResponse])
    async def teams() -> list[TeamSummaryResponse]:
        return [TeamSummaryResponse(**asdict(summary)) for summary in summarize_teams(_players())]

    @app.get("/summary", response_model=LeagueSummaryResponse)
    async def summary() -> LeagueSummaryResponse:
        return LeagueSummaryResponse(**asdict(summarize_league(_players())))

    @app.post("/metrics", response_model=List[PlayerWithMetrics])
    async def metrics(request: MetricsRequest) -> list[PlayerWithMetrics]:
        return compute_all_players_metrics(request.players)

    return app
