"""Apply both engines to a roster."""

from __future__ import annotations

import logging
from typing import Iterable, List

from hoopvalue.config.weights import MetricWeights
from hoopvalue.models import PlayerData, PlayerWithMetrics

from .breakout import calculate_breakout
from .epd import calculate_epd


logger = logging.getLogger(__name__)


def compute_all_metrics(player: PlayerData, weights: MetricWeights | None = None) -> PlayerWithMetrics:
    return PlayerWithMetrics(
        **player.model_dump(),
        epd=calculate_epd(player, weights),
        breakout=calculate_breakout(player, weights),
    )


def compute_all_players_metrics(
    players: Iterable[PlayerData], weights: MetricWeights | None = None
) -> List[PlayerWithMetrics]:
    """Score every player independently, preserving input order."""

    results = [compute_all_metrics(player, weights) for player in players]
    logger.debug("Computed metrics for %d players", len(results))
    return results
