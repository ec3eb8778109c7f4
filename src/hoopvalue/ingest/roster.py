"""Helpers to load roster files (JSON or CSV) into :class:`PlayerData`."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from hoopvalue.models import PlayerData


logger = logging.getLogger(__name__)


class RosterLoadError(ValueError):
    """Raised when a roster entry cannot be turned into a player record."""


# field name -> CSV column; defaults to the camelCase keys used by roster feeds.
DEFAULT_ROSTER_MAPPING: dict[str, str] = {
    name: (info.alias or name) for name, info in PlayerData.model_fields.items()
}


def parse_players(entries: Iterable[Mapping[str, Any]], *, source: str = "roster") -> List[PlayerData]:
    players: List[PlayerData] = []
    for index, entry in enumerate(entries):
        try:
            players.append(PlayerData.model_validate(entry))
        except ValidationError as exc:
            logger.warning("Invalid player entry %d in %s: %s", index, source, exc)
            raise RosterLoadError(f"{source}: entry {index} is not a valid player: {exc}") from exc
    return players


def load_roster_json(path: Path) -> List[PlayerData]:
    """Load a JSON list of player objects, or an object with a ``players`` list."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise RosterLoadError(f"{path}: invalid JSON: {exc}") from exc
    if isinstance(payload, dict):
        payload = payload.get("players")
    if not isinstance(payload, list):
        raise RosterLoadError(f"{path}: expected a list of players")
    return parse_players(payload, source=str(path))


def _row_to_entry(row: Mapping[str, Optional[str]], mapping: Mapping[str, str]) -> dict[str, str]:
    entry: dict[str, str] = {}
    for field_name, column in mapping.items():
        value = row.get(column)
        if value is None:
            continue
        value = value.strip()
        if value:
            entry[field_name] = value
    return entry


def load_roster_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerData]:
    """Load a CSV roster; ``mapping`` overrides field->column pairs."""

    resolved = DEFAULT_ROSTER_MAPPING | dict(mapping or {})
    unknown = set(resolved) - set(PlayerData.model_fields)
    if unknown:
        raise RosterLoadError(f"Unknown roster fields in mapping: {', '.join(sorted(unknown))}")

    entries: list[dict[str, str]] = []
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for line_number, row in enumerate(reader, start=2):
            entry = _row_to_entry(row, resolved)
            if not entry:
                logger.debug("Skipping blank row %d in %s", line_number, path)
                continue
            entries.append(entry)
    return parse_players(entries, source=str(path))


def load_roster(
    path: Path,
    *,
    fmt: str | None = None,
    mapping: Mapping[str, str] | None = None,
) -> List[PlayerData]:
    """Dispatch on ``fmt`` (``json``/``csv``) or the file suffix."""

    resolved = (fmt or path.suffix.lstrip(".")).lower()
    if resolved == "json":
        return load_roster_json(path)
    if resolved == "csv":
        return load_roster_csv(path, mapping=mapping)
    raise RosterLoadError(f"Unsupported roster format {resolved!r} for {path}")
