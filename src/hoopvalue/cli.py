"""Command-line interface for scoring a roster file."""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from hoopvalue.config_loader import MappingProfile
from hoopvalue.ingest import RosterLoadError, load_roster
from hoopvalue.metrics import compute_all_players_metrics
from hoopvalue.models import PlayerWithMetrics
from hoopvalue.query import (
    SORT_FIELDS,
    RosterFilter,
    filter_players,
    sort_players,
    top_breakout_players,
    top_value_players,
)


CSV_HEADER = [
    "id",
    "name",
    "teamCode",
    "position",
    "age",
    "salary",
    "epd",
    "epdPerMillion",
    "tier",
    "confidence",
    "talentScore",
    "opportunityScore",
    "breakoutScore",
    "breakoutTier",
    "ceiling",
    "floor",
]


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute EPD and breakout metrics for a roster")
    parser.add_argument("roster", type=Path, help="Path to roster JSON or CSV")
    parser.add_argument("--format", choices=("json", "csv"), default=None, help="Roster format (default: file suffix)")
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., points_per_game=PTS)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--search", default=None, help="Substring match on name, team or team code")
    parser.add_argument("--team", nargs="*", default=None, help="Team codes to keep")
    parser.add_argument("--position", nargs="*", default=None, help="Positions to keep")
    parser.add_argument("--tier", nargs="*", default=None, help="EPD tiers to keep")
    parser.add_argument("--min-salary", type=float, default=None, help="Minimum salary in millions")
    parser.add_argument("--max-salary", type=float, default=None, help="Maximum salary in millions")
    parser.add_argument("--min-age", type=int, default=None)
    parser.add_argument("--max-age", type=int, default=None)
    parser.add_argument("--sort-by", choices=sorted(SORT_FIELDS), default="epdPerMillion")
    parser.add_argument("--ascending", action="store_true", help="Sort ascending instead of descending")
    parser.add_argument("--limit", type=int, default=None, help="Maximum players to output")
    parser.add_argument(
        "--top",
        choices=("value", "breakout"),
        default=None,
        help="Output a top list instead of the filtered roster",
    )
    parser.add_argument("--output", type=Path, default=None, help="Output path (.json or .csv); stdout JSON if omitted")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g., INFO, DEBUG)")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _csv_row(player: PlayerWithMetrics) -> list[object]:
    return [
        player.player_id,
        player.name,
        player.team_code,
        player.position,
        player.age,
        player.salary,
        round(player.epd.epd, 3),
        round(player.epd.epd_per_million, 3),
        player.epd.tier,
        player.epd.confidence,
        round(player.breakout.talent_score, 2),
        round(player.breakout.opportunity_score, 2),
        round(player.breakout.breakout_score, 2),
        player.breakout.breakout_tier,
        player.breakout.ceiling,
        player.breakout.floor,
    ]


def _write_output(players: list[PlayerWithMetrics], output: Path | None) -> None:
    if output is not None and output.suffix.lower() == ".csv":
        with output.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            for player in players:
                writer.writerow(_csv_row(player))
        return

    payload = [player.model_dump(mode="json", by_alias=True) for player in players]
    text = json.dumps(payload, indent=2)
    if output is None:
        sys.stdout.write(text + "\n")
    else:
        output.write_text(text, encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        mapping = _parse_mapping(args.column)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if args.load_profile:
        mapping = MappingProfile.load(args.load_profile).roster_mapping | mapping

    try:
        roster = load_roster(args.roster, fmt=args.format, mapping=mapping or None)
    except (OSError, RosterLoadError) as exc:
        raise SystemExit(f"Unable to load roster: {exc}") from exc

    if args.save_profile:
        MappingProfile(mapping).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}", file=sys.stderr)

    scored = compute_all_players_metrics(roster)

    if args.top == "value":
        selected = top_value_players(scored, args.limit or 20)
    elif args.top == "breakout":
        selected = top_breakout_players(scored, args.limit or 20)
    else:
        criteria = RosterFilter(
            search=args.search,
            team_codes=tuple(args.team or ()),
            positions=tuple(args.position or ()),
            tiers=tuple(args.tier or ()),
            min_salary=args.min_salary,
            max_salary=args.max_salary,
            min_age=args.min_age,
            max_age=args.max_age,
        )
        direction = "asc" if args.ascending else "desc"
        selected = sort_players(filter_players(scored, criteria), args.sort_by, direction)
        if args.limit is not None:
            selected = selected[: args.limit]

    _write_output(selected, args.output)
    if args.output is not None:
        print(f"Wrote {len(selected)} players to {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
