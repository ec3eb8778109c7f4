"""Lightweight REST client for the hoopvalue API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the hoopvalue REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--top", choices=("value", "breakout"), help="Fetch a top list")
    parser.add_argument("--limit", type=int, default=20, help="Number of players to request")
    parser.add_argument("--player", metavar="PLAYER_ID", help="Fetch a single player and exit")
    parser.add_argument("--teams", action="store_true", help="Fetch team summaries and exit")
    parser.add_argument("--score", type=Path, metavar="ROSTER_JSON", help="POST a roster JSON file for scoring")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.player:
            resp = client.get(f"/players/{args.player}")
            if resp.status_code == 404:
                raise SystemExit(f"player {args.player} not found")
        elif args.teams:
            resp = client.get("/teams")
        elif args.score:
            payload = json.loads(args.score.read_text(encoding="utf-8"))
            if isinstance(payload, list):
                payload = {"players": payload}
            resp = client.post("/metrics", json=payload)
        elif args.top:
            resp = client.get(f"/players/top-{args.top}", params={"limit": args.limit})
        else:
            resp = client.get("/players", params={"limit": args.limit})
        resp.raise_for_status()
        print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
