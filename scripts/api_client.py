"""Lightweight REST client for the pyscout API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_profile(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid profile JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pyscout REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--squad", nargs="+", metavar="PLAYER_ID", help="Analyze a squad of player IDs")
    parser.add_argument("--match", nargs=2, metavar=("HOME", "AWAY"), help="Predict a match score")
    parser.add_argument("--preset", help="Fetch a scouting report for a built-in team profile")
    parser.add_argument("--profile", type=Path, help="Fetch a scouting report for a team profile JSON")
    parser.add_argument("--list-players", action="store_true", help="List catalog players and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_players:
            resp = client.get("/players")
            resp.raise_for_status()
            for player in resp.json():
                print(f"{player['player_id']}\t{player['position']}\t{player['name']}")
            return

        if args.squad:
            resp = client.post("/squad/analysis", json={"player_ids": args.squad})
            if resp.status_code in (400, 404):
                raise SystemExit(f"squad rejected: {json.dumps(resp.json()['detail'])}")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))

        if args.match:
            home, away = args.match
            resp = client.post("/match/prediction", json={"home_team": home, "away_team": away})
            if resp.status_code == 400:
                raise SystemExit(resp.json()["detail"])
            resp.raise_for_status()
            print(json.dumps(resp.json()["data"], indent=2))

        if args.preset or args.profile:
            if args.preset:
                resp = client.get(f"/scouting/presets/{args.preset}")
                if resp.status_code == 404:
                    raise SystemExit(f"preset {args.preset} not found")
                resp.raise_for_status()
                profile = resp.json()
            else:
                profile = load_profile(args.profile)
            resp = client.post("/scouting/report", json=profile)
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
