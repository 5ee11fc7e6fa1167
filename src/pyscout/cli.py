"""Command-line interface for the squad, match and scouting calculators."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Sequence

from pyscout.catalog import PlayerCatalog, UnknownPlayerError, default_catalog
from pyscout.config import has_formation
from pyscout.config_loader import SquadSelection
from pyscout.match import predict_match_score
from pyscout.models import TeamProfile
from pyscout.scouting import SCOUTING_PRESETS, generate_scout_report, get_preset
from pyscout.squad import SquadValidationError, analyze_squad


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    roster = argparse.ArgumentParser(add_help=False)
    roster.add_argument(
        "--players",
        type=Path,
        default=None,
        help="Players CSV to use instead of the built-in roster",
    )

    parser = argparse.ArgumentParser(description="Football squad, match and scouting calculators")
    sub = parser.add_subparsers(dest="command", required=True)

    squad = sub.add_parser("squad", parents=[roster], help="Analyze a squad and predict its league finish")
    squad.add_argument("player_ids", nargs="*", help="Player IDs in the squad")
    squad.add_argument("--load-squad", type=Path, default=None, help="Load a saved squad JSON")
    squad.add_argument("--save-squad", type=Path, default=None, help="Save the squad selection JSON")
    squad.add_argument("--name", default="", help="Name stored with a saved squad")
    squad.add_argument("--formation", default=None, help="Formation stored with a saved squad (e.g. 4-3-3)")
    squad.add_argument("--output", type=Path, default=None, help="Write the analysis JSON to a file")

    match = sub.add_parser("match", help="Predict a match score")
    match.add_argument("home_team")
    match.add_argument("away_team")

    scout = sub.add_parser("scout", help="Generate a scouting report")
    source = scout.add_mutually_exclusive_group(required=True)
    source.add_argument("--preset", choices=sorted(SCOUTING_PRESETS), help="Built-in team profile")
    source.add_argument("--profile", type=Path, help="Team profile JSON")

    players = sub.add_parser("players", parents=[roster], help="List catalog players")
    players.add_argument("--position", default=None, help="GK, DEF, MID or FWD")
    players.add_argument("--query", default=None, help="Name or position substring")
    players.add_argument("--team", default=None, help="Club name")

    return parser.parse_args(argv)


def _load_catalog(path: Path | None) -> PlayerCatalog:
    if path is None:
        return default_catalog()
    try:
        return PlayerCatalog.from_csv(path)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Could not load players from {path}: {exc}") from exc


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2))


def _run_squad(args: argparse.Namespace, catalog: PlayerCatalog) -> None:
    player_ids = list(args.player_ids)
    formation = args.formation
    name = args.name
    if args.load_squad:
        selection = SquadSelection.load(args.load_squad)
        player_ids = selection.player_ids + [pid for pid in player_ids if pid not in selection.player_ids]
        formation = formation or selection.formation
        name = name or selection.name
    if not player_ids:
        raise SystemExit("No player IDs given; pass IDs or --load-squad")
    if formation and not has_formation(formation):
        raise SystemExit(f"Unknown formation {formation!r}")

    try:
        squad = catalog.resolve(player_ids)
    except UnknownPlayerError as exc:
        raise SystemExit(exc.message) from exc
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if args.save_squad:
        SquadSelection(player_ids=player_ids, name=name, formation=formation).save(args.save_squad)
        print(f"Saved squad selection to {args.save_squad}")

    try:
        analysis = analyze_squad(squad)
    except SquadValidationError as exc:
        raise SystemExit(f"Invalid squad: {exc.message}") from exc

    payload = analysis.to_dict()
    if args.output:
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote squad analysis to {args.output}")
    else:
        _print_json(payload)


def _run_match(args: argparse.Namespace) -> None:
    try:
        prediction = predict_match_score(args.home_team, args.away_team)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    _print_json(prediction.to_dict())


def _run_scout(args: argparse.Namespace) -> None:
    if args.preset:
        profile = get_preset(args.preset)
    else:
        try:
            profile = TeamProfile.model_validate_json(args.profile.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SystemExit(f"Invalid team profile {args.profile}: {exc}") from exc
    _print_json(generate_scout_report(profile).to_dict())


def _run_players(args: argparse.Namespace, catalog: PlayerCatalog) -> None:
    results = catalog.search(args.query) if args.query else catalog.all()
    if args.position:
        try:
            codes = {player.player_id for player in catalog.by_position(args.position)}
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
        results = [player for player in results if player.player_id in codes]
    if args.team:
        members = {player.player_id for player in catalog.by_team(args.team)}
        results = [player for player in results if player.player_id in members]
    for player in results:
        print(f"{player.player_id}\t{player.position}\t{player.overall_rating:g}\t{player.name}")


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)

    if args.command == "squad":
        _run_squad(args, _load_catalog(args.players))
    elif args.command == "match":
        _run_match(args)
    elif args.command == "scout":
        _run_scout(args)
    elif args.command == "players":
        _run_players(args, _load_catalog(args.players))


if __name__ == "__main__":
    main()
