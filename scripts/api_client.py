"""Lightweight command-line client for the roster API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rosterapi.api.schemas import PlayerRequest
from rosterapi.client import PlayerClient
from rosterapi.store import PlayerNotFoundError, SquadNumberConflictError


def _load_request(path: Path) -> PlayerRequest:
    try:
        return PlayerRequest.model_validate_json(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise SystemExit(f"Invalid player JSON in {path}: {exc}") from exc


def _dump(payload) -> None:
    print(json.dumps(payload, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the roster REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--list", action="store_true", help="List every player")
    parser.add_argument("--get", type=int, metavar="ID", help="Fetch a player by id")
    parser.add_argument("--squad-number", type=int, metavar="N", help="Fetch a player by squad number")
    parser.add_argument("--create", type=Path, metavar="JSON", help="Create a player from a JSON file")
    parser.add_argument("--update", nargs=2, metavar=("ID", "JSON"), help="Replace a player from a JSON file")
    parser.add_argument("--delete", type=int, metavar="ID", help="Delete a player by id")
    args = parser.parse_args()

    with PlayerClient(args.base_url) as client:
        try:
            if args.list:
                _dump([player.model_dump(by_alias=True) for player in client.list_players()])
            if args.get is not None:
                _dump(client.get_player(args.get).model_dump(by_alias=True))
            if args.squad_number is not None:
                _dump(client.get_player_by_squad_number(args.squad_number).model_dump(by_alias=True))
            if args.create:
                _dump(client.create_player(_load_request(args.create)).model_dump(by_alias=True))
            if args.update:
                player_id, path = args.update
                updated = client.update_player(int(player_id), _load_request(Path(path)))
                _dump(updated.model_dump(by_alias=True))
            if args.delete is not None:
                client.delete_player(args.delete)
                print(f"player {args.delete} deleted")
        except PlayerNotFoundError as exc:
            raise SystemExit(f"not found: {exc.args[0]}") from exc
        except SquadNumberConflictError as exc:
            raise SystemExit(f"conflict: {exc}") from exc


if __name__ == "__main__":
    main()
