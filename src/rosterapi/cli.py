"""Command-line entry point for serving and checking the roster."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from rosterapi.config import Settings
from rosterapi.ingest import PlayerDataError, load_store


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="In-memory player roster REST API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Load the roster and start the HTTP server")
    serve.add_argument("--players", type=Path, default=None, help="Roster JSON file (default: players.json)")
    serve.add_argument("--host", default=None, help="Bind host")
    serve.add_argument("--port", type=int, default=None, help="Bind port")
    serve.add_argument("--log-level", default=None, help="uvicorn log level (e.g. info, debug)")

    check = subparsers.add_parser("check", help="Validate a roster file and exit")
    check.add_argument("--players", type=Path, default=None, help="Roster JSON file (default: players.json)")

    return parser.parse_args(argv)


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    overrides = {}
    if args.players is not None:
        overrides["players_path"] = args.players
    if getattr(args, "host", None) is not None:
        overrides["host"] = args.host
    if getattr(args, "port", None) is not None:
        overrides["port"] = args.port
    if getattr(args, "log_level", None) is not None:
        overrides["log_level"] = args.log_level.lower()
    return replace(settings, **overrides)


def _serve(settings: Settings) -> None:
    import uvicorn

    from rosterapi.api import create_app

    store = load_store(settings.players_path)
    app = create_app(store=store, settings=settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = _settings_from_args(args)

    try:
        if args.command == "check":
            store = load_store(settings.players_path)
            print(f"{settings.players_path}: {len(store)} players OK")
        else:
            _serve(settings)
    except PlayerDataError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
