"""Load the startup roster from a JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from rosterapi.models import Player
from rosterapi.store import PlayerStore


logger = logging.getLogger(__name__)

_PLAYER_LIST = TypeAdapter(List[Player])


class PlayerDataError(RuntimeError):
    """The startup roster could not be loaded. The service cannot run without it."""


def load_players(path: Path | str) -> List[Player]:
    """Parse a JSON array of full player records (``id`` included)."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PlayerDataError(
            f"{path} not found; run from the directory holding the roster or point ROSTERAPI_PLAYERS_PATH at it"
        ) from exc
    except UnicodeDecodeError as exc:
        raise PlayerDataError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise PlayerDataError(f"could not read {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PlayerDataError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise PlayerDataError(f"{path} must contain a JSON array of players")

    try:
        return _PLAYER_LIST.validate_python(data)
    except ValidationError as exc:
        raise PlayerDataError(f"{path} has invalid player records:\n{exc}") from exc


def load_store(path: Path | str) -> PlayerStore:
    """Build a store from the roster file, failing if ids or squad numbers repeat."""
    players = load_players(path)
    try:
        store = PlayerStore(players)
    except ValueError as exc:
        raise PlayerDataError(f"{path}: {exc}") from exc
    logger.info("Loaded %d players from %s", len(players), path)
    return store
