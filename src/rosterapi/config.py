"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger("uvicorn.error")

_PLAYERS_PATH_ENV = "ROSTERAPI_PLAYERS_PATH"
_HOST_ENV = "ROSTERAPI_HOST"
_PORT_ENV = "ROSTERAPI_PORT"
_LOG_LEVEL_ENV = "ROSTERAPI_LOG_LEVEL"

DEFAULT_PLAYERS_PATH = Path("players.json")
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "info"

_LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}


def _env_int(name: str, default: int, *, min_value: int | None = None, max_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if (min_value is not None and value < min_value) or (max_value is not None and value > max_value):
        logger.warning("Out of range value for %s: %s; using default %d", name, raw, default)
        return default
    return value


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = raw.strip().lower()
    if level not in _LOG_LEVELS:
        logger.warning("Unknown log level for %s: %s; using default %s", name, raw, default)
        return default
    return level


@dataclass(frozen=True)
class Settings:
    players_path: Path = DEFAULT_PLAYERS_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        players_path = os.getenv(_PLAYERS_PATH_ENV)
        return cls(
            players_path=Path(players_path) if players_path else DEFAULT_PLAYERS_PATH,
            host=os.getenv(_HOST_ENV) or DEFAULT_HOST,
            port=_env_int(_PORT_ENV, DEFAULT_PORT, min_value=1, max_value=65535),
            log_level=_env_log_level(_LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        )
