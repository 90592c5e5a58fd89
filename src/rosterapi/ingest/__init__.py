"""Input adapters that load the startup roster."""

from .players import PlayerDataError, load_players, load_store

__all__ = [
    "PlayerDataError",
    "load_players",
    "load_store",
]
