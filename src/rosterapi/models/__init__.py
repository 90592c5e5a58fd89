"""Canonical player models shared across the store and API layers."""

from .player import MAX_NUMBER, Player, PlayerRequest

__all__ = ["MAX_NUMBER", "Player", "PlayerRequest"]
