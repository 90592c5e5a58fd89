"""Pydantic models for API I/O."""

from rosterapi.models import PlayerRequest

from .player import PlayerResponse

__all__ = [
    "PlayerRequest",
    "PlayerResponse",
]
