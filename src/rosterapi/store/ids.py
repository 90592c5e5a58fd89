"""Identifier allocation for new players."""

from __future__ import annotations

from typing import Iterable

from rosterapi.models import Player


def next_id(players: Iterable[Player]) -> int:
    """Return one past the highest id currently present, or 1 when empty.

    Derived from the current contents on every call, so an id removed from
    the top of the range can be handed out again.
    """
    return max((player.id for player in players), default=0) + 1
