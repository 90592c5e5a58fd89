"""Lock-guarded in-memory store for the player roster."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List

from rosterapi.models import Player, PlayerRequest

from .ids import next_id


logger = logging.getLogger("uvicorn.error")


class PlayerNotFoundError(KeyError):
    """No player matches the requested id or squad number."""


class SquadNumberConflictError(ValueError):
    """Another player already wears the requested squad number."""

    def __init__(self, squad_number: int, holder_id: int | None = None):
        message = f"squad number {squad_number} is already taken"
        if holder_id is not None:
            message += f" by player {holder_id}"
        super().__init__(message)
        self.squad_number = squad_number
        self.holder_id = holder_id


class PlayerStore:
    """Owns the ordered player list.

    Every public method runs under one exclusive lock, reads included, so a
    create's duplicate check, id allocation and append are never interleaved
    with another caller. Records are frozen models and listings are fresh
    lists; callers never hold a reference they can mutate.
    """

    def __init__(self, players: Iterable[Player] = ()):
        self._lock = threading.Lock()
        self._players: List[Player] = list(players)
        _check_unique(self._players)

    def __len__(self) -> int:
        with self._lock:
            return len(self._players)

    def list_all(self) -> List[Player]:
        with self._lock:
            return list(self._players)

    def get_by_id(self, player_id: int) -> Player:
        with self._lock:
            return self._players[self._index_of(player_id)]

    def get_by_squad_number(self, squad_number: int) -> Player:
        with self._lock:
            for player in self._players:
                if player.squad_number == squad_number:
                    return player
        raise PlayerNotFoundError(f"no player wears squad number {squad_number}")

    def create(self, request: PlayerRequest) -> Player:
        with self._lock:
            self._ensure_squad_number_free(request.squad_number)
            player = request.to_player(next_id(self._players))
            self._players.append(player)
        logger.info("Created player %d (squad number %d)", player.id, player.squad_number)
        return player

    def update(self, player_id: int, request: PlayerRequest) -> Player:
        with self._lock:
            index = self._index_of(player_id)
            self._ensure_squad_number_free(request.squad_number, exclude_id=player_id)
            player = request.to_player(player_id)
            self._players[index] = player
        logger.info("Updated player %d", player_id)
        return player

    def delete(self, player_id: int) -> None:
        with self._lock:
            del self._players[self._index_of(player_id)]
        logger.info("Deleted player %d", player_id)

    # Callers must hold self._lock.
    def _index_of(self, player_id: int) -> int:
        for index, player in enumerate(self._players):
            if player.id == player_id:
                return index
        raise PlayerNotFoundError(f"player {player_id} not found")

    def _ensure_squad_number_free(self, squad_number: int, *, exclude_id: int | None = None) -> None:
        for player in self._players:
            if player.squad_number == squad_number and player.id != exclude_id:
                raise SquadNumberConflictError(squad_number, player.id)


def _check_unique(players: Iterable[Player]) -> None:
    seen_ids: set[int] = set()
    seen_numbers: set[int] = set()
    for player in players:
        if player.id in seen_ids:
            raise ValueError(f"duplicate player id {player.id}")
        if player.squad_number in seen_numbers:
            raise ValueError(f"duplicate squad number {player.squad_number}")
        seen_ids.add(player.id)
        seen_numbers.add(player.squad_number)


__all__ = [
    "PlayerNotFoundError",
    "PlayerStore",
    "SquadNumberConflictError",
    "next_id",
]
