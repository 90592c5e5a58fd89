"""Thin httpx client for the roster API."""

from __future__ import annotations

from typing import Any, List

import httpx

from rosterapi.api.schemas import PlayerRequest, PlayerResponse
from rosterapi.store import PlayerNotFoundError, SquadNumberConflictError


class PlayerClient:
    """Calls the roster endpoints and maps 404/409 back to store errors."""

    def __init__(self, base_url: str, *, transport: httpx.BaseTransport | None = None, timeout: float = 10.0):
        self._client = httpx.Client(base_url=base_url, transport=transport, timeout=timeout)

    def __enter__(self) -> "PlayerClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def health(self) -> bool:
        return self._client.get("/health").status_code == 200

    def list_players(self) -> List[PlayerResponse]:
        resp = self._client.get("/players")
        resp.raise_for_status()
        return [PlayerResponse.model_validate(item) for item in resp.json()]

    def get_player(self, player_id: int) -> PlayerResponse:
        return self._player(self._client.get(f"/players/{player_id}"))

    def get_player_by_squad_number(self, squad_number: int) -> PlayerResponse:
        return self._player(self._client.get(f"/players/squadnumber/{squad_number}"))

    def create_player(self, request: PlayerRequest) -> PlayerResponse:
        return self._player(
            self._client.post("/players", json=_payload(request)), squad_number=request.squad_number
        )

    def update_player(self, player_id: int, request: PlayerRequest) -> PlayerResponse:
        return self._player(
            self._client.put(f"/players/{player_id}", json=_payload(request)), squad_number=request.squad_number
        )

    def delete_player(self, player_id: int) -> None:
        self._check(self._client.delete(f"/players/{player_id}"))

    def _player(self, resp: httpx.Response, *, squad_number: int | None = None) -> PlayerResponse:
        self._check(resp, squad_number=squad_number)
        return PlayerResponse.model_validate(resp.json())

    @staticmethod
    def _check(resp: httpx.Response, *, squad_number: int | None = None) -> None:
        if resp.status_code == 404:
            raise PlayerNotFoundError(_detail(resp))
        if resp.status_code == 409 and squad_number is not None:
            raise SquadNumberConflictError(squad_number)
        resp.raise_for_status()


def _payload(request: PlayerRequest) -> dict[str, Any]:
    return request.model_dump(by_alias=True)


def _detail(resp: httpx.Response) -> str:
    try:
        return str(resp.json().get("detail", resp.text))
    except ValueError:
        return resp.text
