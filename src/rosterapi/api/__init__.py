"""REST API for the player roster."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, HTTPException, Path as PathParam, Response, status
from fastapi.responses import PlainTextResponse

from rosterapi.api.schemas import PlayerRequest, PlayerResponse
from rosterapi.config import Settings
from rosterapi.models import MAX_NUMBER
from rosterapi.ingest import load_store
from rosterapi.store import PlayerNotFoundError, PlayerStore, SquadNumberConflictError


logger = logging.getLogger("uvicorn.error")

GREETING = "Sample REST API with Python and FastAPI"


def create_app(store: PlayerStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the application around ``store``.

    Without a store the roster is loaded from ``settings.players_path``; a
    missing or malformed file raises ``PlayerDataError`` here, before any
    request can be served.
    """
    settings = settings or Settings.from_env()
    if store is None:
        store = load_store(settings.players_path)

    # Runs after uvicorn has configured its loggers.
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Serving %d players loaded from %s", len(store), settings.players_path)
        yield

    app = FastAPI(title="rosterapi", lifespan=lifespan)
    app.state.player_store = store
    app.state.settings = settings

    def not_found(player_id: int) -> HTTPException:
        return HTTPException(status_code=404, detail=f"player {player_id} not found")

    def conflict(exc: SquadNumberConflictError) -> HTTPException:
        logger.warning("Rejected squad number %d: %s", exc.squad_number, exc)
        return HTTPException(status_code=409, detail=str(exc))

    @app.get("/", response_class=PlainTextResponse)
    async def index() -> str:
        return GREETING

    @app.get("/health")
    async def health() -> Response:
        return Response(status_code=status.HTTP_200_OK)

    # Store routes are sync so they run on the worker thread pool; the
    # store's lock is what serializes them.
    @app.get("/players", response_model=list[PlayerResponse])
    def list_players() -> list[PlayerResponse]:
        return [PlayerResponse.from_player(player) for player in store.list_all()]

    @app.get("/players/squadnumber/{squad_number}", response_model=PlayerResponse)
    def get_player_by_squad_number(squad_number: int = PathParam(..., ge=0, le=MAX_NUMBER)) -> PlayerResponse:
        try:
            player = store.get_by_squad_number(squad_number)
        except PlayerNotFoundError as exc:
            raise HTTPException(
                status_code=404, detail=f"no player wears squad number {squad_number}"
            ) from exc
        return PlayerResponse.from_player(player)

    @app.get("/players/{player_id}", response_model=PlayerResponse)
    def get_player(player_id: int = PathParam(..., ge=0, le=MAX_NUMBER)) -> PlayerResponse:
        try:
            player = store.get_by_id(player_id)
        except PlayerNotFoundError as exc:
            raise not_found(player_id) from exc
        return PlayerResponse.from_player(player)

    @app.post("/players", response_model=PlayerResponse, status_code=status.HTTP_201_CREATED)
    def create_player(request: PlayerRequest) -> PlayerResponse:
        try:
            player = store.create(request)
        except SquadNumberConflictError as exc:
            raise conflict(exc) from exc
        return PlayerResponse.from_player(player)

    @app.put("/players/{player_id}", response_model=PlayerResponse)
    def update_player(request: PlayerRequest, player_id: int = PathParam(..., ge=0, le=MAX_NUMBER)) -> PlayerResponse:
        try:
            player = store.update(player_id, request)
        except PlayerNotFoundError as exc:
            raise not_found(player_id) from exc
        except SquadNumberConflictError as exc:
            raise conflict(exc) from exc
        return PlayerResponse.from_player(player)

    @app.delete("/players/{player_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_player(player_id: int = PathParam(..., ge=0, le=MAX_NUMBER)) -> Response:
        try:
            store.delete(player_id)
        except PlayerNotFoundError as exc:
            raise not_found(player_id) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app
