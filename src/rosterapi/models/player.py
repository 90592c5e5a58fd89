"""Player shapes kept by the store.

``PlayerRequest`` is what clients may set; ``Player`` adds the identifier,
which only the store assigns.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


# Ids and squad numbers are unsigned 32-bit integers on the wire.
MAX_NUMBER = 2**32 - 1


class PlayerRequest(BaseModel):
    """Create/update payload. Any ``id`` sent by a client is ignored."""

    first_name: str
    middle_name: str
    last_name: str
    date_of_birth: str
    squad_number: int = Field(..., ge=0, le=MAX_NUMBER)
    position: str
    abbr_position: str
    team: str
    league: str
    starting11: bool

    model_config = ConfigDict(strict=True, alias_generator=to_camel, populate_by_name=True)

    def to_player(self, player_id: int) -> "Player":
        return Player(id=player_id, **self.model_dump())


class Player(BaseModel):
    """Stored player, including the server-assigned identifier."""

    id: int = Field(..., ge=0, le=MAX_NUMBER)
    first_name: str
    middle_name: str
    last_name: str
    date_of_birth: str
    squad_number: int = Field(..., ge=0, le=MAX_NUMBER)
    position: str
    abbr_position: str
    team: str
    league: str
    starting11: bool

    model_config = ConfigDict(frozen=True, strict=True, alias_generator=to_camel, populate_by_name=True)
