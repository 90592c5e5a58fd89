from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from rosterapi.models import Player


class PlayerResponse(BaseModel):
    id: int
    first_name: str
    middle_name: str
    last_name: str
    date_of_birth: str
    squad_number: int
    position: str
    abbr_position: str
    team: str
    league: str
    starting11: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_player(cls, player: Player) -> "PlayerResponse":
        return cls(**player.model_dump())
