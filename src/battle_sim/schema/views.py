from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.battle_sim.enums import Gender, Type
from src.battle_sim.schema.battle_pokemon import BattlePokemon, Boosts
from src.battle_sim.schema.battle_state import SideFieldState, WeatherState
from src.battle_sim.schema.build import PokemonBuild


class PreviewEntry(BaseModel):
    """What the rival learns about a roster member at team preview"""

    model_config = ConfigDict(frozen=True)

    species: str
    gender: Gender


class OwnTeamView(BaseModel):
    id: int
    team: list[PokemonBuild]


class RivalTeamView(BaseModel):
    id: int
    team: list[PreviewEntry]


class PublicPokemon(BaseModel):
    """A foe entity as seen from the other side: HP on a public scale, no moves, item or stats"""

    uid: str
    species: str
    name: str
    gender: Gender
    level: int
    types: list[Type]
    hp: int = Field(ge=0)
    max_hp: int = Field(ge=1)
    boosts: Boosts
    status: Optional[str] = None

    def is_fainted(self) -> bool:
        return self.hp <= 0


class OwnView(BaseModel):
    id: int
    active: list[Optional[BattlePokemon]]
    bench: list[Optional[BattlePokemon]]


class RivalView(BaseModel):
    id: int
    active: list[Optional[PublicPokemon]]
    # Only bench members that have already been on the field
    bench: list[PublicPokemon]


class FieldView(BaseModel):
    weather: Optional[WeatherState] = None
    sides: list[SideFieldState] = Field(default_factory=list)
