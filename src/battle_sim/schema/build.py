from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.battle_sim.constants import MAX_LEVEL, MAX_MON_MOVES, MAX_PER_STAT_EVS, MAX_PER_STAT_IVS, MIN_LEVEL
from src.battle_sim.enums import Gender
from src.battle_sim.utils.get_id import to_id


class StatSpread(BaseModel):
    """One value per base stat (base stats, IVs, EVs or computed stats)"""

    model_config = ConfigDict(frozen=True)

    hp: int = Field(ge=0, default=0)
    attack: int = Field(ge=0, default=0)
    defense: int = Field(ge=0, default=0)
    sp_attack: int = Field(ge=0, default=0)
    sp_defense: int = Field(ge=0, default=0)
    speed: int = Field(ge=0, default=0)

    @classmethod
    def uniform(cls, value: int) -> "StatSpread":
        return cls(hp=value, attack=value, defense=value, sp_attack=value, sp_defense=value, speed=value)


def _default_ivs() -> StatSpread:
    return StatSpread.uniform(MAX_PER_STAT_IVS)


class MoveBuild(BaseModel):
    """A move as written in a roster; pp=None uses the move's base PP"""

    model_config = ConfigDict(frozen=True)

    id: str
    pp: Optional[int] = Field(default=None, ge=1)

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        return to_id(value)


class PokemonBuild(BaseModel):
    """Static roster entry - everything known before the battle starts"""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    species: str
    gender: Gender = Gender.NONE
    moves: list[MoveBuild] = Field(min_length=1, max_length=MAX_MON_MOVES)
    ability: str
    item: Optional[str] = None
    level: int = Field(default=50, ge=MIN_LEVEL, le=MAX_LEVEL)
    nature: str = "serious"
    evs: StatSpread = Field(default_factory=StatSpread)
    ivs: StatSpread = Field(default_factory=_default_ivs)
    shiny: bool = False

    @field_validator("species", "ability", "nature")
    @classmethod
    def _normalize_ids(cls, value: str) -> str:
        return to_id(value)

    @field_validator("item")
    @classmethod
    def _normalize_item(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return to_id(value) or None

    @field_validator("moves", mode="before")
    @classmethod
    def _coerce_moves(cls, value):
        # Allow plain move ids in rosters: ["flamethrower", "protect"]
        if isinstance(value, (list, tuple)):
            return [{"id": item} if isinstance(item, str) else item for item in value]
        return value

    @field_validator("evs")
    @classmethod
    def _check_evs(cls, value: StatSpread) -> StatSpread:
        for stat, amount in value.model_dump().items():
            if amount > MAX_PER_STAT_EVS:
                raise ValueError(f"EV for {stat} must be at most {MAX_PER_STAT_EVS}")
        return value

    @field_validator("ivs")
    @classmethod
    def _check_ivs(cls, value: StatSpread) -> StatSpread:
        for stat, amount in value.model_dump().items():
            if amount > MAX_PER_STAT_IVS:
                raise ValueError(f"IV for {stat} must be at most {MAX_PER_STAT_IVS}")
        return value
