from pydantic import BaseModel, ConfigDict, Field

from src.battle_sim.enums import Stat, Type
from src.battle_sim.schema.build import StatSpread


class SpeciesInfo(BaseModel):
    """Static species data"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    num: int = Field(ge=0)
    types: list[Type] = Field(min_length=1, max_length=2)
    base_stats: StatSpread
    height: float = Field(ge=0, default=0)  # m
    weight: float = Field(ge=0, default=0)  # kg
    can_evolve: bool = False


class NatureInfo(BaseModel):
    """Nature data - plus/minus name the stat scaled by 1.1 / 0.9 (None for neutral natures)"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    plus: Stat | None = None
    minus: Stat | None = None
