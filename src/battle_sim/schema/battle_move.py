from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.battle_sim.enums import MoveCategory, MoveFlag, MoveTarget, Type


class MoveInfo(BaseModel):
    """Static move data"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    num: int = Field(ge=0)
    type: Type
    category: MoveCategory
    power: int = Field(ge=0, le=250)  # base power, 0 for status moves
    accuracy: Optional[int] = Field(default=None, ge=1, le=100)  # None = never misses
    pp: int = Field(ge=1, le=64)  # base PP
    priority: int = Field(ge=-7, le=5, default=0)
    target: MoveTarget
    flags: MoveFlag = MoveFlag.NONE
    desc: str = ""


class MoveState(BaseModel):
    """A move slot on a live entity"""

    id: str
    pp: int = Field(ge=0)
    max_pp: int = Field(ge=0)
    disabled: bool = False
