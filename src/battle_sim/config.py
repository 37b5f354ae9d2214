"""
Battle configuration.

Formats are fixed rulesets (active slots per side and how many roster members
are brought to the battle). BattleConfig gathers everything a BattleEngine needs
besides the static data table.

Usage:
    from src.battle_sim.config import BattleConfig

    config = BattleConfig(format_id=FormatId.SINGLES, seed=1234)
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.battle_sim.constants import PUBLIC_HP_SCALE, WEATHER_DEFAULT_DURATION
from src.battle_sim.enums import FormatId


class BattleFormat(BaseModel):
    """Ruleset fixed at battle creation"""

    model_config = ConfigDict(frozen=True)

    id: FormatId
    active_slots: int = Field(ge=1, le=2)
    roster_subset_size: int = Field(ge=1, le=6)


FORMATS: dict[FormatId, BattleFormat] = {
    FormatId.SINGLES: BattleFormat(id=FormatId.SINGLES, active_slots=1, roster_subset_size=3),
    FormatId.DOUBLES: BattleFormat(id=FormatId.DOUBLES, active_slots=2, roster_subset_size=4),
}


def get_format(format_id: FormatId | str) -> BattleFormat:
    return FORMATS[FormatId(format_id)]


class BattleConfig(BaseModel):
    """Engine-level settings"""

    model_config = ConfigDict(frozen=True)

    format_id: FormatId = FormatId.DOUBLES
    # None seeds from the clock when the battle begins
    seed: Optional[int] = Field(default=None, ge=0)
    public_hp_scale: int = Field(default=PUBLIC_HP_SCALE, ge=1)
    weather_duration: int = Field(default=WEATHER_DEFAULT_DURATION, ge=1)

    @property
    def format(self) -> BattleFormat:
        return get_format(self.format_id)
