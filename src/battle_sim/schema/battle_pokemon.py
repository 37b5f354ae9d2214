import math
from typing import Any, Optional

from pydantic import BaseModel, Field

from src.battle_sim.constants import MAX_STAT_STAGE, MIN_DAMAGE, MIN_STAT_STAGE
from src.battle_sim.enums import Stat, Type
from src.battle_sim.schema.battle_move import MoveState
from src.battle_sim.schema.build import PokemonBuild, StatSpread


class Boosts(BaseModel):
    """Stat stages (-6 to +6)"""

    attack: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)
    defense: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)
    sp_attack: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)
    sp_defense: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)
    speed: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)
    accuracy: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)
    evasion: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)

    def get(self, stat: Stat) -> int:
        if stat == Stat.HP:
            raise ValueError("HP has no stat stage")
        return getattr(self, stat.value)

    def change(self, stat: Stat, amount: int) -> int:
        """Apply a stage change, clamped to [-6, 6]. Returns the stage actually applied."""
        current = self.get(stat)
        updated = max(MIN_STAT_STAGE, min(MAX_STAT_STAGE, current + amount))
        setattr(self, stat.value, updated)
        return updated - current


class ItemState(BaseModel):
    """Held item plus a use counter for single-use items"""

    id: Optional[str] = None
    uses: int = Field(ge=0, default=0)


class BattlePokemon(BaseModel):
    """A live combatant occupying an active or bench slot"""

    # Identification - uid is unique across the battle ("<player>:<roster index>")
    uid: str
    player_id: int = Field(ge=1, le=2)
    roster_index: int = Field(ge=1)

    build: PokemonBuild
    species: str
    types: list[Type] = Field(min_length=1, max_length=2)
    can_evolve: bool = False
    ability: str

    # Final stats before boosts, computed once at creation
    stats: StatSpread
    hp: int = Field(ge=0)
    max_hp: int = Field(ge=1)
    boosts: Boosts = Field(default_factory=Boosts)

    moves: list[MoveState] = Field(min_length=1)
    item: ItemState = Field(default_factory=ItemState)

    # Reserved single condition slot
    status: Optional[str] = None
    # Transient per-turn effects
    volatiles: dict[str, Any] = Field(default_factory=dict)

    # Set once the entity has been on the field; drives what the rival can see
    revealed: bool = False

    def is_fainted(self) -> bool:
        return self.hp <= 0

    def has_full_hp(self) -> bool:
        return self.hp == self.max_hp

    def get_stat(self, stat: Stat) -> int:
        return getattr(self.stats, stat.value)

    def subtract_hp(self, damage: float) -> int:
        """Remove HP (floored, minimum 1), clamped at 0. Returns the HP actually lost."""
        amount = max(MIN_DAMAGE, math.floor(damage))
        previous = self.hp
        self.hp = max(0, self.hp - amount)
        return previous - self.hp
