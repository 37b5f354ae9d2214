"""
Mutable context objects handed to hooks.

Each context is scoped to one triggering event. Hooks read and rewrite its fields
in place; the engine reads them back once every hook has run. Entity fields hold
the live entities of the working state, so a hook may also adjust HP or boosts.
"""

from typing import Optional

from pydantic import BaseModel

from src.battle_sim.enums import Stat
from src.battle_sim.schema.battle_move import MoveInfo
from src.battle_sim.schema.battle_pokemon import BattlePokemon


class ActiveContext(BaseModel):
    """An entity has just entered an active slot"""

    entity: BattlePokemon
    player_id: int
    slot: int


class SpeedContext(BaseModel):
    entity: BattlePokemon
    player_id: int
    slot: int
    speed: float


class AccuracyContext(BaseModel):
    attacker: BattlePokemon
    target: BattlePokemon
    move: MoveInfo
    accuracy: float


class DamageContext(BaseModel):
    """In-flight damage computation"""

    level: int
    power: float
    offense_key: Stat
    defense_key: Stat
    offense_stat: float
    defense_stat: float
    stab: bool
    type_modifier: int
    random_modifier: int
    move: MoveInfo
    attacker: BattlePokemon
    target: BattlePokemon
    damage: Optional[float] = None


class AttackContext(BaseModel):
    """A full attack (every target) has resolved"""

    attacker: BattlePokemon
    move: MoveInfo
    did_damage: bool = False
