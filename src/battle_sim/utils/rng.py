import time
from typing import Optional

from src.battle_sim.exceptions import InvariantError
from src.battle_sim.schema.battle_state import BattleState


def seed(battle_state: BattleState, value: Optional[int] = None) -> int:
    """Seed the battle RNG. Defaults to a time-based seed when none is given."""
    battle_state.rng_state = (value if value is not None else int(time.time())) & 0xFFFFFFFF
    return battle_state.rng_state


def advance(battle_state: BattleState) -> int:
    """Advance the LCG RNG and return the new 32-bit state.

    seed = (seed * 1664525 + 1013904223) mod 2^32
    """
    if battle_state.rng_state is None:
        raise InvariantError("RNG used before it was seeded", {"phase": battle_state.phase.value})
    battle_state.rng_state = (battle_state.rng_state * 1664525 + 1013904223) & 0xFFFFFFFF
    return battle_state.rng_state


def rand16(battle_state: BattleState) -> int:
    """Advance RNG and return upper 16 bits (0..65535)."""
    advance(battle_state)
    return (battle_state.rng_state >> 16) & 0xFFFF


def random_int(battle_state: BattleState, low: int, high: int) -> int:
    """Return a random integer in [low, high], scaling the upper 16 bits onto the range."""
    if high < low:
        raise InvariantError("Empty random range", {"low": low, "high": high})
    span = high - low + 1
    return low + ((rand16(battle_state) * span) >> 16)
