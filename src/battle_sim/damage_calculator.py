"""
Damage, accuracy and speed pipeline.

Every computation follows the same shape: derive the raw values from the live
entities, hand them to the hook dispatcher in a mutable context so capabilities
can rewrite them, then read the context back.

Damage formula (after on_before_damage_calculation):

    damage = ((2 * level / 5 + 2) * power * offense / defense) / 50 + 2
    damage *= 1.5 if STAB
    damage *= 2 ** type_modifier
    damage *= random_modifier / 100        # random_modifier in 85..100

The result is floored with a minimum of 1, then passed through
on_before_damage_application before the engine subtracts it.
"""

import logging
import math
from typing import Optional

from src.battle_sim.constants import (
    ACCURACY_ROLL_MAX,
    ACCURACY_ROLL_MIN,
    ACCURACY_STAGE_BASE,
    ALWAYS_HIT_ACCURACY,
    DAMAGE_RANDOM_MAX,
    DAMAGE_RANDOM_MIN,
    MAX_STAT_STAGE,
    MIN_DAMAGE,
    MIN_STAT_STAGE,
    STAB_MULTIPLIER,
    STAT_STAGE_BASE,
)
from src.battle_sim.data.battle_data import BattleData
from src.battle_sim.enums import HookPoint, MoveCategory, Stat
from src.battle_sim.hooks import HookDispatcher
from src.battle_sim.schema.battle_move import MoveInfo
from src.battle_sim.schema.battle_pokemon import BattlePokemon
from src.battle_sim.schema.battle_state import BattleState
from src.battle_sim.schema.hook_context import AccuracyContext, DamageContext, SpeedContext
from src.battle_sim.type_effectiveness import TypeEffectiveness
from src.battle_sim.utils import rng

logger = logging.getLogger(__name__)


def get_boost_multiplier(stat: Stat, boost: int) -> float:
    """
    Multiplier for a stat stage.

    max(base, base + boost) / max(base, base - boost), base 3 for accuracy/evasion and 2 otherwise:
    +1 -> 3/2, +6 -> 8/2, -6 -> 2/8 for ordinary stats; +6 -> 9/3, -6 -> 3/9 for accuracy.
    """
    base = ACCURACY_STAGE_BASE if stat in (Stat.ACCURACY, Stat.EVASION) else STAT_STAGE_BASE
    return max(base, base + boost) / max(base, base - boost)


def get_boosted_value(stat: Stat, boost: int, value: float) -> int:
    base = ACCURACY_STAGE_BASE if stat in (Stat.ACCURACY, Stat.EVASION) else STAT_STAGE_BASE
    return math.floor(value * max(base, base + boost) / max(base, base - boost))


def clamp_stage(stage: int) -> int:
    return max(MIN_STAT_STAGE, min(MAX_STAT_STAGE, stage))


class DamageCalculator:
    """Stat, accuracy and damage computations with their hook calls"""

    def __init__(self, data: BattleData, hooks: HookDispatcher):
        self.data = data
        self.hooks = hooks

    # =================================================================
    # STATS
    # =================================================================

    def get_boosted_stat(self, pokemon: BattlePokemon, stat: Stat) -> int:
        return get_boosted_value(stat, pokemon.boosts.get(stat), pokemon.get_stat(stat))

    def get_speed(self, state: BattleState, player_id: int, slot: int) -> float:
        """Boosted speed of an active entity after on_before_speed_calculation"""
        pokemon = state.get_active(player_id, slot)
        ctx = SpeedContext(entity=pokemon, player_id=player_id, slot=slot, speed=self.get_boosted_stat(pokemon, Stat.SPEED))
        self.hooks.trigger(HookPoint.ON_BEFORE_SPEED_CALCULATION, state, ctx)
        return ctx.speed

    # =================================================================
    # ACCURACY
    # =================================================================

    def get_accuracy(self, state: BattleState, attacker: BattlePokemon, target: BattlePokemon, move: MoveInfo) -> float:
        if move.accuracy is None:
            return ALWAYS_HIT_ACCURACY

        stage = clamp_stage(attacker.boosts.accuracy - target.boosts.evasion)
        ctx = AccuracyContext(
            attacker=attacker,
            target=target,
            move=move,
            accuracy=get_boosted_value(Stat.ACCURACY, stage, move.accuracy),
        )
        self.hooks.trigger(HookPoint.ON_BEFORE_ACCURACY_CALCULATION, state, ctx)
        return ctx.accuracy

    def check_hit(self, state: BattleState, attacker: BattlePokemon, target: BattlePokemon, move: MoveInfo) -> bool:
        """Draw 1..100 against the computed accuracy. The draw happens even for always-hit moves."""
        accuracy = self.get_accuracy(state, attacker, target, move)
        roll = rng.random_int(state, ACCURACY_ROLL_MIN, ACCURACY_ROLL_MAX)
        if roll > accuracy:
            logger.debug(f"{attacker.uid} missed {target.uid} with {move.id} (roll {roll} > {accuracy})")
            return False
        return True

    # =================================================================
    # DAMAGE
    # =================================================================

    def get_damage(self, state: BattleState, attacker: BattlePokemon, target: BattlePokemon, move: MoveInfo) -> Optional[DamageContext]:
        """
        Run the damage pipeline for one target.

        Returns:
            The resolved DamageContext (damage already floored), or None when the move
            deals no damage: status moves and type immunities. Neither consumes an RNG draw.
        """
        if move.category == MoveCategory.STATUS:
            return None

        if move.category == MoveCategory.PHYSICAL:
            offense_key, defense_key = Stat.ATTACK, Stat.DEFENSE
        else:
            offense_key, defense_key = Stat.SP_ATTACK, Stat.SP_DEFENSE

        type_modifier = TypeEffectiveness.calculate_effectiveness(move.type, target.types, self.data.type_chart)
        if type_modifier is None:
            logger.debug(f"{target.uid} is immune to {move.id}")
            return None

        ctx = DamageContext(
            level=attacker.build.level,
            power=move.power,
            offense_key=offense_key,
            defense_key=defense_key,
            offense_stat=self.get_boosted_stat(attacker, offense_key),
            defense_stat=self.get_boosted_stat(target, defense_key),
            stab=move.type in attacker.types,
            type_modifier=type_modifier,
            random_modifier=rng.random_int(state, DAMAGE_RANDOM_MIN, DAMAGE_RANDOM_MAX),
            move=move,
            attacker=attacker,
            target=target,
        )
        self.hooks.trigger(HookPoint.ON_BEFORE_DAMAGE_CALCULATION, state, ctx)

        ctx.damage = max(MIN_DAMAGE, math.floor(self.calculate_damage(ctx)))
        return ctx

    @staticmethod
    def calculate_damage(ctx: DamageContext) -> float:
        damage = ((2 * ctx.level / 5 + 2) * ctx.power * ctx.offense_stat / ctx.defense_stat) / 50 + 2
        if ctx.stab:
            damage *= STAB_MULTIPLIER
        damage *= 2**ctx.type_modifier
        damage *= ctx.random_modifier / 100
        return damage
