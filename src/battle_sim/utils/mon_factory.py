import math

from src.battle_sim.constants import HP_LEVEL_OFFSET, NATURE_BOOST, NATURE_DROP, STAT_OFFSET
from src.battle_sim.data.battle_data import BattleData
from src.battle_sim.enums import Stat
from src.battle_sim.schema.battle_move import MoveState
from src.battle_sim.schema.battle_pokemon import BattlePokemon, ItemState
from src.battle_sim.schema.build import MoveBuild, PokemonBuild, StatSpread
from src.battle_sim.schema.species_info import NatureInfo


def _nature_multiplier(nature: NatureInfo, stat: Stat) -> float:
    if nature.plus == stat:
        return NATURE_BOOST
    if nature.minus == stat:
        return NATURE_DROP
    return 1.0


def _compute_stat(base: int, iv: int, ev: int, level: int, is_hp: bool, nature_multiplier: float = 1.0) -> int:
    raw = ((2 * base + iv + ev // 4) * level) // 100
    if is_hp:
        return raw + level + HP_LEVEL_OFFSET
    return math.floor((raw + STAT_OFFSET) * nature_multiplier)


def compute_stats(build: PokemonBuild, data: BattleData) -> StatSpread:
    """Final (unboosted) stats of a build"""
    base = data.get_species(build.species).base_stats
    nature = data.get_nature(build.nature)

    values = {}
    for stat in (Stat.HP, Stat.ATTACK, Stat.DEFENSE, Stat.SP_ATTACK, Stat.SP_DEFENSE, Stat.SPEED):
        values[stat.value] = _compute_stat(
            getattr(base, stat.value),
            getattr(build.ivs, stat.value),
            getattr(build.evs, stat.value),
            build.level,
            is_hp=stat == Stat.HP,
            nature_multiplier=_nature_multiplier(nature, stat),
        )
    return StatSpread(**values)


def create_move_state(move: MoveBuild, data: BattleData) -> MoveState:
    max_pp = move.pp if move.pp is not None else data.get_move(move.id).pp
    return MoveState(id=move.id, pp=max_pp, max_pp=max_pp)


def create_battle_pokemon(player_id: int, roster_index: int, build: PokemonBuild, data: BattleData) -> BattlePokemon:
    """Instantiate a roster entry (1-based roster_index) as a live entity at full HP"""
    species = data.get_species(build.species)
    stats = compute_stats(build, data)

    return BattlePokemon(
        uid=f"{player_id}:{roster_index}",
        player_id=player_id,
        roster_index=roster_index,
        build=build,
        species=species.id,
        types=list(species.types),
        can_evolve=species.can_evolve,
        ability=build.ability,
        stats=stats,
        hp=stats.hp,
        max_hp=stats.hp,
        moves=[create_move_state(move, data) for move in build.moves],
        item=ItemState(id=build.item),
    )
