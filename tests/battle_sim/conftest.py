from typing import Optional, Sequence

import pytest

from src.battle_sim.battle_engine import BattleEngine
from src.battle_sim.config import BattleConfig, get_format
from src.battle_sim.data.battle_data import BattleData, load_default_data
from src.battle_sim.enums import FormatId, Phase
from src.battle_sim.schema.battle_pokemon import BattlePokemon
from src.battle_sim.schema.battle_state import BattleState, PlayerState, SideFieldState
from src.battle_sim.schema.build import PokemonBuild
from src.battle_sim.utils import rng
from src.battle_sim.utils.mon_factory import create_battle_pokemon

DATA = load_default_data()


def make_build(species: str, moves: Sequence[str] = ("tackle",), ability: str = "frisk", item: Optional[str] = None, **kwargs) -> PokemonBuild:
    return PokemonBuild(species=species, moves=list(moves), ability=ability, item=item, **kwargs)


def make_mon(
    species: str,
    *,
    player_id: int = 1,
    roster_index: int = 1,
    moves: Sequence[str] = ("tackle",),
    ability: str = "frisk",
    item: Optional[str] = None,
    data: BattleData = DATA,
    **kwargs,
) -> BattlePokemon:
    build = make_build(species, moves=moves, ability=ability, item=item, **kwargs)
    return create_battle_pokemon(player_id, roster_index, build, data)


def make_state(side1: list[Optional[BattlePokemon]], side2: list[Optional[BattlePokemon]], seed: int = 1234) -> BattleState:
    """A choice-phase state with the given actives and empty benches, RNG seeded"""
    battle_format = get_format(FormatId.DOUBLES if len(side1) == 2 else FormatId.SINGLES)
    state = BattleState(format=battle_format, phase=Phase.CHOICE, turn=1)
    for player_id, active in ((1, side1), (2, side2)):
        roster = [pokemon.build for pokemon in active if pokemon is not None] or [make_build("venusaur")]
        state.players.append(
            PlayerState(
                id=player_id,
                roster=roster,
                active=list(active),
                bench=[None] * battle_format.roster_subset_size,
                pending_actions=[None] * battle_format.active_slots,
            )
        )
        state.field.sides.append(SideFieldState())
    rng.seed(state, seed)
    return state


# Side 1 leads with Conkeldurr, side 2 with Venusaur in singles
SINGLES_ROSTER_1 = [
    make_build("conkeldurr", moves=["machpunch", "tackle", "skyuppercut"]),
    make_build("hatterene", moves=["psychic", "dazzlinggleam"]),
    make_build("incineroar", moves=["flamethrower", "feintattack"]),
]
SINGLES_ROSTER_2 = [
    make_build("venusaur", moves=["tackle", "energyball", "willowisp"]),
    make_build("dusclops", moves=["shadowpunch", "willowisp"]),
    make_build("torkoal", moves=["flamethrower", "heatwave"]),
]

DOUBLES_ROSTER_1 = [
    make_build("conkeldurr", moves=["machpunch", "tackle"]),
    make_build("incineroar", moves=["flamethrower", "feintattack", "heatwave"]),
    make_build("hatterene", moves=["psychic", "dazzlinggleam"]),
    make_build("venusaur", moves=["energyball", "sludgebomb"]),
    make_build("torkoal", moves=["flamethrower"]),
    make_build("dusclops", moves=["shadowpunch"]),
]
DOUBLES_ROSTER_2 = [
    make_build("venusaur", moves=["tackle", "energyball", "willowisp"]),
    make_build("torkoal", moves=["tackle", "flamethrower"]),
    make_build("dusclops", moves=["shadowpunch", "willowisp"]),
    make_build("hatterene", moves=["psychic"]),
    make_build("conkeldurr", moves=["machpunch"]),
    make_build("incineroar", moves=["feintattack"]),
]


def new_engine(format_id: FormatId = FormatId.SINGLES, seed: int = 42, data: Optional[BattleData] = None) -> BattleEngine:
    return BattleEngine(config=BattleConfig(format_id=format_id, seed=seed), data=data)


def start_battle(
    engine: BattleEngine,
    roster_1: list[PokemonBuild],
    roster_2: list[PokemonBuild],
    picks_1: Optional[list[int]] = None,
    picks_2: Optional[list[int]] = None,
    callbacks_1: Optional[dict] = None,
    callbacks_2: Optional[dict] = None,
) -> BattleEngine:
    """Register both sides and select, leaving the engine in the turn 1 choice phase"""
    size = engine.format.roster_subset_size
    engine.set_player(roster_1, **(callbacks_1 or {}))
    engine.set_player(roster_2, **(callbacks_2 or {}))
    engine.select(1, picks_1 or list(range(1, size + 1)))
    engine.select(2, picks_2 or list(range(1, size + 1)))
    return engine


def replace_state(engine: BattleEngine, update) -> None:
    """Swap in an edited copy of the current snapshot (test setup only)"""
    draft = engine.state.model_copy(deep=True)
    update(draft)
    engine.state = draft


@pytest.fixture
def singles_battle() -> BattleEngine:
    return start_battle(new_engine(FormatId.SINGLES), SINGLES_ROSTER_1, SINGLES_ROSTER_2)


@pytest.fixture
def doubles_battle() -> BattleEngine:
    return start_battle(new_engine(FormatId.DOUBLES), DOUBLES_ROSTER_1, DOUBLES_ROSTER_2)
