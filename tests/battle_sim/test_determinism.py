import pytest

from src.battle_sim.battle_engine import BattleEngine
from src.battle_sim.enums import FormatId, Phase

from conftest import SINGLES_ROSTER_1, SINGLES_ROSTER_2, make_build, new_engine, start_battle

ROSTER_1 = [
    make_build("incineroar", moves=["flamethrower"]),
    make_build("torkoal", moves=["flamethrower"]),
    make_build("hatterene", moves=["dazzlinggleam"]),
]
ROSTER_2 = [
    make_build("venusaur", moves=["sludgebomb"]),
    make_build("conkeldurr", moves=["skyuppercut"]),
    make_build("dusclops", moves=["shadowpunch"]),
]


class Bot:
    """Brings its whole roster, attacks the first foe slot and replaces knocked out leads in bench order"""

    def __init__(self):
        self.hp_log: list[tuple[str, int]] = []
        self.ended = False

    def on_team_preview(self, select, own, rival):
        select(list(range(1, len(own.team) + 1)))

    def on_move(self, move, switch, own, rival, field):
        for slot, pokemon in enumerate(own.active, start=1):
            if pokemon is None:
                continue
            self.hp_log.append((pokemon.uid, pokemon.hp))
            move_slot = next(index for index, move_state in enumerate(pokemon.moves, start=1) if move_state.pp > 0)
            move(slot, move_slot, 1)

    def on_force_switch(self, switch, own, rival, field, forced_slots):
        bench_slot = next(index for index, pokemon in enumerate(own.bench, start=1) if pokemon is not None and pokemon.hp > 0)
        switch(forced_slots[0], bench_slot)

    def on_end(self):
        self.ended = True

    def callbacks(self) -> dict:
        return {
            "on_team_preview": self.on_team_preview,
            "on_move": self.on_move,
            "on_force_switch": self.on_force_switch,
            "on_end": self.on_end,
        }


def play(seed: int) -> tuple[BattleEngine, Bot, Bot]:
    engine = new_engine(FormatId.SINGLES, seed=seed)
    bot_1, bot_2 = Bot(), Bot()
    engine.set_player(ROSTER_1, **bot_1.callbacks())
    engine.set_player(ROSTER_2, **bot_2.callbacks())
    return engine, bot_1, bot_2


def test_callbacks_play_a_full_battle():
    engine, bot_1, bot_2 = play(seed=42)
    assert engine.phase == Phase.END
    assert engine.winner in (1, 2, None)
    assert bot_1.ended and bot_2.ended
    assert engine.turn > 1


def test_same_seed_same_battle():
    first, first_1, first_2 = play(seed=42)
    second, second_1, second_2 = play(seed=42)

    assert first.state.model_dump() == second.state.model_dump()
    assert first_1.hp_log == second_1.hp_log
    assert first_2.hp_log == second_2.hp_log


def test_long_callback_driven_battle():
    engine = new_engine(FormatId.SINGLES, seed=7)
    last_turn = 60

    def on_move(move, switch, own, rival, field):
        if engine.turn <= last_turn:
            move(1, 1, 1)

    roster = [make_build("torkoal", moves=[{"id": "willowisp", "pp": 64}]), make_build("hatterene"), make_build("dusclops")]
    start_battle(engine, roster, roster, callbacks_1={"on_move": on_move}, callbacks_2={"on_move": on_move})

    assert engine.turn == last_turn + 1
    assert engine.phase == Phase.CHOICE
    assert engine.state.get_active(1, 1).moves[0].pp == 64 - last_turn


def test_callback_error_escapes_after_the_turn_is_published():
    calls = {1: 0, 2: 0}

    def on_move_1(move, switch, own, rival, field):
        calls[1] += 1
        if calls[1] > 1:
            raise RuntimeError("side 1 client crashed")

    def on_move_2(move, switch, own, rival, field):
        calls[2] += 1

    engine = start_battle(
        new_engine(FormatId.SINGLES),
        SINGLES_ROSTER_1,
        SINGLES_ROSTER_2,
        callbacks_1={"on_move": on_move_1},
        callbacks_2={"on_move": on_move_2},
    )
    engine.move(1, 1, 2, 1)
    with pytest.raises(RuntimeError):
        engine.move(2, 1, 1, 1)

    assert engine.turn == 2
    assert engine.phase == Phase.CHOICE
    assert calls == {1: 2, 2: 1}
