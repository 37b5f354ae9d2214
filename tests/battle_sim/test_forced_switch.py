import pytest

from src.battle_sim.enums import ActionType, FormatId, Phase
from src.battle_sim.exceptions import InvalidActionError

from conftest import DOUBLES_ROSTER_1, DOUBLES_ROSTER_2, SINGLES_ROSTER_1, SINGLES_ROSTER_2, new_engine, replace_state, start_battle


def set_hp(engine, player_id, slot, hp):
    def update(state):
        state.get_active(player_id, slot).hp = hp

    replace_state(engine, update)


def test_fainted_lead_triggers_forced_switch():
    forced_calls = []

    def on_force_switch(switch, own, rival, field, forced_slots):
        forced_calls.append((own.id, forced_slots))

    engine = start_battle(
        new_engine(FormatId.SINGLES),
        SINGLES_ROSTER_1,
        SINGLES_ROSTER_2,
        callbacks_1={"on_force_switch": on_force_switch},
        callbacks_2={"on_force_switch": on_force_switch},
    )
    set_hp(engine, 2, 1, 1)

    engine.move(1, 1, 1, 1)  # Mach Punch
    engine.move(2, 1, 1, 1)

    state = engine.state
    player_2 = state.get_player(2)
    assert engine.phase == Phase.SWITCH
    assert engine.turn == 1
    assert player_2.active == [None]
    assert [pokemon.species for pokemon in player_2.bench] == ["dusclops", "torkoal", "venusaur"]
    assert player_2.bench[2].hp == 0
    assert player_2.forced_switch_slots == [1]
    assert engine.has_forced_switches_left(2)
    assert not engine.has_forced_switches_left(1)
    assert forced_calls == [(2, [1])]
    # Venusaur fainted before it could act
    conkeldurr = state.get_active(1, 1)
    assert conkeldurr.hp == conkeldurr.max_hp


def test_forced_switch_validation():
    engine = start_battle(new_engine(FormatId.SINGLES), SINGLES_ROSTER_1, SINGLES_ROSTER_2)
    set_hp(engine, 2, 1, 1)
    engine.move(1, 1, 1, 1)
    engine.move(2, 1, 1, 1)

    before = engine.state
    with pytest.raises(InvalidActionError):
        engine.switch(1, 1, 1)  # side 1 has nothing to replace
    with pytest.raises(InvalidActionError):
        engine.switch(2, 1, 3)  # fainted
    with pytest.raises(InvalidActionError):
        engine.move(2, 1, 1, 1)
    assert engine.state is before

    engine.switch(2, 1, 1)

    player_2 = engine.state.get_player(2)
    assert engine.phase == Phase.CHOICE
    assert engine.turn == 2
    assert player_2.active[0].species == "dusclops"
    assert player_2.active[0].revealed
    assert [pokemon.species if pokemon else None for pokemon in player_2.bench] == ["torkoal", "venusaur", None]
    assert player_2.forced_switch_slots == []
    assert engine.get_slots_missing_action() == [(1, 1), (2, 1)]


def test_forced_switch_from_callback():
    def on_force_switch(switch, own, rival, field, forced_slots):
        healthy = [index for index, pokemon in enumerate(own.bench, start=1) if pokemon is not None and pokemon.hp > 0]
        switch(forced_slots[0], healthy[-1])

    engine = start_battle(
        new_engine(FormatId.SINGLES),
        SINGLES_ROSTER_1,
        SINGLES_ROSTER_2,
        callbacks_2={"on_force_switch": on_force_switch},
    )
    set_hp(engine, 2, 1, 1)
    engine.move(1, 1, 1, 1)
    engine.move(2, 1, 1, 1)

    assert engine.phase == Phase.CHOICE
    assert engine.turn == 2
    assert engine.state.get_active(2, 1).species == "torkoal"


def test_side_without_healthy_bench_is_skipped():
    engine = start_battle(new_engine(FormatId.DOUBLES), DOUBLES_ROSTER_1, DOUBLES_ROSTER_2)

    def update(state):
        for pokemon in state.get_player(2).bench:
            if pokemon is not None:
                pokemon.hp = 0
        state.get_active(2, 1).hp = 1

    replace_state(engine, update)

    engine.move(1, 1, 1, 1)  # Mach Punch on Venusaur
    engine.move(1, 2, 2, 2)  # Feint Attack on Torkoal
    engine.move(2, 1, 1, 1)
    engine.move(2, 2, 1, 1)

    state = engine.state
    assert engine.phase == Phase.CHOICE
    assert engine.turn == 2
    assert state.get_active(2, 1) is None
    assert state.get_player(2).forced_switch_slots == []

    # The empty slot is pre-filled with a Pass and cannot be overridden
    assert state.get_player(2).get_action(1).action_type == ActionType.PASS
    assert engine.get_slots_missing_action(2) == [(2, 2)]
    with pytest.raises(InvalidActionError):
        engine.move(2, 1, 1, 1)


def test_commit_with_one_empty_slot():
    engine = start_battle(new_engine(FormatId.DOUBLES), DOUBLES_ROSTER_1, DOUBLES_ROSTER_2)

    def update(state):
        for pokemon in state.get_player(2).bench:
            if pokemon is not None:
                pokemon.hp = 0
        state.get_active(2, 1).hp = 1

    replace_state(engine, update)
    engine.move(1, 1, 1, 1)
    engine.move(1, 2, 2, 2)
    engine.move(2, 1, 1, 1)
    engine.move(2, 2, 1, 1)
    assert engine.turn == 2

    engine.move(1, 1, 2, 2)
    engine.move(1, 2, 2, 2)
    assert engine.phase == Phase.CHOICE
    assert engine.turn == 2

    # One action is all side 2 owes this turn
    engine.move(2, 2, 1, 1)
    assert engine.turn == 3


def test_normal_move_falls_back_to_the_other_foe_slot():
    engine = start_battle(new_engine(FormatId.DOUBLES), DOUBLES_ROSTER_1, DOUBLES_ROSTER_2)

    def update(state):
        for pokemon in state.get_player(2).bench:
            if pokemon is not None:
                pokemon.hp = 0
        state.get_active(2, 1).hp = 1

    replace_state(engine, update)
    engine.move(1, 1, 1, 1)
    engine.move(1, 2, 2, 2)
    engine.move(2, 1, 1, 1)
    engine.move(2, 2, 1, 1)
    torkoal_hp = engine.state.get_active(2, 2).hp

    # Aimed at the now empty slot 1
    engine.move(1, 1, 2, 1)
    engine.move(1, 2, 2, 1)
    engine.move(2, 2, 1, 1)
    assert engine.state.get_active(2, 2).hp < torkoal_hp
