from src.battle_sim.config import BattleConfig
from src.battle_sim.battle_engine import BattleEngine
from src.battle_sim.enums import FormatId, Phase
from src.battle_sim.schema.capability import Capability

from conftest import DATA, make_build, new_engine, replace_state, start_battle

SUN_ROSTER_1 = [make_build("venusaur", moves=["willowisp"]), make_build("hatterene"), make_build("dusclops")]
SUN_ROSTER_2 = [make_build("torkoal", moves=["willowisp"], ability="drought"), make_build("incineroar"), make_build("conkeldurr")]


def play_turn(engine):
    engine.move(1, 1, 1, 1)
    engine.move(2, 1, 1, 1)


def test_drought_weather_counts_down_and_expires():
    engine = start_battle(new_engine(FormatId.SINGLES), SUN_ROSTER_1, SUN_ROSTER_2)
    assert engine.state.field.weather.id == "harshsunlight"
    assert engine.state.field.weather.turns_left == 5

    for turns_left in (4, 3, 2, 1):
        play_turn(engine)
        assert engine.state.field.weather.turns_left == turns_left

    play_turn(engine)
    assert engine.state.field.weather is None
    assert engine.turn == 6


def test_weather_duration_comes_from_config():
    engine = BattleEngine(config=BattleConfig(format_id=FormatId.SINGLES, seed=3, weather_duration=2))
    start_battle(engine, SUN_ROSTER_1, SUN_ROSTER_2)
    assert engine.state.field.weather.turns_left == 2
    play_turn(engine)
    play_turn(engine)
    assert engine.state.field.weather is None


def test_status_moves_spend_pp_without_damage():
    engine = start_battle(new_engine(FormatId.SINGLES), SUN_ROSTER_1, SUN_ROSTER_2)
    play_turn(engine)

    venusaur = engine.state.get_active(1, 1)
    torkoal = engine.state.get_active(2, 1)
    assert venusaur.moves[0].pp == venusaur.moves[0].max_pp - 1
    assert torkoal.moves[0].pp == torkoal.moves[0].max_pp - 1
    assert venusaur.hp == venusaur.max_hp
    assert torkoal.hp == torkoal.max_hp


def test_move_with_no_pp_left_cannot_be_chosen():
    engine = start_battle(
        new_engine(FormatId.SINGLES),
        [make_build("venusaur", moves=[{"id": "willowisp", "pp": 1}, "tackle"]), make_build("hatterene"), make_build("dusclops")],
        SUN_ROSTER_2,
    )
    play_turn(engine)
    assert engine.state.get_active(1, 1).moves[0].pp == 0
    assert engine.phase == Phase.CHOICE
    assert engine.get_slots_missing_action(1) == [(1, 1)]


def test_intimidate_applies_on_switch_in():
    engine = start_battle(
        new_engine(FormatId.SINGLES),
        [make_build("conkeldurr", moves=["tackle"]), make_build("hatterene"), make_build("dusclops")],
        [make_build("venusaur", moves=["tackle"]), make_build("incineroar", ability="intimidate"), make_build("torkoal")],
    )
    assert engine.state.get_active(1, 1).boosts.attack == 0

    engine.switch(2, 1, 1)
    engine.move(1, 1, 1, 1)

    assert engine.state.get_active(2, 1).species == "incineroar"
    assert engine.state.get_active(1, 1).boosts.attack == -1


def test_published_snapshots_are_never_mutated(singles_battle):
    first = singles_battle.state
    snapshot = first.model_dump()
    singles_battle.move(1, 1, 2, 1)
    singles_battle.move(2, 1, 1, 1)
    assert singles_battle.state is not first
    assert first.model_dump() == snapshot


def test_clone_runs_independently(singles_battle):
    clone = singles_battle.clone()
    assert clone.state is singles_battle.state

    clone.move(1, 1, 2, 1)
    clone.move(2, 1, 1, 1)

    assert clone.turn == 2
    assert singles_battle.turn == 1
    assert singles_battle.get_slots_missing_action() == [(1, 1), (2, 1)]


def test_lead_intimidate_reaches_both_sides():
    engine = start_battle(
        new_engine(FormatId.SINGLES),
        [make_build("incineroar", ability="intimidate"), make_build("hatterene"), make_build("dusclops")],
        [make_build("incineroar", ability="intimidate"), make_build("venusaur"), make_build("torkoal")],
    )
    assert engine.state.get_active(1, 1).boosts.attack == -1
    assert engine.state.get_active(2, 1).boosts.attack == -1


def test_lead_drought_and_intimidate_fire_after_every_lead_is_placed():
    engine = start_battle(
        new_engine(FormatId.DOUBLES),
        [
            make_build("incineroar", ability="intimidate"),
            make_build("torkoal", ability="drought"),
            make_build("hatterene"),
            make_build("dusclops"),
        ],
        [make_build("conkeldurr"), make_build("venusaur"), make_build("hatterene"), make_build("dusclops")],
    )
    assert engine.state.get_active(2, 1).boosts.attack == -1
    assert engine.state.get_active(2, 2).boosts.attack == -1
    assert engine.state.get_active(1, 2).boosts.attack == 0
    assert engine.state.field.weather.id == "harshsunlight"


def start_accuracy_battle(attacks: list, evasion: int):
    """Venusaur (faster) tackles Torkoal; RNG state 9 makes the accuracy roll of the first move 99"""

    def record(state, owner, ctx):
        attacks.append((ctx.attacker.uid, ctx.did_damage))

    tracker = Capability(id="tracker", name="Tracker", on_after_attack=record)
    data = DATA.model_copy(update={"abilities": {**DATA.abilities, "tracker": tracker}})
    engine = start_battle(
        new_engine(FormatId.SINGLES, data=data),
        [make_build("venusaur", moves=["tackle"], ability="tracker"), make_build("hatterene"), make_build("dusclops")],
        [make_build("torkoal", moves=["willowisp"]), make_build("incineroar"), make_build("conkeldurr")],
    )

    def update(state):
        # Two speed tiebreak draws, then the accuracy draw
        state.rng_state = 9
        state.get_active(2, 1).boosts.evasion = evasion

    replace_state(engine, update)
    return engine


def test_missed_move_leaves_the_target_untouched():
    attacks = []
    engine = start_accuracy_battle(attacks, evasion=6)
    play_turn(engine)

    torkoal = engine.state.get_active(2, 1)
    venusaur = engine.state.get_active(1, 1)
    assert torkoal.hp == torkoal.max_hp
    assert venusaur.moves[0].pp == venusaur.moves[0].max_pp - 1
    assert attacks[0] == ("1:1", False)


def test_same_roll_hits_without_evasion():
    attacks = []
    engine = start_accuracy_battle(attacks, evasion=0)
    play_turn(engine)

    torkoal = engine.state.get_active(2, 1)
    assert torkoal.hp < torkoal.max_hp
    assert attacks[0] == ("1:1", True)
