from src.battle_sim.enums import FormatId
from src.battle_sim.views import build_player_views, scale_hp

from conftest import SINGLES_ROSTER_1, SINGLES_ROSTER_2, new_engine, start_battle


def test_scale_hp():
    assert scale_hp(155, 155) == 48
    assert scale_hp(1, 155) == 1
    assert scale_hp(0, 155) == 0
    assert scale_hp(78, 155) == 25
    assert scale_hp(50, 100, scale=100) == 50


def test_rival_sees_public_data_only(singles_battle):
    own, rival, field = build_player_views(singles_battle.state, 1)

    assert own.id == 1
    assert own.active[0].species == "conkeldurr"
    assert [pokemon.species for pokemon in own.bench if pokemon] == ["hatterene", "incineroar"]

    assert rival.id == 2
    foe = rival.active[0]
    assert foe.species == "venusaur"
    assert foe.hp == 48
    assert foe.max_hp == 48
    assert not hasattr(foe, "moves")
    # Nothing from the rival bench has been on the field yet
    assert rival.bench == []
    assert field.weather is None


def test_rival_bench_shows_revealed_members(singles_battle):
    singles_battle.move(1, 1, 2, 1)
    singles_battle.switch(2, 1, 1)

    _, rival, _ = build_player_views(singles_battle.state, 1)
    assert rival.active[0].species == "dusclops"
    assert [pokemon.species for pokemon in rival.bench] == ["venusaur"]


def test_own_view_is_a_copy(singles_battle):
    own, _, _ = build_player_views(singles_battle.state, 1)
    own.active[0].hp = 0
    own.active[0].moves[0].pp = 0
    assert singles_battle.state.get_active(1, 1).hp > 0
    assert singles_battle.state.get_active(1, 1).moves[0].pp > 0


def test_callbacks_receive_scaled_views():
    received = {}

    def on_move(move, switch, own, rival, field):
        received.setdefault("views", (own, rival, field))

    engine = new_engine(FormatId.SINGLES)
    engine.config = engine.config.model_copy(update={"public_hp_scale": 100})
    start_battle(engine, SINGLES_ROSTER_1, SINGLES_ROSTER_2, callbacks_1={"on_move": on_move})

    own, rival, _ = received["views"]
    assert own.active[0].hp == own.active[0].max_hp
    assert rival.active[0].hp == 100
    assert rival.active[0].max_hp == 100
