from src.battle_sim.enums import Type
from src.battle_sim.schema.build import StatSpread
from src.battle_sim.schema.species_info import SpeciesInfo


def _stats(hp: int, attack: int, defense: int, sp_attack: int, sp_defense: int, speed: int) -> StatSpread:
    return StatSpread(hp=hp, attack=attack, defense=defense, sp_attack=sp_attack, sp_defense=sp_defense, speed=speed)


SPECIES: dict[str, SpeciesInfo] = {
    "venusaur": SpeciesInfo(
        id="venusaur",
        name="Venusaur",
        num=3,
        types=[Type.GRASS, Type.POISON],
        base_stats=_stats(80, 82, 83, 100, 100, 80),
        height=2.0,
        weight=100.0,
        can_evolve=False,
    ),
    "torkoal": SpeciesInfo(
        id="torkoal",
        name="Torkoal",
        num=324,
        types=[Type.FIRE],
        base_stats=_stats(70, 85, 140, 85, 70, 20),
        height=0.5,
        weight=80.4,
        can_evolve=False,
    ),
    "dusclops": SpeciesInfo(
        id="dusclops",
        name="Dusclops",
        num=356,
        types=[Type.GHOST],
        base_stats=_stats(40, 70, 130, 60, 130, 25),
        height=1.6,
        weight=30.6,
        can_evolve=True,
    ),
    "conkeldurr": SpeciesInfo(
        id="conkeldurr",
        name="Conkeldurr",
        num=534,
        types=[Type.FIGHTING],
        base_stats=_stats(105, 140, 95, 55, 65, 45),
        height=1.4,
        weight=87.0,
        can_evolve=False,
    ),
    "incineroar": SpeciesInfo(
        id="incineroar",
        name="Incineroar",
        num=727,
        types=[Type.FIRE, Type.DARK],
        base_stats=_stats(95, 115, 90, 80, 90, 60),
        height=1.8,
        weight=83.0,
        can_evolve=False,
    ),
    "hatterene": SpeciesInfo(
        id="hatterene",
        name="Hatterene",
        num=858,
        types=[Type.PSYCHIC, Type.FAIRY],
        base_stats=_stats(57, 90, 95, 136, 103, 29),
        height=2.1,
        weight=5.1,
        can_evolve=False,
    ),
}
