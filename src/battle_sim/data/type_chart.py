from typing import Optional

from src.battle_sim.enums import Type

# Type modifier exponents: damage is scaled by 2 ** modifier
SUPER_EFFECTIVE = 1
NOT_VERY_EFFECTIVE = -1
NO_EFFECT: Optional[int] = None  # Immunity voids the whole calculation

SE = SUPER_EFFECTIVE
NVE = NOT_VERY_EFFECTIVE

# Attacking type -> defending type -> modifier. Pairs not listed are neutral (0).
TYPE_CHART: dict[Type, dict[Type, Optional[int]]] = {
    Type.NORMAL: {Type.ROCK: NVE, Type.GHOST: NO_EFFECT, Type.STEEL: NVE},
    Type.FIRE: {
        Type.FIRE: NVE,
        Type.WATER: NVE,
        Type.GRASS: SE,
        Type.ICE: SE,
        Type.BUG: SE,
        Type.ROCK: NVE,
        Type.DRAGON: NVE,
        Type.STEEL: SE,
    },
    Type.WATER: {Type.FIRE: SE, Type.WATER: NVE, Type.GRASS: NVE, Type.GROUND: SE, Type.ROCK: SE, Type.DRAGON: NVE},
    Type.ELECTRIC: {Type.WATER: SE, Type.ELECTRIC: NVE, Type.GRASS: NVE, Type.GROUND: NO_EFFECT, Type.FLYING: SE, Type.DRAGON: NVE},
    Type.GRASS: {
        Type.FIRE: NVE,
        Type.WATER: SE,
        Type.GRASS: NVE,
        Type.POISON: NVE,
        Type.GROUND: SE,
        Type.FLYING: NVE,
        Type.BUG: NVE,
        Type.ROCK: SE,
        Type.DRAGON: NVE,
        Type.STEEL: NVE,
    },
    Type.ICE: {
        Type.FIRE: NVE,
        Type.WATER: NVE,
        Type.GRASS: SE,
        Type.ICE: NVE,
        Type.GROUND: SE,
        Type.FLYING: SE,
        Type.DRAGON: SE,
        Type.STEEL: NVE,
    },
    Type.FIGHTING: {
        Type.NORMAL: SE,
        Type.ICE: SE,
        Type.POISON: NVE,
        Type.FLYING: NVE,
        Type.PSYCHIC: NVE,
        Type.BUG: NVE,
        Type.ROCK: SE,
        Type.GHOST: NO_EFFECT,
        Type.DARK: SE,
        Type.STEEL: SE,
        Type.FAIRY: NVE,
    },
    Type.POISON: {
        Type.GRASS: SE,
        Type.POISON: NVE,
        Type.GROUND: NVE,
        Type.ROCK: NVE,
        Type.GHOST: NVE,
        Type.STEEL: NO_EFFECT,
        Type.FAIRY: SE,
    },
    Type.GROUND: {
        Type.FIRE: SE,
        Type.ELECTRIC: SE,
        Type.GRASS: NVE,
        Type.POISON: SE,
        Type.FLYING: NO_EFFECT,
        Type.BUG: NVE,
        Type.ROCK: SE,
        Type.STEEL: SE,
    },
    Type.FLYING: {Type.ELECTRIC: NVE, Type.GRASS: SE, Type.FIGHTING: SE, Type.BUG: SE, Type.ROCK: NVE, Type.STEEL: NVE},
    Type.PSYCHIC: {Type.FIGHTING: SE, Type.POISON: SE, Type.PSYCHIC: NVE, Type.DARK: NO_EFFECT, Type.STEEL: NVE},
    Type.BUG: {
        Type.FIRE: NVE,
        Type.GRASS: SE,
        Type.FIGHTING: NVE,
        Type.POISON: NVE,
        Type.FLYING: NVE,
        Type.PSYCHIC: SE,
        Type.GHOST: NVE,
        Type.DARK: SE,
        Type.STEEL: NVE,
        Type.FAIRY: NVE,
    },
    Type.ROCK: {Type.FIRE: SE, Type.ICE: SE, Type.FIGHTING: NVE, Type.GROUND: NVE, Type.FLYING: SE, Type.BUG: SE, Type.STEEL: NVE},
    Type.GHOST: {Type.NORMAL: NO_EFFECT, Type.PSYCHIC: SE, Type.GHOST: SE, Type.DARK: NVE},
    Type.DRAGON: {Type.DRAGON: SE, Type.STEEL: NVE, Type.FAIRY: NO_EFFECT},
    Type.DARK: {Type.FIGHTING: NVE, Type.PSYCHIC: SE, Type.GHOST: SE, Type.DARK: NVE, Type.FAIRY: NVE},
    Type.STEEL: {Type.FIRE: NVE, Type.WATER: NVE, Type.ELECTRIC: NVE, Type.ICE: SE, Type.ROCK: SE, Type.STEEL: NVE, Type.FAIRY: SE},
    Type.FAIRY: {Type.FIRE: NVE, Type.FIGHTING: SE, Type.POISON: NVE, Type.DRAGON: SE, Type.DARK: SE, Type.STEEL: NVE},
}
