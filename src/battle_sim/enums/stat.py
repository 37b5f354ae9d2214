from enum import Enum


class Stat(str, Enum):
    """Stat keys. Values match the field names on StatSpread and Boosts."""

    HP = "hp"
    ATTACK = "attack"
    DEFENSE = "defense"
    SP_ATTACK = "sp_attack"
    SP_DEFENSE = "sp_defense"
    SPEED = "speed"

    # Battle-only stats
    ACCURACY = "accuracy"
    EVASION = "evasion"


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    NONE = "N"
