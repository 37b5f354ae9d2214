from enum import Enum, IntEnum


class Phase(str, Enum):
    """Battle lifecycle phases. END is terminal: no further command is accepted."""

    SETTING_PLAYERS = "setplayers"
    TEAM_PREVIEW = "teampreview"
    CHOICE = "choice"
    RUN = "run"
    SWITCH = "switch"
    END = "end"


class FormatId(str, Enum):
    SINGLES = "singles"
    DOUBLES = "doubles"


class ActionType(IntEnum):
    """Pending action kinds. The value doubles as the execution tier (lower runs first)."""

    PASS = 1
    SWITCH = 2
    MOVE = 3


class HookPoint(str, Enum):
    """Extension points a capability may hook into.

    Each value is also the attribute name looked up on a Capability record.
    """

    ON_ACTIVE = "on_active"
    ON_BEFORE_SPEED_CALCULATION = "on_before_speed_calculation"
    ON_BEFORE_ACCURACY_CALCULATION = "on_before_accuracy_calculation"
    ON_BEFORE_DAMAGE_CALCULATION = "on_before_damage_calculation"
    ON_BEFORE_DAMAGE_APPLICATION = "on_before_damage_application"
    ON_AFTER_ATTACK = "on_after_attack"
