from enum import Enum, IntFlag


class MoveCategory(str, Enum):
    PHYSICAL = "physical"
    SPECIAL = "special"
    STATUS = "status"


class MoveTarget(str, Enum):
    """Move targeting classes.

    Only NORMAL and ALL_ADJACENT_FOES can be selected by the engine; the rest exist so
    data tables can describe moves the engine refuses to schedule.
    """

    NORMAL = "normal"  # One chosen foe
    ALL_ADJACENT_FOES = "allAdjacentFoes"  # Every occupied foe slot
    ALL_ADJACENT = "allAdjacent"  # Foes and ally
    SELF = "self"
    ADJACENT_ALLY = "adjacentAlly"


class MoveFlag(IntFlag):
    NONE = 0
    CONTACT = 1 << 0
    PROTECT = 1 << 1
    PUNCH = 1 << 2
    SOUND = 1 << 3
    BULLET = 1 << 4

    def is_punch(self) -> bool:
        """Check if move is punch-based (Iron Fist)"""
        return bool(self & MoveFlag.PUNCH)
