from src.battle_sim.enums.battle import Phase, FormatId, ActionType, HookPoint
from src.battle_sim.enums.move import MoveCategory, MoveTarget, MoveFlag
from src.battle_sim.enums.stat import Stat, Gender
from src.battle_sim.enums.type import Type
