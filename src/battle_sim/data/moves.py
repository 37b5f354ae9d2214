from src.battle_sim.enums import MoveCategory, MoveFlag, MoveTarget, Type
from src.battle_sim.schema.battle_move import MoveInfo

# Secondary effects (flinch, stat drops, burns) are not modelled; these entries carry
# only what the damage and ordering pipeline reads.
MOVES: dict[str, MoveInfo] = {
    "tackle": MoveInfo(
        id="tackle",
        name="Tackle",
        num=33,
        type=Type.NORMAL,
        category=MoveCategory.PHYSICAL,
        power=40,
        accuracy=100,
        pp=35,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.CONTACT | MoveFlag.PROTECT,
    ),
    "quickattack": MoveInfo(
        id="quickattack",
        name="Quick Attack",
        num=98,
        type=Type.NORMAL,
        category=MoveCategory.PHYSICAL,
        power=40,
        accuracy=100,
        pp=30,
        priority=1,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.CONTACT | MoveFlag.PROTECT,
        desc="Usually goes first.",
    ),
    "machpunch": MoveInfo(
        id="machpunch",
        name="Mach Punch",
        num=183,
        type=Type.FIGHTING,
        category=MoveCategory.PHYSICAL,
        power=40,
        accuracy=100,
        pp=30,
        priority=1,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.CONTACT | MoveFlag.PROTECT | MoveFlag.PUNCH,
        desc="Usually goes first.",
    ),
    "skyuppercut": MoveInfo(
        id="skyuppercut",
        name="Sky Uppercut",
        num=327,
        type=Type.FIGHTING,
        category=MoveCategory.PHYSICAL,
        power=85,
        accuracy=90,
        pp=15,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.CONTACT | MoveFlag.PROTECT | MoveFlag.PUNCH,
    ),
    "shadowpunch": MoveInfo(
        id="shadowpunch",
        name="Shadow Punch",
        num=325,
        type=Type.GHOST,
        category=MoveCategory.PHYSICAL,
        power=60,
        accuracy=None,
        pp=20,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.CONTACT | MoveFlag.PROTECT | MoveFlag.PUNCH,
        desc="This move does not check accuracy.",
    ),
    "feintattack": MoveInfo(
        id="feintattack",
        name="Feint Attack",
        num=185,
        type=Type.DARK,
        category=MoveCategory.PHYSICAL,
        power=60,
        accuracy=None,
        pp=20,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.CONTACT | MoveFlag.PROTECT,
        desc="This move does not check accuracy.",
    ),
    "flamethrower": MoveInfo(
        id="flamethrower",
        name="Flamethrower",
        num=53,
        type=Type.FIRE,
        category=MoveCategory.SPECIAL,
        power=90,
        accuracy=100,
        pp=15,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.PROTECT,
    ),
    "heatwave": MoveInfo(
        id="heatwave",
        name="Heat Wave",
        num=257,
        type=Type.FIRE,
        category=MoveCategory.SPECIAL,
        power=95,
        accuracy=90,
        pp=10,
        target=MoveTarget.ALL_ADJACENT_FOES,
        flags=MoveFlag.PROTECT,
        desc="Hits all adjacent foes.",
    ),
    "hydropump": MoveInfo(
        id="hydropump",
        name="Hydro Pump",
        num=56,
        type=Type.WATER,
        category=MoveCategory.SPECIAL,
        power=110,
        accuracy=80,
        pp=5,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.PROTECT,
    ),
    "energyball": MoveInfo(
        id="energyball",
        name="Energy Ball",
        num=412,
        type=Type.GRASS,
        category=MoveCategory.SPECIAL,
        power=90,
        accuracy=100,
        pp=10,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.PROTECT | MoveFlag.BULLET,
    ),
    "sludgebomb": MoveInfo(
        id="sludgebomb",
        name="Sludge Bomb",
        num=188,
        type=Type.POISON,
        category=MoveCategory.SPECIAL,
        power=90,
        accuracy=100,
        pp=10,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.PROTECT | MoveFlag.BULLET,
    ),
    "psychic": MoveInfo(
        id="psychic",
        name="Psychic",
        num=94,
        type=Type.PSYCHIC,
        category=MoveCategory.SPECIAL,
        power=90,
        accuracy=100,
        pp=10,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.PROTECT,
    ),
    "dazzlinggleam": MoveInfo(
        id="dazzlinggleam",
        name="Dazzling Gleam",
        num=605,
        type=Type.FAIRY,
        category=MoveCategory.SPECIAL,
        power=80,
        accuracy=100,
        pp=10,
        target=MoveTarget.ALL_ADJACENT_FOES,
        flags=MoveFlag.PROTECT,
        desc="Hits all adjacent foes.",
    ),
    "willowisp": MoveInfo(
        id="willowisp",
        name="Will-O-Wisp",
        num=261,
        type=Type.FIRE,
        category=MoveCategory.STATUS,
        power=0,
        accuracy=85,
        pp=15,
        target=MoveTarget.NORMAL,
        flags=MoveFlag.PROTECT,
    ),
    "earthquake": MoveInfo(
        id="earthquake",
        name="Earthquake",
        num=89,
        type=Type.GROUND,
        category=MoveCategory.PHYSICAL,
        power=100,
        accuracy=100,
        pp=10,
        target=MoveTarget.ALL_ADJACENT,
        flags=MoveFlag.PROTECT,
        desc="Hits all adjacent Pokemon.",
    ),
    "protect": MoveInfo(
        id="protect",
        name="Protect",
        num=182,
        type=Type.NORMAL,
        category=MoveCategory.STATUS,
        power=0,
        accuracy=None,
        pp=10,
        priority=4,
        target=MoveTarget.SELF,
        desc="Prevents moves from affecting the user this turn.",
    ),
}
