"""
Held items. Like abilities, every hook checks its owner against the entity the
event is about before touching the context.
"""

from src.battle_sim.enums import Stat, Type
from src.battle_sim.schema.capability import Capability
from src.battle_sim.schema.hook_context import AccuracyContext, AttackContext, DamageContext

CHARCOAL_MULTIPLIER = 1.2
LIFE_ORB_MULTIPLIER = 1.3
LIFE_ORB_RECOIL_DIVISOR = 10
EVIOLITE_MULTIPLIER = 1.5
ASSAULT_VEST_MULTIPLIER = 1.5
WIDE_LENS_MULTIPLIER = 1.1


def _charcoal_damage(state, owner, ctx: DamageContext) -> None:
    if owner.uid == ctx.attacker.uid and ctx.move.type == Type.FIRE:
        ctx.power *= CHARCOAL_MULTIPLIER


def _life_orb_damage(state, owner, ctx: DamageContext) -> None:
    if owner.uid == ctx.attacker.uid:
        ctx.power *= LIFE_ORB_MULTIPLIER


def _life_orb_after_attack(state, owner, ctx: AttackContext) -> None:
    if owner.uid == ctx.attacker.uid and ctx.did_damage and owner.hp > 0:
        owner.subtract_hp(owner.max_hp / LIFE_ORB_RECOIL_DIVISOR)


def _focus_sash_application(state, owner, ctx: DamageContext) -> None:
    # Single use, and only from full HP
    if owner.uid != ctx.target.uid or owner.item.uses > 0 or not owner.has_full_hp():
        return
    if ctx.damage is not None and ctx.damage >= owner.max_hp:
        ctx.damage = owner.max_hp - 1
        owner.item.uses += 1


def _eviolite_damage(state, owner, ctx: DamageContext) -> None:
    if owner.uid == ctx.target.uid and owner.can_evolve:
        ctx.defense_stat *= EVIOLITE_MULTIPLIER


def _assault_vest_damage(state, owner, ctx: DamageContext) -> None:
    if owner.uid == ctx.target.uid and ctx.defense_key == Stat.SP_DEFENSE:
        ctx.defense_stat *= ASSAULT_VEST_MULTIPLIER


def _wide_lens_accuracy(state, owner, ctx: AccuracyContext) -> None:
    if owner.uid == ctx.attacker.uid:
        ctx.accuracy *= WIDE_LENS_MULTIPLIER


ITEMS: dict[str, Capability] = {
    # =============================================================================
    # DAMAGE BOOSTING
    # =============================================================================
    "charcoal": Capability(
        id="charcoal",
        name="Charcoal",
        num=226,
        desc="Holder's Fire-type attacks have 1.2x power.",
        on_before_damage_calculation=_charcoal_damage,
    ),
    "lifeorb": Capability(
        id="lifeorb",
        name="Life Orb",
        num=270,
        desc="Holder's attacks do 1.3x damage, and it loses 1/10 its max HP after the attack.",
        on_before_damage_calculation=_life_orb_damage,
        on_after_attack=_life_orb_after_attack,
    ),
    # =============================================================================
    # DEFENSIVE
    # =============================================================================
    "focussash": Capability(
        id="focussash",
        name="Focus Sash",
        num=275,
        desc="If holder's HP is full, will survive an attack that would KO it with 1 HP. Single use.",
        on_before_damage_application=_focus_sash_application,
    ),
    "eviolite": Capability(
        id="eviolite",
        name="Eviolite",
        num=538,
        desc="If holder's species can evolve, its Defense and Sp. Def are 1.5x.",
        on_before_damage_calculation=_eviolite_damage,
    ),
    "assaultvest": Capability(
        id="assaultvest",
        name="Assault Vest",
        num=640,
        desc="Holder's Sp. Def is 1.5x.",
        on_before_damage_calculation=_assault_vest_damage,
    ),
    # =============================================================================
    # ACCURACY
    # =============================================================================
    "widelens": Capability(
        id="widelens",
        name="Wide Lens",
        num=265,
        desc="The accuracy of attacks by the holder is 1.1x.",
        on_before_accuracy_calculation=_wide_lens_accuracy,
    ),
}
