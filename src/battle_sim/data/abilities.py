"""
Abilities. Hooks fire for every active entity, so each one first checks that the
entity it is about to affect is its owner (or a foe of its owner).
"""

from src.battle_sim.data.weathers import HARSH_SUNLIGHT, is_weather_active
from src.battle_sim.enums import Stat
from src.battle_sim.schema.battle_state import WeatherState
from src.battle_sim.schema.capability import Capability
from src.battle_sim.schema.hook_context import ActiveContext, DamageContext, SpeedContext

IRON_FIST_MULTIPLIER = 1.2
CHLOROPHYLL_MULTIPLIER = 2


def _chlorophyll_speed(state, owner, ctx: SpeedContext) -> None:
    if owner.uid == ctx.entity.uid and is_weather_active(state, HARSH_SUNLIGHT):
        ctx.speed *= CHLOROPHYLL_MULTIPLIER


def _drought_active(state, owner, ctx: ActiveContext) -> None:
    if owner.uid == ctx.entity.uid:
        state.field.weather = WeatherState(id=HARSH_SUNLIGHT, turns_left=state.field.weather_duration)


def _iron_fist_damage(state, owner, ctx: DamageContext) -> None:
    if owner.uid == ctx.attacker.uid and ctx.move.flags.is_punch():
        ctx.power *= IRON_FIST_MULTIPLIER


def _intimidate_active(state, owner, ctx: ActiveContext) -> None:
    if owner.uid != ctx.entity.uid:
        return
    rival = state.get_player(state.get_rival_id(owner.player_id))
    for foe in rival.active:
        if foe is not None and foe.hp > 0:
            foe.boosts.change(Stat.ATTACK, -1)


ABILITIES: dict[str, Capability] = {
    "chlorophyll": Capability(
        id="chlorophyll",
        name="Chlorophyll",
        num=34,
        desc="If Sunny Day is active, this Pokemon's Speed is doubled.",
        on_before_speed_calculation=_chlorophyll_speed,
    ),
    "drought": Capability(
        id="drought",
        name="Drought",
        num=70,
        desc="On switch-in, this Pokemon summons Sunny Day.",
        on_active=_drought_active,
    ),
    "ironfist": Capability(
        id="ironfist",
        name="Iron Fist",
        num=89,
        desc="This Pokemon's punch-based attacks have 1.2x power.",
        on_before_damage_calculation=_iron_fist_damage,
    ),
    "magicbounce": Capability(
        id="magicbounce",
        name="Magic Bounce",
        num=156,
        desc="This Pokemon blocks certain status moves and bounces them back to the user.",
    ),
    "intimidate": Capability(
        id="intimidate",
        name="Intimidate",
        num=22,
        desc="On switch-in, this Pokemon lowers the Attack of adjacent opponents by 1 stage.",
        on_active=_intimidate_active,
    ),
    "frisk": Capability(
        id="frisk",
        name="Frisk",
        num=119,
        desc="On switch-in, this Pokemon identifies the held items of all opposing Pokemon.",
    ),
}
