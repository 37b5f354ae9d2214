from src.battle_sim.enums import Type
from src.battle_sim.schema.capability import Capability
from src.battle_sim.schema.hook_context import DamageContext

HARSH_SUNLIGHT = "harshsunlight"


def is_weather_active(state, weather_id: str) -> bool:
    return state.field.weather is not None and state.field.weather.id == weather_id


def _harsh_sunlight_damage(state, owner, ctx: DamageContext) -> None:
    if ctx.move.type == Type.FIRE:
        ctx.power *= 1.5
    elif ctx.move.type == Type.WATER:
        ctx.power *= 0.5


WEATHERS: dict[str, Capability] = {
    HARSH_SUNLIGHT: Capability(
        id=HARSH_SUNLIGHT,
        name="Harsh Sunlight",
        desc="Fire-type moves are 1.5x stronger, Water-type moves are halved.",
        on_before_damage_calculation=_harsh_sunlight_damage,
    ),
}
