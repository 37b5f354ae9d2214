from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict

from src.battle_sim.enums import HookPoint

# (state, owner, context) -> None. owner is the entity holding the ability/item, None for weather.
HookFn = Callable[[Any, Any, Any], None]


class Capability(BaseModel):
    """An ability, held item or weather: identity plus optional hook functions.

    A hook left as None is simply skipped by the dispatcher.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    num: int = 0
    desc: str = ""

    on_active: Optional[HookFn] = None
    on_before_speed_calculation: Optional[HookFn] = None
    on_before_accuracy_calculation: Optional[HookFn] = None
    on_before_damage_calculation: Optional[HookFn] = None
    on_before_damage_application: Optional[HookFn] = None
    on_after_attack: Optional[HookFn] = None

    def get_hook(self, hook_point: HookPoint) -> Optional[HookFn]:
        return getattr(self, hook_point.value)
