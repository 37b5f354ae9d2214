"""
Hook dispatcher.

Capabilities (weather, abilities, held items) interpose on fixed extension points.
For one trigger the dispatcher runs, in order:

1. the active weather's hook (owner None)
2. for every occupied active slot, side 1 ascending then side 2 ascending:
   the entity's ability hook, then its held item hook

Hooks receive (state, owner, context) and mutate the context or the working state
in place. Capabilities are looked up in the injected data table, so the core never
needs to know their identities.
"""

import logging
from typing import Any

from src.battle_sim.data.battle_data import BattleData
from src.battle_sim.enums import HookPoint
from src.battle_sim.schema.battle_state import BattleState

logger = logging.getLogger(__name__)


class HookDispatcher:
    def __init__(self, data: BattleData):
        self.data = data

    def trigger(self, hook_point: HookPoint, state: BattleState, context: Any) -> Any:
        """Run every defined hook for hook_point and return the (mutated) context"""
        if state.field.weather is not None:
            weather = self.data.get_weather(state.field.weather.id)
            hook = weather.get_hook(hook_point)
            if hook is not None:
                logger.debug(f"{hook_point.value}: weather {weather.id}")
                hook(state, None, context)

        # Snapshot positions first: a hook may move entities around
        for player_id, pos in state.get_occupied_active_positions():
            owner = state.get_active(player_id, pos)
            if owner is None:
                continue

            ability = self.data.get_ability(owner.ability)
            hook = ability.get_hook(hook_point)
            if hook is not None:
                logger.debug(f"{hook_point.value}: ability {ability.id} of {owner.uid}")
                hook(state, owner, context)

            if owner.item.id is not None:
                item = self.data.get_item(owner.item.id)
                hook = item.get_hook(hook_point)
                if hook is not None:
                    logger.debug(f"{hook_point.value}: item {item.id} of {owner.uid}")
                    hook(state, owner, context)

        return context
