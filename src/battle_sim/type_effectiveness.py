from typing import Iterable, Optional

from src.battle_sim.data.type_chart import NO_EFFECT, TYPE_CHART
from src.battle_sim.enums import Type

TypeChart = dict[Type, dict[Type, Optional[int]]]


class TypeEffectiveness:
    """Type chart lookups. Modifiers are exponents of 2; None marks an immunity."""

    @staticmethod
    def get_effectiveness(attacking_type: Type, defending_type: Type, chart: TypeChart = TYPE_CHART) -> Optional[int]:
        """
        Get the modifier of an attacking type against one defending type.

        Returns:
            1 for super effective, -1 for not very effective, 0 for neutral, None for immune
        """
        return chart.get(attacking_type, {}).get(defending_type, 0)

    @staticmethod
    def calculate_effectiveness(attacking_type: Type, defending_types: Iterable[Type], chart: TypeChart = TYPE_CHART) -> Optional[int]:
        """
        Sum the modifiers against every defending type.

        Any immunity voids the whole result: None is returned and no further
        multipliers apply.
        """
        total = 0
        for defending_type in defending_types:
            modifier = TypeEffectiveness.get_effectiveness(attacking_type, defending_type, chart)
            if modifier is NO_EFFECT:
                return NO_EFFECT
            total += modifier
        return total
