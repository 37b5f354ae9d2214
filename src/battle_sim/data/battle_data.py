"""
Read-only static data table injected into the engine.

The engine only reaches species, moves, natures, the type chart and capabilities
through a BattleData instance, so alternative tables (tests, other rulesets) can be
swapped in without touching the core.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.battle_sim.constants import MAX_ROSTER_SIZE
from src.battle_sim.data.abilities import ABILITIES
from src.battle_sim.data.items import ITEMS
from src.battle_sim.data.moves import MOVES
from src.battle_sim.data.natures import NATURES
from src.battle_sim.data.species import SPECIES
from src.battle_sim.data.type_chart import TYPE_CHART
from src.battle_sim.data.weathers import WEATHERS
from src.battle_sim.enums import Type
from src.battle_sim.exceptions import InvariantError, SetupError
from src.battle_sim.schema.battle_move import MoveInfo
from src.battle_sim.schema.build import PokemonBuild
from src.battle_sim.schema.capability import Capability
from src.battle_sim.schema.species_info import NatureInfo, SpeciesInfo


class BattleData(BaseModel):
    model_config = ConfigDict(frozen=True)

    species: dict[str, SpeciesInfo]
    moves: dict[str, MoveInfo]
    natures: dict[str, NatureInfo]
    type_chart: dict[Type, dict[Type, Optional[int]]]
    abilities: dict[str, Capability]
    items: dict[str, Capability]
    weathers: dict[str, Capability]

    # =================================================================
    # LOOKUPS - a miss here means the caller skipped roster validation
    # =================================================================

    def get_species(self, species_id: str) -> SpeciesInfo:
        return self._lookup(self.species, "species", species_id)

    def get_move(self, move_id: str) -> MoveInfo:
        return self._lookup(self.moves, "move", move_id)

    def get_nature(self, nature_id: str) -> NatureInfo:
        return self._lookup(self.natures, "nature", nature_id)

    def get_ability(self, ability_id: str) -> Capability:
        return self._lookup(self.abilities, "ability", ability_id)

    def get_item(self, item_id: str) -> Capability:
        return self._lookup(self.items, "item", item_id)

    def get_weather(self, weather_id: str) -> Capability:
        return self._lookup(self.weathers, "weather", weather_id)

    @staticmethod
    def _lookup(table: dict, kind: str, key: str):
        try:
            return table[key]
        except KeyError:
            raise InvariantError(f"Unknown {kind}", {kind: key}) from None

    # =================================================================
    # ROSTER VALIDATION
    # =================================================================

    def validate_roster(self, roster: list[PokemonBuild]) -> None:
        """Raise SetupError unless every build references known data"""
        if not 1 <= len(roster) <= MAX_ROSTER_SIZE:
            raise SetupError("Roster must hold between 1 and 6 members", {"size": len(roster)})

        for index, build in enumerate(roster, start=1):
            if build.species not in self.species:
                raise SetupError("Unknown species", {"roster_index": index, "species": build.species})
            if build.ability not in self.abilities:
                raise SetupError("Unknown ability", {"roster_index": index, "ability": build.ability})
            if build.item is not None and build.item not in self.items:
                raise SetupError("Unknown item", {"roster_index": index, "item": build.item})
            if build.nature not in self.natures:
                raise SetupError("Unknown nature", {"roster_index": index, "nature": build.nature})
            for move in build.moves:
                if move.id not in self.moves:
                    raise SetupError("Unknown move", {"roster_index": index, "move": move.id})


def load_default_data() -> BattleData:
    return BattleData(
        species=SPECIES,
        moves=MOVES,
        natures=NATURES,
        type_chart=TYPE_CHART,
        abilities=ABILITIES,
        items=ITEMS,
        weathers=WEATHERS,
    )
