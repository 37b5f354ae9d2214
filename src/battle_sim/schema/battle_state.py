from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from src.battle_sim.config import BattleFormat
from src.battle_sim.constants import NO_TARGET, WEATHER_DEFAULT_DURATION
from src.battle_sim.enums import ActionType, Phase
from src.battle_sim.schema.battle_pokemon import BattlePokemon
from src.battle_sim.schema.build import PokemonBuild


class BattleAction(BaseModel):
    """Pending action for one active slot"""

    action_type: ActionType

    # For MOVE
    move_slot: Optional[int] = Field(None, ge=1, description="Which move slot (1-based)")
    target: int = Field(NO_TARGET, description="0 = no target, positive = foe slot, negative = ally slot")

    # For SWITCH
    bench_slot: Optional[int] = Field(None, ge=1, description="Which bench slot to bring in (1-based)")

    @classmethod
    def pass_turn(cls) -> "BattleAction":
        return cls(action_type=ActionType.PASS)

    @classmethod
    def switch(cls, bench_slot: int) -> "BattleAction":
        return cls(action_type=ActionType.SWITCH, bench_slot=bench_slot)

    @classmethod
    def use_move(cls, move_slot: int, target: int) -> "BattleAction":
        return cls(action_type=ActionType.MOVE, move_slot=move_slot, target=target)


class PlayerState(BaseModel):
    """One side of the battle"""

    id: int = Field(ge=1, le=2)
    roster: list[PokemonBuild]

    # Filled once the side has selected its team
    active: list[Optional[BattlePokemon]] = Field(default_factory=list)
    bench: list[Optional[BattlePokemon]] = Field(default_factory=list)
    pending_actions: list[Optional[BattleAction]] = Field(default_factory=list)
    forced_switch_slots: list[int] = Field(default_factory=list)

    def has_selected(self) -> bool:
        return len(self.active) > 0

    def get_pokemon(self, location: Literal["active", "bench"], pos: int) -> Optional[BattlePokemon]:
        """Get the entity at a 1-based position"""
        return getattr(self, location)[pos - 1]

    def set_pokemon(self, location: Literal["active", "bench"], pos: int, pokemon: Optional[BattlePokemon]) -> None:
        getattr(self, location)[pos - 1] = pokemon

    def get_action(self, pos: int) -> Optional[BattleAction]:
        return self.pending_actions[pos - 1]

    def set_action(self, pos: int, action: Optional[BattleAction]) -> None:
        self.pending_actions[pos - 1] = action

    def first_empty_bench_slot(self) -> Optional[int]:
        for index, pokemon in enumerate(self.bench):
            if pokemon is None:
                return index + 1
        return None

    def sort_bench(self) -> None:
        """Move empty bench placeholders to the back, keeping entity order"""
        self.bench.sort(key=lambda pokemon: pokemon is None)

    def healthy_bench_count(self) -> int:
        return sum(1 for pokemon in self.bench if pokemon is not None and pokemon.hp > 0)

    def has_healthy_bench(self) -> bool:
        return self.healthy_bench_count() > 0

    def has_pokemon_left(self) -> bool:
        """True while any selected entity (active or bench) still has HP"""
        return any(pokemon is not None and pokemon.hp > 0 for pokemon in self.active + self.bench)


class WeatherState(BaseModel):
    id: str
    turns_left: int = Field(ge=0)


class SideFieldState(BaseModel):
    """Per-side effects (reserved for side conditions)"""

    effects: dict[str, Any] = Field(default_factory=dict)


class FieldState(BaseModel):
    weather: Optional[WeatherState] = None
    # Turns a weather set by a capability lasts
    weather_duration: int = Field(ge=1, default=WEATHER_DEFAULT_DURATION)
    effects: dict[str, Any] = Field(default_factory=dict)
    sides: list[SideFieldState] = Field(default_factory=list)


class TurnOrderEntry(BaseModel):
    """Ordering key of one pending move action"""

    player_id: int
    slot: int
    priority: int
    speed: float
    tiebreak: int

    def sort_key(self) -> tuple[int, float, int]:
        return (self.priority, self.speed, self.tiebreak)


class BattleState(BaseModel):
    """
    Complete battle state - the single source of truth.

    The engine never mutates a published BattleState: every transition works on a deep
    copy and replaces the previous snapshot wholesale.
    """

    format: BattleFormat
    phase: Phase = Phase.SETTING_PLAYERS
    turn: int = Field(ge=0, default=0)

    # players[0] = player 1, players[1] = player 2
    players: list[PlayerState] = Field(default_factory=list, max_length=2)
    field: FieldState = Field(default_factory=FieldState)

    # Recomputed before each move execution
    turn_order: list[TurnOrderEntry] = Field(default_factory=list)

    # Deterministic RNG state, None until the battle begins
    rng_state: Optional[int] = Field(default=None, ge=0, le=0xFFFFFFFF)

    winner: Optional[int] = None

    # =================================================================
    # POSITION HELPERS
    # =================================================================

    def get_ids(self) -> list[int]:
        return [player.id for player in self.players]

    def get_player(self, player_id: int) -> PlayerState:
        return self.players[player_id - 1]

    def get_rival_id(self, player_id: int) -> int:
        return len(self.players) - player_id + 1

    def get_positions(self) -> list[int]:
        """1-based active slot numbers"""
        return list(range(1, self.format.active_slots + 1))

    def get_ally_position(self, pos: int) -> int:
        """The mirrored slot on the same side (doubles: 1 <-> 2)"""
        return self.format.active_slots - pos + 1

    def get_active_positions(self) -> list[tuple[int, int]]:
        """Every (player_id, slot) in enumeration order: side 1 ascending, then side 2"""
        return [(player_id, pos) for player_id in self.get_ids() for pos in self.get_positions()]

    def get_occupied_active_positions(self) -> list[tuple[int, int]]:
        return [(player_id, pos) for player_id, pos in self.get_active_positions() if self.get_active(player_id, pos) is not None]

    def get_active(self, player_id: int, pos: int) -> Optional[BattlePokemon]:
        return self.get_player(player_id).get_pokemon("active", pos)

    def is_over(self) -> bool:
        return self.phase == Phase.END
