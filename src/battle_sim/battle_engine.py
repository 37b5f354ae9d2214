"""
Battle state machine.

The engine owns a single BattleState snapshot. Every state change goes through
_dispatch: the current snapshot is deep-copied, a transition mutates the copy,
the copy replaces the snapshot, and _trigger_side_effects compares the previous
and new snapshots to fire notifications and pick the next automatic transition.
A published snapshot is never mutated afterwards.

Phases:

    setplayers -> teampreview -> choice -> run -> (switch) -> choice -> ...
                                                 \\-> end

Player commands are validated against the current snapshot before anything is
dispatched, so a rejected command leaves the battle untouched.

Callbacks run inline and may issue commands for their own side. Such a command
re-enters _dispatch, runs to completion, and the outer cascade stops as soon as it
notices its snapshot has been replaced.
"""

import logging
from functools import partial
from typing import Any, Callable, Optional

from pydantic import BaseModel, ValidationError

from src.battle_sim.config import BattleConfig, BattleFormat
from src.battle_sim.constants import NO_TARGET, NUM_PLAYERS, SPEED_TIEBREAK_MAX, SPEED_TIEBREAK_MIN
from src.battle_sim.damage_calculator import DamageCalculator
from src.battle_sim.data.battle_data import BattleData, load_default_data
from src.battle_sim.enums import ActionType, HookPoint, MoveTarget, Phase
from src.battle_sim.exceptions import BattleError, InvalidActionError, InvariantError, SetupError
from src.battle_sim.hooks import HookDispatcher
from src.battle_sim.schema.battle_state import BattleAction, BattleState, PlayerState, SideFieldState, TurnOrderEntry
from src.battle_sim.schema.build import PokemonBuild
from src.battle_sim.schema.hook_context import ActiveContext, AttackContext
from src.battle_sim.utils import rng
from src.battle_sim.utils.mon_factory import create_battle_pokemon
from src.battle_sim.views import build_player_views, build_team_preview

logger = logging.getLogger(__name__)

Transition = Callable[[BattleState], None]


class PlayerCallbacks(BaseModel):
    """Notification hooks registered by one side. Any of them may be left unset."""

    on_team_preview: Optional[Callable[..., Any]] = None
    on_move: Optional[Callable[..., Any]] = None
    on_force_switch: Optional[Callable[..., Any]] = None
    on_end: Optional[Callable[..., Any]] = None


class BattleEngine:
    """
    Deterministic two-player battle engine

    Commands (all positions, slots and indices are 1-based):
    - set_player(roster, ...) -> player id
    - select(player_id, roster_indices)
    - move(player_id, active_slot, move_slot, target)
    - switch(player_id, active_slot, bench_slot)

    Targets: 0 = no target, positive = foe slot, negative = ally slot.

    Callbacks run inside the command that triggered them. A command issued from a
    callback nests inside that command, about five stack frames per turn, so a
    battle driven purely by callbacks reaches the default recursion limit after
    roughly 190 turns. An exception raised by a callback propagates out of the
    command that triggered it; the new snapshot has already been published by then
    and the remaining callbacks of that notification are skipped.
    """

    def __init__(self, config: BattleConfig | None = None, data: BattleData | None = None, state: BattleState | None = None):
        self.config: BattleConfig = config or BattleConfig()
        self.data: BattleData = data or load_default_data()
        self.hooks = HookDispatcher(self.data)
        self.damage_calculator = DamageCalculator(self.data, self.hooks)

        self.state: BattleState = state or BattleState(format=self.config.format)
        self.callbacks: list[PlayerCallbacks] = []

    # =================================================================
    # QUERIES
    # =================================================================

    @property
    def turn(self) -> int:
        return self.state.turn

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def format(self) -> BattleFormat:
        return self.state.format

    @property
    def winner(self) -> Optional[int]:
        return self.state.winner

    def get_slots_missing_action(self, player_id: Optional[int] = None) -> list[tuple[int, int]]:
        """(player_id, slot) of every active slot without a pending action"""
        return self._get_slots_missing_action(self.state, player_id)

    def has_forced_switches_left(self, player_id: int) -> bool:
        return len(self.state.get_player(player_id).forced_switch_slots) > 0

    def clone(self, keep_callbacks: bool = False) -> "BattleEngine":
        """
        A new engine starting from the current snapshot, for look-ahead.

        Snapshots are never mutated, so both engines can share it. Callbacks are only
        carried over when asked for; they are rebound to the clone's commands.
        """
        clone = BattleEngine(config=self.config, data=self.data, state=self.state)
        if keep_callbacks:
            clone.callbacks = [callbacks.model_copy() for callbacks in self.callbacks]
        return clone

    # =================================================================
    # COMMANDS
    # =================================================================

    def set_player(
        self,
        roster: list[PokemonBuild | dict],
        on_team_preview: Optional[Callable[..., Any]] = None,
        on_move: Optional[Callable[..., Any]] = None,
        on_force_switch: Optional[Callable[..., Any]] = None,
        on_end: Optional[Callable[..., Any]] = None,
    ) -> int:
        """Register a side. The second registration opens team preview."""
        if self.state.phase != Phase.SETTING_PLAYERS or len(self.state.players) >= NUM_PLAYERS:
            raise SetupError("Cannot set more than two players", {"phase": self.state.phase.value})

        try:
            builds = [build if isinstance(build, PokemonBuild) else PokemonBuild.model_validate(build) for build in roster]
        except ValidationError as e:
            raise SetupError("Invalid roster entry", {"errors": e.error_count()}) from e
        self.data.validate_roster(builds)

        player_id = len(self.state.players) + 1
        self.callbacks.append(
            PlayerCallbacks(on_team_preview=on_team_preview, on_move=on_move, on_force_switch=on_force_switch, on_end=on_end)
        )
        logger.info(f"Player {player_id} registered with {len(builds)} roster members")
        self._dispatch(partial(self._on_set_player, builds=builds))
        return player_id

    def select(self, player_id: int, roster_indices: list[int]) -> None:
        """Pick the members brought to battle, in lead order"""
        if self.state.phase != Phase.TEAM_PREVIEW:
            raise SetupError("Team selection is only possible during team preview", {"phase": self.state.phase.value})
        self._check_player_id(player_id, SetupError)

        roster_size = len(self.state.get_player(player_id).roster)
        picks: list[int] = []
        for index in roster_indices:
            if 1 <= index <= roster_size and index not in picks:
                picks.append(index)

        expected = self.state.format.roster_subset_size
        if len(picks) != expected:
            raise SetupError(f"You must select exactly {expected} members", {"player_id": player_id, "selected": picks})

        self._dispatch(partial(self._on_select, player_id=player_id, picks=picks))

    def move(self, player_id: int, active_slot: int, move_slot: int, target: int = NO_TARGET) -> None:
        """Stage a move for one active slot during the choice phase"""
        state = self.state
        if state.phase != Phase.CHOICE:
            raise InvalidActionError("Moves can only be chosen during the choice phase", {"phase": state.phase.value})
        self._check_player_id(player_id, InvalidActionError)

        active_slots = state.format.active_slots
        if not 1 <= active_slot <= active_slots or not -active_slots <= target <= active_slots:
            raise InvalidActionError("Invalid move input", {"active_slot": active_slot, "target": target})

        pokemon = state.get_active(player_id, active_slot)
        if pokemon is None:
            raise InvalidActionError("There is no Pokemon in this slot", {"active_slot": active_slot})
        if not 1 <= move_slot <= len(pokemon.moves):
            raise InvalidActionError("There is no move in this slot", {"move_slot": move_slot})

        move_state = pokemon.moves[move_slot - 1]
        if move_state.disabled:
            raise InvalidActionError("This move has been disabled", {"move": move_state.id})
        if move_state.pp == 0:
            raise InvalidActionError("There is no PP left in this move", {"move": move_state.id})

        move = self.data.get_move(move_state.id)
        if move.target == MoveTarget.NORMAL:
            if target <= 0:
                raise InvalidActionError("You must choose a foe's position", {"move": move.id, "target": target})
        elif move.target == MoveTarget.ALL_ADJACENT_FOES:
            target = NO_TARGET
        else:
            raise InvariantError(f"Unrecognized target type: {move.target.value}", {"move": move.id})

        action = BattleAction.use_move(move_slot, target)
        self._dispatch(partial(self._on_set_action, player_id=player_id, slot=active_slot, action=action))

    def switch(self, player_id: int, active_slot: int, bench_slot: int) -> None:
        """
        Switch an active slot with a bench slot.

        During the choice phase this stages the switch; during the switch phase it
        fills a forced slot immediately.
        """
        state = self.state
        if state.phase not in (Phase.CHOICE, Phase.SWITCH):
            raise InvalidActionError("Switching is not possible in this phase", {"phase": state.phase.value})
        self._check_player_id(player_id, InvalidActionError)

        if not 1 <= active_slot <= state.format.active_slots or not 1 <= bench_slot <= state.format.roster_subset_size:
            raise InvalidActionError("Invalid switch input", {"active_slot": active_slot, "bench_slot": bench_slot})

        player = state.get_player(player_id)
        incoming = player.get_pokemon("bench", bench_slot)
        if incoming is None:
            raise InvalidActionError("There is no Pokemon in this slot", {"bench_slot": bench_slot})
        if incoming.is_fainted():
            raise InvalidActionError("Cannot switch into a fainted Pokemon", {"bench_slot": bench_slot})

        if state.phase == Phase.SWITCH:
            if active_slot not in player.forced_switch_slots:
                raise InvalidActionError("This Pokemon cannot be switched out", {"active_slot": active_slot})
            self._dispatch(partial(self._on_forced_switch, player_id=player_id, slot=active_slot, bench_slot=bench_slot))
            return

        if player.get_pokemon("active", active_slot) is None:
            raise InvalidActionError("There is no Pokemon in this slot", {"active_slot": active_slot})
        for pos in state.get_positions():
            action = player.get_action(pos)
            if pos != active_slot and action is not None and action.action_type == ActionType.SWITCH and action.bench_slot == bench_slot:
                raise InvalidActionError("Another switch already brings in this Pokemon", {"bench_slot": bench_slot})

        action = BattleAction.switch(bench_slot)
        self._dispatch(partial(self._on_set_action, player_id=player_id, slot=active_slot, action=action))

    def _check_player_id(self, player_id: int, error: type[BattleError]) -> None:
        if player_id not in self.state.get_ids():
            raise error("Unknown player", {"player_id": player_id})

    def _get_callbacks(self, player_id: int) -> PlayerCallbacks:
        # Clones created without callbacks run silently
        if player_id > len(self.callbacks):
            return PlayerCallbacks()
        return self.callbacks[player_id - 1]

    # =================================================================
    # DISPATCH
    # =================================================================

    def _dispatch(self, transition: Transition) -> None:
        """Apply a transition and every automatic transition it cascades into"""
        next_transition: Optional[Transition] = transition
        while next_transition is not None:
            previous = self.state
            draft = previous.model_copy(deep=True)
            next_transition(draft)
            self.state = draft
            logger.debug(f"{self._transition_name(next_transition)}: phase={draft.phase.value} turn={draft.turn}")
            next_transition = self._trigger_side_effects(draft, previous)

    @staticmethod
    def _transition_name(transition: Transition) -> str:
        func = transition.func if isinstance(transition, partial) else transition
        return getattr(func, "__name__", repr(func))

    def _trigger_side_effects(self, state: BattleState, previous: BattleState) -> Optional[Transition]:
        """Fire notifications for a state change and return the next automatic transition, if any"""
        if previous.phase == Phase.SETTING_PLAYERS and state.phase == Phase.TEAM_PREVIEW:
            self._notify_team_preview(state)
            return None

        if state.phase == Phase.TEAM_PREVIEW:
            if all(player.has_selected() for player in state.players):
                return self._on_begin_battle
            return None

        if state.phase == Phase.END:
            if previous.phase != Phase.END:
                self._notify_end(state)
            return None

        if previous.turn != state.turn:
            self._notify_move(state)
            if self.state is not state:
                return None

        if state.phase == Phase.CHOICE:
            if not self._get_slots_missing_action(state):
                return self._on_begin_run
            return None

        if state.phase == Phase.RUN:
            if any(action is not None for player in state.players for action in player.pending_actions):
                return self._on_execute_action
            return self._on_end_run

        if state.phase == Phase.SWITCH:
            if previous.phase != Phase.SWITCH:
                self._notify_force_switch(state)
                if self.state is not state:
                    return None
            if not any(player.forced_switch_slots for player in state.players):
                return self._on_finish_switches
        return None

    # =================================================================
    # TRANSITIONS (all operate on a draft)
    # =================================================================

    def _on_set_player(self, state: BattleState, builds: list[PokemonBuild]) -> None:
        player_id = len(state.players) + 1
        state.players.append(PlayerState(id=player_id, roster=builds))
        state.field.sides.append(SideFieldState())
        if len(state.players) == NUM_PLAYERS:
            state.phase = Phase.TEAM_PREVIEW

    def _on_select(self, state: BattleState, player_id: int, picks: list[int]) -> None:
        player = state.get_player(player_id)
        positions = state.get_positions()
        player.bench = [create_battle_pokemon(player_id, index, player.roster[index - 1], self.data) for index in picks]
        player.active = [None for _ in positions]
        player.pending_actions = [BattleAction.switch(pos) for pos in positions]
        player.forced_switch_slots = list(positions)

    def _on_begin_battle(self, state: BattleState) -> None:
        seed = rng.seed(state, self.config.seed)
        state.field.weather_duration = self.config.weather_duration
        logger.info(f"Battle begins ({state.format.id.value}, seed {seed})")

        # Leads: both sides take the field before any switch-in hook fires
        for player in state.players:
            for pos in list(player.forced_switch_slots):
                action = player.get_action(pos)
                self._execute_switch(state, player.id, pos, action.bench_slot, trigger_on_active=False)
            player.sort_bench()
        for player_id, pos in state.get_occupied_active_positions():
            self._trigger_on_active(state, player_id, pos)

        self._set_next_turn(state)

    def _on_set_action(self, state: BattleState, player_id: int, slot: int, action: BattleAction) -> None:
        state.get_player(player_id).set_action(slot, action)

    def _on_begin_run(self, state: BattleState) -> None:
        state.phase = Phase.RUN

    def _on_execute_action(self, state: BattleState) -> None:
        player_id, slot = self._get_next_action_position(state)
        action = state.get_player(player_id).get_action(slot)

        if action.action_type == ActionType.SWITCH:
            self._execute_switch(state, player_id, slot, action.bench_slot)
        elif action.action_type == ActionType.MOVE:
            self._execute_move(state, player_id, slot, action.move_slot, action.target)

        state.get_player(player_id).set_action(slot, None)

    def _on_end_run(self, state: BattleState) -> None:
        defeated = [player.id for player in state.players if not player.has_pokemon_left()]
        if defeated:
            state.phase = Phase.END
            if len(defeated) == 1:
                state.winner = state.get_rival_id(defeated[0])
            logger.info(f"Battle over after turn {state.turn}, winner: {state.winner}")
            return

        for player in state.players:
            empty_slots = [pos for pos in state.get_positions() if player.get_pokemon("active", pos) is None]
            player.forced_switch_slots = empty_slots if player.has_healthy_bench() else []

        if any(player.forced_switch_slots for player in state.players):
            state.phase = Phase.SWITCH
        else:
            self._finalize_turn(state)

    def _on_forced_switch(self, state: BattleState, player_id: int, slot: int, bench_slot: int) -> None:
        player = state.get_player(player_id)
        self._execute_switch(state, player_id, slot, bench_slot)
        if not player.has_healthy_bench():
            player.forced_switch_slots = []
        # Bench indices stay stable until every forced slot of the side is filled
        if not player.forced_switch_slots:
            player.sort_bench()

    def _on_finish_switches(self, state: BattleState) -> None:
        self._finalize_turn(state)

    # =================================================================
    # TURN LIFECYCLE
    # =================================================================

    def _finalize_turn(self, state: BattleState) -> None:
        weather = state.field.weather
        if weather is not None:
            weather.turns_left -= 1
            if weather.turns_left <= 0:
                logger.debug(f"Weather {weather.id} ended")
                state.field.weather = None
        self._set_next_turn(state)

    def _set_next_turn(self, state: BattleState) -> None:
        """Empty slots get a forced Pass, occupied slots start the turn without an action"""
        for player_id, pos in state.get_active_positions():
            player = state.get_player(player_id)
            if player.get_pokemon("active", pos) is None:
                player.set_action(pos, BattleAction.pass_turn())
            else:
                player.set_action(pos, None)
        for player in state.players:
            player.forced_switch_slots = []
        state.turn_order = []
        state.phase = Phase.CHOICE
        state.turn += 1

    # =================================================================
    # ACTION ORDER
    # =================================================================

    def _get_next_action_position(self, state: BattleState) -> tuple[int, int]:
        """
        Pass actions first, then switches in slot enumeration order, then moves.

        Moves are re-ranked before every execution: priority, then speed after hooks,
        then a fresh random tiebreak, all descending.
        """
        pending = [(player_id, pos) for player_id, pos in state.get_active_positions() if state.get_player(player_id).get_action(pos) is not None]
        if not pending:
            raise InvariantError("No pending action to execute", {"turn": state.turn})

        tier = min(state.get_player(player_id).get_action(pos).action_type for player_id, pos in pending)
        candidates = [(player_id, pos) for player_id, pos in pending if state.get_player(player_id).get_action(pos).action_type == tier]
        if tier != ActionType.MOVE:
            return candidates[0]

        state.turn_order = self._compute_turn_order(state, candidates)
        first = state.turn_order[0]
        return first.player_id, first.slot

    def _compute_turn_order(self, state: BattleState, positions: list[tuple[int, int]]) -> list[TurnOrderEntry]:
        entries = []
        for player_id, pos in positions:
            pokemon = state.get_active(player_id, pos)
            action = state.get_player(player_id).get_action(pos)
            move = self.data.get_move(pokemon.moves[action.move_slot - 1].id)
            entries.append(
                TurnOrderEntry(
                    player_id=player_id,
                    slot=pos,
                    priority=move.priority,
                    speed=self.damage_calculator.get_speed(state, player_id, pos),
                    tiebreak=rng.random_int(state, SPEED_TIEBREAK_MIN, SPEED_TIEBREAK_MAX),
                )
            )
        entries.sort(key=lambda entry: entry.sort_key(), reverse=True)
        return entries

    # =================================================================
    # EXECUTION
    # =================================================================

    def _execute_switch(self, state: BattleState, player_id: int, slot: int, bench_slot: int, trigger_on_active: bool = True) -> None:
        """
        Swap an active slot with a bench slot. bench_slot 0 sends the active entity to
        the first empty bench slot (used when it faints) and compacts the bench.
        """
        player = state.get_player(player_id)
        compact = bench_slot == 0
        if compact:
            bench_slot = player.first_empty_bench_slot()
            if bench_slot is None:
                raise InvariantError("No empty bench slot to switch into", {"player_id": player_id, "slot": slot})

        outgoing = player.get_pokemon("active", slot)
        incoming = player.get_pokemon("bench", bench_slot)
        player.set_pokemon("active", slot, incoming)
        player.set_pokemon("bench", bench_slot, outgoing)
        player.forced_switch_slots = [pos for pos in player.forced_switch_slots if pos != slot]
        player.set_action(slot, None)
        if compact:
            player.sort_bench()

        if incoming is not None:
            incoming.revealed = True
            logger.debug(f"Player {player_id} slot {slot}: {incoming.uid} comes in")
            if trigger_on_active:
                self._trigger_on_active(state, player_id, slot)

    def _trigger_on_active(self, state: BattleState, player_id: int, slot: int) -> None:
        entity = state.get_active(player_id, slot)
        self.hooks.trigger(HookPoint.ON_ACTIVE, state, ActiveContext(entity=entity, player_id=player_id, slot=slot))

    def _execute_move(self, state: BattleState, player_id: int, slot: int, move_slot: int, target: int) -> None:
        attacker = state.get_active(player_id, slot)
        move_state = attacker.moves[move_slot - 1]
        move = self.data.get_move(move_state.id)
        move_state.pp = max(0, move_state.pp - 1)
        logger.debug(f"{attacker.uid} uses {move.id}")

        attack_ctx = AttackContext(attacker=attacker, move=move)
        for target_id, target_pos in self._get_target_positions(state, player_id, move.target, target):
            defender = state.get_active(target_id, target_pos)
            if defender is None:
                continue
            if not self.damage_calculator.check_hit(state, attacker, defender, move):
                continue

            damage_ctx = self.damage_calculator.get_damage(state, attacker, defender, move)
            if damage_ctx is not None:
                self.hooks.trigger(HookPoint.ON_BEFORE_DAMAGE_APPLICATION, state, damage_ctx)
                attack_ctx.did_damage = True
                lost = defender.subtract_hp(damage_ctx.damage)
                logger.debug(f"{defender.uid} lost {lost} HP ({defender.hp}/{defender.max_hp} left)")

            if defender.is_fainted():
                logger.debug(f"{defender.uid} fainted")
                self._execute_switch(state, target_id, target_pos, 0)

        self.hooks.trigger(HookPoint.ON_AFTER_ATTACK, state, attack_ctx)

        # Recoil from after-attack hooks can knock out the attacker as well
        for occupied_id, occupied_pos in state.get_occupied_active_positions():
            pokemon = state.get_active(occupied_id, occupied_pos)
            if pokemon.is_fainted():
                logger.debug(f"{pokemon.uid} fainted")
                self._execute_switch(state, occupied_id, occupied_pos, 0)

    def _get_target_positions(self, state: BattleState, player_id: int, move_target: MoveTarget, target: int) -> list[tuple[int, int]]:
        rival_id = state.get_rival_id(player_id)
        if move_target == MoveTarget.NORMAL:
            if state.get_active(rival_id, target) is not None:
                return [(rival_id, target)]
            return [(rival_id, state.get_ally_position(target))]
        if move_target == MoveTarget.ALL_ADJACENT_FOES:
            return [(rival_id, pos) for pos in state.get_positions() if state.get_active(rival_id, pos) is not None]
        raise InvariantError(f"Unrecognized target type: {move_target.value}")

    @staticmethod
    def _get_slots_missing_action(state: BattleState, player_id: Optional[int] = None) -> list[tuple[int, int]]:
        return [
            (pid, pos)
            for pid, pos in state.get_active_positions()
            if (player_id is None or pid == player_id) and state.get_player(pid).has_selected() and state.get_player(pid).get_action(pos) is None
        ]

    # =================================================================
    # NOTIFICATIONS
    # =================================================================

    def _notify_team_preview(self, state: BattleState) -> None:
        for player_id in state.get_ids():
            callback = self._get_callbacks(player_id).on_team_preview
            if callback is None or self.state.phase != Phase.TEAM_PREVIEW:
                continue
            own, rival = build_team_preview(self.state, player_id)
            callback(partial(self.select, player_id), own, rival)

    def _notify_move(self, state: BattleState) -> None:
        for player_id in state.get_ids():
            callback = self._get_callbacks(player_id).on_move
            current = self.state
            # A callback may already have pushed the battle past this turn
            if callback is None or current.turn != state.turn or current.phase != Phase.CHOICE:
                continue
            own, rival, field = build_player_views(current, player_id, self.config.public_hp_scale)
            callback(partial(self.move, player_id), partial(self.switch, player_id), own, rival, field)

    def _notify_force_switch(self, state: BattleState) -> None:
        for player_id in state.get_ids():
            callback = self._get_callbacks(player_id).on_force_switch
            current = self.state
            if callback is None or current.phase != Phase.SWITCH or current.turn != state.turn:
                continue
            forced_slots = list(current.get_player(player_id).forced_switch_slots)
            if not forced_slots:
                continue
            own, rival, field = build_player_views(current, player_id, self.config.public_hp_scale)
            callback(partial(self.switch, player_id), own, rival, field, forced_slots)

    def _notify_end(self, state: BattleState) -> None:
        for player_id in state.get_ids():
            callback = self._get_callbacks(player_id).on_end
            if callback is not None:
                callback()
