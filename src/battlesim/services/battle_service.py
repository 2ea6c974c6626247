"""Battle service running the turn loop for two combatants."""
from __future__ import annotations

import logging
from typing import List

from battlesim.domain.battle_models import BattleOutcome, BattleState, Combatant
from battlesim.domain.progression import level_up
from battlesim.domain.rules import BattleRules
from battlesim.domain.statuses import remove_status
from battlesim.services.action_resolver import ActionResolver
from battlesim.services.battle_events import (
    BattleEndedEvent,
    BattleEvent,
    BattleStartedEvent,
    LeveledUpEvent,
    RoundStartedEvent,
    SelectionRejectedEvent,
    TurnForfeitedEvent,
    TurnSkippedEvent,
)
from battlesim.services.decision_providers import DecisionProvider, EventSink
from battlesim.services.errors import InvalidSelection
from battlesim.services.status_engine import StatusEffectEngine

logger = logging.getLogger(__name__)


class BattleService:
    """
    Orchestrates a battle as a small state machine.

    Each round moves through ``player_one_turn``, ``player_two_turn`` and
    ``status_resolution`` before either starting the next round or reaching
    ``terminal``. Player two's defeat is checked right after player one acts,
    in which case the rest of the round is skipped. After player two acts the
    round always runs to completion: statuses tick on both combatants and
    every ``level_up_interval`` completed rounds both combatants level up,
    even one already at zero health.
    """

    def __init__(
        self,
        resolver: ActionResolver,
        status_engine: StatusEffectEngine,
        rules: BattleRules | None = None,
    ) -> None:
        self._resolver = resolver
        self._status_engine = status_engine
        self._rules = rules or BattleRules()

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(self, player_one: Combatant, player_two: Combatant, sink: EventSink) -> BattleState:
        state = BattleState(player_one=player_one, player_two=player_two)
        logger.info(
            "Battle started: %s (%s) vs %s (%s), status mode %s",
            player_one.name,
            player_one.class_id,
            player_two.name,
            player_two.class_id,
            self._rules.status_mode,
        )
        sink.emit(
            BattleStartedEvent(
                combatant_names=(player_one.name, player_two.name),
                status_mode=self._rules.status_mode,
            )
        )
        self._check_termination(state, sink)
        return state

    def run_battle(
        self,
        player_one: Combatant,
        player_two: Combatant,
        provider: DecisionProvider,
        sink: EventSink,
    ) -> BattleOutcome:
        """Play rounds until one or both combatants are defeated."""
        state = self.start_battle(player_one, player_two, sink)
        while not state.is_over:
            self.play_round(state, provider, sink)
        return self.outcome(state)

    def play_round(self, state: BattleState, provider: DecisionProvider, sink: EventSink) -> None:
        if state.is_over:
            raise ValueError("Battle is already over.")
        first, second = state.combatants
        sink.emit(RoundStartedEvent(round_number=state.round_number))

        state.phase = "player_one_turn"
        self._take_turn(first, second, provider, sink)
        if not second.is_alive:
            self._finish(state, sink)
            return

        state.phase = "player_two_turn"
        self._take_turn(second, first, provider, sink)

        state.phase = "status_resolution"
        for combatant in (first, second):
            self._emit_all(sink, self._status_engine.tick(combatant))

        state.completed_rounds += 1
        state.round_number += 1
        if state.completed_rounds % self._rules.level_up_interval == 0:
            for combatant in (first, second):
                self._level_up(combatant, sink)

        if not self._check_termination(state, sink):
            state.phase = "player_one_turn"

    def outcome(self, state: BattleState) -> BattleOutcome:
        if not state.is_over:
            raise ValueError("Battle is still in progress.")
        winner = None
        if state.victor is not None:
            winner = state.player_one.name if state.victor == "player_one" else state.player_two.name
        return BattleOutcome(
            victor=state.victor,
            winner_name=winner,
            is_draw=state.is_draw,
            rounds=state.completed_rounds,
        )

    # -----------------------
    # Helpers
    # -----------------------
    def _take_turn(
        self,
        actor: Combatant,
        opponent: Combatant,
        provider: DecisionProvider,
        sink: EventSink,
    ) -> None:
        if self._rules.wires_status_effects and actor.has_status("stun"):
            remove_status(actor.statuses, "stun")
            sink.emit(TurnSkippedEvent(combatant_name=actor.name, reason="stun"))
            return

        # Haste gained during this action only pays off next turn.
        hasted = self._rules.wires_status_effects and actor.has_status("haste")
        self._perform_action(actor, opponent, provider, sink)
        if hasted and opponent.is_alive:
            self._perform_action(actor, opponent, provider, sink)

    def _perform_action(
        self,
        actor: Combatant,
        opponent: Combatant,
        provider: DecisionProvider,
        sink: EventSink,
    ) -> None:
        attempts = self._rules.max_selection_attempts
        for attempt in range(1, attempts + 1):
            action = provider.choose_action(actor)
            try:
                events = self._resolver.resolve(action, actor, opponent)
            except InvalidSelection as exc:
                logger.debug("Rejected %s for %s: %s", action, actor.name, exc)
                sink.emit(
                    SelectionRejectedEvent(
                        combatant_name=actor.name,
                        reason=str(exc),
                        attempts_left=attempts - attempt,
                    )
                )
                continue
            self._emit_all(sink, events)
            return
        sink.emit(TurnForfeitedEvent(combatant_name=actor.name))

    def _level_up(self, combatant: Combatant, sink: EventSink) -> None:
        result = level_up(combatant)
        logger.debug("%s reached level %d", combatant.name, result.new_level)
        sink.emit(
            LeveledUpEvent(
                combatant_name=combatant.name,
                new_level=result.new_level,
                max_hp_gain=result.max_hp_gain,
                max_mp_gain=result.max_mp_gain,
                strength_gain=result.strength_gain,
                intelligence_gain=result.intelligence_gain,
                agility_gain=result.agility_gain,
            )
        )

    def _check_termination(self, state: BattleState, sink: EventSink) -> bool:
        if state.player_one.is_alive and state.player_two.is_alive:
            return False
        self._finish(state, sink)
        return True

    def _finish(self, state: BattleState, sink: EventSink) -> None:
        first_down = not state.player_one.is_alive
        second_down = not state.player_two.is_alive
        state.phase = "terminal"
        state.is_over = True
        if first_down and second_down:
            state.is_draw = True
            state.victor = None
        elif second_down:
            state.victor = "player_one"
        else:
            state.victor = "player_two"

        outcome = self.outcome(state)
        logger.info(
            "Battle ended after %d rounds: %s",
            outcome.rounds,
            "draw" if outcome.is_draw else f"{outcome.winner_name} wins",
        )
        sink.emit(
            BattleEndedEvent(
                victor=outcome.victor,
                winner_name=outcome.winner_name,
                is_draw=outcome.is_draw,
                rounds=outcome.rounds,
            )
        )

    @staticmethod
    def _emit_all(sink: EventSink, events: List[BattleEvent]) -> None:
        for event in events:
            sink.emit(event)
