"""Interfaces the battle loop consumes, plus headless implementations."""
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Protocol

from battlesim.core.types import Side
from battlesim.domain.battle_models import BattleAction, Combatant
from battlesim.services.battle_events import BattleEvent


class DecisionProvider(Protocol):
    """Supplies the action for a combatant's turn. May block indefinitely."""

    def choose_action(self, combatant: Combatant) -> BattleAction: ...


class EventSink(Protocol):
    """Receives battle events in the order they happen."""

    def emit(self, event: BattleEvent) -> None: ...


class EventLog:
    """In-memory event sink."""

    def __init__(self) -> None:
        self.events: List[BattleEvent] = []

    def emit(self, event: BattleEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> List[BattleEvent]:
        return [event for event in self.events if isinstance(event, event_type)]


class ScriptedDecisionProvider:
    """Hands out pre-recorded actions per side in order."""

    def __init__(
        self,
        script: Mapping[Side, Iterable[BattleAction]],
        *,
        fallback: BattleAction | None = None,
    ) -> None:
        self._queues: Dict[str, List[BattleAction]] = {side: list(actions) for side, actions in script.items()}
        self._fallback = fallback

    def choose_action(self, combatant: Combatant) -> BattleAction:
        queue = self._queues.get(combatant.side)
        if queue:
            return queue.pop(0)
        if self._fallback is not None:
            return self._fallback
        raise LookupError(f"No scripted action left for {combatant.side} ({combatant.name}).")

    def remaining(self, side: Side) -> int:
        return len(self._queues.get(side, []))


class RecordingDecisionProvider:
    """Wraps another provider and keeps every action it returns.

    Replaying the recording with the same RNG seed reproduces the battle.
    """

    def __init__(self, inner: DecisionProvider) -> None:
        self._inner = inner
        self.recorded: Dict[Side, List[BattleAction]] = {"player_one": [], "player_two": []}

    def choose_action(self, combatant: Combatant) -> BattleAction:
        action = self._inner.choose_action(combatant)
        self.recorded[combatant.side].append(action)
        return action

    def replay(self) -> ScriptedDecisionProvider:
        return ScriptedDecisionProvider(self.recorded)
