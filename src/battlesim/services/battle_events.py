"""Structured events emitted by the battle engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from battlesim.core.types import Side, StatusKind


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    combatant_names: Tuple[str, str]
    status_mode: str


@dataclass(slots=True)
class RoundStartedEvent(BattleEvent):
    round_number: int


@dataclass(slots=True)
class MoveUsedEvent(BattleEvent):
    attacker_name: str
    move_name: str
    mana_spent: int
    attacker_mp: int


@dataclass(slots=True)
class InsufficientManaEvent(BattleEvent):
    combatant_name: str
    move_name: str
    mana_cost: int
    current_mp: int


@dataclass(slots=True)
class DamageDealtEvent(BattleEvent):
    attacker_name: str
    target_name: str
    damage: int
    target_hp: int


@dataclass(slots=True)
class HealedEvent(BattleEvent):
    combatant_name: str
    amount: int
    hp: int


@dataclass(slots=True)
class StatusInflictedEvent(BattleEvent):
    source_name: str
    target_name: str
    status: StatusKind


@dataclass(slots=True)
class ItemUsedEvent(BattleEvent):
    combatant_name: str
    item_id: str
    item_name: str
    slot_index: int
    hp_delta: int
    mp_delta: int
    strength_delta: int
    intelligence_delta: int
    agility_delta: int


@dataclass(slots=True)
class StatusTickEvent(BattleEvent):
    combatant_name: str
    status: StatusKind
    damage: int
    hp: int


@dataclass(slots=True)
class StatusExpiredEvent(BattleEvent):
    combatant_name: str
    status: StatusKind


@dataclass(slots=True)
class TurnSkippedEvent(BattleEvent):
    combatant_name: str
    reason: StatusKind


@dataclass(slots=True)
class SelectionRejectedEvent(BattleEvent):
    combatant_name: str
    reason: str
    attempts_left: int


@dataclass(slots=True)
class TurnForfeitedEvent(BattleEvent):
    combatant_name: str


@dataclass(slots=True)
class LeveledUpEvent(BattleEvent):
    combatant_name: str
    new_level: int
    max_hp_gain: int
    max_mp_gain: int
    strength_gain: int
    intelligence_gain: int
    agility_gain: int


@dataclass(slots=True)
class BattleEndedEvent(BattleEvent):
    victor: Side | None
    winner_name: str | None
    is_draw: bool
    rounds: int
