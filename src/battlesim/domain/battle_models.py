"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from battlesim.core.types import ActionType, BattlePhase, ClassKind, Side, StatusKind
from battlesim.domain.defs import GrowthDef, ItemDef, MoveDef
from battlesim.domain.entities import Stats


@dataclass(slots=True)
class Combatant:
    """Represents one of the two participants in a battle."""

    name: str
    class_id: ClassKind
    class_name: str
    side: Side
    stats: Stats
    moves: Tuple[MoveDef, ...]
    growth: GrowthDef
    statuses: List[StatusKind] = field(default_factory=list)
    inventory: List[ItemDef | None] = field(default_factory=list)
    level: int = 1

    @property
    def is_alive(self) -> bool:
        return self.stats.hp > 0

    def has_status(self, kind: StatusKind) -> bool:
        return kind in self.statuses


@dataclass(frozen=True, slots=True)
class BattleAction:
    """A decision for one turn: a move index or an inventory slot, both 0-based."""

    action_type: ActionType
    index: int

    @classmethod
    def move(cls, index: int) -> "BattleAction":
        return cls(action_type="move", index=index)

    @classmethod
    def item(cls, slot_index: int) -> "BattleAction":
        return cls(action_type="item", index=slot_index)


@dataclass(slots=True)
class BattleState:
    """Tracks the state of an ongoing battle."""

    player_one: Combatant
    player_two: Combatant
    phase: BattlePhase = "player_one_turn"
    round_number: int = 1
    completed_rounds: int = 0
    is_over: bool = False
    victor: Side | None = None
    is_draw: bool = False

    @property
    def combatants(self) -> Tuple[Combatant, Combatant]:
        return (self.player_one, self.player_two)


@dataclass(frozen=True, slots=True)
class BattleOutcome:
    """Final result of a finished battle."""

    victor: Side | None
    winner_name: str | None
    is_draw: bool
    rounds: int
