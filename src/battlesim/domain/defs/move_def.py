"""Move definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from battlesim.core.types import MoveType, StatusKind


@dataclass(frozen=True, slots=True)
class MoveDef:
    """A class move; catalog instances are shared by every combatant of the class."""

    id: str
    name: str
    base_power: int
    mana_cost: int
    move_type: MoveType
    inflicts: StatusKind | None = None
    inflict_chance: float = 0.0

    @property
    def deals_damage(self) -> bool:
        return self.move_type in ("physical", "magical")
