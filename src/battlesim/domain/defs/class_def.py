"""Combatant class definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from battlesim.core.types import ClassKind


@dataclass(frozen=True, slots=True)
class GrowthDef:
    """Stat gains applied on every level-up."""

    max_hp: int
    max_mp: int
    strength: int
    intelligence: int
    agility: int


@dataclass(frozen=True, slots=True)
class ClassDef:
    """Defines starting attributes, move ids and starting items for a class."""

    id: ClassKind
    name: str
    base_hp: int
    base_mp: int
    strength: int
    intelligence: int
    agility: int
    move_ids: Tuple[str, ...]
    growth: GrowthDef
    starting_item_ids: Tuple[str, ...] = ()
