"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from battlesim.core.types import ItemEffect


@dataclass(frozen=True, slots=True)
class ItemDef:
    """Single-use consumable definition."""

    id: str
    name: str
    effect: ItemEffect
    amount: int
