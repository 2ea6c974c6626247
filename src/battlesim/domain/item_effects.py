"""Pure helpers for applying item effects to combat stats."""
from __future__ import annotations

from dataclasses import dataclass

from battlesim.domain.defs import ItemDef
from battlesim.domain.entities import Stats


@dataclass(slots=True)
class ItemEffectResult:
    """Summary of stat deltas produced by a consumable."""

    hp_delta: int = 0
    mp_delta: int = 0
    strength_delta: int = 0
    intelligence_delta: int = 0
    agility_delta: int = 0


def apply_item_effects(stats: Stats, item: ItemDef) -> ItemEffectResult:
    """Apply a potion (clamped to max) or an elixir (permanent boost) to the stats."""

    result = ItemEffectResult()
    amount = max(0, item.amount)

    if item.effect == "restore_hp":
        before = stats.hp
        stats.hp = min(stats.max_hp, stats.hp + amount)
        result.hp_delta = stats.hp - before
    elif item.effect == "restore_mp":
        before = stats.mp
        stats.mp = min(stats.max_mp, stats.mp + amount)
        result.mp_delta = stats.mp - before
    elif item.effect == "boost_strength":
        stats.strength += amount
        result.strength_delta = amount
    elif item.effect == "boost_intelligence":
        stats.intelligence += amount
        result.intelligence_delta = amount
    elif item.effect == "boost_agility":
        stats.agility += amount
        result.agility_delta = amount

    return result
