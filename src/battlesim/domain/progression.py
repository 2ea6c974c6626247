"""Level-up progression for combatants."""
from __future__ import annotations

from dataclasses import dataclass

from battlesim.domain.battle_models import Combatant


@dataclass(slots=True)
class LevelUpResult:
    """Stat gains granted by a single level-up."""

    new_level: int
    max_hp_gain: int
    max_mp_gain: int
    strength_gain: int
    intelligence_gain: int
    agility_gain: int


def level_up(combatant: Combatant) -> LevelUpResult:
    """Grow the combatant by its class growth and fully restore health and mana."""
    growth = combatant.growth
    stats = combatant.stats

    stats.max_hp += growth.max_hp
    stats.max_mp += growth.max_mp
    stats.hp = stats.max_hp
    stats.mp = stats.max_mp
    stats.strength += growth.strength
    stats.intelligence += growth.intelligence
    stats.agility += growth.agility
    combatant.level += 1

    return LevelUpResult(
        new_level=combatant.level,
        max_hp_gain=growth.max_hp,
        max_mp_gain=growth.max_mp,
        strength_gain=growth.strength,
        intelligence_gain=growth.intelligence,
        agility_gain=growth.agility,
    )
