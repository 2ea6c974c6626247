"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Stats:
    """Health, mana and the three combat attributes.

    ``hp`` may drop below zero while damage is applied; a combatant at zero or
    less is defeated. Healing and restoration never raise it above ``max_hp``.
    """

    max_hp: int
    hp: int
    max_mp: int
    mp: int
    strength: int
    intelligence: int
    agility: int
