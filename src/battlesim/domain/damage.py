"""Damage and healing formulas."""
from __future__ import annotations

from battlesim.domain.defs import MoveDef
from battlesim.domain.entities import Stats

MITIGATION_BASE = 100


def compute_raw_power(move: MoveDef, attacker: Stats) -> int:
    """Base power plus STR for physical moves or INT for magical moves."""
    if move.move_type == "physical":
        return move.base_power + attacker.strength
    if move.move_type == "magical":
        return move.base_power + attacker.intelligence
    return move.base_power


def mitigate(power: int, agility: int) -> int:
    """Scale power down by the defender's agility: floor(power * 100 / (100 + agility))."""
    return power * MITIGATION_BASE // (MITIGATION_BASE + max(0, agility))


def compute_effective_power(move: MoveDef, attacker: Stats, defender: Stats) -> int:
    # Applied to every move type, including heals, before the type dispatch.
    return mitigate(compute_raw_power(move, attacker), defender.agility)
