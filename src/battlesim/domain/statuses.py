"""Status effect bookkeeping helpers."""
from __future__ import annotations

from typing import Dict, List

from battlesim.core.types import StatusKind

STATUS_CAPACITY = 5

STATUS_TICK_DAMAGE: Dict[StatusKind, int] = {
    "poison": 10,
    "burn": 15,
}

# Kinds that help whoever carries them.
BENEFICIAL_STATUSES: frozenset[StatusKind] = frozenset({"shield", "haste"})

SHIELD_DAMAGE_DIVISOR = 2


def apply_status_no_stack(
    statuses: List[StatusKind],
    kind: StatusKind,
    *,
    capacity: int = STATUS_CAPACITY,
) -> bool:
    """
    Add a status kind if it is not already active and there is room.

    Returns True if the status was added. Duplicates and inserts beyond
    capacity are dropped silently and return False.
    """

    if kind in statuses or len(statuses) >= capacity:
        return False
    statuses.append(kind)
    return True


def remove_status(statuses: List[StatusKind], kind: StatusKind) -> bool:
    if kind not in statuses:
        return False
    statuses.remove(kind)
    return True
