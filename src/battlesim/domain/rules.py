"""Tunable battle rules shared by the services."""
from __future__ import annotations

from dataclasses import dataclass

from battlesim.core.types import StatusMode

DEFAULT_LEVEL_UP_INTERVAL = 5
DEFAULT_STATUS_EXPIRY_CHANCE = 0.2
DEFAULT_MAX_SELECTION_ATTEMPTS = 3


@dataclass(frozen=True, slots=True)
class BattleRules:
    """Rule switches for a battle.

    ``status_mode`` selects how stun, shield and haste behave. In ``"observed"``
    mode they are inert labels; in ``"intended"`` mode stun skips the next
    action, shield halves incoming damage and haste grants an extra action
    to a combatant that already held it when its turn began.
    """

    status_mode: StatusMode = "observed"
    level_up_interval: int = DEFAULT_LEVEL_UP_INTERVAL
    status_expiry_chance: float = DEFAULT_STATUS_EXPIRY_CHANCE
    max_selection_attempts: int = DEFAULT_MAX_SELECTION_ATTEMPTS

    @property
    def wires_status_effects(self) -> bool:
        return self.status_mode == "intended"
