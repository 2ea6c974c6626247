"""Per-round status effect damage and expiry."""
from __future__ import annotations

import logging
from typing import List

from battlesim.core.rng import RNG
from battlesim.domain.battle_models import Combatant
from battlesim.domain.rules import BattleRules
from battlesim.domain.statuses import STATUS_TICK_DAMAGE, remove_status
from battlesim.services.battle_events import BattleEvent, StatusExpiredEvent, StatusTickEvent

logger = logging.getLogger(__name__)


class StatusEffectEngine:
    """Applies active statuses once per completed round.

    Poison and burn deal fixed damage; stun only narrates. Shield and haste do
    nothing here. Every active status then rolls independently for expiry.
    """

    def __init__(self, rng: RNG, rules: BattleRules | None = None) -> None:
        self._rng = rng
        self._rules = rules or BattleRules()

    def tick(self, combatant: Combatant) -> List[BattleEvent]:
        events: List[BattleEvent] = []
        for kind in list(combatant.statuses):
            damage = STATUS_TICK_DAMAGE.get(kind, 0)
            if damage:
                combatant.stats.hp -= damage
            if damage or kind == "stun":
                events.append(
                    StatusTickEvent(
                        combatant_name=combatant.name,
                        status=kind,
                        damage=damage,
                        hp=combatant.stats.hp,
                    )
                )

            roll = self._rng.random()
            if roll < self._rules.status_expiry_chance:
                remove_status(combatant.statuses, kind)
                logger.debug("%s on %s expired (roll %.3f)", kind, combatant.name, roll)
                events.append(StatusExpiredEvent(combatant_name=combatant.name, status=kind))
        return events
