"""Resolves a single move or item use between two combatants."""
from __future__ import annotations

import logging
from typing import List

from battlesim.core.rng import RNG
from battlesim.core.types import StatusKind
from battlesim.domain.battle_models import BattleAction, Combatant
from battlesim.domain.damage import compute_effective_power
from battlesim.domain.defs import MoveDef
from battlesim.domain.item_effects import apply_item_effects
from battlesim.domain.rules import BattleRules
from battlesim.domain.statuses import BENEFICIAL_STATUSES, SHIELD_DAMAGE_DIVISOR, apply_status_no_stack
from battlesim.services.battle_events import (
    BattleEvent,
    DamageDealtEvent,
    HealedEvent,
    InsufficientManaEvent,
    ItemUsedEvent,
    MoveUsedEvent,
    StatusInflictedEvent,
)
from battlesim.services.errors import InvalidSelection

logger = logging.getLogger(__name__)


class ActionResolver:
    """Applies moves and items, drawing infliction rolls from the injected RNG."""

    def __init__(self, rng: RNG, rules: BattleRules | None = None) -> None:
        self._rng = rng
        self._rules = rules or BattleRules()

    def resolve(self, action: BattleAction, actor: Combatant, opponent: Combatant) -> List[BattleEvent]:
        """Dispatch a decision to apply_move or use_item."""
        if action.action_type == "move":
            if not 0 <= action.index < len(actor.moves):
                raise InvalidSelection(f"Move {action.index + 1} does not exist.", index=action.index)
            return self.apply_move(actor, opponent, actor.moves[action.index])
        if action.action_type == "item":
            return [self.use_item(actor, action.index)]
        raise InvalidSelection(f"Unknown action type: {action.action_type}")

    def apply_move(self, attacker: Combatant, defender: Combatant, move: MoveDef) -> List[BattleEvent]:
        if move.mana_cost > attacker.stats.mp:
            logger.debug("%s lacks mana for %s (%d > %d)", attacker.name, move.name, move.mana_cost, attacker.stats.mp)
            return [
                InsufficientManaEvent(
                    combatant_name=attacker.name,
                    move_name=move.name,
                    mana_cost=move.mana_cost,
                    current_mp=attacker.stats.mp,
                )
            ]

        attacker.stats.mp -= move.mana_cost
        events: List[BattleEvent] = [
            MoveUsedEvent(
                attacker_name=attacker.name,
                move_name=move.name,
                mana_spent=move.mana_cost,
                attacker_mp=attacker.stats.mp,
            )
        ]

        effective = compute_effective_power(move, attacker.stats, defender.stats)

        if move.move_type == "heal":
            attacker.stats.hp = min(attacker.stats.hp + effective, attacker.stats.max_hp)
            events.append(HealedEvent(combatant_name=attacker.name, amount=effective, hp=attacker.stats.hp))
        elif move.deals_damage:
            damage = effective
            if self._rules.wires_status_effects and defender.has_status("shield"):
                damage //= SHIELD_DAMAGE_DIVISOR
            defender.stats.hp -= damage
            events.append(
                DamageDealtEvent(
                    attacker_name=attacker.name,
                    target_name=defender.name,
                    damage=damage,
                    target_hp=defender.stats.hp,
                )
            )

        if move.inflicts is not None:
            roll = self._rng.random()
            logger.debug("%s infliction roll for %s: %.3f vs %.2f", move.name, move.inflicts, roll, move.inflict_chance)
            if roll < move.inflict_chance:
                recipient = self._status_recipient(attacker, defender, move.inflicts)
                if apply_status_no_stack(recipient.statuses, move.inflicts):
                    events.append(
                        StatusInflictedEvent(
                            source_name=attacker.name,
                            target_name=recipient.name,
                            status=move.inflicts,
                        )
                    )
        return events

    def use_item(self, combatant: Combatant, slot_index: int) -> ItemUsedEvent:
        if not 0 <= slot_index < len(combatant.inventory):
            raise InvalidSelection(f"Inventory slot {slot_index + 1} does not exist.", index=slot_index)
        item = combatant.inventory[slot_index]
        if item is None:
            raise InvalidSelection(f"Inventory slot {slot_index + 1} is empty.", index=slot_index)

        result = apply_item_effects(combatant.stats, item)
        combatant.inventory[slot_index] = None
        logger.debug("%s used %s from slot %d", combatant.name, item.id, slot_index)
        return ItemUsedEvent(
            combatant_name=combatant.name,
            item_id=item.id,
            item_name=item.name,
            slot_index=slot_index,
            hp_delta=result.hp_delta,
            mp_delta=result.mp_delta,
            strength_delta=result.strength_delta,
            intelligence_delta=result.intelligence_delta,
            agility_delta=result.agility_delta,
        )

    def _status_recipient(self, attacker: Combatant, defender: Combatant, kind: StatusKind) -> Combatant:
        if self._rules.wires_status_effects and kind in BENEFICIAL_STATUSES:
            return attacker
        return defender
