"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import List, Sequence

from battlesim.domain.battle_models import Combatant
from battlesim.services.battle_events import (
    BattleEndedEvent,
    BattleEvent,
    BattleStartedEvent,
    DamageDealtEvent,
    HealedEvent,
    InsufficientManaEvent,
    ItemUsedEvent,
    LeveledUpEvent,
    MoveUsedEvent,
    RoundStartedEvent,
    SelectionRejectedEvent,
    StatusExpiredEvent,
    StatusInflictedEvent,
    StatusTickEvent,
    TurnForfeitedEvent,
    TurnSkippedEvent,
)

_ITEM_GAIN_LABELS = (
    ("hp_delta", "HP"),
    ("mp_delta", "MP"),
    ("strength_delta", "STR"),
    ("intelligence_delta", "INT"),
    ("agility_delta", "AGI"),
)


def debug_enabled() -> bool:
    """Return True only when BATTLESIM_DEBUG is explicitly set to '1'."""
    return os.getenv("BATTLESIM_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def format_status_panel(combatant: Combatant) -> List[str]:
    stats = combatant.stats
    statuses = " ".join(kind.title() for kind in combatant.statuses) or "None"
    return [
        f"{combatant.name} ({combatant.class_name}, Lv {combatant.level})",
        f"HP: {stats.hp}/{stats.max_hp} | MP: {stats.mp}/{stats.max_mp}",
        f"STR: {stats.strength} | INT: {stats.intelligence} | AGI: {stats.agility}",
        f"Status Effects: {statuses}",
    ]


def format_move_options(combatant: Combatant) -> List[str]:
    options = [
        f"{move.name} (Power: {move.base_power}, Mana Cost: {move.mana_cost})" for move in combatant.moves
    ]
    options.append("Use Item")
    return options


def format_inventory_options(combatant: Combatant) -> List[str]:
    return [item.name if item is not None else "(empty)" for item in combatant.inventory]


def describe_event(event: BattleEvent) -> str | None:
    """Return the narration line for an event, or None when it has none."""
    if isinstance(event, BattleStartedEvent):
        names = " vs ".join(event.combatant_names)
        return f"Battle started: {names} (status rules: {event.status_mode})."
    if isinstance(event, RoundStartedEvent):
        return f"\n--- Round {event.round_number} ---"
    if isinstance(event, MoveUsedEvent):
        return f"{event.attacker_name} uses {event.move_name}! (MP now {event.attacker_mp})"
    if isinstance(event, InsufficientManaEvent):
        return f"{event.combatant_name} doesn't have enough mana to use {event.move_name}!"
    if isinstance(event, DamageDealtEvent):
        return f"{event.attacker_name} dealt {event.damage} damage to {event.target_name}! (HP now {event.target_hp})"
    if isinstance(event, HealedEvent):
        return f"{event.combatant_name} healed for {event.amount} HP!"
    if isinstance(event, StatusInflictedEvent):
        return f"{event.source_name} inflicted {event.status.title()} on {event.target_name}!"
    if isinstance(event, ItemUsedEvent):
        gains = [
            f"+{getattr(event, attr)} {label}" for attr, label in _ITEM_GAIN_LABELS if getattr(event, attr)
        ]
        suffix = f" ({', '.join(gains)})" if gains else " (no effect)"
        return f"{event.combatant_name} used a {event.item_name}{suffix}."
    if isinstance(event, StatusTickEvent):
        if event.status == "stun":
            return f"{event.combatant_name} is Stunned!"
        return f"{event.combatant_name} took {event.damage} damage from {event.status.title()}!"
    if isinstance(event, StatusExpiredEvent):
        return f"{event.status.title()} wore off {event.combatant_name}."
    if isinstance(event, TurnSkippedEvent):
        return f"{event.combatant_name} is Stunned and loses the turn!"
    if isinstance(event, SelectionRejectedEvent):
        if event.attempts_left:
            return f"{event.reason} Choose again ({event.attempts_left} left)."
        return event.reason
    if isinstance(event, TurnForfeitedEvent):
        return f"{event.combatant_name} hesitates and forfeits the turn."
    if isinstance(event, LeveledUpEvent):
        return (
            f"{event.combatant_name} leveled up to Lv {event.new_level}! "
            f"Max HP +{event.max_hp_gain}, Max MP +{event.max_mp_gain}, "
            f"STR +{event.strength_gain}, INT +{event.intelligence_gain}, AGI +{event.agility_gain}"
        )
    if isinstance(event, BattleEndedEvent):
        if event.is_draw:
            return "It's a draw! Both players have been defeated."
        return f"{event.winner_name} wins after {event.rounds} rounds!"
    return None
