"""Shared type aliases for the core and domain layers."""
from typing import Literal

ClassKind = Literal["warrior", "mage", "rogue", "cleric"]
MoveType = Literal["physical", "magical", "heal", "buff", "debuff"]
StatusKind = Literal["poison", "burn", "stun", "shield", "haste"]
ItemEffect = Literal["restore_hp", "restore_mp", "boost_strength", "boost_intelligence", "boost_agility"]
Side = Literal["player_one", "player_two"]
StatusMode = Literal["observed", "intended"]
BattlePhase = Literal["player_one_turn", "player_two_turn", "status_resolution", "terminal"]
ActionType = Literal["move", "item"]

CLASS_KINDS: tuple[ClassKind, ...] = ("warrior", "mage", "rogue", "cleric")
MOVE_TYPES: tuple[MoveType, ...] = ("physical", "magical", "heal", "buff", "debuff")
STATUS_KINDS: tuple[StatusKind, ...] = ("poison", "burn", "stun", "shield", "haste")
ITEM_EFFECTS: tuple[ItemEffect, ...] = (
    "restore_hp",
    "restore_mp",
    "boost_strength",
    "boost_intelligence",
    "boost_agility",
)
STATUS_MODES: tuple[StatusMode, ...] = ("observed", "intended")

__all__ = [
    "ActionType",
    "BattlePhase",
    "CLASS_KINDS",
    "ClassKind",
    "ITEM_EFFECTS",
    "ItemEffect",
    "MOVE_TYPES",
    "MoveType",
    "STATUS_KINDS",
    "STATUS_MODES",
    "Side",
    "StatusKind",
    "StatusMode",
]
