"""Domain definition exports."""

from .class_def import ClassDef, GrowthDef
from .item_def import ItemDef
from .move_def import MoveDef

__all__ = [
    "ClassDef",
    "GrowthDef",
    "ItemDef",
    "MoveDef",
]
