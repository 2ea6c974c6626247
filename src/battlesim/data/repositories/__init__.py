"""Repository exports."""

from .classes_repo import ClassesRepository
from .items_repo import ItemsRepository
from .moves_repo import MovesRepository

__all__ = [
    "ClassesRepository",
    "ItemsRepository",
    "MovesRepository",
]
