"""Read-only lookup of the five moves each class can use."""
from __future__ import annotations

from typing import Dict, Tuple

from battlesim.data.repositories import ClassesRepository, MovesRepository
from battlesim.domain.defs import MoveDef


class MoveCatalog:
    """Resolves a class id to its fixed move set.

    Move tuples are built once per class and reused, so every combatant of a
    class holds the same immutable ``MoveDef`` instances.
    """

    def __init__(self, classes_repo: ClassesRepository, moves_repo: MovesRepository) -> None:
        self._classes_repo = classes_repo
        self._moves_repo = moves_repo
        self._cache: Dict[str, Tuple[MoveDef, ...]] = {}

    def moves_for(self, class_id: str) -> Tuple[MoveDef, ...]:
        """Return the class moves in slot order; unknown ids raise KeyError."""
        cached = self._cache.get(class_id)
        if cached is not None:
            return cached
        class_def = self._classes_repo.get(class_id)
        moves = tuple(self._moves_repo.get(move_id) for move_id in class_def.move_ids)
        self._cache[class_id] = moves
        return moves
