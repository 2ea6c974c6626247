"""Classes repository with reference validation."""
from __future__ import annotations

from typing import Dict

from battlesim.core.types import CLASS_KINDS
from battlesim.data.errors import DataReferenceError, DataValidationError
from battlesim.data.repositories.base import RepositoryBase
from battlesim.data.repositories.items_repo import ItemsRepository
from battlesim.data.repositories.moves_repo import MovesRepository
from battlesim.domain.defs import ClassDef, GrowthDef

MOVES_PER_CLASS = 5
INVENTORY_SLOTS = 5

_GROWTH_FIELDS = {"max_hp", "max_mp", "strength", "intelligence", "agility"}


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads classes and ensures referenced moves and items exist."""

    def __init__(
        self,
        moves_repo: MovesRepository | None = None,
        items_repo: ItemsRepository | None = None,
        base_path=None,
    ) -> None:
        super().__init__("classes.json", base_path)
        self._moves_repo = moves_repo or MovesRepository(base_path=base_path)
        self._items_repo = items_repo or ItemsRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        classes: Dict[str, ClassDef] = {}
        for raw_id, payload in raw.items():
            context = f"class '{raw_id}'"
            if raw_id not in CLASS_KINDS:
                raise DataValidationError(f"{context} is not one of {list(CLASS_KINDS)}.")
            class_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                class_data,
                {"name", "base_hp", "base_mp", "strength", "intelligence", "agility", "moves", "growth"},
                context,
                optional_fields={"starting_items"},
            )

            move_ids = self._require_str_list(class_data["moves"], f"{context} moves")
            if len(move_ids) != MOVES_PER_CLASS:
                raise DataValidationError(f"{context} must list exactly {MOVES_PER_CLASS} moves.")
            for move_id in move_ids:
                if not self._moves_repo.has(move_id):
                    raise DataReferenceError(f"{context} references missing move '{move_id}'.")

            item_ids = self._require_str_list(class_data.get("starting_items", []), f"{context} starting_items")
            if len(item_ids) > INVENTORY_SLOTS:
                raise DataValidationError(f"{context} may start with at most {INVENTORY_SLOTS} items.")
            for item_id in item_ids:
                if not self._items_repo.has(item_id):
                    raise DataReferenceError(f"{context} references missing item '{item_id}'.")

            classes[raw_id] = ClassDef(
                id=raw_id,
                name=self._require_str(class_data["name"], f"{context} name"),
                base_hp=self._require_int(class_data["base_hp"], f"{context} base_hp", minimum=1),
                base_mp=self._require_int(class_data["base_mp"], f"{context} base_mp", minimum=0),
                strength=self._require_int(class_data["strength"], f"{context} strength", minimum=0),
                intelligence=self._require_int(class_data["intelligence"], f"{context} intelligence", minimum=0),
                agility=self._require_int(class_data["agility"], f"{context} agility", minimum=0),
                move_ids=tuple(move_ids),
                growth=self._parse_growth(class_data["growth"], context),
                starting_item_ids=tuple(item_ids),
            )
        return classes

    def _parse_growth(self, raw_growth: object, context: str) -> GrowthDef:
        growth_context = f"{context} growth"
        growth_data = self._require_mapping(raw_growth, growth_context)
        self._assert_exact_fields(growth_data, _GROWTH_FIELDS, growth_context)
        values = {
            key: self._require_int(growth_data[key], f"{growth_context} {key}", minimum=0)
            for key in _GROWTH_FIELDS
        }
        return GrowthDef(**values)
