"""Items repository."""
from __future__ import annotations

from typing import Dict

from battlesim.core.types import ITEM_EFFECTS
from battlesim.data.repositories.base import RepositoryBase
from battlesim.domain.defs import ItemDef


class ItemsRepository(RepositoryBase[ItemDef]):
    """Loads and validates consumable item definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("items.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ItemDef]:
        items: Dict[str, ItemDef] = {}
        for raw_id, payload in raw.items():
            context = f"item '{raw_id}'"
            item_data = self._require_mapping(payload, context)
            self._assert_exact_fields(item_data, {"name", "effect", "amount"}, context)
            items[raw_id] = ItemDef(
                id=raw_id,
                name=self._require_str(item_data["name"], f"{context} name"),
                effect=self._require_literal(item_data["effect"], ITEM_EFFECTS, f"{context} effect"),
                amount=self._require_int(item_data["amount"], f"{context} amount", minimum=0),
            )
        return items
