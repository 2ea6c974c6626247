"""Moves repository."""
from __future__ import annotations

from typing import Dict

from battlesim.core.types import MOVE_TYPES, STATUS_KINDS
from battlesim.data.errors import DataValidationError
from battlesim.data.repositories.base import RepositoryBase
from battlesim.domain.defs import MoveDef


class MovesRepository(RepositoryBase[MoveDef]):
    """Loads class moves and validates power, cost and status infliction."""

    def __init__(self, base_path=None) -> None:
        super().__init__("moves.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, MoveDef]:
        moves: Dict[str, MoveDef] = {}
        for raw_id, payload in raw.items():
            context = f"move '{raw_id}'"
            move_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                move_data,
                {"name", "base_power", "mana_cost", "type"},
                context,
                optional_fields={"inflicts", "inflict_chance"},
            )

            inflicts = move_data.get("inflicts")
            if inflicts is not None:
                inflicts = self._require_literal(inflicts, STATUS_KINDS, f"{context} inflicts")
            chance = self._require_chance(move_data.get("inflict_chance", 0.0), f"{context} inflict_chance")
            if inflicts is None and chance > 0:
                raise DataValidationError(f"{context} has an inflict_chance but no status to inflict.")

            moves[raw_id] = MoveDef(
                id=raw_id,
                name=self._require_str(move_data["name"], f"{context} name"),
                base_power=self._require_int(move_data["base_power"], f"{context} base_power", minimum=0),
                mana_cost=self._require_int(move_data["mana_cost"], f"{context} mana_cost", minimum=0),
                move_type=self._require_literal(move_data["type"], MOVE_TYPES, f"{context} type"),
                inflicts=inflicts,
                inflict_chance=chance,
            )
        return moves

    @staticmethod
    def _require_chance(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        if not 0.0 <= value <= 1.0:
            raise DataValidationError(f"{context} must be between 0 and 1.")
        return float(value)
