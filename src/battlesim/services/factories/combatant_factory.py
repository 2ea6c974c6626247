"""Factory for creating combatants from class definitions."""
from __future__ import annotations

from battlesim.core.types import Side
from battlesim.data.repositories import ClassesRepository, ItemsRepository
from battlesim.data.repositories.classes_repo import INVENTORY_SLOTS
from battlesim.domain.battle_models import Combatant
from battlesim.domain.defs import ItemDef
from battlesim.domain.entities import Stats
from battlesim.services.errors import FactoryError
from battlesim.services.move_catalog import MoveCatalog


def create_combatant(
    name: str,
    class_id: str,
    *,
    side: Side,
    classes_repo: ClassesRepository,
    items_repo: ItemsRepository,
    catalog: MoveCatalog,
) -> Combatant:
    """Instantiate a full-health combatant using the provided repositories."""
    try:
        class_def = classes_repo.get(class_id)
    except KeyError as exc:
        raise FactoryError(f"Class '{class_id}' not found.") from exc

    try:
        moves = catalog.moves_for(class_id)
    except KeyError as exc:
        raise FactoryError(f"Move '{exc.args[0]}' not found for class '{class_id}'.") from exc

    inventory: list[ItemDef | None] = []
    for item_id in class_def.starting_item_ids:
        try:
            inventory.append(items_repo.get(item_id))
        except KeyError as exc:
            raise FactoryError(f"Item '{item_id}' not found for class '{class_id}'.") from exc
    inventory.extend([None] * (INVENTORY_SLOTS - len(inventory)))

    stats = Stats(
        max_hp=class_def.base_hp,
        hp=class_def.base_hp,
        max_mp=class_def.base_mp,
        mp=class_def.base_mp,
        strength=class_def.strength,
        intelligence=class_def.intelligence,
        agility=class_def.agility,
    )
    return Combatant(
        name=name,
        class_id=class_def.id,
        class_name=class_def.name,
        side=side,
        stats=stats,
        moves=moves,
        growth=class_def.growth,
        inventory=inventory,
    )
