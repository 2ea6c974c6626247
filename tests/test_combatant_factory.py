from __future__ import annotations

import pytest

from battlesim.services.errors import FactoryError
from battlesim.services.factories import create_combatant
from tests.helpers.builders import get_catalog, get_items_repo, make_combatant

BASE_STATS = {
    "warrior": (150, 50, 15, 5, 10),
    "mage": (100, 150, 5, 20, 8),
    "rogue": (120, 80, 12, 8, 18),
    "cleric": (130, 120, 8, 15, 7),
}


@pytest.mark.parametrize("class_id", sorted(BASE_STATS))
def test_create_combatant_assigns_class_base_stats(class_id: str) -> None:
    combatant = make_combatant(class_id, "Aldric")
    max_hp, max_mp, strength, intelligence, agility = BASE_STATS[class_id]

    assert combatant.name == "Aldric"
    assert combatant.class_id == class_id
    assert combatant.stats.hp == combatant.stats.max_hp == max_hp
    assert combatant.stats.mp == combatant.stats.max_mp == max_mp
    assert (combatant.stats.strength, combatant.stats.intelligence, combatant.stats.agility) == (
        strength,
        intelligence,
        agility,
    )
    assert combatant.level == 1
    assert combatant.statuses == []


def test_create_combatant_starts_with_one_of_each_item() -> None:
    combatant = make_combatant("mage", side="player_two")

    assert combatant.side == "player_two"
    assert [item.id for item in combatant.inventory if item is not None] == [
        "health_potion",
        "mana_potion",
        "strength_elixir",
        "intelligence_elixir",
        "agility_elixir",
    ]


def test_create_combatant_unknown_class_raises() -> None:
    from battlesim.data.repositories import ClassesRepository

    with pytest.raises(FactoryError, match="bard"):
        create_combatant(
            "Nobody",
            "bard",
            side="player_one",
            classes_repo=ClassesRepository(),
            items_repo=get_items_repo(),
            catalog=get_catalog(),
        )


def test_combatants_do_not_share_mutable_state() -> None:
    first = make_combatant("cleric")
    second = make_combatant("cleric", side="player_two")

    first.statuses.append("poison")
    first.inventory[0] = None
    first.stats.hp -= 10

    assert second.statuses == []
    assert second.inventory[0] is not None
    assert second.stats.hp == second.stats.max_hp
