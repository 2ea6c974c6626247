from __future__ import annotations

import pytest

from tests.helpers.builders import get_catalog, make_combatant

EXPECTED_MOVES = {
    "warrior": [
        ("Slash", 30, 0, "physical", None, 0.0),
        ("Cleave", 45, 20, "physical", None, 0.0),
        ("Shield Bash", 25, 15, "physical", "stun", 0.3),
        ("Warcry", 0, 25, "buff", None, 0.0),
        ("Berserk", 60, 40, "physical", None, 0.0),
    ],
    "mage": [
        ("Fireball", 40, 30, "magical", "burn", 0.4),
        ("Ice Shard", 35, 25, "magical", None, 0.0),
        ("Thunderbolt", 50, 40, "magical", "stun", 0.2),
        ("Arcane Shield", 0, 35, "buff", "shield", 1.0),
        ("Meteor", 70, 60, "magical", "burn", 0.6),
    ],
    "rogue": [
        ("Backstab", 45, 20, "physical", None, 0.0),
        ("Poison Dart", 25, 15, "physical", "poison", 0.7),
        ("Smoke Bomb", 0, 30, "debuff", None, 0.0),
        ("Swift Strike", 35, 25, "physical", "haste", 0.5),
        ("Shadow Dance", 55, 45, "physical", None, 0.0),
    ],
    "cleric": [
        ("Smite", 35, 25, "magical", None, 0.0),
        ("Heal", 40, 30, "heal", None, 0.0),
        ("Purify", 0, 20, "buff", None, 0.0),
        ("Holy Shield", 0, 35, "buff", "shield", 1.0),
        ("Divine Wrath", 60, 50, "magical", None, 0.0),
    ],
}


@pytest.mark.parametrize("class_id", sorted(EXPECTED_MOVES))
def test_moves_for_returns_fixed_catalog(class_id: str) -> None:
    moves = get_catalog().moves_for(class_id)

    assert len(moves) == 5
    actual = [
        (move.name, move.base_power, move.mana_cost, move.move_type, move.inflicts, move.inflict_chance)
        for move in moves
    ]
    assert actual == EXPECTED_MOVES[class_id]


def test_warrior_first_move_is_slash() -> None:
    slash = get_catalog().moves_for("warrior")[0]

    assert slash.name == "Slash"
    assert slash.base_power == 30
    assert slash.mana_cost == 0
    assert slash.move_type == "physical"
    assert slash.inflicts is None


def test_combatants_of_same_class_share_move_instances() -> None:
    first = make_combatant("rogue", "First")
    second = make_combatant("rogue", "Second", side="player_two")

    assert first.moves == second.moves
    assert all(a is b for a, b in zip(first.moves, second.moves))


def test_moves_are_immutable() -> None:
    move = get_catalog().moves_for("mage")[0]

    with pytest.raises(AttributeError):
        move.base_power = 999  # type: ignore[misc]


def test_unknown_class_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_catalog().moves_for("bard")
