"""Console-driven UI loops for the battle simulator."""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import Dict, Literal, Tuple

from battlesim.core.rng import RNG
from battlesim.core.types import CLASS_KINDS, Side
from battlesim.data.repositories import ClassesRepository, ItemsRepository, MovesRepository
from battlesim.domain.battle_models import BattleAction, BattleOutcome, Combatant
from battlesim.domain.rules import BattleRules
from battlesim.presentation.cli.config import load_config, rules_from_config, save_config
from battlesim.presentation.cli.render import (
    debug_enabled,
    describe_event,
    format_inventory_options,
    format_move_options,
    format_status_panel,
    render_heading,
    render_menu,
)
from battlesim.services import (
    ActionResolver,
    BattleService,
    MoveCatalog,
    StatusEffectEngine,
    create_combatant,
)
from battlesim.services.battle_events import BattleEvent

MenuAction = Literal["new_battle", "options", "quit"]
_MAX_RANDOM_SEED = 2**31 - 1
_ITEM_MENU_BACK = 0


@dataclass(slots=True)
class _Repositories:
    moves: MovesRepository
    items: ItemsRepository
    classes: ClassesRepository
    catalog: MoveCatalog


class ConsoleDecisionProvider:
    """Prompts the player at the keyboard for each action."""

    def choose_action(self, combatant: Combatant) -> BattleAction:
        while True:
            print()
            for line in format_status_panel(combatant):
                print(line)
            options = format_move_options(combatant)
            render_menu("Moves", options)
            move_index = _prompt_index("Enter your move", len(options))
            if move_index < len(combatant.moves):
                return BattleAction.move(move_index)
            slot_index = _prompt_item_slot(combatant)
            if slot_index is not None:
                return BattleAction.item(slot_index)


class ConsoleEventSink:
    """Prints one narration line per event."""

    def emit(self, event: BattleEvent) -> None:
        line = describe_event(event)
        if line is not None:
            print(line)


def main() -> None:
    """Start the interactive CLI session."""
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = load_config()
    repos = _build_repositories()
    print("Welcome to the Battle Simulator!")
    running = True
    while running:
        action = _main_menu_loop()
        if action == "quit":
            running = False
        elif action == "options":
            config = _options_menu(config)
        else:
            _run_new_battle(repos, rules_from_config(config))
    print("Goodbye!")


def _main_menu_loop() -> MenuAction:
    options: Tuple[Tuple[str, MenuAction], ...] = (
        ("New Battle", "new_battle"),
        ("Options", "options"),
        ("Quit", "quit"),
    )
    render_menu("Main Menu", [label for label, _ in options])
    index = _prompt_index("Select an option", len(options))
    return options[index][1]


def _options_menu(config: Dict[str, str]) -> Dict[str, str]:
    current = config.get("status_mode", "observed")
    render_heading("Options")
    print(f"Status rules: {current}")
    print("  observed - Stun, Shield and Haste are labels only")
    print("  intended - Stun skips a turn, Shield halves damage, Haste grants an extra action")
    render_menu("Change status rules?", ["Observed", "Intended", "Back"])
    index = _prompt_index("Select an option", 3)
    if index == 2:
        return config
    updated = dict(config)
    updated["status_mode"] = "observed" if index == 0 else "intended"
    save_config(updated)
    print(f"Status rules set to {updated['status_mode']}.")
    return updated


def _build_repositories() -> _Repositories:
    """Construct the repositories and move catalog."""
    moves_repo = MovesRepository()
    items_repo = ItemsRepository()
    classes_repo = ClassesRepository(moves_repo=moves_repo, items_repo=items_repo)
    return _Repositories(
        moves=moves_repo,
        items=items_repo,
        classes=classes_repo,
        catalog=MoveCatalog(classes_repo, moves_repo),
    )


def _build_battle_service(seed: int, rules: BattleRules) -> BattleService:
    """Construct the BattleService around a single seeded RNG."""
    rng = RNG(seed)
    return BattleService(
        resolver=ActionResolver(rng, rules),
        status_engine=StatusEffectEngine(rng, rules),
        rules=rules,
    )


def _run_new_battle(repos: _Repositories, rules: BattleRules) -> BattleOutcome:
    seed = _prompt_seed()
    player_one = _prompt_combatant(repos, "Player 1", "player_one")
    player_two = _prompt_combatant(repos, "Player 2", "player_two")
    service = _build_battle_service(seed, rules)
    print(f"Battle seed: {seed}")
    outcome = service.run_battle(player_one, player_two, ConsoleDecisionProvider(), ConsoleEventSink())
    render_heading("Battle Ended")
    return outcome


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _prompt_combatant(repos: _Repositories, label: str, side: Side) -> Combatant:
    print()
    name = _prompt_name(label)
    class_id = _prompt_class(repos)
    return create_combatant(
        name,
        class_id,
        side=side,
        classes_repo=repos.classes,
        items_repo=repos.items,
        catalog=repos.catalog,
    )


def _prompt_name(label: str) -> str:
    while True:
        name = input(f"{label}, enter your name: ").strip()
        if name:
            return name
        print("Name cannot be empty.")


def _prompt_class(repos: _Repositories) -> str:
    labels = ", ".join(f"{idx}: {repos.classes.get(class_id).name}" for idx, class_id in enumerate(CLASS_KINDS))
    while True:
        raw = input(f"Choose your class ({labels}): ").strip()
        try:
            index = int(raw)
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < len(CLASS_KINDS):
            return CLASS_KINDS[index]
        print(f"Please enter a value between 0 and {len(CLASS_KINDS) - 1}.")


def _prompt_item_slot(combatant: Combatant) -> int | None:
    """Return the chosen 0-based slot, or None to go back to the move list."""
    render_menu("Inventory", format_inventory_options(combatant))
    print(f"{_ITEM_MENU_BACK}. Back")
    slot_count = len(combatant.inventory)
    while True:
        raw = input(f"Choose an item to use (1-{slot_count}): ").strip()
        try:
            choice = int(raw)
        except ValueError:
            print("Please enter a number.")
            continue
        if choice == _ITEM_MENU_BACK:
            return None
        if 1 <= choice <= slot_count:
            return choice - 1
        print(f"Please enter a value between {_ITEM_MENU_BACK} and {slot_count}.")


def _prompt_index(prompt: str, option_count: int) -> int:
    while True:
        raw = input(f"{prompt} (1-{option_count}): ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < option_count:
            return index
        print(f"Please enter a value between 1 and {option_count}.")
