from itertools import chain, repeat
from typing import Iterable

from battlesim.domain.battle_models import BattleAction
from battlesim.domain.rules import BattleRules
from battlesim.presentation.cli import app
from tests.helpers.builders import make_combatant


def _feed_input(monkeypatch, values: Iterable[str]) -> None:
    answers = iter(values)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))


def test_console_provider_reprompts_out_of_range_move(monkeypatch, capsys) -> None:
    _feed_input(monkeypatch, ["9", "2"])

    action = app.ConsoleDecisionProvider().choose_action(make_combatant("warrior", "Ann"))

    assert action == BattleAction.move(1)
    assert "Please enter a value between 1 and 6." in capsys.readouterr().out


def test_console_provider_item_menu_back_returns_to_moves(monkeypatch) -> None:
    _feed_input(monkeypatch, ["6", "0", "1"])

    action = app.ConsoleDecisionProvider().choose_action(make_combatant("cleric"))

    assert action == BattleAction.move(0)


def test_console_provider_picks_item_slot(monkeypatch) -> None:
    _feed_input(monkeypatch, ["6", "x", "2"])

    action = app.ConsoleDecisionProvider().choose_action(make_combatant("mage"))

    assert action == BattleAction.item(1)


def test_run_new_battle_plays_to_completion(monkeypatch, capsys) -> None:
    _feed_input(monkeypatch, chain(["1", "Ann", "0", "", "Bo", "0"], repeat("1")))

    outcome = app._run_new_battle(app._build_repositories(), BattleRules())

    output = capsys.readouterr().out
    assert outcome.winner_name == "Ann"
    assert outcome.rounds == 3
    assert "Battle seed: 1" in output
    assert "Name cannot be empty." in output
    assert "Ann wins after 3 rounds!" in output
    assert "=== Battle Ended ===" in output


def test_options_menu_saves_selected_mode(monkeypatch) -> None:
    saved = []
    monkeypatch.setattr(app, "save_config", lambda config: saved.append(config))
    _feed_input(monkeypatch, ["2"])

    updated = app._options_menu({"status_mode": "observed"})

    assert updated == {"status_mode": "intended"}
    assert saved == [{"status_mode": "intended"}]


def test_main_quits_from_menu(monkeypatch, capsys) -> None:
    monkeypatch.setattr(app, "load_config", lambda: {"status_mode": "observed"})
    _feed_input(monkeypatch, ["3"])

    app.main()

    output = capsys.readouterr().out
    assert "Welcome to the Battle Simulator!" in output
    assert "Goodbye!" in output
