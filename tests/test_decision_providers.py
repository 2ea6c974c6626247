from __future__ import annotations

import pytest

from battlesim.domain.battle_models import BattleAction
from battlesim.services import EventLog, RecordingDecisionProvider, ScriptedDecisionProvider
from battlesim.services.battle_events import RoundStartedEvent, TurnForfeitedEvent
from tests.helpers.builders import make_combatant


def test_scripted_provider_pops_actions_per_side() -> None:
    first = make_combatant("warrior")
    second = make_combatant("mage", side="player_two")
    provider = ScriptedDecisionProvider(
        {
            "player_one": [BattleAction.move(0), BattleAction.item(1)],
            "player_two": [BattleAction.move(4)],
        }
    )

    assert provider.choose_action(second) == BattleAction.move(4)
    assert provider.choose_action(first) == BattleAction.move(0)
    assert provider.choose_action(first) == BattleAction.item(1)
    assert provider.remaining("player_one") == 0
    assert provider.remaining("player_two") == 0


def test_scripted_provider_uses_fallback_once_exhausted() -> None:
    provider = ScriptedDecisionProvider({"player_one": [BattleAction.move(2)]}, fallback=BattleAction.move(0))
    warrior = make_combatant("warrior")

    assert provider.choose_action(warrior) == BattleAction.move(2)
    assert provider.choose_action(warrior) == BattleAction.move(0)
    assert provider.choose_action(warrior) == BattleAction.move(0)


def test_scripted_provider_without_fallback_raises_when_exhausted() -> None:
    provider = ScriptedDecisionProvider({})

    with pytest.raises(LookupError):
        provider.choose_action(make_combatant("rogue"))


def test_recording_provider_replays_the_same_choices() -> None:
    inner = ScriptedDecisionProvider(
        {"player_one": [BattleAction.move(1)], "player_two": [BattleAction.item(0)]},
    )
    recorder = RecordingDecisionProvider(inner)
    first = make_combatant("cleric")
    second = make_combatant("rogue", side="player_two")

    recorder.choose_action(first)
    recorder.choose_action(second)
    replay = recorder.replay()

    assert recorder.recorded == {"player_one": [BattleAction.move(1)], "player_two": [BattleAction.item(0)]}
    assert replay.choose_action(second) == BattleAction.item(0)
    assert replay.choose_action(first) == BattleAction.move(1)


def test_event_log_filters_by_type() -> None:
    log = EventLog()
    log.emit(RoundStartedEvent(round_number=1))
    log.emit(TurnForfeitedEvent(combatant_name="Ann"))
    log.emit(RoundStartedEvent(round_number=2))

    assert [event.round_number for event in log.of_type(RoundStartedEvent)] == [1, 2]
    assert len(log.events) == 3
