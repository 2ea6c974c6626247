"""Service layer exports."""

from .action_resolver import ActionResolver
from .battle_service import BattleService
from .decision_providers import (
    DecisionProvider,
    EventLog,
    EventSink,
    RecordingDecisionProvider,
    ScriptedDecisionProvider,
)
from .errors import FactoryError, InvalidSelection
from .factories import create_combatant
from .move_catalog import MoveCatalog
from .status_engine import StatusEffectEngine

__all__ = [
    "ActionResolver",
    "BattleService",
    "DecisionProvider",
    "EventLog",
    "EventSink",
    "FactoryError",
    "InvalidSelection",
    "MoveCatalog",
    "RecordingDecisionProvider",
    "ScriptedDecisionProvider",
    "StatusEffectEngine",
    "create_combatant",
]
