"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

from battlesim.core.types import STATUS_MODES
from battlesim.domain.rules import BattleRules

_DEFAULT_STATUS_MODE = "observed"

logger = logging.getLogger(__name__)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "BattleSim"
        return Path.home() / "BattleSim"
    return Path.home() / ".config" / "battlesim"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_status_mode(value: object) -> str:
    return value if value in STATUS_MODES else _DEFAULT_STATUS_MODE


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {"status_mode": _DEFAULT_STATUS_MODE}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return {"status_mode": _DEFAULT_STATUS_MODE}
    if not isinstance(raw, dict):
        return {"status_mode": _DEFAULT_STATUS_MODE}
    return {"status_mode": _normalize_status_mode(raw.get("status_mode"))}


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"status_mode": _normalize_status_mode(config.get("status_mode"))}
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def rules_from_config(config: Dict[str, str]) -> BattleRules:
    return BattleRules(status_mode=_normalize_status_mode(config.get("status_mode")))
