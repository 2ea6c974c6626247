"""Low-level JSON helpers for repositories."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError, DataValidationError


def load_json_object(path: Path) -> dict[str, object]:
    """Read a definitions file whose top level must be an object keyed by id."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Definition file not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read definition file: {path}") from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise DataValidationError(f"Expected top-level object in {path}")
    for key in payload:
        if not isinstance(key, str) or not key:
            raise DataValidationError(f"Definition ids in {path} must be non-empty strings.")
    return payload
