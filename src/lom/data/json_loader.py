"""Low-level JSON helpers for repositories."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from .errors import DataLoadError, DataValidationError

logger = logging.getLogger(__name__)


def load_json(path: Path) -> object:
    """Load JSON from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Definition file not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read definition file: {path}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc
    logger.debug("Loaded %s", path)
    return data


def load_json_object(path: Path) -> dict[str, object]:
    """Load a JSON file whose top level must be an object."""
    raw = load_json(path)
    if not isinstance(raw, dict):
        raise DataValidationError(f"Expected top-level object in {path}")
    return raw
