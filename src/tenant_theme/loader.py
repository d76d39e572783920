"""
Loading theme schema and override documents from JSON files.

The resolver itself accepts any mapping; this module is for tooling that
wants a validated view of a stored document, and reports problems as
ThemeSchemaError instead of letting JSON or pydantic errors escape.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ThemeSchemaError
from .ir.schema import ThemeSchema

logger = logging.getLogger(__name__)


def load_json_document(path: Path) -> dict[str, Any]:
    """
    Read a JSON object from disk.

    Raises:
        ThemeSchemaError: If the file is missing, not JSON, or not an object
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ThemeSchemaError(f"Cannot read file: {e.strerror or e}", path=path) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ThemeSchemaError(
            f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}", path=path
        ) from e

    if not isinstance(data, dict):
        raise ThemeSchemaError(
            f"Expected a JSON object, got {type(data).__name__}", path=path
        )
    logger.debug("Loaded %s (%d top-level keys)", path, len(data))
    return data


def parse_theme_schema(data: Any, path: Path | None = None) -> ThemeSchema:
    """
    Validate a schema document against the ThemeSchema model.

    Raises:
        ThemeSchemaError: With one line per validation problem
    """
    try:
        return ThemeSchema.model_validate(data)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ThemeSchemaError(
            "Invalid theme schema:\n  " + "\n  ".join(problems), path=path
        ) from e


def load_theme_schema(path: Path) -> ThemeSchema:
    """Load and validate a theme schema document."""
    return parse_theme_schema(load_json_document(path), path=path)
