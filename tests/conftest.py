"""Shared pytest fixtures for tenant-theme tests."""

from __future__ import annotations

import copy
import logging
from typing import Any

import pytest

from tenant_theme import default_theme_schema


@pytest.fixture
def default_schema() -> dict[str, Any]:
    """Return a fresh default schema document."""
    return default_theme_schema()


@pytest.fixture
def make_schema(default_schema: dict[str, Any]):
    """Build a schema document from the default with nested overrides applied."""

    def _make(**editable_overrides: Any) -> dict[str, Any]:
        schema = copy.deepcopy(default_schema)
        for group, values in editable_overrides.items():
            target = schema["editable"].setdefault(group, {})
            _deep_update(target, values)
        return schema

    return _make


@pytest.fixture
def reset_logging():
    """Restore the package logger after a test configures it."""
    logger = logging.getLogger("tenant_theme")
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def _deep_update(target: dict[str, Any], values: dict[str, Any]) -> None:
    for key, value in values.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value
