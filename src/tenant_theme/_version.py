"""Package version, from a source checkout or the installed distribution."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DIST_NAME = "tenant-theme"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version(pyproject: Path) -> str | None:
    """[project].version of a pyproject.toml that belongs to this distribution."""
    try:
        with open(pyproject, "rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return None
    if project.get("name") != DIST_NAME:
        return None
    value = project.get("version")
    return value if isinstance(value, str) else None


def get_version(pyproject: Path = _PYPROJECT) -> str:
    found = _checkout_version(pyproject)
    if found is not None:
        return found
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()
