"""
Configuration for tenant theme tooling.

Parses the [theme] section from tenant_theme.toml:

    [theme]
    allowlists = ["theme_tokens", "brand_overrides"]
    log_level = "WARNING"
    selector = ":root"

A missing file or section yields the defaults.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .allowlist import ALLOWLISTS, AllowlistName
from .errors import ThemeConfigError

CONFIG_FILE = "tenant_theme.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ThemeConfig(BaseModel):
    """Typed view of the [theme] section."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    allowlists: tuple[AllowlistName, ...] = Field(
        default=(AllowlistName.THEME_TOKENS, AllowlistName.BRAND_OVERRIDES),
        description="Allowlists applied to resolver output",
    )
    log_level: str = Field(default="WARNING", description="Logging level name")
    selector: str = Field(default=":root", description="Selector for stylesheet output")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("allowlists")
    @classmethod
    def _check_allowlists(cls, value: tuple[AllowlistName, ...]) -> tuple[AllowlistName, ...]:
        if not value:
            raise ValueError("at least one allowlist is required")
        return value

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def allowlist_sets(self) -> tuple[frozenset[str], ...]:
        """The selected allowlists, ready to hand to the resolver."""
        return tuple(ALLOWLISTS[name] for name in self.allowlists)


def get_config_path(project_root: Path) -> Path:
    return project_root / CONFIG_FILE


def load_theme_config(toml_path: Path) -> ThemeConfig:
    """
    Load configuration from a TOML file.

    Args:
        toml_path: Path to tenant_theme.toml

    Returns:
        ThemeConfig with parsed values or defaults

    Raises:
        ThemeConfigError: If the file is not valid TOML or the section is invalid
    """
    if not toml_path.exists():
        return ThemeConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ThemeConfigError(f"Invalid TOML: {e}", path=toml_path) from e

    theme_data: Any = data.get("theme", {})
    if not theme_data:
        return ThemeConfig()
    if not isinstance(theme_data, dict):
        raise ThemeConfigError("[theme] must be a table", path=toml_path)

    try:
        return ThemeConfig(**theme_data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ThemeConfigError(f"Invalid [theme] section: {problems}", path=toml_path) from e
