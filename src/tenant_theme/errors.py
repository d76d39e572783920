"""
Error types for loading theme documents and configuration.

Resolution and sanitization never raise; these cover the edges where files
are read and validated.
"""

from __future__ import annotations

from pathlib import Path


class ThemeError(Exception):
    """Base exception for all tenant-theme errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class ThemeSchemaError(ThemeError):
    """
    Raised when a schema or overrides document cannot be used.

    Examples:
    - File is not valid JSON
    - Top-level value is not an object
    - Document fails ThemeSchema validation
    """

    pass


class ThemeConfigError(ThemeError):
    """Raised when tenant_theme.toml is unreadable or invalid."""

    pass
