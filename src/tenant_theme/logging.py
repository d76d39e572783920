"""
Logging setup for tenant-theme tooling.

Library modules only call ``logging.getLogger(__name__)``; nothing is
configured on import. Tools (the CLI, a host service) call
:func:`setup_logging` once to attach either:
- a human-readable console formatter, or
- a JSONL formatter (one JSON object per line) for log collectors
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

ROOT_LOGGER = "tenant_theme"

_NO_COLOR = bool(os.environ.get("NO_COLOR")) or not sys.stderr.isatty()


class Colors:
    """ANSI color codes for terminal output (empty when NO_COLOR is set)."""

    RESET = "" if _NO_COLOR else "\033[0m"
    DIM = "" if _NO_COLOR else "\033[2m"

    DEBUG = "" if _NO_COLOR else "\033[36m"  # Cyan
    INFO = "" if _NO_COLOR else "\033[32m"  # Green
    WARNING = "" if _NO_COLOR else "\033[33m"  # Yellow
    ERROR = "" if _NO_COLOR else "\033[31m"  # Red
    CRITICAL = "" if _NO_COLOR else "\033[35m"  # Magenta


class JSONLFormatter(logging.Formatter):
    """
    Formats log records as JSON Lines.

    Each entry carries timestamp, level, component (the logger name below
    ``tenant_theme``), message, and an optional ``context`` dict passed via
    ``extra={"context": {...}}``.

    Example output:
    {"timestamp":"2026-01-15T10:30:45.123000Z","level":"DEBUG","component":"sanitizer","message":"Dropped '--x': not allowlisted"}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "component": _component(record.name),
            "message": record.getMessage(),
        }

        context = getattr(record, "context", None)
        if context:
            entry["context"] = context

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
            }

        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DEBUG,
        logging.INFO: Colors.INFO,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.ERROR,
        logging.CRITICAL: Colors.CRITICAL,
    }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        component = _component(record.name)
        level_color = self.LEVEL_COLORS.get(record.levelno, "")
        return (
            f"{Colors.DIM}{timestamp}{Colors.RESET} [{component}] "
            f"{level_color}{record.levelname}{Colors.RESET}: {record.getMessage()}"
        )


def setup_logging(
    level: int | str = logging.WARNING,
    json_output: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Attach a single handler to the ``tenant_theme`` logger.

    Calling it again replaces the previous handler.

    Args:
        level: Minimum log level (number or name)
        json_output: Emit JSONL instead of console lines
        stream: Output stream (default: stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONLFormatter() if json_output else ConsoleFormatter())
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def _component(name: str) -> str:
    prefix = f"{ROOT_LOGGER}."
    return name[len(prefix):] if name.startswith(prefix) else name
