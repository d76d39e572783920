"""
Symbolic ``{path}`` references inside theme schema leaves.

A leaf whose whole (trimmed) text is ``{a.b.c}`` points at another value in
the resolution context. Leaves are parsed into an explicit tagged value,
either a :class:`LiteralValue` or a :class:`Reference`, and resolved exactly
one hop: a hit that is itself a reference string comes back verbatim.

Usage:
    ctx = {"colors": {"primary": "#2563eb"}}
    resolve_refs("{colors.primary}", ctx)   # "#2563eb"
    resolve_refs("{missing.path}", ctx)     # "{missing.path}"
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_REFERENCE_RE = re.compile(r"^\{([a-zA-Z0-9_.]+)\}$")


class _Missing:
    """Sentinel for a path that does not exist in the context."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class LiteralValue:
    """A leaf used as-is."""

    value: Any


@dataclass(frozen=True)
class Reference:
    """A leaf pointing at ``path`` inside the resolution context."""

    path: str
    raw: str

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(part for part in self.path.split(".") if part)


TokenValue = LiteralValue | Reference


def parse_token(value: Any) -> TokenValue:
    """Classify a schema leaf as a literal or a reference.

    Only strings whose entire trimmed text matches ``{path}`` are
    references; braces anywhere else leave the value literal.
    """
    if not isinstance(value, str):
        return LiteralValue(value)
    match = _REFERENCE_RE.match(value.strip())
    if match is None:
        return LiteralValue(value)
    return Reference(path=match.group(1), raw=value)


def is_reference(value: Any) -> bool:
    return isinstance(parse_token(value), Reference)


def lookup_path(root: Any, path: str | tuple[str, ...]) -> Any:
    """Descend through nested mappings along a dotted path.

    Returns:
        The value found, or ``MISSING`` if a segment is absent or a
        non-mapping node is reached before the path ends.
    """
    segments = path if isinstance(path, tuple) else tuple(p for p in path.split(".") if p)
    if not segments:
        return MISSING
    current = root
    for segment in segments:
        if not isinstance(current, Mapping) or segment not in current:
            return MISSING
        current = current[segment]
    return current


def resolve_token(token: TokenValue, ctx: Mapping[str, Any]) -> Any:
    if isinstance(token, LiteralValue):
        return token.value
    found = lookup_path(ctx, token.segments)
    if found is MISSING:
        return token.raw
    return found


def resolve_refs(value: Any, ctx: Mapping[str, Any]) -> Any:
    """Resolve a single leaf against the context (one hop, never recursive)."""
    return resolve_token(parse_token(value), ctx)
