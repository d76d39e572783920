"""
Sanitization of CSS variable maps against the allowlists.

Tenant-controlled values end up inside a live stylesheet, so every entry is
checked twice: the key must be allowlisted, and the value must satisfy the
rule for the key's category. Anything else is dropped without raising;
absence of a key is the only signal callers get.

Categories are decided by an ordered table of ``(predicate, validator)``
rules on the key name. The first matching rule wins, so narrower rules sit
above broader ones (``--bf-card-radius`` contains neither ``bg`` nor
``text`` but ``--bf-popover-border`` does; a ``*-radius`` key that also
says ``border`` must still be a pixel length).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .allowlist import BRAND_OVERRIDE_KEYS, THEME_TOKEN_KEYS

logger = logging.getLogger(__name__)

_PX_RE = re.compile(r"^[0-9]+(\.[0-9]+)?px$")
_COLOR_RE = re.compile(r"^(#([0-9a-fA-F]{3}){1,2}|rgba?\(\s*[0-9.%\s,/]+\))$")
_DECIMAL_RE = re.compile(r"^[0-9]+(\.[0-9]+)?$")
_WEIGHT_RE = re.compile(r"^[0-9]{3}$")

# Characters that could close a declaration, open a block, break out of a
# <style> element or smuggle any of those through a CSS escape.
_UNSAFE_OPAQUE_RE = re.compile(r"[;{}<>\\]")

SCALE_MIN = 0.8
SCALE_MAX = 1.2
WEIGHT_MIN = 100
WEIGHT_MAX = 900

FONT_FAMILY_KEY = "--bf-font-family"
FEATURE_FLAG_KEYS = frozenset({"--bf-glow-enabled"})
NAMED_SHADOW_KEYS = frozenset({"--bf-shadow", "--bf-glass"})
NAMED_WEIGHT_KEYS = frozenset(
    {
        "--bf-font-weight-heading",
        "--bf-font-weight-body",
        "--bf-details-label-weight",
        "--bf-details-value-weight",
    }
)
NAMED_COLOR_KEYS = frozenset(
    {
        "--bf-danger",
        "--bf-success",
        "--bf-warning",
        "--bf-info",
        # back-compat aliases
        "--bf-muted",
        "--bf-surface",
    }
)

_PX_SUBSTRINGS = (
    "radius",
    "pad",
    "gap",
    "height",
    "width",
    "max-w",
    "max-h",
    "blur",
    "offset",
    "mt",
    "mb",
)
_PX_SUFFIXES = (
    "-fs",
    "-px",
    "-py",
    "-pr",
    "-pl",
    "-h",
    "-size",
    "-font",
    "-avatar",
    "-box",
)
_COLOR_SUBSTRINGS = ("bg", "border", "brand", "text")


# =============================================================================
# Value validators
# =============================================================================


def is_px(value: str) -> bool:
    return bool(_PX_RE.match(value))


def is_color(value: str) -> bool:
    return bool(_COLOR_RE.match(value))


def is_scale(value: str) -> bool:
    if not _DECIMAL_RE.match(value):
        return False
    return SCALE_MIN <= float(value) <= SCALE_MAX


def is_font_weight(value: str) -> bool:
    if not _WEIGHT_RE.match(value):
        return False
    return WEIGHT_MIN <= int(value) <= WEIGHT_MAX


def is_flag(value: str) -> bool:
    return value in ("0", "1")


def opaque(max_length: int) -> Callable[[str], bool]:
    """Build a validator for free-form strings (fonts, shadows, filters)."""

    def validate(value: str) -> bool:
        return len(value) <= max_length and not _UNSAFE_OPAQUE_RE.search(value)

    return validate


# =============================================================================
# Category table
# =============================================================================


@dataclass(frozen=True)
class CategoryRule:
    """One row of the classification table."""

    name: str
    matches: Callable[[str], bool]
    validate: Callable[[str], bool]


def _contains_any(*parts: str) -> Callable[[str], bool]:
    return lambda key: any(part in key for part in parts)


def _ends_with_any(*suffixes: str) -> Callable[[str], bool]:
    return lambda key: key.endswith(suffixes)


def _is_px_key(key: str) -> bool:
    return any(part in key for part in _PX_SUBSTRINGS) or key.endswith(_PX_SUFFIXES)


def _is_color_key(key: str) -> bool:
    return (
        key in NAMED_COLOR_KEYS
        or key.endswith("-color")
        or any(part in key for part in _COLOR_SUBSTRINGS)
    )


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("font-family", lambda key: key == FONT_FAMILY_KEY, opaque(80)),
    CategoryRule("named-shadow", lambda key: key in NAMED_SHADOW_KEYS, opaque(200)),
    CategoryRule("flag", lambda key: key in FEATURE_FLAG_KEYS, is_flag),
    CategoryRule(
        "font-weight",
        lambda key: key in NAMED_WEIGHT_KEYS or key.endswith("-weight"),
        is_font_weight,
    ),
    CategoryRule("px", _is_px_key, is_px),
    CategoryRule("color", _is_color_key, is_color),
    CategoryRule("scale", _ends_with_any("-scale"), is_scale),
    CategoryRule("filter", _ends_with_any("-filter"), opaque(80)),
    CategoryRule("shadow", _ends_with_any("-shadow"), opaque(200)),
)


def classify_key(key: str) -> CategoryRule | None:
    """Return the first rule whose predicate matches ``key``."""
    for rule in CATEGORY_RULES:
        if rule.matches(key):
            return rule
    return None


def is_safe_value(key: str, value: Any) -> bool:
    """Check a single value against its key's category rule."""
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not text:
        return False
    rule = classify_key(key)
    if rule is None:
        return False
    return rule.validate(text)


# =============================================================================
# Public API
# =============================================================================


def sanitize_css_vars(
    values: Any,
    *allowlists: Iterable[str],
) -> dict[str, str]:
    """
    Filter a candidate map down to allowlisted, validated entries.

    Args:
        values: Candidate mapping of CSS variable name -> value
        allowlists: One or more name sets; a key must appear in at least one

    Returns:
        New dict with trimmed values, in input order
    """
    out: dict[str, str] = {}
    if not isinstance(values, Mapping):
        return out

    allowed: set[str] = set()
    for names in allowlists:
        allowed.update(names)

    for key, value in values.items():
        if key not in allowed:
            logger.debug("Dropped %r: not allowlisted", key)
            continue
        if not is_safe_value(key, value):
            logger.debug("Dropped %r: value rejected (%r)", key, value)
            continue
        out[key] = value.strip()
    return out


def sanitize_theme_tokens(values: Any) -> dict[str, str]:
    return sanitize_css_vars(values, THEME_TOKEN_KEYS)


def sanitize_brand_overrides(values: Any) -> dict[str, str]:
    return sanitize_css_vars(values, BRAND_OVERRIDE_KEYS)
