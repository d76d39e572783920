"""
Stylesheet output for sanitized CSS variable maps.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from .allowlist import BRAND_OVERRIDE_KEYS, THEME_TOKEN_KEYS
from .sanitizer import sanitize_css_vars

_SELECTOR_RE = re.compile(r"^[a-zA-Z0-9_:.#\[\]=\"' -]+$")


def css_vars_to_stylesheet(css_vars: Mapping[str, str], selector: str = ":root") -> str:
    """
    Render a CSS variable map as a single rule block.

    The map is sanitized again on the way out, so passing an unsanitized
    mapping here cannot produce an unsafe stylesheet.

    Args:
        css_vars: CSS variable name -> value
        selector: Selector for the rule (e.g. ``:root``, ``[data-tenant="x"]``)

    Returns:
        CSS text with one declaration per line, sorted by name

    Raises:
        ValueError: If the selector contains characters that could break out
            of the rule
    """
    if not _SELECTOR_RE.match(selector):
        raise ValueError(f"Unsafe selector: {selector!r}")

    safe = sanitize_css_vars(css_vars, THEME_TOKEN_KEYS, BRAND_OVERRIDE_KEYS)
    lines = [f"{selector} {{"]
    for key, value in sorted(safe.items()):
        lines.append(f"  {key}: {value};")
    lines.append("}")
    return "\n".join(lines)
