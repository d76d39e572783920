"""
Tenant CSS variable layering.

Builds the final variable map for a tenant by merging:
1. Platform theme tokens (from the published platform theme)
2. The tenant's resolved theme schema
3. Tenant brand overrides (highest precedence)

Each layer is sanitized against its own allowlist before merging, so a
layer can never smuggle a key the other layers are not allowed to set.
"""

from __future__ import annotations

from typing import Any

from .resolver import resolve_theme_schema
from .sanitizer import sanitize_brand_overrides, sanitize_theme_tokens


def build_tenant_css_vars(
    schema: Any,
    theme_tokens: Any = None,
    brand_overrides: Any = None,
) -> dict[str, str]:
    """
    Merge platform tokens, the resolved schema and brand overrides.

    Precedence: brand overrides > schema > platform theme tokens

    Args:
        schema: Tenant theme schema (model, mapping or None)
        theme_tokens: Platform theme ``tokens_json`` mapping
        brand_overrides: Tenant ``brand_overrides_json`` mapping

    Returns:
        Sanitized CSS variable map
    """
    merged: dict[str, str] = {}
    merged.update(sanitize_theme_tokens(theme_tokens))
    merged.update(resolve_theme_schema(schema).css_vars)
    merged.update(sanitize_brand_overrides(brand_overrides))
    return merged
