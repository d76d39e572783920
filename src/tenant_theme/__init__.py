"""
Tenant theme resolution.

Turns a tenant-editable theme schema into derived colors and a sanitized
map of CSS custom properties that is safe to write into a live stylesheet.

Usage:
    from tenant_theme import default_theme_schema, resolve_theme_schema

    resolved = resolve_theme_schema(default_theme_schema())
    resolved.css_vars["--bf-brand-primary"]   # "#2563eb"
    resolved.derived.glow_color               # "rgba(37, 99, 235, 0.3)"

    # Layer platform tokens and tenant overrides on top
    css_vars = build_tenant_css_vars(schema, theme_tokens, brand_overrides)
"""

from ._version import __version__
from .allowlist import (
    ALLOWLISTS,
    BRAND_OVERRIDE_KEYS,
    THEME_TOKEN_KEYS,
    AllowlistName,
    get_allowlist,
    list_allowlists,
)
from .colors import glow_alpha, glow_shadow, hex_to_rgb, mix, rgb_to_hex, rgba, shade, tint
from .css import css_vars_to_stylesheet
from .derived import compute_derived
from .errors import ThemeConfigError, ThemeError, ThemeSchemaError
from .ir import DerivedValues, ResolvedTheme, ThemeSchema, default_theme_schema
from .layering import build_tenant_css_vars
from .references import LiteralValue, Reference, parse_token, resolve_refs
from .resolver import resolve_theme_schema, schema_to_css_vars
from .sanitizer import (
    classify_key,
    is_safe_value,
    sanitize_brand_overrides,
    sanitize_css_vars,
    sanitize_theme_tokens,
)

__all__ = [
    "__version__",
    # Schema
    "ThemeSchema",
    "default_theme_schema",
    # Resolution
    "DerivedValues",
    "ResolvedTheme",
    "compute_derived",
    "resolve_theme_schema",
    "schema_to_css_vars",
    "build_tenant_css_vars",
    # References
    "LiteralValue",
    "Reference",
    "parse_token",
    "resolve_refs",
    # Color math
    "glow_alpha",
    "glow_shadow",
    "hex_to_rgb",
    "mix",
    "rgb_to_hex",
    "rgba",
    "shade",
    "tint",
    # Sanitization
    "ALLOWLISTS",
    "AllowlistName",
    "BRAND_OVERRIDE_KEYS",
    "THEME_TOKEN_KEYS",
    "classify_key",
    "get_allowlist",
    "is_safe_value",
    "list_allowlists",
    "sanitize_brand_overrides",
    "sanitize_css_vars",
    "sanitize_theme_tokens",
    # Output
    "css_vars_to_stylesheet",
    # Errors
    "ThemeConfigError",
    "ThemeError",
    "ThemeSchemaError",
]
