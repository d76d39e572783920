"""
Theme schema resolver.

Resolves a tenant theme schema (v1) into:
1. Derived values (tint/shade/mix/glow math)
2. A flat map of CSS variables the booking UI consumes

The candidate map is always passed through the sanitizer, so callers only
ever see allowlisted, validated entries. Resolution is pure: the same
schema always produces the same map.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .allowlist import BRAND_OVERRIDE_KEYS, THEME_TOKEN_KEYS
from .colors import format_number
from .derived import DEFAULT_PALETTE, compute_derived, group, palette_color
from .ir.resolved import DerivedValues, ResolvedTheme
from .ir.schema import ThemeSchema
from .references import MISSING, is_reference, lookup_path, resolve_refs
from .sanitizer import sanitize_css_vars

logger = logging.getLogger(__name__)

CONTEXT_GROUPS: tuple[str, ...] = ("colors", "buttons", "pills", "inputs", "nav", "status")

DISABLED_BUTTON_BG = "#9ca3af"

DENSITY_SCALES: dict[str, str] = {
    "compact": "0.9",
    "comfortable": "1",
    "spacious": "1.1",
}

SHADOW_LEVELS: dict[str, str] = {
    "soft": "0 10px 30px rgba(0, 0, 0, 0.18)",
    "strong": "0 18px 48px rgba(0, 0, 0, 0.35)",
}

_TRUE_STRINGS = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "n", "off"})


@dataclass(frozen=True)
class ColorField:
    """
    One color output: a CSS variable fed by a schema leaf.

    ``fallback`` is itself a token (literal or ``{path}``) resolved against
    the same context when the leaf is absent or still reference-shaped after
    its single hop.
    """

    var: str
    source: str
    fallback: str | None = None


COLOR_FIELDS: tuple[ColorField, ...] = (
    # Brand
    ColorField("--bf-brand-primary", "colors.primary", "{defaults.primary}"),
    ColorField("--bf-brand-primary-dark", "derived.primaryShade"),
    ColorField("--bf-brand-accent", "colors.accent", "{defaults.accent}"),
    ColorField("--bf-brand-accent-soft", "derived.accentSoft"),
    ColorField("--bf-link-color", "typography.link", "{colors.accent}"),
    # Page / card
    ColorField("--bf-page-bg", "colors.background"),
    ColorField("--bf-text-main", "colors.text"),
    ColorField("--bf-text-muted", "colors.mutedText"),
    ColorField("--bf-card-bg", "colors.surface", "{defaults.surface}"),
    ColorField("--bf-card-bg-raised", "derived.surfaceRaised"),
    ColorField("--bf-card-border", "colors.border", "{defaults.border}"),
    ColorField("--bf-card-border-subtle", "derived.borderSubtle"),
    # Pills
    ColorField("--bf-pill-bg", "pills.bg", "{derived.surfaceRaised}"),
    ColorField("--bf-pill-text", "pills.text", "{colors.text}"),
    ColorField("--bf-pill-border", "pills.border", "{colors.border}"),
    ColorField("--bf-pill-hover-bg", "pills.hoverBg", "{derived.surfaceRaised}"),
    ColorField("--bf-pill-selected-bg", "pills.activeBg", "{derived.primaryShade}"),
    ColorField("--bf-pill-selected-text", "pills.activeText", "{buttons.active.text}"),
    ColorField("--bf-pill-selected-border", "pills.activeBorder", "{derived.primaryTint}"),
    # Buttons
    ColorField("--bf-btn-bg", "buttons.primary.bg", "{defaults.primary}"),
    ColorField("--bf-btn-text", "buttons.primary.text"),
    ColorField("--bf-btn-bg-active", "buttons.active.bg", "{derived.primaryShade}"),
    ColorField("--bf-btn-text-active", "buttons.active.text", "{buttons.primary.text}"),
    ColorField("--bf-btn-bg-disabled", "buttons.disabled.bg", DISABLED_BUTTON_BG),
    ColorField("--bf-btn-text-disabled", "buttons.disabled.text", "{colors.mutedText}"),
    ColorField("--bf-btn-secondary-bg", "buttons.secondary.bg", "{derived.surfaceRaised}"),
    ColorField("--bf-btn-secondary-text", "buttons.secondary.text", "{colors.text}"),
    ColorField("--bf-btn-ghost-text", "buttons.ghost.text", "{colors.text}"),
    ColorField("--bf-btn-ghost-hover-bg", "buttons.ghost.hoverBg", "{derived.surfaceRaised}"),
    ColorField("--bf-focus-ring-color", "buttons.focus.ringColor", "{derived.primaryTint}"),
    # Navigation
    ColorField("--bf-nav-item-text", "nav.item.text", "{colors.text}"),
    ColorField("--bf-nav-item-hover-bg", "nav.item.hoverBg", "{derived.surfaceRaised}"),
    ColorField("--bf-nav-active-bg", "nav.activeItem.bg", "{derived.primaryShade}"),
    ColorField("--bf-nav-active-text", "nav.activeItem.text", "{buttons.active.text}"),
    # Inputs
    ColorField("--bf-input-bg", "inputs.bg"),
    ColorField("--bf-input-text", "inputs.text"),
    ColorField("--bf-input-border", "inputs.border", "{colors.border}"),
    ColorField("--bf-input-focus-border", "inputs.focusBorder", "{derived.primaryTint}"),
    ColorField("--bf-input-focus-bg", "inputs.focusBg"),
    # Status (text / soft bg / border); "error" is exposed as "danger"
    ColorField("--bf-success", "status.success.text", "{derived.successText}"),
    ColorField("--bf-success-bg", "status.success.bg", "{derived.successSoft}"),
    ColorField("--bf-success-border", "status.success.border", "{derived.successBorder}"),
    ColorField("--bf-warning", "status.warning.text", "{derived.warningText}"),
    ColorField("--bf-warning-bg", "status.warning.bg", "{derived.warningSoft}"),
    ColorField("--bf-warning-border", "status.warning.border", "{derived.warningBorder}"),
    ColorField("--bf-danger", "status.error.text", "{derived.errorText}"),
    ColorField("--bf-danger-bg", "status.error.bg", "{derived.errorSoft}"),
    ColorField("--bf-danger-border", "status.error.border", "{derived.errorBorder}"),
    ColorField("--bf-info", "status.info.text", "{derived.infoText}"),
    ColorField("--bf-info-bg", "status.info.bg", "{derived.infoSoft}"),
    ColorField("--bf-info-border", "status.info.border", "{derived.infoBorder}"),
)

TYPOGRAPHY_FIELDS: tuple[tuple[str, str], ...] = (
    ("--bf-font-family", "fontFamily"),
    ("--bf-font-weight-heading", "headingWeight"),
    ("--bf-font-weight-body", "bodyWeight"),
)

RADIUS_FIELDS: tuple[tuple[str, str], ...] = (
    ("--bf-card-radius", "card"),
    ("--bf-control-radius", "input"),
    ("--bf-btn-radius", "button"),
    ("--bf-pill-radius", "pill"),
)


# =============================================================================
# Coercion helpers
# =============================================================================


def to_css_string(value: Any) -> str:
    """Coerce a resolved leaf to its string form, JSON style."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value)
    return str(value)


def to_px(value: Any) -> str:
    """Render a pixel measure; bare numbers gain a ``px`` suffix."""
    if isinstance(value, int | float) and not isinstance(value, bool):
        return f"{format_number(value)}px"
    text = to_css_string(value).strip()
    try:
        float(text)
    except ValueError:
        return text
    return f"{text}px"


def to_flag(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    return default


# =============================================================================
# Context and field resolution
# =============================================================================


def editable_section(schema: Any) -> Mapping[str, Any]:
    """Extract ``editable`` from a model, a plain mapping or anything else."""
    if isinstance(schema, ThemeSchema):
        return schema.editable.model_dump(mode="json", by_alias=True, exclude_none=True)
    return group(schema, "editable")


def build_context(editable: Mapping[str, Any], derived: DerivedValues) -> dict[str, Any]:
    """Assemble the lookup root for ``{path}`` references."""
    ctx: dict[str, Any] = {name: group(editable, name) for name in CONTEXT_GROUPS}
    ctx["derived"] = derived.to_context()
    return ctx


def resolve_field(
    field: ColorField,
    editable: Mapping[str, Any],
    ctx: Mapping[str, Any],
) -> Any:
    """
    Resolve one output leaf.

    Sources are read from the editable document, or from the derived values
    for ``derived.*`` sources. The fallback token applies when the leaf is
    absent or its single hop still lands on a reference string.

    Returns:
        The resolved value, or ``MISSING`` when there is nothing to emit
    """
    root = {**editable, "derived": ctx["derived"]}
    value = lookup_path(root, field.source)
    if value is not MISSING and value is not None:
        resolved = resolve_refs(value, ctx)
        if field.fallback is None or not is_reference(resolved):
            return resolved
    elif field.fallback is None:
        return MISSING

    colors = group(editable, "colors")
    defaults = {name: palette_color(colors, name) for name in DEFAULT_PALETTE}
    return resolve_refs(field.fallback, {**ctx, "defaults": defaults})


def build_candidates(editable: Mapping[str, Any], derived: DerivedValues) -> dict[str, str]:
    """Build the unsanitized CSS variable map."""
    ctx = build_context(editable, derived)
    candidates: dict[str, str] = {}

    for field in COLOR_FIELDS:
        value = resolve_field(field, editable, ctx)
        if value is not MISSING:
            candidates[field.var] = to_css_string(value)

    typography = group(editable, "typography")
    for var, key in TYPOGRAPHY_FIELDS:
        if typography.get(key) is not None:
            candidates[var] = to_css_string(resolve_refs(typography[key], ctx))

    radius = group(editable, "radius")
    for var, key in RADIUS_FIELDS:
        if radius.get(key) is not None:
            candidates[var] = to_px(resolve_refs(radius[key], ctx))

    buttons = group(editable, "buttons")
    focus = group(buttons, "focus")
    if focus.get("ringWidth") is not None:
        candidates["--bf-focus-ring-width"] = to_px(resolve_refs(focus["ringWidth"], ctx))

    glow_enabled = to_flag(group(buttons, "glow").get("enabled"), default=True)
    glow_css = derived.glow_shadow if glow_enabled else "none"
    candidates["--bf-glow-enabled"] = "1" if glow_enabled else "0"
    candidates["--bf-btn-glow-shadow"] = glow_css
    candidates["--bf-pill-selected-shadow"] = glow_css

    level = str(group(editable, "shadow").get("level") or "soft").lower()
    if level in SHADOW_LEVELS:
        candidates["--bf-shadow"] = SHADOW_LEVELS[level]

    density = str(group(editable, "bookingUI").get("density") or "comfortable").lower()
    if density in DENSITY_SCALES:
        candidates["--bf-density-scale"] = DENSITY_SCALES[density]

    return candidates


# =============================================================================
# Public API
# =============================================================================


def resolve_theme_schema(
    schema: Any,
    allowlists: Iterable[Iterable[str]] | None = None,
) -> ResolvedTheme:
    """
    Resolve a theme schema into derived values and safe CSS variables.

    Args:
        schema: ThemeSchema model, JSON-compatible mapping, or None
        allowlists: Name sets for the sanitizer (default: theme tokens and
            brand overrides)

    Returns:
        ResolvedTheme with the sanitized ``css_vars`` map
    """
    editable = editable_section(schema)
    derived = compute_derived(editable)
    candidates = build_candidates(editable, derived)

    if allowlists is None:
        allowlists = (THEME_TOKEN_KEYS, BRAND_OVERRIDE_KEYS)
    css_vars = sanitize_css_vars(candidates, *allowlists)

    logger.debug(
        "Resolved theme schema: %d candidates, %d accepted", len(candidates), len(css_vars)
    )
    return ResolvedTheme(derived=derived, css_vars=css_vars)


def schema_to_css_vars(schema: Any) -> dict[str, Any]:
    """Resolve and return the plain ``{"derived", "cssVars"}`` document."""
    return resolve_theme_schema(schema).to_dict()
