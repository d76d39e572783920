"""
Derived theme values (tint/shade/mix/glow math).

Status families use fixed hues rather than the tenant palette so that
success/warning/error/info read the same across every tenant.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .colors import WHITE, glow_alpha, glow_shadow, mix, rgba, shade, tint
from .ir.resolved import DerivedValues

# Built-in palette used when the schema leaves a color out
DEFAULT_PALETTE: dict[str, str] = {
    "primary": "#2563eb",
    "accent": "#22c55e",
    "surface": "#0f172a",
    "border": "#1f2937",
}

STATUS_HUES: dict[str, str] = {
    "success": "#22c55e",
    "warning": "#f59e0b",
    "error": "#ef4444",
    "info": "#3b82f6",
}

STATUS_SOFT_TINT = 0.85
STATUS_TEXT_SHADE = 0.35
STATUS_BORDER_TINT = 0.65


def group(source: Any, name: str) -> Mapping[str, Any]:
    """Fetch a nested mapping, treating anything else as empty."""
    if not isinstance(source, Mapping):
        return {}
    value = source.get(name)
    return value if isinstance(value, Mapping) else {}


def palette_color(colors: Mapping[str, Any], name: str) -> Any:
    return colors.get(name) or DEFAULT_PALETTE[name]


def compute_derived(editable: Any) -> DerivedValues:
    """
    Compute derived values from ``editable.colors`` and ``editable.buttons``.

    Args:
        editable: The schema's editable section (any shape is tolerated)

    Returns:
        DerivedValues with every field populated
    """
    colors = group(editable, "colors")
    glow = group(group(editable, "buttons"), "glow")

    primary = palette_color(colors, "primary")
    accent = palette_color(colors, "accent")
    surface = palette_color(colors, "surface")
    border = palette_color(colors, "border")

    glow_source = accent if glow.get("source") == "accent" else primary
    glow_color = rgba(glow_source, glow_alpha(glow.get("intensity")))

    status: dict[str, str] = {}
    for name, hue in STATUS_HUES.items():
        status[f"{name}_soft"] = tint(hue, STATUS_SOFT_TINT)
        status[f"{name}_text"] = shade(hue, STATUS_TEXT_SHADE)
        status[f"{name}_border"] = tint(hue, STATUS_BORDER_TINT)

    return DerivedValues(
        primary_tint=str(tint(primary, 0.35)),
        primary_shade=str(shade(primary, 0.18)),
        accent_soft=str(tint(accent, 0.55)),
        surface_raised=str(mix(surface, WHITE, 0.06)),
        border_subtle=str(mix(border, surface, 0.35)),
        glow_color=glow_color,
        glow_shadow=glow_shadow(glow_color, glow.get("spread")),
        **status,
    )
