"""
Theme schema IR types.

Describes the tenant-editable theme schema document (version 1). The
document is JSON with camelCase keys; the models expose snake_case fields
with camelCase aliases so ``model_dump(by_alias=True)`` round-trips the
stored form.

Any leaf may hold a literal or a ``{path}`` reference string, so leaves are
typed loosely. Unknown fields are ignored for forward compatibility.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SCHEMA_VERSION = 1

Leaf = str | int | float | bool | None


class _SchemaModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Enums
# =============================================================================


class GlowSource(StrEnum):
    """Which brand color feeds the glow."""

    PRIMARY = "primary"
    ACCENT = "accent"


class GlowIntensity(StrEnum):
    SOFT = "soft"
    MEDIUM = "medium"
    STRONG = "strong"


class GlowSpread(StrEnum):
    TIGHT = "tight"
    MEDIUM = "medium"
    WIDE = "wide"


class ShadowLevel(StrEnum):
    SOFT = "soft"
    STRONG = "strong"


class ButtonStyle(StrEnum):
    SOLID = "solid"
    OUTLINE = "outline"


class NavIndicator(StrEnum):
    NONE = "none"
    BAR = "bar"
    DOT = "dot"


class Density(StrEnum):
    COMPACT = "compact"
    COMFORTABLE = "comfortable"
    SPACIOUS = "spacious"


# =============================================================================
# Colors and typography
# =============================================================================


class ColorTokens(_SchemaModel):
    """Brand palette. Each value is a hex color or a reference."""

    primary: str = "#2563eb"
    accent: str = "#22c55e"
    background: str = "#0b1220"
    surface: str = "#0f172a"
    text: str = "#f8fafc"
    muted_text: str = "#94a3b8"
    border: str = "#1f2937"


class TypographyTokens(_SchemaModel):
    font_family: str = "system"
    heading_weight: int | str = 700
    body_weight: int | str = 400
    link: str = "{colors.accent}"


class RadiusTokens(_SchemaModel):
    """Corner radii in pixels."""

    card: int | float | str = 16
    input: int | float | str = 12
    button: int | float | str = 14
    pill: int | float | str = 999


class ShadowTokens(_SchemaModel):
    level: ShadowLevel = ShadowLevel.SOFT


# =============================================================================
# Buttons
# =============================================================================


class ButtonColors(_SchemaModel):
    bg: Leaf = None
    text: Leaf = None


class GhostButtonTokens(_SchemaModel):
    text: Leaf = "{colors.text}"
    hover_bg: Leaf = "{derived.surfaceRaised}"


class FocusTokens(_SchemaModel):
    ring_width: int | float | str = 2
    ring_color: Leaf = "{derived.primaryTint}"


class GlowTokens(_SchemaModel):
    enabled: bool = True
    source: GlowSource = GlowSource.PRIMARY
    intensity: GlowIntensity = GlowIntensity.MEDIUM
    spread: GlowSpread = GlowSpread.MEDIUM


class ButtonTokens(_SchemaModel):
    style: ButtonStyle = ButtonStyle.SOLID
    primary: ButtonColors = Field(
        default_factory=lambda: ButtonColors(bg="{colors.primary}", text="#ffffff")
    )
    secondary: ButtonColors = Field(
        default_factory=lambda: ButtonColors(bg="{derived.surfaceRaised}", text="{colors.text}")
    )
    ghost: GhostButtonTokens = Field(default_factory=GhostButtonTokens)
    active: ButtonColors = Field(
        default_factory=lambda: ButtonColors(bg="{derived.primaryShade}", text="#ffffff")
    )
    disabled: ButtonColors | None = Field(
        default=None, description="Disabled state; falls back to gray / muted text"
    )
    focus: FocusTokens = Field(default_factory=FocusTokens)
    glow: GlowTokens = Field(default_factory=GlowTokens)


# =============================================================================
# Navigation, pills, inputs, status
# =============================================================================


class NavItemTokens(_SchemaModel):
    text: Leaf = "{colors.text}"
    hover_bg: Leaf = "{derived.surfaceRaised}"


class NavActiveItemTokens(_SchemaModel):
    bg: Leaf = "{buttons.active.bg}"
    text: Leaf = "{buttons.active.text}"
    indicator: NavIndicator = NavIndicator.NONE


class NavTokens(_SchemaModel):
    item: NavItemTokens = Field(default_factory=NavItemTokens)
    active_item: NavActiveItemTokens = Field(default_factory=NavActiveItemTokens)


class PillTokens(_SchemaModel):
    bg: Leaf = "{derived.surfaceRaised}"
    text: Leaf = "{colors.text}"
    hover_bg: Leaf = "{derived.surfaceRaised}"
    active_bg: Leaf = "{buttons.active.bg}"
    active_text: Leaf = "{buttons.active.text}"
    active_border: Leaf = None
    border: Leaf = "{colors.border}"


class InputTokens(_SchemaModel):
    bg: Leaf = "#ffffff"
    text: Leaf = "#0b1220"
    border: Leaf = "{colors.border}"
    focus_border: Leaf = "{derived.primaryTint}"
    focus_bg: Leaf = "#ffffff"


class StatusColors(_SchemaModel):
    bg: Leaf = None
    text: Leaf = None
    border: Leaf = None


def _status_default(name: str) -> StatusColors:
    return StatusColors(
        bg=f"{{derived.{name}Soft}}",
        text=f"{{derived.{name}Text}}",
        border=f"{{derived.{name}Border}}",
    )


class StatusTokens(_SchemaModel):
    success: StatusColors = Field(default_factory=lambda: _status_default("success"))
    warning: StatusColors = Field(default_factory=lambda: _status_default("warning"))
    error: StatusColors = Field(default_factory=lambda: _status_default("error"))
    info: StatusColors = Field(default_factory=lambda: _status_default("info"))


class BookingUITokens(_SchemaModel):
    density: Density = Density.COMFORTABLE
    show_service_details_under_dropdown: bool = True
    use_logo_as_favicon: bool = True
    hero_mode: str = "tabBanners"


# =============================================================================
# Document
# =============================================================================


class EditableTokens(_SchemaModel):
    colors: ColorTokens = Field(default_factory=ColorTokens)
    typography: TypographyTokens = Field(default_factory=TypographyTokens)
    radius: RadiusTokens = Field(default_factory=RadiusTokens)
    shadow: ShadowTokens = Field(default_factory=ShadowTokens)
    buttons: ButtonTokens = Field(default_factory=ButtonTokens)
    nav: NavTokens = Field(default_factory=NavTokens)
    pills: PillTokens = Field(default_factory=PillTokens)
    inputs: InputTokens = Field(default_factory=InputTokens)
    status: StatusTokens = Field(default_factory=StatusTokens)
    booking_ui: BookingUITokens = Field(default_factory=BookingUITokens, alias="bookingUI")


class SafetyFlags(_SchemaModel):
    """Carried with the schema but not enforced by the resolver."""

    min_contrast_aa: bool = Field(default=False, alias="minContrastAA")


class LockedTokens(_SchemaModel):
    safety: SafetyFlags = Field(default_factory=SafetyFlags)


class ThemeSchema(_SchemaModel):
    """
    Versioned tenant theme schema.

    Example:
        schema = ThemeSchema()
        schema.editable.colors.primary   # "#2563eb"
        schema.to_document()["editable"]["bookingUI"]["density"]  # "comfortable"
    """

    version: int = SCHEMA_VERSION
    editable: EditableTokens = Field(default_factory=EditableTokens)
    locked: LockedTokens = Field(default_factory=LockedTokens)

    def to_document(self) -> dict[str, Any]:
        """Dump to the stored JSON form (camelCase keys, no empty slots)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def default_theme_schema() -> dict[str, Any]:
    """Return a fresh copy of the default version-1 schema document."""
    return ThemeSchema().to_document()
