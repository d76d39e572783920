"""
Intermediate representation for tenant theme schemas.
"""

from .resolved import DerivedValues, ResolvedTheme
from .schema import (
    SCHEMA_VERSION,
    BookingUITokens,
    ButtonColors,
    ButtonStyle,
    ButtonTokens,
    ColorTokens,
    Density,
    EditableTokens,
    FocusTokens,
    GhostButtonTokens,
    GlowIntensity,
    GlowSource,
    GlowSpread,
    GlowTokens,
    InputTokens,
    LockedTokens,
    NavActiveItemTokens,
    NavIndicator,
    NavItemTokens,
    NavTokens,
    PillTokens,
    RadiusTokens,
    SafetyFlags,
    ShadowLevel,
    ShadowTokens,
    StatusColors,
    StatusTokens,
    ThemeSchema,
    TypographyTokens,
    default_theme_schema,
)

__all__ = [
    "SCHEMA_VERSION",
    # Document
    "ThemeSchema",
    "EditableTokens",
    "LockedTokens",
    "SafetyFlags",
    "default_theme_schema",
    # Groups
    "BookingUITokens",
    "ButtonColors",
    "ButtonTokens",
    "ColorTokens",
    "FocusTokens",
    "GhostButtonTokens",
    "GlowTokens",
    "InputTokens",
    "NavActiveItemTokens",
    "NavItemTokens",
    "NavTokens",
    "PillTokens",
    "RadiusTokens",
    "ShadowTokens",
    "StatusColors",
    "StatusTokens",
    "TypographyTokens",
    # Enums
    "ButtonStyle",
    "Density",
    "GlowIntensity",
    "GlowSource",
    "GlowSpread",
    "NavIndicator",
    "ShadowLevel",
    # Output
    "DerivedValues",
    "ResolvedTheme",
]
