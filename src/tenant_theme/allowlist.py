"""
Canonical allowlists for tenant CSS variable output.

Two fixed name sets decide which custom properties may ever leave the
library. Theme tokens cover structure (radii, spacing, fonts, shadows);
brand overrides cover brand colour identity and semantic colours.

Keep these in sync with the custom properties the booking UI reads.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType


class AllowlistName(StrEnum):
    """Names of the built-in allowlists."""

    THEME_TOKENS = "theme_tokens"
    BRAND_OVERRIDES = "brand_overrides"


# Layout / spacing tokens (cards, controls, pills)
THEME_TOKEN_KEYS: frozenset[str] = frozenset(
    {
        "--bf-card-radius",
        "--bf-control-radius",
        "--bf-pill-radius",
        "--bf-btn-radius",
        "--bf-card-pad",
        "--bf-card-mt",
        "--bf-card-mb",
        "--bf-field-gap",
        "--bf-label-gap",
        "--bf-label-font",
        "--bf-control-font",
        "--bf-control-height",
        "--bf-control-pad-x",
        "--bf-focus-ring-width",
        "--bf-density-scale",
        "--bf-glow-enabled",
        # layout + navigation
        "--bf-page-bg",
        "--bf-page-pad-top",
        "--bf-page-pad-x",
        "--bf-page-pad-bottom",
        "--bf-page-max-w",
        "--bf-page-content-mt",
        "--bf-page-hero-pad-top",
        "--bf-page-content-pad-top",
        "--bf-bottomnav-pad-top",
        "--bf-bottomnav-pad-bottom",
        "--bf-bottomnav-bg",
        "--bf-bottomnav-blur",
        "--bf-bottomnav-max-w",
        "--bf-bottomnav-item-pad",
        "--bf-bottomnav-item-gap",
        "--bf-bottomnav-font",
        "--bf-bottomnav-icon-box",
        "--bf-bottomnav-icon-size",
        "--bf-bottomnav-emoji-font",
        # hero
        "--bf-hero-mb",
        "--bf-hero-radius",
        "--bf-hero-shadow",
        "--bf-hero-media-h",
        "--bf-hero-media-filter",
        "--bf-hero-pad",
        "--bf-hero-gap",
        "--bf-hero-label-fs",
        "--bf-hero-label-mb",
        "--bf-hero-title-fs",
        "--bf-hero-title-weight",
        "--bf-hero-member-fs",
        "--bf-hero-member-mt",
        "--bf-hero-avatar-size",
        "--bf-hero-avatar-fs",
        "--bf-hero-logo-size",
        "--bf-hero-subtext",
        "--bf-hero-right-gap",
        # selects / popovers
        "--bf-select-gap",
        "--bf-select-avatar",
        "--bf-select-avatar-fs",
        "--bf-popover-offset",
        "--bf-popover-bg",
        "--bf-popover-border",
        "--bf-popover-radius",
        "--bf-popover-shadow",
        "--bf-popover-blur",
        "--bf-popover-item-pad",
        "--bf-popover-max-h",
        # misc
        "--bf-signin-btn-pad",
        "--bf-signin-btn-fs",
        "--bf-avatar-btn-size",
        "--bf-avatar-btn-fs",
        "--bf-avatar-btn-weight",
        "--bf-avatar-btn-shadow",
        "--bf-home-title-fs",
        "--bf-home-title-mb",
        "--bf-home-body-fs",
        "--bf-home-body-mb",
        "--bf-home-list-fs",
        "--bf-home-list-mb",
        "--bf-home-list-pl",
        "--bf-home-note-fs",
        # booking details card
        "--bf-details-header-gap",
        "--bf-details-title-fs",
        "--bf-details-subtitle-fs",
        "--bf-details-box-mt",
        "--bf-details-box-radius",
        "--bf-details-box-pad",
        "--bf-details-grid-gap",
        "--bf-details-label-fs",
        "--bf-details-label-mb",
        "--bf-details-label-weight",
        "--bf-details-value-weight",
    }
)

# Brand + semantic variables that tenants may override safely.
# Some of these are back-compat aliases read by older components.
BRAND_OVERRIDE_KEYS: frozenset[str] = frozenset(
    {
        # Brand
        "--bf-brand-primary",
        "--bf-brand-primary-dark",
        "--bf-brand-accent",
        "--bf-brand-accent-soft",
        "--bf-link-color",
        # Typography / page
        "--bf-font-family",
        "--bf-font-weight-heading",
        "--bf-font-weight-body",
        "--bf-page-bg",
        "--bf-text-main",
        "--bf-text-muted",
        "--bf-text-soft",
        # Card
        "--bf-card-bg",
        "--bf-card-bg-raised",
        "--bf-card-border",
        "--bf-card-border-subtle",
        # Pills
        "--bf-pill-bg",
        "--bf-pill-border",
        "--bf-pill-text",
        "--bf-pill-hover-bg",
        "--bf-pill-selected-bg",
        "--bf-pill-selected-border",
        "--bf-pill-selected-text",
        "--bf-pill-selected-shadow",
        # Buttons
        "--bf-btn-bg",
        "--bf-btn-text",
        "--bf-btn-bg-active",
        "--bf-btn-text-active",
        "--bf-btn-bg-disabled",
        "--bf-btn-text-disabled",
        "--bf-btn-secondary-bg",
        "--bf-btn-secondary-text",
        "--bf-btn-ghost-text",
        "--bf-btn-ghost-hover-bg",
        "--bf-btn-glow-shadow",
        "--bf-focus-ring-color",
        # Navigation
        "--bf-nav-item-text",
        "--bf-nav-item-hover-bg",
        "--bf-nav-active-bg",
        "--bf-nav-active-text",
        # Inputs
        "--bf-input-bg",
        "--bf-input-text",
        "--bf-input-border",
        "--bf-input-focus-border",
        "--bf-input-focus-bg",
        # Semantic colors
        "--bf-danger",
        "--bf-danger-bg",
        "--bf-danger-border",
        "--bf-success",
        "--bf-success-bg",
        "--bf-success-border",
        "--bf-warning",
        "--bf-warning-bg",
        "--bf-warning-border",
        "--bf-info",
        "--bf-info-bg",
        "--bf-info-border",
        "--bf-hero-text",
        # Density vars used for pill sizing on booking pages
        "--bf-pill-h",
        "--bf-pill-fs",
        "--bf-pill-px",
        # Back-compat aliases
        "--bf-text",
        "--bf-muted",
        "--bf-surface",
        "--bf-border",
        # Optional (kept for forwards/backwards compatibility)
        "--bf-shadow",
        "--bf-glass",
    }
)

ALLOWLISTS: Mapping[AllowlistName, frozenset[str]] = MappingProxyType(
    {
        AllowlistName.THEME_TOKENS: THEME_TOKEN_KEYS,
        AllowlistName.BRAND_OVERRIDES: BRAND_OVERRIDE_KEYS,
    }
)

ALL_KEYS: frozenset[str] = THEME_TOKEN_KEYS | BRAND_OVERRIDE_KEYS


def get_allowlist(name: str) -> frozenset[str]:
    """Get an allowlist by name.

    Raises:
        KeyError: If the name is not a known allowlist.
    """
    try:
        return ALLOWLISTS[AllowlistName(name)]
    except ValueError:
        raise KeyError(f"Unknown allowlist: {name!r}") from None


def list_allowlists() -> list[str]:
    """List the names of all built-in allowlists."""
    return [name.value for name in AllowlistName]
