"""Tests for CSS variable sanitization against the allowlists."""

from __future__ import annotations

import pytest

from tenant_theme.allowlist import ALL_KEYS, BRAND_OVERRIDE_KEYS, THEME_TOKEN_KEYS
from tenant_theme.sanitizer import (
    CATEGORY_RULES,
    classify_key,
    is_safe_value,
    sanitize_brand_overrides,
    sanitize_css_vars,
    sanitize_theme_tokens,
)

# ---------------------------------------------------------------------------
# Allowlist filtering
# ---------------------------------------------------------------------------


class TestAllowlistFiltering:
    """Tests for key-level filtering."""

    def test_round_trip_theme_token(self):
        values = {"--bf-card-radius": "12px"}
        assert sanitize_theme_tokens(values) == values

    def test_injection_value_dropped(self):
        assert sanitize_theme_tokens({"--bf-card-radius": "12px; background:url(x)"}) == {}

    @pytest.mark.parametrize("value", ["12px", "#ffffff", "1", "Inter"])
    def test_unknown_key_always_dropped(self, value):
        assert sanitize_css_vars({"--bf-evil": value}, THEME_TOKEN_KEYS, BRAND_OVERRIDE_KEYS) == {}

    def test_brand_key_not_in_theme_tokens(self):
        assert sanitize_theme_tokens({"--bf-brand-primary": "#2563eb"}) == {}
        assert sanitize_brand_overrides({"--bf-brand-primary": "#2563eb"}) == {
            "--bf-brand-primary": "#2563eb"
        }

    def test_union_of_allowlists(self):
        values = {"--bf-card-radius": "8px", "--bf-card-bg": "#0f172a"}
        assert sanitize_css_vars(values, THEME_TOKEN_KEYS, BRAND_OVERRIDE_KEYS) == values

    def test_no_allowlists_drops_everything(self):
        assert sanitize_css_vars({"--bf-card-radius": "8px"}) == {}

    def test_values_are_trimmed(self):
        assert sanitize_brand_overrides({"--bf-brand-primary": "  #2563EB \n"}) == {
            "--bf-brand-primary": "#2563EB"
        }

    @pytest.mark.parametrize("values", [None, "string", 42, ["--bf-card-radius"]])
    def test_non_mapping_input(self, values):
        assert sanitize_theme_tokens(values) == {}

    def test_output_is_subset_in_input_order(self):
        values = {
            "--bf-card-pad": "20px",
            "--bf-nope": "1px",
            "--bf-card-radius": "x",
            "--bf-card-mt": "4px",
        }
        out = sanitize_theme_tokens(values)
        assert list(out) == ["--bf-card-pad", "--bf-card-mt"]

    def test_does_not_mutate_input(self):
        values = {"--bf-card-pad": " 20px ", "--bf-nope": "1px"}
        sanitize_theme_tokens(values)
        assert values == {"--bf-card-pad": " 20px ", "--bf-nope": "1px"}


# ---------------------------------------------------------------------------
# Category classification
# ---------------------------------------------------------------------------


class TestClassifyKey:
    """Tests for ordered, first-match-wins classification."""

    @pytest.mark.parametrize(
        ("key", "category"),
        [
            ("--bf-card-radius", "px"),
            ("--bf-border-radius", "px"),
            ("--bf-popover-radius", "px"),
            ("--bf-details-box-radius", "px"),
            ("--bf-page-pad-top", "px"),
            ("--bf-hero-title-fs", "px"),
            ("--bf-pill-px", "px"),
            ("--bf-pill-h", "px"),
            ("--bf-hero-logo-size", "px"),
            ("--bf-popover-offset", "px"),
            ("--bf-focus-ring-width", "px"),
            ("--bf-card-bg", "color"),
            ("--bf-popover-border", "color"),
            ("--bf-brand-primary", "color"),
            ("--bf-text-muted", "color"),
            ("--bf-link-color", "color"),
            ("--bf-danger", "color"),
            ("--bf-muted", "color"),
            ("--bf-density-scale", "scale"),
            ("--bf-hero-media-filter", "filter"),
            ("--bf-pill-selected-shadow", "shadow"),
            ("--bf-popover-shadow", "shadow"),
            ("--bf-shadow", "named-shadow"),
            ("--bf-glass", "named-shadow"),
            ("--bf-font-family", "font-family"),
            ("--bf-font-weight-heading", "font-weight"),
            ("--bf-details-label-weight", "font-weight"),
            ("--bf-hero-title-weight", "font-weight"),
            ("--bf-glow-enabled", "flag"),
        ],
    )
    def test_category(self, key, category):
        rule = classify_key(key)
        assert rule is not None
        assert rule.name == category

    def test_unmatched_key(self):
        assert classify_key("--bf-mystery") is None

    def test_radius_beats_border(self):
        # Contains both "border" and "radius": must be validated as a length.
        assert is_safe_value("--bf-border-radius", "8px")
        assert not is_safe_value("--bf-border-radius", "#ffffff")

    def test_rule_order_is_fixed(self):
        names = [rule.name for rule in CATEGORY_RULES]
        assert names.index("px") < names.index("color")
        assert names.index("font-weight") < names.index("px")

    def test_every_allowlisted_key_is_classified(self):
        unclassified = sorted(key for key in ALL_KEYS if classify_key(key) is None)
        assert unclassified == []


# ---------------------------------------------------------------------------
# Value rules
# ---------------------------------------------------------------------------


class TestValueRules:
    """Tests for per-category value validation."""

    @pytest.mark.parametrize("value", ["0px", "12px", "12.5px", " 4px "])
    def test_px_valid(self, value):
        assert is_safe_value("--bf-card-pad", value)

    @pytest.mark.parametrize("value", ["12", "12 px", "-4px", "1e2px", "12rem", ".5px", "１２px"])
    def test_px_invalid(self, value):
        assert not is_safe_value("--bf-card-pad", value)

    @pytest.mark.parametrize(
        "value",
        [
            "#fff",
            "#FFFFFF",
            "rgb(1, 2, 3)",
            "rgba(37, 99, 235, 0.3)",
            "rgba(0,0,0,0.5)",
            "rgb(10% 20% 30% / 0.5)",
        ],
    )
    def test_color_valid(self, value):
        assert is_safe_value("--bf-card-bg", value)

    @pytest.mark.parametrize(
        "value",
        [
            "red",
            "#ffff",
            "#gggggg",
            "rgb(1,2,3);color:red",
            "rgba(calc(1),0,0,1)",
            "rgb(1,2,3) url(x)",
            "rgb({x})",
            "{colors.primary}",
            "hsl(10, 20%, 30%)",
            "rgb(</style><img src=x onerror=alert`1`>)",
            "rgb(1 2 3 \\3c)",
            "rgb(var(--x))",
            "rgba(1, 2, 3, e)",
        ],
    )
    def test_color_invalid(self, value):
        assert not is_safe_value("--bf-card-bg", value)

    @pytest.mark.parametrize(
        ("value", "ok"),
        [
            ("0.8", True),
            ("1", True),
            ("1.2", True),
            ("0.79", False),
            ("1.3", False),
            ("-1", False),
            ("1.0x", False),
            ("", False),
        ],
    )
    def test_scale(self, value, ok):
        assert is_safe_value("--bf-density-scale", value) is ok

    @pytest.mark.parametrize(
        ("value", "ok"),
        [
            ("100", True),
            ("700", True),
            ("900", True),
            ("950", False),
            ("50", False),
            ("bold", False),
            ("400.5", False),
            ("0700", False),
        ],
    )
    def test_font_weight(self, value, ok):
        assert is_safe_value("--bf-font-weight-body", value) is ok

    @pytest.mark.parametrize(
        ("value", "ok"), [("0", True), ("1", True), ("true", False), ("2", False), ("yes", False)]
    )
    def test_flag(self, value, ok):
        assert is_safe_value("--bf-glow-enabled", value) is ok

    def test_font_family(self):
        assert is_safe_value("--bf-font-family", "Inter, system-ui, sans-serif")
        assert not is_safe_value("--bf-font-family", "a" * 81)
        assert not is_safe_value("--bf-font-family", "Inter; color: red")
        assert not is_safe_value("--bf-font-family", "Inter} body {display:none")

    def test_shadow_caps(self):
        assert is_safe_value("--bf-shadow", "0 10px 30px rgba(0, 0, 0, 0.18)")
        assert is_safe_value("--bf-glass", "x" * 200)
        assert not is_safe_value("--bf-glass", "x" * 201)
        assert not is_safe_value("--bf-hero-shadow", "0 0 2px red; }")

    def test_filter_cap(self):
        assert is_safe_value("--bf-hero-media-filter", "blur(2px) brightness(0.9)")
        assert not is_safe_value("--bf-hero-media-filter", "x" * 81)

    @pytest.mark.parametrize(
        "value", ["</style><script>alert(1)</script>", "\\7d body", "0 0 2px red }"]
    )
    def test_markup_and_escapes_rejected(self, value):
        assert not is_safe_value("--bf-shadow", value)

    @pytest.mark.parametrize("value", [12, None, 1.5, True, ["12px"]])
    def test_non_string_rejected(self, value):
        assert not is_safe_value("--bf-card-pad", value)

    def test_blank_rejected(self):
        assert not is_safe_value("--bf-font-family", "   ")
