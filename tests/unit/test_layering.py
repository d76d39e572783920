"""Tests for tenant CSS variable layering."""

from __future__ import annotations

from tenant_theme.layering import build_tenant_css_vars
from tenant_theme.resolver import resolve_theme_schema


class TestBuildTenantCssVars:
    """Precedence: brand overrides > schema > platform theme tokens."""

    def test_schema_only(self, default_schema):
        expected = resolve_theme_schema(default_schema).css_vars
        assert build_tenant_css_vars(default_schema) == expected

    def test_platform_tokens_fill_gaps(self, default_schema):
        merged = build_tenant_css_vars(default_schema, theme_tokens={"--bf-card-pad": "20px"})
        assert merged["--bf-card-pad"] == "20px"

    def test_schema_beats_platform_tokens(self, default_schema):
        merged = build_tenant_css_vars(default_schema, theme_tokens={"--bf-card-radius": "4px"})
        assert merged["--bf-card-radius"] == "16px"

    def test_brand_overrides_win(self, default_schema):
        merged = build_tenant_css_vars(
            default_schema,
            theme_tokens={"--bf-page-bg": "#111111"},
            brand_overrides={"--bf-page-bg": "#222222", "--bf-brand-primary": "#ff0000"},
        )
        assert merged["--bf-page-bg"] == "#222222"
        assert merged["--bf-brand-primary"] == "#ff0000"

    def test_layers_sanitized_against_own_list(self, default_schema):
        merged = build_tenant_css_vars(
            default_schema,
            # brand key smuggled through platform tokens
            theme_tokens={"--bf-brand-primary": "#ff0000"},
            # structural key smuggled through brand overrides
            brand_overrides={"--bf-card-radius": "0px"},
        )
        assert merged["--bf-brand-primary"] == "#2563eb"
        assert merged["--bf-card-radius"] == "16px"

    def test_unsafe_override_does_not_clobber(self, default_schema):
        merged = build_tenant_css_vars(
            default_schema, brand_overrides={"--bf-brand-primary": "red;}"}
        )
        assert merged["--bf-brand-primary"] == "#2563eb"

    def test_malformed_layers(self):
        merged = build_tenant_css_vars(None, theme_tokens="nope", brand_overrides=[1, 2])
        assert merged == resolve_theme_schema(None).css_vars
