"""Tests for the built-in allowlists."""

from __future__ import annotations

import pytest

from tenant_theme.allowlist import (
    ALL_KEYS,
    ALLOWLISTS,
    BRAND_OVERRIDE_KEYS,
    THEME_TOKEN_KEYS,
    AllowlistName,
    get_allowlist,
    list_allowlists,
)


class TestAllowlists:
    def test_names(self):
        assert list_allowlists() == ["theme_tokens", "brand_overrides"]

    @pytest.mark.parametrize(
        ("name", "keys"),
        [("theme_tokens", THEME_TOKEN_KEYS), ("brand_overrides", BRAND_OVERRIDE_KEYS)],
    )
    def test_get_allowlist(self, name, keys):
        assert get_allowlist(name) is keys

    def test_get_unknown_allowlist(self):
        with pytest.raises(KeyError, match="Unknown allowlist"):
            get_allowlist("everything")

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            ALLOWLISTS[AllowlistName.THEME_TOKENS] = frozenset()  # type: ignore[index]

    def test_all_keys_is_union(self):
        assert ALL_KEYS == THEME_TOKEN_KEYS | BRAND_OVERRIDE_KEYS

    def test_keys_are_bf_custom_properties(self):
        for key in ALL_KEYS:
            assert key.startswith("--bf-")
            assert key == key.strip().lower()

    def test_page_bg_in_both_lists(self):
        assert "--bf-page-bg" in THEME_TOKEN_KEYS
        assert "--bf-page-bg" in BRAND_OVERRIDE_KEYS

    @pytest.mark.parametrize(
        "key", ["--bf-brand-primary", "--bf-danger", "--bf-text", "--bf-shadow", "--bf-glass"]
    )
    def test_brand_override_members(self, key):
        assert key in BRAND_OVERRIDE_KEYS
        assert key not in THEME_TOKEN_KEYS
