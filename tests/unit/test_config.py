"""Tests for tenant_theme.toml loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from tenant_theme.allowlist import BRAND_OVERRIDE_KEYS, THEME_TOKEN_KEYS, AllowlistName
from tenant_theme.config import CONFIG_FILE, ThemeConfig, get_config_path, load_theme_config
from tenant_theme.errors import ThemeConfigError


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / CONFIG_FILE
    path.write_text(text)
    return path


class TestThemeConfig:
    def test_defaults(self):
        config = ThemeConfig()
        assert config.allowlists == (AllowlistName.THEME_TOKENS, AllowlistName.BRAND_OVERRIDES)
        assert config.log_level == "WARNING"
        assert config.log_level_number == logging.WARNING
        assert config.selector == ":root"
        assert config.allowlist_sets() == (THEME_TOKEN_KEYS, BRAND_OVERRIDE_KEYS)

    def test_log_level_normalized(self):
        assert ThemeConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            ThemeConfig(log_level="chatty")

    def test_empty_allowlists_rejected(self):
        with pytest.raises(ValidationError):
            ThemeConfig(allowlists=[])

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            ThemeConfig(colour="blue")


class TestLoadThemeConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_theme_config(tmp_path / "absent.toml") == ThemeConfig()

    def test_get_config_path(self, tmp_path):
        assert get_config_path(tmp_path) == tmp_path / "tenant_theme.toml"

    def test_full_section(self, tmp_path):
        path = write_config(
            tmp_path,
            """
[theme]
allowlists = ["brand_overrides"]
log_level = "info"
selector = "[data-tenant='acme']"
""",
        )
        config = load_theme_config(path)
        assert config.allowlists == (AllowlistName.BRAND_OVERRIDES,)
        assert config.log_level == "INFO"
        assert config.selector == "[data-tenant='acme']"
        assert config.allowlist_sets() == (BRAND_OVERRIDE_KEYS,)

    def test_missing_section_gives_defaults(self, tmp_path):
        path = write_config(tmp_path, '[other]\nname = "x"\n')
        assert load_theme_config(path) == ThemeConfig()

    def test_invalid_toml(self, tmp_path):
        path = write_config(tmp_path, "[theme\nlog_level = ")
        with pytest.raises(ThemeConfigError, match="Invalid TOML") as exc_info:
            load_theme_config(path)
        assert exc_info.value.path == path

    def test_section_must_be_table(self, tmp_path):
        path = write_config(tmp_path, 'theme = "dark"\n')
        with pytest.raises(ThemeConfigError, match="must be a table"):
            load_theme_config(path)

    def test_invalid_values(self, tmp_path):
        path = write_config(tmp_path, '[theme]\nallowlists = ["everything"]\n')
        with pytest.raises(ThemeConfigError, match="allowlists"):
            load_theme_config(path)
