"""Tests for configuration loading."""

import pytest
from pathlib import Path

from pydantic import ValidationError

from notepane import config
from notepane.config import Settings, get_settings, load_settings


class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        """Test default values with no environment overrides."""
        for name in ("NOTEPANE_FONT_SIZE", "NOTEPANE_DATA_DIR", "NOTEPANE_AUTO_SAVE"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.font_name == "SF Pro"
        assert settings.font_size == 16.0
        assert settings.accent_color == "blue"
        assert settings.enable_auto_save is True
        assert settings.default_category == "Uncategorized"
        assert settings.store_path == settings.data_dir / "notes.json"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        """Test that NOTEPANE_* variables are read."""
        monkeypatch.setenv("NOTEPANE_FONT_SIZE", "20")
        monkeypatch.setenv("NOTEPANE_AUTO_SAVE", "false")
        monkeypatch.setenv("NOTEPANE_DATA_DIR", str(tmp_path))

        settings = Settings(_env_file=None)

        assert settings.font_size == 20.0
        assert settings.enable_auto_save is False
        assert settings.store_path == tmp_path / "notes.json"

    def test_font_size_bounds(self, monkeypatch: pytest.MonkeyPatch):
        """Test that font sizes outside 12-24 are rejected."""
        monkeypatch.setenv("NOTEPANE_FONT_SIZE", "40")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_populate_by_name(self):
        """Test that fields can be set by name as well as alias."""
        assert Settings(font_size=12, _env_file=None).font_size == 12.0


class TestSettingsLoading:
    """Tests for the global settings helpers."""

    def test_get_settings_is_cached(self, settings: Settings):
        """Test that get_settings returns the same instance."""
        assert get_settings() is settings

    def test_load_settings_from_env_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        """Test loading from an explicit .env file."""
        monkeypatch.delenv("NOTEPANE_DEFAULT_CATEGORY", raising=False)
        monkeypatch.setattr(config, "_settings", None)
        env_file = tmp_path / "custom.env"
        env_file.write_text("NOTEPANE_DEFAULT_CATEGORY=Inbox\n", encoding="utf-8")

        settings = load_settings(env_file)

        assert settings.default_category == "Inbox"
        assert get_settings() is settings
