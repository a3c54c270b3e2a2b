"""Tests for palette preferences."""

import json

import pytest

from quickpalette.config import ui_config
from quickpalette.config.ui_config import (
    PaletteSettings,
    get_palette_settings,
    load_ui_config,
    save_ui_config,
    validate_palette_settings,
)
from quickpalette.exceptions import ConfigurationError


class TestLoadUiConfig:
    def test_defaults_when_missing(self) -> None:
        assert load_ui_config() == ui_config.DEFAULT_CONFIG

    def test_merges_with_defaults(self, isolated_config_dir) -> None:
        isolated_config_dir.mkdir(parents=True, exist_ok=True)
        (isolated_config_dir / "ui_config.json").write_text(json.dumps({"keyboard_lock_ms": 300}))
        config = load_ui_config()
        assert config["keyboard_lock_ms"] == 300
        assert config["max_recent_items"] == 5

    def test_invalid_json_falls_back(self, isolated_config_dir) -> None:
        isolated_config_dir.mkdir(parents=True, exist_ok=True)
        (isolated_config_dir / "ui_config.json").write_text("{not json")
        assert load_ui_config() == ui_config.DEFAULT_CONFIG

    def test_non_object_falls_back(self, isolated_config_dir) -> None:
        isolated_config_dir.mkdir(parents=True, exist_ok=True)
        (isolated_config_dir / "ui_config.json").write_text("[1, 2]")
        assert load_ui_config() == ui_config.DEFAULT_CONFIG

    def test_saved_config_is_loaded(self) -> None:
        save_ui_config({**ui_config.DEFAULT_CONFIG, "max_recent_items": 3, "theme": "nord"})
        config = load_ui_config()
        assert config["theme"] == "nord"
        assert config["max_recent_items"] == 3


class TestPaletteSettings:
    def test_defaults(self) -> None:
        settings = get_palette_settings()
        assert settings == PaletteSettings()
        assert settings.keyboard_lock_ms == 600
        assert settings.keyboard_lock_seconds == pytest.approx(0.6)
        assert settings.max_recent_items == 5

    @pytest.mark.parametrize(
        "config, setting",
        [
            ({"keyboard_lock_ms": -1}, "keyboard_lock_ms"),
            ({"keyboard_lock_ms": "fast"}, "keyboard_lock_ms"),
            ({"keyboard_lock_ms": True}, "keyboard_lock_ms"),
            ({"max_recent_items": -3}, "max_recent_items"),
            ({"theme": ""}, "theme"),
        ],
    )
    def test_invalid_values_raise(self, config, setting) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_palette_settings(config)
        assert exc_info.value.setting == setting
        assert setting in str(exc_info.value)

    def test_get_settings_falls_back_on_invalid(self) -> None:
        save_ui_config({"keyboard_lock_ms": -50})
        assert get_palette_settings() == PaletteSettings()

    def test_get_settings_reads_values(self) -> None:
        save_ui_config({"keyboard_lock_ms": 250, "max_recent_items": 2})
        settings = get_palette_settings()
        assert settings.keyboard_lock_ms == 250
        assert settings.max_recent_items == 2
