"""
quickpalette UI Configuration.

Handles persistence of palette preferences (keyboard lock window, number of
recent items, theme). Config is stored in ~/.config/quickpalette/ui_config.json
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from quickpalette.exceptions import ConfigurationError

from . import constants

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": "textual-dark",
    "keyboard_lock_ms": constants.KEYBOARD_LOCK_MS,
    "max_recent_items": constants.MAX_DYNAMIC_ITEMS,
}


@dataclass(frozen=True)
class PaletteSettings:
    """Validated palette preferences."""

    keyboard_lock_ms: int = constants.KEYBOARD_LOCK_MS
    max_recent_items: int = constants.MAX_DYNAMIC_ITEMS
    theme: str = "textual-dark"

    @property
    def keyboard_lock_seconds(self) -> float:
        return self.keyboard_lock_ms / 1000.0


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to <config dir>/ui_config.json
    """
    constants.QUICKPALETTE_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return constants.QUICKPALETTE_CONFIG_DIR / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if not isinstance(config, dict):
                return DEFAULT_CONFIG.copy()
            # Merge with defaults to handle missing keys
            return {**DEFAULT_CONFIG, **config}
        except (json.JSONDecodeError, OSError):
            return DEFAULT_CONFIG.copy()
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        # Config is non-critical
        logger.warning("Could not save UI config to %s: %s", path, e)


def validate_palette_settings(config: dict[str, Any]) -> PaletteSettings:
    """
    Build PaletteSettings from a raw config dict.

    Raises:
        ConfigurationError: If a value has the wrong type or is out of range
    """
    lock_ms = config.get("keyboard_lock_ms", constants.KEYBOARD_LOCK_MS)
    if isinstance(lock_ms, bool) or not isinstance(lock_ms, int) or lock_ms < 0:
        raise ConfigurationError(
            "keyboard_lock_ms must be a non-negative integer",
            setting="keyboard_lock_ms",
            value=lock_ms,
        )

    max_recent = config.get("max_recent_items", constants.MAX_DYNAMIC_ITEMS)
    if isinstance(max_recent, bool) or not isinstance(max_recent, int) or max_recent < 0:
        raise ConfigurationError(
            "max_recent_items must be a non-negative integer",
            setting="max_recent_items",
            value=max_recent,
        )

    theme = config.get("theme", DEFAULT_CONFIG["theme"])
    if not isinstance(theme, str) or not theme:
        raise ConfigurationError("theme must be a non-empty string", setting="theme", value=theme)

    return PaletteSettings(
        keyboard_lock_ms=lock_ms,
        max_recent_items=max_recent,
        theme=theme,
    )


def get_palette_settings() -> PaletteSettings:
    """
    Get palette settings from config, falling back to defaults on bad values.

    Returns:
        PaletteSettings
    """
    try:
        return validate_palette_settings(load_ui_config())
    except ConfigurationError as e:
        logger.warning("Ignoring invalid palette config: %s", e)
        return PaletteSettings()

