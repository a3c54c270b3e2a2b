"""
Centralized constants for quickpalette.

Magic numbers for the palette engine live here so the registry, the
selection arbiter and the config layer agree on the same defaults.
"""

import os
from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

# Overridable so tests never touch the real config directory
QUICKPALETTE_CONFIG_DIR = Path(
    os.environ.get("QUICKPALETTE_CONFIG_DIR", Path.home() / ".config" / "quickpalette")
)

# =============================================================================
# REGISTRY
# =============================================================================

MAX_DYNAMIC_ITEMS = 5  # Recent entities shown in the palette

# =============================================================================
# SELECTION
# =============================================================================

# Window after an arrow key during which pointer hover cannot move the highlight
KEYBOARD_LOCK_MS = 600

# =============================================================================
# DISPLAY
# =============================================================================

MAX_LABEL_WIDTH = 50
MAX_DESCRIPTION_WIDTH = 35
CURRENCY_SYMBOL = "₵"
