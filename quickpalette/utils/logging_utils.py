"""Simple logging utilities for quickpalette.

Standard Logger Initialization Pattern
--------------------------------------
For most modules, use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

Use `get_logger()` only when you need immediate file-based logging with
auto-configuration, e.g. for code that may run outside the TUI.

Use `setup_tui_logging()` once, from the TUI entry point, so log output
goes to a rotating file instead of the terminal the TUI is drawing on.

Note: This module uses inline Path construction instead of importing the
config constants to avoid circular imports, since logging may be needed
before config is fully loaded.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_dir() -> Path:
    override = os.environ.get("QUICKPALETTE_CONFIG_DIR")
    log_dir = Path(override) if override else Path.home() / ".config" / "quickpalette"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_logger(name: str) -> logging.Logger:
    """Get a logger for name that writes to quickpalette.log in the config dir."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = RotatingFileHandler(
            _log_dir() / "quickpalette.log", maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
        )
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def setup_tui_logging(module_name: str, verbose: bool = False) -> logging.Logger:
    """
    Set up TUI logging for UI modules.

    The root logger is set to WARNING to avoid noise from third-party libs.
    quickpalette's own loggers are set to INFO, or DEBUG when verbose.

    Returns:
        The logger for module_name
    """
    try:
        log_file = _log_dir() / "tui_debug.log"

        # Configure root logger: WARNING only, with rotation
        if not logging.getLogger().handlers:
            handler = RotatingFileHandler(
                log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
            )
            handler.setFormatter(logging.Formatter(_FORMAT))
            logging.basicConfig(level=logging.WARNING, handlers=[handler])

        logging.getLogger("quickpalette").setLevel(logging.DEBUG if verbose else logging.INFO)

        return logging.getLogger(module_name)

    except OSError as e:
        # We can't log this failure since logging is what's failing
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)
        return logging.getLogger(module_name)
