"""Exception hierarchy for quickpalette.

The palette engine has no fallible I/O. Its errors are either invariant
violations caused by a host handing the engine something it cannot honour,
or configuration problems found while loading preferences.

Exception Hierarchy:
    QuickPaletteError (base)
    ├── PaletteInvariantError - out-of-range confirmation, duplicate grouping
    └── ConfigurationError - invalid palette preferences

Usage:
    from quickpalette.exceptions import PaletteInvariantError

    if not 0 <= index < len(view):
        raise PaletteInvariantError("Click outside the filtered view", index=index)
"""

from typing import Any


class QuickPaletteError(Exception):
    """Base exception for all quickpalette errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., indices, ids)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class PaletteInvariantError(QuickPaletteError):
    """Raised when the engine is asked to break one of its own invariants.

    Correct hosts never trigger this: indices come from the current grouped
    view and ids are unique within a registry snapshot.
    """


class ConfigurationError(QuickPaletteError):
    """Raised when palette preferences hold invalid values."""

    def __init__(self, message: str, setting: str | None = None, **context: Any) -> None:
        self.setting = setting
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
