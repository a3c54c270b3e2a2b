"""
Selection arbiter for the command palette.

Keyboard and pointer both want to move the highlight. The arbiter owns the
single (active, hovered, modality, lock_until) state and decides which input
wins: an arrow key takes the highlight and holds it for a short lock window,
during which pointer hover is recorded but does not move the highlight.

Lock expiry is evaluated lazily, by comparing the clock against lock_until
when the next pointer event arrives. Nothing fires when the window ends.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from quickpalette.config.constants import KEYBOARD_LOCK_MS

logger = logging.getLogger(__name__)


class Modality(Enum):
    """Which input class owns the visible highlight."""

    KEYBOARD = "keyboard"
    POINTER = "pointer"


class ItemVisual(Enum):
    """How a row should be drawn."""

    NONE = "none"
    ACTIVE = "active"
    HOVER = "hover"


@dataclass(frozen=True)
class SelectionState:
    """Snapshot of the arbiter's state."""

    active_index: int = 0
    hovered_index: int | None = None
    modality: Modality = Modality.POINTER
    lock_until: float | None = None


def resolve_visual(state: SelectionState, index: int, keyboard_locked: bool) -> ItemVisual:
    """Active row wins; a hover-only row shows once the keyboard lock is over."""
    if index == state.active_index:
        return ItemVisual.ACTIVE
    if index == state.hovered_index and not keyboard_locked:
        return ItemVisual.HOVER
    return ItemVisual.NONE


class SelectionArbiter:
    """
    State machine for the palette's active index.

    Args:
        clock: Monotonic clock in seconds, injectable for tests
        lock_seconds: Length of the keyboard lock window
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        lock_seconds: float = KEYBOARD_LOCK_MS / 1000.0,
    ):
        self._clock = clock
        self._lock_seconds = lock_seconds
        self._state = SelectionState()

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def active_index(self) -> int:
        return self._state.active_index

    @property
    def lock_seconds(self) -> float:
        return self._lock_seconds

    def reset(self) -> None:
        """Back to index 0, no hover, pointer-eligible, no lock."""
        self._state = SelectionState()

    def is_locked(self, now: float | None = None) -> bool:
        """Whether keyboard currently holds exclusive control of the highlight."""
        state = self._state
        if state.modality is not Modality.KEYBOARD or state.lock_until is None:
            return False
        if now is None:
            now = self._clock()
        return now < state.lock_until

    def move(self, delta: int, count: int) -> bool:
        """
        Move the active index by delta, clamped to [0, count - 1].

        Every call restarts the lock window from now. Returns False when there
        is nothing to select.
        """
        if count <= 0:
            return False

        new_index = max(0, min(self._state.active_index + delta, count - 1))
        self._state = SelectionState(
            active_index=new_index,
            hovered_index=None,
            modality=Modality.KEYBOARD,
            lock_until=self._clock() + self._lock_seconds,
        )
        return True

    def pointer_enter(self, index: int) -> bool:
        """
        Record the pointer entering row index.

        Returns True if the active index was taken over by the pointer, False
        if the keyboard lock held and only the hover was recorded.
        """
        if self.is_locked():
            self._state = replace(self._state, hovered_index=index)
            return False

        self._state = SelectionState(
            active_index=index,
            hovered_index=index,
            modality=Modality.POINTER,
            lock_until=self._state.lock_until,
        )
        return True

    def pointer_leave(self, index: int) -> None:
        """Clear the hover if the pointer left the row it was recorded on."""
        if self._state.hovered_index == index:
            self._state = replace(self._state, hovered_index=None)

    def visual_for(self, index: int, now: float | None = None) -> ItemVisual:
        """Rendering state of the row at index."""
        return resolve_visual(self._state, index, self.is_locked(now))
