"""
Presenter for the command palette.

Owns a palette session: builds the registry snapshot on open, rebuilds the
filtered and grouped views on every query edit, feeds key and pointer events
to the selection arbiter, tracks scroll requests and dispatches confirmed
items. Discards everything on close.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from quickpalette.exceptions import PaletteInvariantError

from .palette_commands import CommandItem, CommandRegistry
from .palette_search import GroupedView, filter_items, group_items
from .selection_arbiter import ItemVisual, SelectionArbiter, SelectionState, resolve_visual

logger = logging.getLogger(__name__)


class PaletteKey(Enum):
    """Discrete keys the palette reacts to."""

    ARROW_DOWN = "arrow_down"
    ARROW_UP = "arrow_up"
    ENTER = "enter"
    ESCAPE = "escape"


class ConfirmSource(Enum):
    """Where a confirmation came from."""

    ENTER_KEY = "enter_key"
    CLICK = "click"


class ViewportSync:
    """
    Pending scroll-into-view request.

    Only the latest requested index is kept; a request made before the view
    flushed the previous one replaces it.
    """

    def __init__(self) -> None:
        self._pending: int | None = None

    @property
    def pending(self) -> int | None:
        return self._pending

    def request(self, index: int) -> None:
        self._pending = index

    def take(self) -> int | None:
        """Return the latest requested index and clear it."""
        index, self._pending = self._pending, None
        return index

    def cancel(self) -> None:
        self._pending = None


@dataclass
class PaletteStateVM:
    """Current state of the palette, for rendering."""

    is_open: bool = False
    query: str = ""
    view: GroupedView = field(default_factory=GroupedView)
    selection: SelectionState = field(default_factory=SelectionState)
    keyboard_locked: bool = False

    @property
    def is_empty(self) -> bool:
        return len(self.view) == 0

    def visual_for(self, index: int) -> ItemVisual:
        return resolve_visual(self.selection, index, self.keyboard_locked)


class PalettePresenter:
    """
    Handles command palette business logic.

    The view forwards events here and redraws from the PaletteStateVM passed
    to on_state_update. on_close is called once per session, after an item
    ran or the palette was dismissed.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        on_state_update: Callable[[PaletteStateVM], None] | None = None,
        on_close: Callable[[CommandItem | None], None] | None = None,
        arbiter: SelectionArbiter | None = None,
    ):
        self.registry = registry
        self.on_state_update = on_state_update
        self.on_close = on_close
        self.arbiter = arbiter or SelectionArbiter()
        self.viewport = ViewportSync()
        self._is_open = False
        self._query = ""
        self._snapshot: tuple[CommandItem, ...] = ()
        self._view = GroupedView()

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def state(self) -> PaletteStateVM:
        """Get current state."""
        return PaletteStateVM(
            is_open=self._is_open,
            query=self._query,
            view=self._view,
            selection=self.arbiter.state,
            keyboard_locked=self.arbiter.is_locked(),
        )

    def _notify_update(self) -> None:
        if self.on_state_update:
            self.on_state_update(self.state)

    def open(self, entities: Sequence[Any] | None = None) -> None:
        """Start a session with a fresh snapshot and empty query."""
        self._snapshot = self.registry.build(entities)
        self._query = ""
        self._view = group_items(self._snapshot)
        self.arbiter.reset()
        self.viewport.cancel()
        self._is_open = True
        logger.debug(f"Palette opened with {len(self._snapshot)} items")
        self._notify_update()

    def close(self, executed: CommandItem | None = None) -> None:
        """Discard the session. Safe to call when already closed."""
        if not self._is_open:
            return
        self._is_open = False
        self._query = ""
        self._snapshot = ()
        self._view = GroupedView()
        self.arbiter.reset()
        self.viewport.cancel()
        logger.debug("Palette closed")
        if self.on_close:
            self.on_close(executed)

    def set_query(self, query: str) -> None:
        """Rebuild the views for query and reset the selection."""
        if not self._is_open:
            return
        self._query = query
        self._view = group_items(filter_items(self._snapshot, query))
        self.arbiter.reset()
        self.viewport.cancel()
        self._notify_update()

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------

    def handle_key(self, key: PaletteKey) -> bool:
        """Handle a palette key. Returns True if the key was consumed."""
        if not self._is_open:
            return False

        if key in (PaletteKey.ARROW_DOWN, PaletteKey.ARROW_UP):
            delta = 1 if key is PaletteKey.ARROW_DOWN else -1
            if self.arbiter.move(delta, len(self._view)):
                self.viewport.request(self.arbiter.active_index)
                self._notify_update()
            return True

        if key is PaletteKey.ENTER:
            self.confirm(ConfirmSource.ENTER_KEY)
            return True

        if key is PaletteKey.ESCAPE:
            self.close()
            return True

        return False

    def pointer_enter(self, index: int) -> None:
        if not self._is_open or self._view.item_at(index) is None:
            return
        self.arbiter.pointer_enter(index)
        self._notify_update()

    def pointer_leave(self, index: int) -> None:
        if not self._is_open:
            return
        self.arbiter.pointer_leave(index)
        self._notify_update()

    def click(self, index: int) -> bool:
        return self.confirm(ConfirmSource.CLICK, index)

    # Rows identify themselves by item id. A row rendered for an earlier
    # query may still deliver events after set_query, and its id either
    # resolves to the same item in the new view or is ignored.

    def pointer_enter_item(self, item_id: str) -> None:
        index = self._view.index_of.get(item_id)
        if index is not None:
            self.pointer_enter(index)

    def pointer_leave_item(self, item_id: str) -> None:
        index = self._view.index_of.get(item_id)
        if index is not None:
            self.pointer_leave(index)

    def click_item(self, item_id: str) -> bool:
        """Run the clicked item. Returns False if it is no longer listed."""
        if not self._is_open:
            return False
        index = self._view.index_of.get(item_id)
        if index is None:
            logger.debug(f"Ignoring click on {item_id}, not in the current view")
            return False
        return self.click(index)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def get_selected_item(self) -> CommandItem | None:
        """Get the item at the active index, if any."""
        return self._view.item_at(self.arbiter.active_index)

    def confirm(self, source: ConfirmSource, index: int | None = None) -> bool:
        """
        Run the confirmed item's action and close the palette.

        Enter acts on the active index and does nothing on an empty view.
        A click acts on the clicked index whatever the active index is.

        Returns:
            True if an action ran
        """
        if not self._is_open:
            return False

        if source is ConfirmSource.ENTER_KEY:
            item = self.get_selected_item()
            if item is None:
                return False
        else:
            if index is None:
                raise PaletteInvariantError("Click confirmation without an index")
            item = self._view.item_at(index)
            if item is None:
                raise PaletteInvariantError(
                    "Click outside the filtered view", index=index, count=len(self._view)
                )

        logger.info(f"Executing palette item {item.id} ({source.value})")
        try:
            item.action()
        finally:
            self.close(executed=item)
        return True
