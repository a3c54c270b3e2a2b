"""
Command Palette Screen - modal quick-actions overlay.

Renders the presenter's grouped view under category headers and forwards
keys, pointer hover/leave/click and query edits to the presenter.
"""

import logging
from collections.abc import Sequence
from typing import Any

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Input, Static

from quickpalette.config.constants import MAX_DESCRIPTION_WIDTH, MAX_LABEL_WIDTH

from .palette_commands import CommandCategory, CommandItem, CommandRegistry
from .palette_presenter import PaletteKey, PalettePresenter, PaletteStateVM
from .selection_arbiter import ItemVisual, SelectionArbiter

logger = logging.getLogger(__name__)


def _truncate(text: str, width: int) -> str:
    if len(text) > width:
        return text[: width - 3] + "..."
    return text


class PaletteResultWidget(Static):
    """Widget for a single palette result."""

    DEFAULT_CSS = """
    PaletteResultWidget {
        height: 1;
        padding: 0 1;
    }
    PaletteResultWidget.-hover {
        background: $boost;
    }
    PaletteResultWidget.-active {
        background: $accent;
        color: $text;
    }
    """

    class Hovered(Message):
        """Pointer entered a result row."""

        def __init__(self, index: int, item_id: str):
            super().__init__()
            self.index = index
            self.item_id = item_id

    class Left(Message):
        """Pointer left a result row."""

        def __init__(self, index: int, item_id: str):
            super().__init__()
            self.index = index
            self.item_id = item_id

    class Clicked(Message):
        """A result row was clicked."""

        def __init__(self, index: int, item_id: str):
            super().__init__()
            self.index = index
            self.item_id = item_id

    def __init__(self, index: int, item: CommandItem, **kwargs):
        super().__init__(self._render_item(item), **kwargs)
        self.index = index
        self.item = item

    @staticmethod
    def _render_item(item: CommandItem) -> Text:
        text = Text(f"{item.icon} {_truncate(item.label, MAX_LABEL_WIDTH)}")
        if item.description:
            text.append(f"  {_truncate(item.description, MAX_DESCRIPTION_WIDTH)}", style="dim")
        return text

    def show_visual(self, visual: ItemVisual) -> None:
        self.set_class(visual is ItemVisual.ACTIVE, "-active")
        self.set_class(visual is ItemVisual.HOVER, "-hover")

    def on_enter(self, event: events.Enter) -> None:
        self.post_message(self.Hovered(self.index, self.item.id))

    def on_leave(self, event: events.Leave) -> None:
        self.post_message(self.Left(self.index, self.item.id))

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Clicked(self.index, self.item.id))


class CategoryHeader(Static):
    """Header row above a category bucket."""

    DEFAULT_CSS = """
    CategoryHeader {
        height: 1;
        padding: 0 1;
        color: $text-muted;
        text-style: bold;
    }
    """

    def __init__(self, category: CommandCategory, **kwargs):
        super().__init__(category.label.upper(), **kwargs)
        self.category = category


class CommandPaletteScreen(ModalScreen[str | None]):
    """
    Command palette modal overlay.

    Dismisses with the id of the item that ran, or None when closed with
    escape.
    """

    CSS = """
    CommandPaletteScreen {
        align: center top;
        padding-top: 3;
    }

    #palette-container {
        width: 80;
        height: auto;
        max-height: 30;
        background: $surface;
        border: solid $primary;
    }

    #palette-input {
        width: 100%;
        height: 3;
        border: none;
        border-bottom: solid $primary-darken-1;
        background: $surface-darken-1;
        padding: 0 1;
    }

    #palette-results {
        height: auto;
        max-height: 20;
        min-height: 3;
    }

    #palette-empty {
        height: 3;
        content-align: center middle;
        color: $text-muted;
    }

    #palette-hints {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "close_palette", "Close", show=False),
        Binding("ctrl+k", "close_palette", "Close", show=False),
        Binding("enter", "select", "Select", show=False, priority=True),
        Binding("up", "cursor_up", "Up", show=False, priority=True),
        Binding("down", "cursor_down", "Down", show=False, priority=True),
        Binding("ctrl+p", "cursor_up", "Up", show=False),
        Binding("ctrl+n", "cursor_down", "Down", show=False),
    ]

    def __init__(
        self,
        registry: CommandRegistry,
        entities: Sequence[Any] | None = None,
        initial_query: str = "",
        arbiter: SelectionArbiter | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.entities = entities
        self.initial_query = initial_query
        self.presenter = PalettePresenter(
            registry,
            on_state_update=self._on_state_update,
            on_close=self._on_presenter_close,
            arbiter=arbiter,
        )
        self._render_id = 0
        self._rendered_view: object | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="palette-container"):
            yield Input(
                placeholder="Search for transactions, pages, or actions...",
                id="palette-input",
            )
            yield VerticalScroll(id="palette-results")
            yield Static(
                "↑↓ Navigate │ Enter Select │ Esc Close",
                id="palette-hints",
            )

    def on_mount(self) -> None:
        """Open a palette session and focus the query input."""
        self.presenter.open(self.entities)
        input_widget = self.query_one("#palette-input", Input)
        if self.initial_query:
            input_widget.value = self.initial_query
        input_widget.focus()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _on_state_update(self, state: PaletteStateVM) -> None:
        """Handle state updates from presenter."""
        if not state.is_open:
            return
        if state.view is not self._rendered_view:
            self._render_id += 1
            self._rendered_view = state.view
            self.call_later(self._render_results, self._render_id)
        else:
            self._apply_visuals(state)
            self.call_after_refresh(self._flush_scroll)

    async def _render_results(self, render_id: int) -> None:
        """Rebuild the result rows for the current grouped view."""
        # Skip if a newer render was requested
        if render_id != self._render_id or not self.presenter.is_open:
            return

        state = self.presenter.state
        results = self.query_one("#palette-results", VerticalScroll)
        await results.remove_children()

        if state.is_empty:
            await results.mount(Static("No results found", id="palette-empty"))
            return

        rows: list[Static] = []
        for category, entries in state.view:
            rows.append(CategoryHeader(category, classes="palette-header"))
            for entry in entries:
                rows.append(
                    PaletteResultWidget(entry.index, entry.item, id=f"palette-item-{entry.index}")
                )
        await results.mount_all(rows)
        results.scroll_home(animate=False)
        self._apply_visuals(self.presenter.state)

    def _apply_visuals(self, state: PaletteStateVM) -> None:
        for row in self.query(PaletteResultWidget):
            row.show_visual(state.visual_for(row.index))

    def _flush_scroll(self) -> None:
        """Bring the latest keyboard target into view."""
        index = self.presenter.viewport.take()
        if index is None:
            return
        rows = self.query(f"#palette-item-{index}")
        if rows:
            rows.first().scroll_visible(animate=False)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "palette-input":
            return
        self.presenter.set_query(event.value)

    def action_cursor_up(self) -> None:
        """Move selection up."""
        self.presenter.handle_key(PaletteKey.ARROW_UP)

    def action_cursor_down(self) -> None:
        """Move selection down."""
        self.presenter.handle_key(PaletteKey.ARROW_DOWN)

    def action_select(self) -> None:
        """Execute the active item."""
        self.presenter.handle_key(PaletteKey.ENTER)

    def action_close_palette(self) -> None:
        self.presenter.handle_key(PaletteKey.ESCAPE)

    def on_palette_result_widget_hovered(self, event: PaletteResultWidget.Hovered) -> None:
        self.presenter.pointer_enter_item(event.item_id)

    def on_palette_result_widget_left(self, event: PaletteResultWidget.Left) -> None:
        self.presenter.pointer_leave_item(event.item_id)

    def on_palette_result_widget_clicked(self, event: PaletteResultWidget.Clicked) -> None:
        self.presenter.click_item(event.item_id)

    def _on_presenter_close(self, executed: CommandItem | None) -> None:
        self.dismiss(executed.id if executed else None)
