"""
Quick actions host app.

A minimal Textual app that opens the command palette on ctrl+k and shows
the route the last executed item navigated to.
"""

import logging
from collections.abc import Sequence
from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.reactive import reactive
from textual.widgets import Footer, Static

from quickpalette.config.ui_config import PaletteSettings, get_palette_settings
from quickpalette.ui.command_palette import (
    CommandPaletteScreen,
    CommandRegistry,
    SelectionArbiter,
    default_catalog,
)

logger = logging.getLogger(__name__)


class QuickActionsApp(App[None]):
    """Host app for the quick-actions palette."""

    CSS = """
    #route {
        height: 3;
        padding: 1 2;
        text-style: bold;
    }
    #last-action {
        padding: 0 2;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("ctrl+k", "open_palette", "Quick actions"),
        Binding("q", "quit", "Quit"),
    ]

    route: reactive[str] = reactive("/dashboard")

    def __init__(
        self,
        transactions: Sequence[Any] | None = None,
        settings: PaletteSettings | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.settings = settings or get_palette_settings()
        self.transactions: Sequence[Any] = transactions if transactions is not None else []
        self.registry = CommandRegistry(
            default_catalog(self.navigate),
            self.navigate,
            max_dynamic_items=self.settings.max_recent_items,
        )
        self.last_executed: str | None = None

    def compose(self) -> ComposeResult:
        yield Static(self.route, id="route")
        yield Static("Press ctrl+k to open quick actions", id="last-action")
        yield Footer()

    def on_mount(self) -> None:
        if self.settings.theme in self.available_themes:
            self.theme = self.settings.theme

    def watch_route(self, route: str) -> None:
        for widget in self.query("#route").results(Static):
            widget.update(route)

    def navigate(self, route: str) -> None:
        """Stand-in page router: record and display the route."""
        logger.info(f"Navigating to {route}")
        self.route = route

    def set_transactions(self, transactions: Sequence[Any]) -> None:
        """Replace the recent-transaction source used on the next open."""
        self.transactions = transactions

    def _palette_open(self) -> bool:
        return isinstance(self.screen, CommandPaletteScreen)

    def action_open_palette(self) -> None:
        if self._palette_open():
            return
        arbiter = SelectionArbiter(lock_seconds=self.settings.keyboard_lock_seconds)
        self.push_screen(
            CommandPaletteScreen(self.registry, self.transactions, arbiter=arbiter),
            callback=self._on_palette_closed,
        )

    def _on_palette_closed(self, item_id: str | None) -> None:
        self.last_executed = item_id
        message = f"Ran {item_id}" if item_id else "Palette closed"
        self.query_one("#last-action", Static).update(message)
