"""
Command Palette - quick-actions overlay.

Provides:
- CommandRegistry: Static catalog plus recent-transaction items
- filter_items / group_items: Query filtering and category grouping
- SelectionArbiter: Keyboard/pointer arbitration of the active row
- PalettePresenter: Session state, scroll requests and execution
- CommandPaletteScreen: Modal Textual overlay
"""

from .palette_commands import (
    CommandCategory,
    CommandItem,
    CommandRegistry,
    build_snapshot,
    default_catalog,
    entity_to_item,
)
from .palette_presenter import (
    ConfirmSource,
    PaletteKey,
    PalettePresenter,
    PaletteStateVM,
    ViewportSync,
)
from .palette_screen import CommandPaletteScreen
from .palette_search import GroupedView, IndexedItem, filter_items, group_items
from .selection_arbiter import (
    ItemVisual,
    Modality,
    SelectionArbiter,
    SelectionState,
    resolve_visual,
)

__all__ = [
    "CommandCategory",
    "CommandItem",
    "CommandPaletteScreen",
    "CommandRegistry",
    "ConfirmSource",
    "GroupedView",
    "IndexedItem",
    "ItemVisual",
    "Modality",
    "PaletteKey",
    "PalettePresenter",
    "PaletteStateVM",
    "SelectionArbiter",
    "SelectionState",
    "resolve_visual",
    "ViewportSync",
    "build_snapshot",
    "default_catalog",
    "entity_to_item",
    "filter_items",
    "group_items",
]
