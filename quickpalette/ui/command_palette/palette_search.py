"""
Filtering and grouping for the command palette.

Both functions are pure: the grouped view and its global indices are
rebuilt from scratch for every query, never patched.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from quickpalette.exceptions import PaletteInvariantError

from .palette_commands import CommandCategory, CommandItem


def matches(item: CommandItem, query_lower: str) -> bool:
    """Case-insensitive substring match on label, description and keywords."""
    if query_lower in item.label.lower():
        return True
    if item.description and query_lower in item.description.lower():
        return True
    return any(query_lower in keyword.lower() for keyword in item.keywords)


def filter_items(snapshot: Sequence[CommandItem], query: str) -> tuple[CommandItem, ...]:
    """
    Reduce a snapshot to the items matching query.

    An empty or whitespace-only query returns the snapshot unchanged. Otherwise
    the query is lower-cased but otherwise used as typed, and snapshot order
    is preserved.
    """
    if not query.strip():
        return tuple(snapshot)

    query_lower = query.lower()
    return tuple(item for item in snapshot if matches(item, query_lower))


@dataclass(frozen=True)
class IndexedItem:
    """An item paired with its position in the flat filtered view."""

    index: int
    item: CommandItem


@dataclass
class GroupedView:
    """Filtered items bucketed by category, in first-seen category order."""

    groups: dict[CommandCategory, list[IndexedItem]] = field(default_factory=dict)
    index_of: dict[str, int] = field(default_factory=dict)
    items: tuple[CommandItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[tuple[CommandCategory, list[IndexedItem]]]:
        return iter(self.groups.items())

    def item_at(self, index: int) -> CommandItem | None:
        if 0 <= index < len(self.items):
            return self.items[index]
        return None


def group_items(filtered: Sequence[CommandItem]) -> GroupedView:
    """
    Partition filtered items by category and assign global indices.

    The global index is the item's flat position in filtered, so it keeps
    counting across bucket boundaries.
    """
    view = GroupedView(items=tuple(filtered))
    for position, item in enumerate(view.items):
        if item.id in view.index_of:
            raise PaletteInvariantError("Item grouped twice", item_id=item.id)
        view.index_of[item.id] = position
        view.groups.setdefault(item.category, []).append(IndexedItem(position, item))
    return view
