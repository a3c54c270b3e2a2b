"""
Command registry for the command palette.

Assembles the palette's candidate items: a fixed catalog of navigation
targets and actions, followed by a bounded slice of recent transactions
supplied by the host.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from quickpalette.config.constants import CURRENCY_SYMBOL, MAX_DYNAMIC_ITEMS

logger = logging.getLogger(__name__)

Navigate = Callable[[str], None]


class CommandCategory(Enum):
    """Categories shown as headers in the palette."""

    NAVIGATION = "navigation"
    ACTIONS = "actions"
    TRANSACTIONS = "transactions"  # Dynamic recent-entity slice

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    CommandCategory.NAVIGATION: "Navigation",
    CommandCategory.ACTIONS: "Actions",
    CommandCategory.TRANSACTIONS: "Recent Transactions",
}

_CATEGORY_ICONS = {
    CommandCategory.NAVIGATION: "▸",
    CommandCategory.ACTIONS: "+",
    CommandCategory.TRANSACTIONS: "▪",
}


def _noop() -> None:
    return None


@dataclass(frozen=True)
class CommandItem:
    """An item that can be executed from the palette."""

    id: str  # Unique within a registry snapshot, e.g. "nav-dashboard"
    label: str  # Display name: "Dashboard"
    category: CommandCategory
    description: str | None = None
    keywords: tuple[str, ...] = ()  # Extra search terms
    action: Callable[[], None] = field(default=_noop, compare=False, repr=False)
    icon: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError(f"CommandItem {self.id!r} needs a non-empty label")
        if not self.icon:
            object.__setattr__(self, "icon", _CATEGORY_ICONS[self.category])


def _go(navigate: Navigate, route: str) -> Callable[[], None]:
    def action() -> None:
        navigate(route)

    return action


def default_catalog(navigate: Navigate) -> tuple[CommandItem, ...]:
    """Build the static navigation and action items."""
    nav = CommandCategory.NAVIGATION
    actions = CommandCategory.ACTIONS
    return (
        CommandItem(
            id="nav-dashboard",
            label="Dashboard",
            description="View your dashboard",
            category=nav,
            keywords=("home", "overview"),
            action=_go(navigate, "/dashboard"),
        ),
        CommandItem(
            id="nav-transactions",
            label="Transactions",
            description="View all transactions",
            category=nav,
            keywords=("orders", "payments"),
            action=_go(navigate, "/transactions"),
        ),
        CommandItem(
            id="nav-accounts",
            label="Payments",
            description="Manage payment accounts",
            category=nav,
            keywords=("billing", "cards"),
            action=_go(navigate, "/accounts"),
        ),
        CommandItem(
            id="nav-users",
            label="Users",
            description="Manage users",
            category=nav,
            action=_go(navigate, "/users"),
        ),
        CommandItem(
            id="nav-settings",
            label="Settings",
            description="Account settings",
            category=nav,
            keywords=("profile", "preferences"),
            action=_go(navigate, "/settings"),
        ),
        CommandItem(
            id="action-new-transaction",
            label="Create New Transaction",
            description="Start a new transaction",
            category=actions,
            keywords=("add", "create", "new"),
            action=_go(navigate, "/transactions/create"),
        ),
        CommandItem(
            id="action-join-transaction",
            label="Join Transaction",
            description="Join an existing transaction",
            category=actions,
            keywords=("participate", "enter"),
            action=_go(navigate, "/transactions/join"),
        ),
    )


def _field(entity: Any, name: str) -> str:
    """Read an optional field from a mapping or object as a string."""
    if isinstance(entity, Mapping):
        value = entity.get(name)
    else:
        value = getattr(entity, name, None)
    if value is None:
        return ""
    return str(value)


def entity_to_item(entity: Any, navigate: Navigate) -> CommandItem:
    """
    Map one recent-transaction record to a palette item.

    Missing or malformed fields degrade to empty strings; this never raises.
    """
    entity_id = _field(entity, "id")
    transaction_id = _field(entity, "transaction_id")
    title = _field(entity, "title")
    amount = _field(entity, "amount")
    status = _field(entity, "status")

    key = entity_id or transaction_id
    label = title or f"Transaction {transaction_id or entity_id}".rstrip()

    return CommandItem(
        id=f"transaction-{key}",
        label=label,
        description=f"{CURRENCY_SYMBOL}{amount} • {status}",
        category=CommandCategory.TRANSACTIONS,
        keywords=(transaction_id, title, status),
        action=_go(navigate, f"/transactions/{transaction_id}"),
    )


class CommandRegistry:
    """Builds registry snapshots from the static catalog and recent entities.

    The dynamic slice is only re-derived when the host passes a different
    entity list object; repeated builds with the same list reuse it.
    """

    def __init__(
        self,
        static_catalog: Sequence[CommandItem],
        navigate: Navigate,
        max_dynamic_items: int = MAX_DYNAMIC_ITEMS,
    ):
        self._static = tuple(static_catalog)
        self._navigate = navigate
        self._max_dynamic_items = max_dynamic_items
        self._source: Sequence[Any] | None = None
        self._dynamic: tuple[CommandItem, ...] = ()

    @property
    def static_catalog(self) -> tuple[CommandItem, ...]:
        return self._static

    def _dynamic_slice(self, entities: Sequence[Any]) -> tuple[CommandItem, ...]:
        if entities is self._source:
            return self._dynamic

        seen = {item.id for item in self._static}
        items: list[CommandItem] = []
        for entity in list(entities)[: self._max_dynamic_items]:
            item = entity_to_item(entity, self._navigate)
            if item.id in seen:
                logger.debug(f"Dropping duplicate recent item: {item.id}")
                continue
            seen.add(item.id)
            items.append(item)

        self._source = entities
        self._dynamic = tuple(items)
        logger.debug(f"Derived {len(items)} recent items from {len(entities)} entities")
        return self._dynamic

    def build(self, entities: Sequence[Any] | None = None) -> tuple[CommandItem, ...]:
        """Build a snapshot: static catalog followed by the dynamic slice."""
        if entities is None:
            entities = ()
        return self._static + self._dynamic_slice(entities)


def build_snapshot(
    entities: Sequence[Any] | None,
    navigate: Navigate,
    max_dynamic_items: int = MAX_DYNAMIC_ITEMS,
) -> tuple[CommandItem, ...]:
    """One-shot snapshot using the default catalog."""
    registry = CommandRegistry(default_catalog(navigate), navigate, max_dynamic_items)
    return registry.build(entities)
