"""Shared pytest fixtures for quickpalette tests."""

from collections.abc import Generator

import pytest

from quickpalette.config import constants
from quickpalette.ui.command_palette import (
    CommandRegistry,
    PalettePresenter,
    SelectionArbiter,
    default_catalog,
)


class FakeClock:
    """Manually advanced monotonic clock, in seconds."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RouteRecorder:
    """Stand-in router that records every navigation."""

    def __init__(self) -> None:
        self.routes: list[str] = []

    def __call__(self, route: str) -> None:
        self.routes.append(route)


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch) -> Generator:
    """Keep tests away from the real ~/.config/quickpalette."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(constants, "QUICKPALETTE_CONFIG_DIR", config_dir)
    monkeypatch.setenv("QUICKPALETTE_CONFIG_DIR", str(config_dir))
    yield config_dir


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def navigate() -> RouteRecorder:
    return RouteRecorder()


@pytest.fixture
def transactions() -> list[dict]:
    """Three recent transactions, one of which matches "join"."""
    return [
        {
            "id": 1,
            "transaction_id": "TX1001",
            "title": "Laptop purchase",
            "amount": 4200,
            "status": "pending",
        },
        {
            "id": 2,
            "transaction_id": "TX1002",
            "title": "Freelance design",
            "amount": 850,
            "status": "completed",
        },
        {
            "id": 3,
            "transaction_id": "TX1003",
            "title": "Joint venture deposit",
            "amount": 12000,
            "status": "in_progress",
        },
    ]


@pytest.fixture
def registry(navigate: RouteRecorder) -> CommandRegistry:
    return CommandRegistry(default_catalog(navigate), navigate)


@pytest.fixture
def arbiter(clock: FakeClock) -> SelectionArbiter:
    return SelectionArbiter(clock=clock, lock_seconds=0.6)


@pytest.fixture
def presenter(registry: CommandRegistry, arbiter: SelectionArbiter) -> PalettePresenter:
    return PalettePresenter(registry, arbiter=arbiter)
