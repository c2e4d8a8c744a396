"""Shared test fixtures — small hand-checkable catalog plus the default one."""

from __future__ import annotations

import pytest

from dessert_pusher.config import Dessert, DessertCatalog, default_catalog


@pytest.fixture
def abc_catalog() -> DessertCatalog:
    """A{price 5, starts 0}, B{price 10, starts 2}, C{price 15, starts 5}."""
    return DessertCatalog(desserts=[
        Dessert(name="A", image="a.png", price=5, start_production_amount=0),
        Dessert(name="B", image="b.png", price=10, start_production_amount=2),
        Dessert(name="C", image="c.png", price=15, start_production_amount=5),
    ])


@pytest.fixture
def catalog() -> DessertCatalog:
    return default_catalog()


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
