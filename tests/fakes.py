"""Test doubles and builders shared across the test suite.

Repositories are the real in-memory ones (they have no I/O); only the
clock needs faking so dispatch timestamps are deterministic.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money


class FakeClock:
    """Returns a fixed time that only moves when ``advance()`` is called."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


def make_product(
    product_id: int = 1,
    name: str | None = None,
    category: str = "Regular",
    price: str = "100.00",
    available: int = 10,
) -> Product:
    return Product(
        id=product_id,
        name=name or f"Product{product_id}",
        category=category,
        price=Money.of(price),
        available_quantity=available,
    )
