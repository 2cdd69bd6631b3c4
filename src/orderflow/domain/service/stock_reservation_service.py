"""Domain service: Stock Reservation.

Coordinates the cross-aggregate check and decrement of catalog stock for
the lines of a new order.

The two-phase approach (validate-then-mutate) ensures we never leave the
catalog partially decremented if one line fails validation. Both phases
must run inside the same exclusive section; this service does not lock.
"""

from __future__ import annotations

from collections.abc import Sequence

from orderflow.domain.exceptions import EntityNotFoundError, InsufficientStockError
from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Quantity
from orderflow.domain.repository.product_repository import ProductRepository

# Business rule, independent of stock on hand.
MAX_LINE_QUANTITY = 10


class StockReservationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def check(self, requested: Sequence[tuple[int, int]]) -> list[tuple[Product, int]]:
        """Phase 1: resolve and validate ``(product_id, quantity)`` lines.

        Nothing is mutated. Lines naming the same product draw on one
        shrinking pool, so a second line can fail even though either
        alone would fit.
        """
        checked: list[tuple[Product, int]] = []
        pending: dict[int, int] = {}

        for product_id, quantity in requested:
            qty = Quantity(quantity).value
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product #{product_id} not found in catalog"
                )

            if qty > MAX_LINE_QUANTITY:
                raise InsufficientStockError(
                    f"Requested quantity {qty} of {product.name} exceeds "
                    f"the per-line limit of {MAX_LINE_QUANTITY}"
                )

            available = product.available_quantity - pending.get(product.id, 0)
            if qty > available:
                raise InsufficientStockError(
                    f"Insufficient stock for {product.name} "
                    f"(need {qty}, have {available} available)"
                )

            pending[product.id] = pending.get(product.id, 0) + qty
            checked.append((product, qty))

        return checked

    def commit(self, checked: Sequence[tuple[Product, int]]) -> list[Product]:
        """Phase 2: decrement every checked line, returning post-decrement snapshots."""
        return [
            self._product_repo.decrement(product.id, qty)
            for product, qty in checked
        ]
