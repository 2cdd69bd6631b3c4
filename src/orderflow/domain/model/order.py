"""Order aggregate — the record produced by a committed placement.

An Order is created exactly once by the placement transaction and from
then on only its status (and dispatch timestamp) change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.value_objects import Money, Quantity


class OrderStatus(str, Enum):
    """Well-known status labels.

    The status set is open: any non-blank label is accepted by
    ``Order.update_status``. Only DISPATCHED carries extra behaviour.
    """

    PLACED = "Placed"
    DISPATCHED = "Dispatched"


@dataclass(frozen=True)
class OrderLine:
    """Committed snapshot of one requested line.

    ``remaining_stock`` is the product's available quantity immediately
    after this line's decrement.
    """

    product_id: int
    product_name: str
    category: str
    unit_price: Money  # locked at placement time
    quantity: Quantity
    remaining_stock: int

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders. ``total`` is the pricing result
    computed at placement and is never recomputed from the lines.
    """

    id: int | None
    lines: list[OrderLine]
    total: Money
    status: str = OrderStatus.PLACED.value
    dispatched_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(lines: list[OrderLine], total: Money) -> Order:
        if not lines:
            raise ValidationError("Order must contain at least one line")
        return Order(id=None, lines=list(lines), total=total)

    # --- State transitions ----------------------------------------------------

    def update_status(self, new_status: str, now: datetime) -> None:
        """Overwrite the status; stamp the dispatch time on first dispatch.

        No transition table applies. Once stamped, ``dispatched_at`` is
        never cleared or moved, even if DISPATCHED is applied again.
        """
        if not isinstance(new_status, str) or not new_status.strip():
            raise ValidationError("Order status is required")
        if new_status == OrderStatus.DISPATCHED.value and self.dispatched_at is None:
            self.dispatched_at = now
        self.status = new_status

    # --- Computed properties --------------------------------------------------

    @property
    def is_dispatched(self) -> bool:
        return self.dispatched_at is not None
