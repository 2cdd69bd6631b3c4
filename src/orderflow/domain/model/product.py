"""Product aggregate.

Products are seeded into the catalog at process start. The only mutation
they ever see is a stock withdrawal when an order is committed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from orderflow.domain.exceptions import InsufficientStockError, ValidationError
from orderflow.domain.model.value_objects import Money

PREMIUM_CATEGORY = "Premium"


@dataclass(frozen=True)
class Product:
    """A product in the catalog together with its live stock level.

    Frozen so that a snapshot handed out by the catalog can never be
    mutated behind the store's back; ``withdraw()`` returns a new
    snapshot instead.
    """

    id: int
    name: str
    category: str
    price: Money
    available_quantity: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.available_quantity < 0:
            raise ValidationError(
                f"Available quantity for {self.name} cannot be negative"
            )

    @property
    def is_premium(self) -> bool:
        return self.category == PREMIUM_CATEGORY

    def can_supply(self, quantity: int) -> bool:
        return quantity <= self.available_quantity

    def withdraw(self, quantity: int) -> Product:
        """Return the snapshot left after taking *quantity* units out of stock."""
        if quantity <= 0:
            raise ValidationError("Withdrawal quantity must be positive")
        if not self.can_supply(quantity):
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.available_quantity} available)"
            )
        return replace(self, available_quantity=self.available_quantity - quantity)
