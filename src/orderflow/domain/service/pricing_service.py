"""Domain service: order pricing with the premium tier discount.

The total is accumulated line by line in request order. Once the third
Premium line has been seen, 10% comes off the *whole running total*, not
just the line that crossed the threshold.

Two discount modes exist:

``compounding``
    The reduction is applied again on every further Premium line, so an
    order with four Premium lines has been discounted twice. This is how
    orders have always been priced and stays the default.
``once``
    The reduction is applied a single time, when the threshold is
    crossed; later lines are added at full price.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from enum import Enum

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money

PREMIUM_LINE_THRESHOLD = 3
PREMIUM_DISCOUNT_RATE = Decimal("0.10")


class DiscountMode(str, Enum):
    COMPOUNDING = "compounding"
    ONCE = "once"

    @classmethod
    def parse(cls, raw: str) -> DiscountMode:
        try:
            return cls(raw.strip().lower())
        except ValueError as exc:
            choices = ", ".join(m.value for m in cls)
            raise ValidationError(
                f"Unknown discount mode {raw!r} (expected one of: {choices})"
            ) from exc


class PricingService:

    def __init__(self, mode: DiscountMode = DiscountMode.COMPOUNDING) -> None:
        self._mode = mode

    @property
    def mode(self) -> DiscountMode:
        return self._mode

    def price(self, lines: Sequence[tuple[Product, int]]) -> Money:
        """Compute the order total for resolved ``(product, quantity)`` lines."""
        total = Money.zero()
        premium_lines = 0

        for product, quantity in lines:
            total = total + product.price * quantity
            if not product.is_premium:
                continue
            premium_lines += 1
            if self._applies_discount(premium_lines):
                total = total.discounted(PREMIUM_DISCOUNT_RATE)

        return total

    def _applies_discount(self, premium_lines: int) -> bool:
        if self._mode is DiscountMode.ONCE:
            return premium_lines == PREMIUM_LINE_THRESHOLD
        return premium_lines >= PREMIUM_LINE_THRESHOLD
