"""Application service: Place Order use case.

This is the placement transaction. Validation, pricing, stock decrement
and ledger insertion all run while holding the shared store lock, so two
placements never interleave and a failure leaves no trace:

  Validating: every line resolved and checked against live stock
  Pricing:    total computed over the resolved products
  Committing: stock decremented, Order recorded in the ledger

Only the commit phase mutates anything, and it cannot fail once every
line has passed validation under the same lock.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence

import structlog

from orderflow.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from orderflow.domain.exceptions import DomainException, ValidationError
from orderflow.domain.model.order import Order, OrderLine
from orderflow.domain.model.value_objects import Quantity
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.repository.product_repository import ProductRepository
from orderflow.domain.service.pricing_service import PricingService
from orderflow.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        lock: threading.RLock,
        pricing: PricingService | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._lock = lock
        self._pricing = pricing if pricing is not None else PricingService()

    def handle(self, item_specs: Sequence[OrderItemSpec]) -> OrderDTO:
        if not item_specs:
            raise ValidationError("Order must contain at least one product")

        requested = [(spec.product_id, spec.quantity) for spec in item_specs]
        stock = StockReservationService(self._product_repo)

        with self._lock:
            try:
                checked = stock.check(requested)
            except DomainException as exc:
                logger.warning(
                    "order_rejected",
                    reason=type(exc).__name__,
                    detail=str(exc),
                    lines=len(requested),
                )
                raise

            total = self._pricing.price(checked)

            snapshots = stock.commit(checked)
            lines = [
                OrderLine(
                    product_id=snapshot.id,
                    product_name=snapshot.name,
                    category=snapshot.category,
                    unit_price=snapshot.price,  # <-- price snapshot
                    quantity=Quantity(qty),
                    remaining_stock=snapshot.available_quantity,
                )
                for snapshot, (_, qty) in zip(snapshots, checked)
            ]
            order = Order.place(lines=lines, total=total)
            self._order_repo.add(order)
            dto = order_to_dto(order)

        logger.info(
            "order_placed",
            order_id=dto.id,
            lines=len(dto.lines),
            total=dto.total,
            discount_mode=self._pricing.mode.value,
        )
        return dto
