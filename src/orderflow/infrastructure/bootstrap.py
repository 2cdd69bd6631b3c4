"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

One re-entrant lock is created per container and shared by the catalog,
the ledger and every handler; it is the atomicity boundary for order
placement and status updates.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from orderflow.application.list_orders import ListOrdersHandler
from orderflow.application.list_products import ListProductsHandler
from orderflow.application.place_order import PlaceOrderHandler
from orderflow.application.show_order import ShowOrderHandler
from orderflow.application.update_order_status import UpdateOrderStatusHandler
from orderflow.domain.model.product import Product
from orderflow.domain.service.pricing_service import DiscountMode, PricingService
from orderflow.infrastructure.config import Settings
from orderflow.infrastructure.persistence.catalog_seed import load_products
from orderflow.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from orderflow.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)


@dataclass
class Container:
    product_repo: InMemoryProductRepository
    order_repo: InMemoryOrderRepository
    lock: threading.RLock
    pricing: PricingService = field(default_factory=PricingService)
    clock: Callable[[], datetime] | None = None

    def list_products_handler(self) -> ListProductsHandler:
        return ListProductsHandler(self.product_repo, self.lock)

    def list_orders_handler(self) -> ListOrdersHandler:
        return ListOrdersHandler(self.order_repo, self.lock)

    def show_order_handler(self) -> ShowOrderHandler:
        return ShowOrderHandler(self.order_repo, self.lock)

    def place_order_handler(self) -> PlaceOrderHandler:
        return PlaceOrderHandler(
            product_repo=self.product_repo,
            order_repo=self.order_repo,
            lock=self.lock,
            pricing=self.pricing,
        )

    def update_order_status_handler(self) -> UpdateOrderStatusHandler:
        if self.clock is None:
            return UpdateOrderStatusHandler(self.order_repo, self.lock)
        return UpdateOrderStatusHandler(self.order_repo, self.lock, clock=self.clock)


def build_container(
    products: list[Product] | None = None,
    discount_mode: DiscountMode = DiscountMode.COMPOUNDING,
    clock: Callable[[], datetime] | None = None,
) -> Container:
    """Create a freshly seeded store. Defaults to the built-in catalog."""
    lock = threading.RLock()
    return Container(
        product_repo=InMemoryProductRepository(
            products if products is not None else load_products(), lock=lock
        ),
        order_repo=InMemoryOrderRepository(lock=lock),
        lock=lock,
        pricing=PricingService(discount_mode),
        clock=clock,
    )


def container_from_settings(settings: Settings) -> Container:
    return build_container(
        products=load_products(settings.catalog_file),
        discount_mode=settings.discount_mode,
    )
