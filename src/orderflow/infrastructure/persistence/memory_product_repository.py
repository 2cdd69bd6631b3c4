"""In-memory implementation of ProductRepository.

State lives for the lifetime of the process only. Every method takes the
shared re-entrant lock, so a reader can never observe a catalog that an
in-flight placement has only partly decremented (the placement holds the
same lock for its whole transaction).
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from orderflow.domain.exceptions import EntityNotFoundError, ValidationError
from orderflow.domain.model.product import Product
from orderflow.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(
        self,
        products: Iterable[Product] = (),
        lock: threading.RLock | None = None,
    ) -> None:
        self._lock = lock if lock is not None else threading.RLock()
        self._store: dict[int, Product] = {}
        for product in products:
            if product.id in self._store:
                raise ValidationError(f"Duplicate product ID {product.id} in catalog")
            self._store[product.id] = product

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        with self._lock:
            return [self._store[pid] for pid in sorted(self._store)]

    def decrement(self, product_id: int, quantity: int) -> Product:
        with self._lock:
            product = self._store.get(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product #{product_id} not found in catalog")
            updated = product.withdraw(quantity)
            self._store[product_id] = updated
            return updated
