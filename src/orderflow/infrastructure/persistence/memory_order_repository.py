"""In-memory implementation of OrderRepository."""

from __future__ import annotations

import itertools
import threading

from orderflow.domain.exceptions import EntityNotFoundError, ValidationError
from orderflow.domain.model.order import Order
from orderflow.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self, lock: threading.RLock | None = None) -> None:
        self._lock = lock if lock is not None else threading.RLock()
        self._store: dict[int, Order] = {}
        # Independent of len(self._store) so IDs are never reused.
        self._ids = itertools.count(1)

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> int:
        if order.id is not None:
            raise ValidationError(f"Order #{order.id} has already been recorded")
        with self._lock:
            order.id = next(self._ids)
            self._store[order.id] = order
            return order.id

    def get_by_id(self, order_id: int) -> Order | None:
        with self._lock:
            return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        with self._lock:
            # dicts keep insertion order, which is creation order here
            return list(self._store.values())

    def save(self, order: Order) -> None:
        with self._lock:
            if order.id is None or order.id not in self._store:
                raise EntityNotFoundError(f"Order #{order.id} not found")
            self._store[order.id] = order
