"""Application service: Show Order use case (query)."""

from __future__ import annotations

import threading

from orderflow.application.dto import OrderDTO, order_to_dto
from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository, lock: threading.RLock) -> None:
        self._order_repo = order_repo
        self._lock = lock

    def handle(self, order_id: int) -> OrderDTO:
        with self._lock:
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            return order_to_dto(order)
