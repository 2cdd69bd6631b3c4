"""Application service: List Orders use case (query)."""

from __future__ import annotations

import threading

from orderflow.application.dto import OrderDTO, order_to_dto
from orderflow.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, lock: threading.RLock) -> None:
        self._order_repo = order_repo
        self._lock = lock

    def handle(self) -> list[OrderDTO]:
        with self._lock:
            return [order_to_dto(order) for order in self._order_repo.list_all()]
