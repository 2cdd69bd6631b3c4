"""Application service: Update Order Status use case.

Overwrites the status of an existing order. Applying the dispatch status
stamps the dispatch time the first time it happens.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime, timezone

import structlog

from orderflow.application.dto import OrderDTO, order_to_dto
from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        lock: threading.RLock,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._lock = lock
        self._clock = clock

    def handle(self, order_id: int, new_status: str) -> OrderDTO:
        with self._lock:
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            previous = order.status
            order.update_status(new_status, now=self._clock())
            self._order_repo.save(order)
            dto = order_to_dto(order)

        logger.info(
            "order_status_updated",
            order_id=order_id,
            previous_status=previous,
            status=dto.status,
            dispatched_at=dto.dispatched_at.isoformat() if dto.dispatched_at else None,
        )
        return dto
