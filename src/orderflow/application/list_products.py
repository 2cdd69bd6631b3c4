"""Application service: List Products use case (query)."""

from __future__ import annotations

import threading

from orderflow.application.dto import ProductDTO, product_to_dto
from orderflow.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository, lock: threading.RLock) -> None:
        self._product_repo = product_repo
        self._lock = lock

    def handle(self) -> list[ProductDTO]:
        """Return the catalog with current stock levels."""
        with self._lock:
            return [product_to_dto(p) for p in self._product_repo.list_all()]
