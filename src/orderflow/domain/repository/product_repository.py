"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by ID."""

    @abstractmethod
    def decrement(self, product_id: int, quantity: int) -> Product:
        """Remove *quantity* units from stock and return the new snapshot.

        Raises EntityNotFoundError for an unknown product and
        InsufficientStockError if stock would go negative. Callers own
        the atomicity boundary around check-then-decrement.
        """
