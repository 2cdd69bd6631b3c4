"""Abstract repository for the Order ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> int:
        """Insert a new order, assign its ID and return it.

        IDs come from a monotonic counter and are never reused.
        """

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in creation order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Replace an existing order."""
