"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI boundary and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from orderflow.domain.model.order import Order
from orderflow.domain.model.product import Product


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the caller asked for (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    category: str
    price: float
    availability: int


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a committed line, with the stock left after it was taken."""

    product_id: int
    product_name: str
    category: str
    unit_price: float
    quantity: int
    line_total: float
    remaining_stock: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order."""

    id: int
    status: str
    lines: list[OrderLineDTO]
    total: float
    created_at: datetime
    dispatched_at: datetime | None


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        category=product.category,
        price=float(product.price),
        availability=product.available_quantity,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        status=order.status,
        lines=[
            OrderLineDTO(
                product_id=line.product_id,
                product_name=line.product_name,
                category=line.category,
                unit_price=float(line.unit_price),
                quantity=line.quantity.value,
                line_total=float(line.line_total),
                remaining_stock=line.remaining_stock,
            )
            for line in order.lines
        ],
        total=float(order.total),
        created_at=order.created_at,
        dispatched_at=order.dispatched_at,
    )
