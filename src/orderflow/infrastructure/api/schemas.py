"""Pydantic request/response schemas for the HTTP API.

These are the external contracts; field names follow the wire format
clients already use (``order_id``, ``order_value``, ``availability`` ...).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from orderflow.application.dto import OrderDTO, ProductDTO


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class RequestedProduct(BaseModel):
    id: int
    quantity: int = Field(ge=1)


class PlaceOrderRequest(BaseModel):
    products: list[RequestedProduct] = Field(min_length=1)

    model_config = {
        "json_schema_extra": {
            "examples": [{"products": [{"id": 1, "quantity": 5}, {"id": 2, "quantity": 1}]}]
        }
    }


class UpdateOrderStatusRequest(BaseModel):
    order_id: int
    order_status: str = Field(min_length=1)

    model_config = {
        "json_schema_extra": {"examples": [{"order_id": 1, "order_status": "Dispatched"}]}
    }


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class ProductSchema(BaseModel):
    id: int
    name: str
    category: str
    price: float
    availability: int

    @staticmethod
    def from_dto(dto: ProductDTO) -> ProductSchema:
        return ProductSchema(
            id=dto.id,
            name=dto.name,
            category=dto.category,
            price=dto.price,
            availability=dto.availability,
        )


class OrderedProductSchema(BaseModel):
    """A committed line: the product as it stood right after the decrement."""

    id: int
    name: str
    category: str
    price: float
    quantity: int
    availability: int


class OrderSchema(BaseModel):
    order_id: int
    products: list[OrderedProductSchema]
    order_value: float
    order_status: str
    dispatch_date: datetime | None = None

    @staticmethod
    def from_dto(dto: OrderDTO) -> OrderSchema:
        return OrderSchema(
            order_id=dto.id,
            products=[
                OrderedProductSchema(
                    id=line.product_id,
                    name=line.product_name,
                    category=line.category,
                    price=line.unit_price,
                    quantity=line.quantity,
                    availability=line.remaining_stock,
                )
                for line in dto.lines
            ],
            order_value=dto.total,
            order_status=dto.status,
            dispatch_date=dto.dispatched_at,
        )


class ErrorSchema(BaseModel):
    detail: str
    error_type: str
