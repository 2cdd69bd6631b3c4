"""FastAPI application exposing the catalog and order operations.

Endpoints are plain ``def`` functions: they run in the server threadpool
and serialize on the store lock inside the handlers.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from orderflow.application.dto import OrderItemSpec
from orderflow.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from orderflow.infrastructure.api.schemas import (
    ErrorSchema,
    OrderSchema,
    PlaceOrderRequest,
    ProductSchema,
    UpdateOrderStatusRequest,
)
from orderflow.infrastructure.bootstrap import Container, build_container
from orderflow.infrastructure.logging import get_logger

logger = get_logger(__name__)

# Map exception types to (HTTP status, error kind)
ERROR_RESPONSES: dict[type[DomainException], tuple[int, str]] = {
    ValidationError: (400, "MalformedInput"),
    EntityNotFoundError: (404, "NotFound"),
    InsufficientStockError: (409, "InsufficientStock"),
}

_ERROR_MODELS = {
    400: {"model": ErrorSchema},
    404: {"model": ErrorSchema},
    409: {"model": ErrorSchema},
}


def _error(status_code: int, kind: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "error_type": kind},
    )


def _container(request: Request) -> Container:
    return request.app.state.container


def create_app(container: Container | None = None) -> FastAPI:
    """Build the API around *container* (a freshly seeded one by default)."""
    app = FastAPI(
        title="orderflow API",
        description="In-memory catalog, order placement and order status tracking",
        version="0.1.0",
    )
    app.state.container = container if container is not None else build_container()

    # --- Exception handlers ---------------------------------------------------

    @app.exception_handler(DomainException)
    async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
        status_code, kind = ERROR_RESPONSES.get(type(exc), (500, type(exc).__name__))
        logger.warning(
            "request_failed",
            path=request.url.path,
            status_code=status_code,
            error_type=kind,
            detail=str(exc),
        )
        return _error(status_code, kind, str(exc))

    @app.exception_handler(RequestValidationError)
    async def malformed_input_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = [
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in exc.errors()
        ]
        return _error(400, "MalformedInput", "; ".join(messages) or "Malformed request")

    # --- Endpoints ------------------------------------------------------------

    @app.get("/health")
    def health_check() -> dict:
        return {"status": "ok"}

    @app.get("/productCatalog", response_model=list[ProductSchema])
    def list_products(request: Request) -> list[ProductSchema]:
        products = _container(request).list_products_handler().handle()
        return [ProductSchema.from_dto(p) for p in products]

    @app.get("/orders", response_model=list[OrderSchema])
    def list_orders(request: Request) -> list[OrderSchema]:
        orders = _container(request).list_orders_handler().handle()
        return [OrderSchema.from_dto(o) for o in orders]

    @app.get("/orders/{order_id}", response_model=OrderSchema, responses=_ERROR_MODELS)
    def show_order(order_id: int, request: Request) -> OrderSchema:
        dto = _container(request).show_order_handler().handle(order_id)
        return OrderSchema.from_dto(dto)

    @app.post("/placeOrder", response_model=OrderSchema, responses=_ERROR_MODELS)
    def place_order(body: PlaceOrderRequest, request: Request) -> OrderSchema:
        specs = [OrderItemSpec(product_id=p.id, quantity=p.quantity) for p in body.products]
        dto = _container(request).place_order_handler().handle(specs)
        return OrderSchema.from_dto(dto)

    @app.post("/updateOrderStatus", response_model=OrderSchema, responses=_ERROR_MODELS)
    def update_order_status(body: UpdateOrderStatusRequest, request: Request) -> OrderSchema:
        dto = _container(request).update_order_status_handler().handle(
            body.order_id, body.order_status
        )
        return OrderSchema.from_dto(dto)

    return app
