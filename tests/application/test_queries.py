"""Tests for the read-side use cases (catalog, order list, single order)."""

import pytest

from orderflow.application.dto import OrderItemSpec
from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.infrastructure.bootstrap import build_container
from tests.fakes import make_product


def _setup():
    return build_container(
        products=[
            make_product(2, category="Regular", price="150", available=20),
            make_product(1, category="Premium", price="100", available=10),
        ]
    )


class TestListProducts:

    def test_lists_catalog_sorted_by_id(self):
        products = _setup().list_products_handler().handle()
        assert [p.id for p in products] == [1, 2]
        assert products[0].category == "Premium"
        assert products[0].price == 100.0

    def test_reflects_committed_stock(self):
        container = _setup()
        container.place_order_handler().handle([OrderItemSpec(2, 4)])
        products = container.list_products_handler().handle()
        assert products[1].availability == 16


class TestListOrders:

    def test_empty_ledger(self):
        assert _setup().list_orders_handler().handle() == []

    def test_lists_in_creation_order(self):
        container = _setup()
        handler = container.place_order_handler()
        handler.handle([OrderItemSpec(1, 1)])
        handler.handle([OrderItemSpec(2, 2)])

        orders = container.list_orders_handler().handle()

        assert [o.id for o in orders] == [1, 2]
        assert [o.total for o in orders] == [100.0, 300.0]


class TestShowOrder:

    def test_shows_existing_order(self):
        container = _setup()
        placed = container.place_order_handler().handle([OrderItemSpec(1, 2)])
        assert container.show_order_handler().handle(placed.id) == placed

    def test_unknown_order_rejected(self):
        with pytest.raises(EntityNotFoundError, match="Order #7 not found"):
            _setup().show_order_handler().handle(7)
