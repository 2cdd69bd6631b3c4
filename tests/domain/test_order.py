"""Unit tests for the Order aggregate and its status transitions."""

from datetime import datetime, timedelta, timezone

import pytest

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.order import Order, OrderLine, OrderStatus
from orderflow.domain.model.value_objects import Money, Quantity

T0 = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


def _make_line(qty: int = 1, price: str = "100.00") -> OrderLine:
    """Helper to build a valid committed line."""
    return OrderLine(
        product_id=1,
        product_name="Product1",
        category="Premium",
        unit_price=Money.of(price),
        quantity=Quantity(qty),
        remaining_stock=5,
    )


class TestOrderPlacement:

    def test_happy_path(self):
        order = Order.place([_make_line(qty=5)], total=Money.of("500"))
        assert order.status == OrderStatus.PLACED.value == "Placed"
        assert order.total == Money.of("500")
        assert order.dispatched_at is None

    def test_id_is_none_until_recorded(self):
        order = Order.place([_make_line()], total=Money.of("100"))
        assert order.id is None  # assigned by the ledger

    def test_total_is_not_recomputed_from_lines(self):
        order = Order.place([_make_line(qty=3, price="100")], total=Money.of("270"))
        assert order.total == Money.of("270")
        assert order.lines[0].line_total == Money.of("300")

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError, match="at least one line"):
            Order.place([], total=Money.zero())


class TestOrderStatusUpdate:

    def test_any_label_accepted(self):
        order = Order.place([_make_line()], total=Money.of("100"))
        order.update_status("Packed", now=T0)
        assert order.status == "Packed"
        assert order.dispatched_at is None

    def test_label_is_stored_as_given(self):
        order = Order.place([_make_line()], total=Money.of("100"))
        order.update_status(" Dispatched ", now=T0)
        assert order.status == " Dispatched "
        assert order.dispatched_at is None

    def test_dispatch_stamps_timestamp(self):
        order = Order.place([_make_line()], total=Money.of("100"))
        order.update_status("Dispatched", now=T0)
        assert order.status == "Dispatched"
        assert order.dispatched_at == T0
        assert order.is_dispatched

    def test_redispatch_keeps_first_timestamp(self):
        order = Order.place([_make_line()], total=Money.of("100"))
        order.update_status("Dispatched", now=T0)
        order.update_status("Dispatched", now=T0 + timedelta(hours=2))
        assert order.dispatched_at == T0

    def test_later_status_does_not_clear_timestamp(self):
        order = Order.place([_make_line()], total=Money.of("100"))
        order.update_status("Dispatched", now=T0)
        order.update_status("Placed", now=T0 + timedelta(hours=1))
        assert order.status == "Placed"
        assert order.dispatched_at == T0

    def test_blank_status_rejected(self):
        order = Order.place([_make_line()], total=Money.of("100"))
        with pytest.raises(ValidationError, match="status is required"):
            order.update_status("   ", now=T0)
        assert order.status == "Placed"
