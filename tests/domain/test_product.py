"""Unit tests for the Product aggregate."""

import pytest

from orderflow.domain.exceptions import InsufficientStockError, ValidationError
from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money
from tests.fakes import make_product


class TestProductInvariants:

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product(id=1, name="Widget", category="Regular", price=Money.of("1"), available_quantity=-1)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product(id=1, name="  ", category="Regular", price=Money.of("1"), available_quantity=1)

    def test_premium_category(self):
        assert make_product(category="Premium").is_premium
        assert not make_product(category="premium").is_premium
        assert not make_product(category="Budget").is_premium


class TestProductWithdraw:

    def test_withdraw_returns_new_snapshot(self):
        product = make_product(available=10)
        after = product.withdraw(4)
        assert after.available_quantity == 6
        assert product.available_quantity == 10
        assert after.price == product.price

    def test_withdraw_everything(self):
        assert make_product(available=3).withdraw(3).available_quantity == 0

    def test_withdraw_more_than_available_rejected(self):
        with pytest.raises(InsufficientStockError, match="need 4, have 3"):
            make_product(available=3).withdraw(4)

    def test_withdraw_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            make_product().withdraw(0)

    def test_can_supply(self):
        product = make_product(available=2)
        assert product.can_supply(2)
        assert not product.can_supply(3)
