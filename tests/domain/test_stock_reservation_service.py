"""Unit tests for the StockReservationService domain service."""

import pytest

from orderflow.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from orderflow.domain.service.stock_reservation_service import (
    MAX_LINE_QUANTITY,
    StockReservationService,
)
from orderflow.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import make_product


def _make_catalog(*specs: tuple[int, int]) -> InMemoryProductRepository:
    """Create a catalog from (product_id, available) tuples."""
    return InMemoryProductRepository(make_product(pid, available=avail) for pid, avail in specs)


class TestCheck:

    def test_resolves_all_lines_in_order(self):
        repo = _make_catalog((1, 10), (2, 20))
        checked = StockReservationService(repo).check([(2, 3), (1, 5)])
        assert [(p.id, qty) for p, qty in checked] == [(2, 3), (1, 5)]

    def test_check_does_not_mutate(self):
        repo = _make_catalog((1, 10))
        StockReservationService(repo).check([(1, 5)])
        assert repo.get_by_id(1).available_quantity == 10

    def test_unknown_product_rejected(self):
        repo = _make_catalog((1, 10))
        with pytest.raises(EntityNotFoundError, match="Product #99 not found"):
            StockReservationService(repo).check([(1, 1), (99, 1)])

    def test_insufficient_stock_rejected(self):
        repo = _make_catalog((1, 3))
        with pytest.raises(InsufficientStockError, match="need 4, have 3"):
            StockReservationService(repo).check([(1, 4)])

    def test_per_line_cap_applies_even_with_stock(self):
        repo = _make_catalog((1, 50))
        with pytest.raises(InsufficientStockError, match="per-line limit"):
            StockReservationService(repo).check([(1, MAX_LINE_QUANTITY + 1)])

    def test_cap_is_inclusive(self):
        repo = _make_catalog((1, 50))
        checked = StockReservationService(repo).check([(1, MAX_LINE_QUANTITY)])
        assert checked[0][1] == MAX_LINE_QUANTITY

    def test_duplicate_lines_share_a_shrinking_pool(self):
        repo = _make_catalog((1, 10))
        with pytest.raises(InsufficientStockError, match="need 6, have 4"):
            StockReservationService(repo).check([(1, 6), (1, 6)])

    def test_duplicate_lines_within_stock_pass(self):
        repo = _make_catalog((1, 10))
        checked = StockReservationService(repo).check([(1, 6), (1, 4)])
        assert len(checked) == 2

    def test_non_positive_quantity_rejected(self):
        repo = _make_catalog((1, 10))
        with pytest.raises(ValidationError, match="must be positive"):
            StockReservationService(repo).check([(1, 0)])


class TestCommit:

    def test_decrements_and_returns_snapshots(self):
        repo = _make_catalog((1, 10), (2, 20))
        svc = StockReservationService(repo)

        snapshots = svc.commit(svc.check([(1, 5), (2, 1)]))

        assert [s.available_quantity for s in snapshots] == [5, 19]
        assert repo.get_by_id(1).available_quantity == 5
        assert repo.get_by_id(2).available_quantity == 19

    def test_duplicate_lines_snapshot_running_stock(self):
        repo = _make_catalog((1, 10))
        svc = StockReservationService(repo)

        snapshots = svc.commit(svc.check([(1, 6), (1, 4)]))

        assert [s.available_quantity for s in snapshots] == [4, 0]
