"""Integration tests for the product and stock use cases.

Uses the in-memory repositories, no file I/O.
"""

import pytest

from stockpos.application.add_product import AddProductHandler
from stockpos.application.adjust_stock import AdjustStockHandler
from stockpos.application.delete_product import DeleteProductHandler
from stockpos.application.show_history import ShowHistoryHandler
from stockpos.application.show_inventory import ShowInventoryHandler
from stockpos.application.update_product import UpdateProductHandler
from stockpos.domain.exceptions import (
    InsufficientStockError,
    NotFoundError,
    ValidationError,
)
from stockpos.domain.service.inventory_ledger import InventoryLedger
from stockpos.infrastructure.persistence.memory_repositories import (
    InMemoryHistoryRepository,
    InMemoryProductRepository,
)


def _ledger() -> InventoryLedger:
    return InventoryLedger(
        InMemoryProductRepository(), InMemoryHistoryRepository(), operator="Clerk"
    )


class TestAddProduct:

    def test_returns_formatted_product(self):
        dto = AddProductHandler(_ledger()).handle("Main Store", "Coffee", "0.5", 120, "25")
        assert dto.item_name == "Coffee"
        assert dto.price == "$25.00"
        assert dto.weight_per_item == "0.50 kg"
        assert dto.total_weight == "60.00 kg"
        assert dto.quantity == 120

    def test_opening_stock_appears_in_history(self):
        ledger = _ledger()
        dto = AddProductHandler(ledger).handle("Main Store", "Coffee", "0.5", 120, "25")
        [entry] = ShowHistoryHandler(ledger).handle(product_id=dto.id)
        assert entry.action_type == "increase"
        assert (entry.previous_quantity, entry.new_quantity) == (0, 120)
        assert entry.change == 120
        assert entry.updated_by == "Clerk"

    def test_invalid_price_rejected(self):
        ledger = _ledger()
        with pytest.raises(ValidationError):
            AddProductHandler(ledger).handle("Main Store", "Coffee", "0.5", 1, "-3")
        assert ShowInventoryHandler(ledger).handle() == []


class TestUpdateAndDelete:

    def test_update_changes_only_given_fields(self):
        ledger = _ledger()
        dto = AddProductHandler(ledger).handle("Main Store", "Coffee", "0.5", 10, "25")
        updated = UpdateProductHandler(ledger).handle(dto.id, price="30")
        assert updated.price == "$30.00"
        assert updated.item_name == "Coffee"
        assert updated.quantity == 10

    def test_update_unknown_product(self):
        with pytest.raises(NotFoundError):
            UpdateProductHandler(_ledger()).handle("missing", price="1")

    def test_delete_returns_name_and_keeps_history(self):
        ledger = _ledger()
        dto = AddProductHandler(ledger).handle("Main Store", "Coffee", "0.5", 10, "25")
        assert DeleteProductHandler(ledger).handle(dto.id) == "Coffee"
        assert ShowInventoryHandler(ledger).handle() == []
        assert len(ShowHistoryHandler(ledger).handle(product_id=dto.id)) == 1


class TestAdjustStock:

    def test_decrease_logs_entry(self):
        ledger = _ledger()
        dto = AddProductHandler(ledger).handle("Main Store", "Coffee", "0.5", 10, "25")
        entry = AdjustStockHandler(ledger).handle(dto.id, "decrease", 4)
        assert entry.action_type == "decrease"
        assert entry.change == -4
        assert ShowInventoryHandler(ledger).handle()[0].quantity == 6

    def test_overdraw_rejected(self):
        ledger = _ledger()
        dto = AddProductHandler(ledger).handle("Main Store", "Coffee", "0.5", 3, "25")
        with pytest.raises(InsufficientStockError):
            AdjustStockHandler(ledger).handle(dto.id, "decrease", 4)
        assert ShowInventoryHandler(ledger).handle()[0].quantity == 3


class TestShowInventory:

    def test_search_and_in_stock_filter(self):
        ledger = _ledger()
        add = AddProductHandler(ledger)
        add.handle("Main Store", "Green Tea", "0.25", 5, "18.50")
        add.handle("Main Store", "Black Tea", "0.25", 0, "12")
        add.handle("Main Store", "Coffee", "0.5", 5, "25")

        teas = ShowInventoryHandler(ledger).handle(search="TEA")
        assert {p.item_name for p in teas} == {"Green Tea", "Black Tea"}

        stocked = ShowInventoryHandler(ledger).handle(search="tea", in_stock_only=True)
        assert [p.item_name for p in stocked] == ["Green Tea"]
