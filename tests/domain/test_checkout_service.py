"""Tests for the CheckoutSession domain service."""

import pytest

from stockpos.domain.exceptions import (
    EmptyCartError,
    InsufficientStockError,
    NotFoundError,
    OutOfStockError,
    ValidationError,
)
from stockpos.domain.model.cart import CartState
from stockpos.domain.model.history import ActionType
from stockpos.domain.model.invoice import WALK_IN_CUSTOMER
from stockpos.domain.model.value_objects import Money, Weight
from stockpos.domain.service.checkout_service import CheckoutSession
from stockpos.domain.service.inventory_ledger import InventoryLedger
from stockpos.infrastructure.persistence.memory_repositories import (
    InMemoryHistoryRepository,
    InMemoryInvoiceRepository,
    InMemoryProductRepository,
)


def _setup(quantity=10, price="5", weight="0.5"):
    history_repo = InMemoryHistoryRepository()
    ledger = InventoryLedger(InMemoryProductRepository(), history_repo)
    invoice_repo = InMemoryInvoiceRepository()
    product = ledger.create_product("Main Store", "Coffee", weight, quantity, price)
    session = CheckoutSession(ledger, invoice_repo)
    return session, ledger, product, invoice_repo, history_repo


class TestCheckoutHappyPath:

    def test_three_units_sold_from_stock_of_ten(self):
        session, ledger, product, invoice_repo, history_repo = _setup()

        for _ in range(3):
            session.add_item(product.id)
        [line] = session.lines
        assert line.quantity == 3
        assert line.total_price == Money.of("15")

        invoice = session.checkout("Alice")

        stocked = ledger.get_product(product.id)
        assert stocked.quantity == 7
        assert stocked.total_weight == Weight.of("3.5")
        assert invoice.grand_total == Money.of("15")
        assert invoice_repo.list_all() == [invoice]

        sales = ledger.history(action_type=ActionType.SALE)
        assert len(sales) == 1
        assert (sales[0].previous_quantity, sales[0].new_quantity) == (10, 7)

    def test_invoice_totals_match_its_items(self):
        session, ledger, coffee, _, _ = _setup(price="5", weight="0.5")
        tea = ledger.create_product("Warehouse A", "Tea", "0.25", 45, "18.50")
        session.add_item(coffee.id)
        session.add_item(tea.id)
        session.set_line_quantity(tea.id, 4)

        invoice = session.checkout("Bob")

        grand_total = Money.zero()
        total_weight = Weight.zero()
        for item in invoice.items:
            grand_total = grand_total + item.total_price
            total_weight = total_weight + item.weight * item.quantity
        assert invoice.grand_total == grand_total == Money.of("79")
        assert invoice.total_weight == total_weight == Weight.of("1.5")
        assert invoice.total_quantity == 5

    def test_cart_resets_after_checkout(self):
        session, _, product, _, _ = _setup()
        session.add_item(product.id)
        session.checkout("Alice")

        assert session.state == CartState.EMPTY
        assert session.lines == []
        assert session.totals().quantity == 0

    def test_bill_numbers_are_sequential(self):
        session, _, product, _, _ = _setup()
        session.add_item(product.id)
        first = session.checkout("Alice")
        session.add_item(product.id)
        second = session.checkout("Bob")

        assert first.bill_number == "INV-000001"
        assert second.bill_number == "INV-000002"
        assert first.id != second.id

    def test_blank_customer_is_walk_in(self):
        session, _, product, _, _ = _setup()
        session.add_item(product.id)
        assert session.checkout("").customer_name == WALK_IN_CUSTOMER

    def test_invoice_keeps_prices_after_product_edit(self):
        session, ledger, product, _, _ = _setup(price="5")
        session.add_item(product.id)
        invoice = session.checkout("Alice")
        ledger.update_product(product.id, price="50")
        assert invoice.items[0].price == Money.of("5")


class TestCheckoutFailures:

    def test_empty_cart_rejected_and_store_unchanged(self):
        session, _, _, invoice_repo, _ = _setup()
        with pytest.raises(EmptyCartError):
            session.checkout("Alice")
        assert invoice_repo.list_all() == []

    def test_stock_drop_after_adding_leaves_cart_untouched(self):
        session, ledger, product, invoice_repo, history_repo = _setup(quantity=10)
        session.add_item(product.id)
        session.set_line_quantity(product.id, 3)
        ledger.adjust_quantity(product.id, "decrease", 8)
        entries_before = len(history_repo.list_all())

        with pytest.raises(InsufficientStockError):
            session.checkout("Alice")

        assert session.state == CartState.BUILDING
        assert session.lines[0].quantity == 3
        assert ledger.get_product(product.id).quantity == 2
        assert invoice_repo.list_all() == []
        assert len(history_repo.list_all()) == entries_before

    def test_bad_customer_name_changes_nothing(self):
        session, ledger, product, invoice_repo, history_repo = _setup(quantity=10)
        session.add_item(product.id)
        entries_before = len(history_repo.list_all())

        with pytest.raises(ValidationError):
            session.checkout(42)

        assert ledger.get_product(product.id).quantity == 10
        assert len(history_repo.list_all()) == entries_before
        assert invoice_repo.list_all() == []
        assert session.state == CartState.BUILDING
        assert session.lines[0].quantity == 1

        assert session.checkout("Alice").bill_number == "INV-000001"

    def test_deleted_product_blocks_checkout(self):
        session, ledger, product, invoice_repo, _ = _setup()
        session.add_item(product.id)
        ledger.delete_product(product.id)

        with pytest.raises(NotFoundError):
            session.checkout("Alice")
        assert len(session.lines) == 1
        assert invoice_repo.list_all() == []

    def test_two_registers_cannot_oversell(self):
        session_a, ledger, product, invoice_repo, _ = _setup(quantity=3)
        session_b = CheckoutSession(ledger, invoice_repo)
        for _ in range(3):
            session_a.add_item(product.id)
        session_b.add_item(product.id)
        session_b.add_item(product.id)

        session_a.checkout("Alice")
        with pytest.raises(InsufficientStockError):
            session_b.checkout("Bob")

        assert session_b.lines[0].quantity == 2
        assert ledger.get_product(product.id).quantity == 0
        assert len(invoice_repo.list_all()) == 1


class TestCartOperations:

    def test_add_unknown_product_rejected(self):
        session, _, _, _, _ = _setup()
        with pytest.raises(NotFoundError):
            session.add_item("ghost")

    def test_add_beyond_stock_rejected(self):
        session, _, product, _, _ = _setup(quantity=1)
        session.add_item(product.id)
        with pytest.raises(OutOfStockError):
            session.add_item(product.id)

    def test_set_quantity_above_stock_keeps_line(self):
        session, _, product, _, _ = _setup(quantity=4)
        session.add_item(product.id)
        with pytest.raises(OutOfStockError):
            session.set_line_quantity(product.id, 5)
        assert session.lines[0].quantity == 1

    def test_set_quantity_zero_removes_line(self):
        session, _, product, _, _ = _setup()
        session.add_item(product.id)
        session.set_line_quantity(product.id, 0)
        assert session.state == CartState.EMPTY

    def test_add_then_remove_restores_cart(self):
        session, _, product, _, _ = _setup()
        session.add_item(product.id)
        session.remove_item(product.id)
        assert session.lines == []
        assert session.state == CartState.EMPTY
