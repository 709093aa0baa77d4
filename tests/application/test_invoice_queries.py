"""Tests for the invoice listing and lookup queries."""

import pytest

from stockpos.application.checkout import CheckoutHandler
from stockpos.application.dto import SaleItemSpec
from stockpos.application.show_invoices import ListInvoicesHandler, ShowInvoiceHandler
from stockpos.domain.exceptions import NotFoundError
from stockpos.domain.service.inventory_ledger import InventoryLedger
from stockpos.infrastructure.persistence.memory_repositories import (
    InMemoryHistoryRepository,
    InMemoryInvoiceRepository,
    InMemoryProductRepository,
)


def _setup():
    ledger = InventoryLedger(InMemoryProductRepository(), InMemoryHistoryRepository())
    invoice_repo = InMemoryInvoiceRepository()
    product = ledger.create_product("Main Store", "Coffee", "0.5", 50, "10")
    checkout = CheckoutHandler(ledger, invoice_repo)
    first = checkout.handle("Alice Smith", [SaleItemSpec(product.id, 1)])
    second = checkout.handle("Bob Jones", [SaleItemSpec(product.id, 2)])
    return invoice_repo, first, second


class TestListInvoices:

    def test_newest_first(self):
        invoice_repo, first, second = _setup()
        listed = ListInvoicesHandler(invoice_repo).handle()
        assert [dto.bill_number for dto in listed] == [second.bill_number, first.bill_number]

    def test_search_by_customer(self):
        invoice_repo, _, second = _setup()
        listed = ListInvoicesHandler(invoice_repo).handle("bob")
        assert [dto.id for dto in listed] == [second.id]

    def test_search_by_bill_number(self):
        invoice_repo, first, _ = _setup()
        listed = ListInvoicesHandler(invoice_repo).handle("000001")
        assert [dto.id for dto in listed] == [first.id]

    def test_blank_search_returns_all(self):
        invoice_repo, _, _ = _setup()
        assert len(ListInvoicesHandler(invoice_repo).handle("  ")) == 2


class TestShowInvoice:

    def test_by_id(self):
        invoice_repo, first, _ = _setup()
        assert ShowInvoiceHandler(invoice_repo).handle(first.id) == first

    def test_by_bill_number_case_insensitive(self):
        invoice_repo, _, second = _setup()
        assert ShowInvoiceHandler(invoice_repo).handle("inv-000002") == second

    def test_unknown_reference(self):
        invoice_repo, _, _ = _setup()
        with pytest.raises(NotFoundError):
            ShowInvoiceHandler(invoice_repo).handle("INV-999999")
