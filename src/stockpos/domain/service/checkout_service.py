"""Domain service: Checkout.

A ``CheckoutSession`` is one register: it owns a cart, reads stock from
the shared ledger while the cart is built, and on checkout posts the
sale to the ledger and files the invoice.  Checkout is atomic from the
caller's point of view: either the sale is posted and an invoice is
stored, or the ledger, the invoice store and the cart are all unchanged.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Callable

from stockpos.domain.exceptions import EmptyCartError
from stockpos.domain.model.cart import Cart, CartState, CartTotals, SaleItem
from stockpos.domain.model.invoice import Invoice
from stockpos.domain.model.value_objects import whole_number
from stockpos.domain.repository.invoice_repository import InvoiceRepository
from stockpos.domain.service.inventory_ledger import (
    Clock,
    InventoryLedger,
    new_id,
    utc_now,
)

logger = logging.getLogger(__name__)


class CheckoutSession:

    def __init__(
        self,
        ledger: InventoryLedger,
        invoice_repo: InvoiceRepository,
        clock: Clock = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._ledger = ledger
        self._invoice_repo = invoice_repo
        self._clock = clock
        self._new_id = id_factory
        self._cart = Cart()
        self._lock = threading.RLock()

    # --- Cart queries ---------------------------------------------------------

    @property
    def state(self) -> CartState:
        return self._cart.state

    @property
    def lines(self) -> list[SaleItem]:
        return self._cart.lines

    def totals(self) -> CartTotals:
        return self._cart.totals()

    # --- Cart building --------------------------------------------------------

    def add_item(self, product_id: str) -> SaleItem:
        """Add one unit of a product, checked against its current stock."""
        with self._lock:
            product = self._ledger.get_product(product_id)
            return self._cart.add(product)

    def set_line_quantity(self, product_id: str, quantity: object) -> SaleItem | None:
        """Set a line's quantity; 0 removes the line."""
        with self._lock:
            if whole_number(quantity, "Quantity") == 0:
                self._cart.remove(product_id)
                return None
            product = self._ledger.get_product(product_id)
            return self._cart.set_quantity(product, quantity)

    def remove_item(self, product_id: str) -> None:
        with self._lock:
            self._cart.remove(product_id)

    # --- Checkout -------------------------------------------------------------

    def checkout(self, customer_name: str | None = None) -> Invoice:
        """Post the cart to the ledger and return the stored invoice.

        If the invoice cannot be built or the ledger refuses the sale
        (stock changed or a product was deleted since it was added) the
        error propagates and the ledger, the invoice store and the cart
        are left as they were.  The bill number is taken only once the
        sale is accepted.
        """
        with self._lock:
            if self._cart.is_empty:
                raise EmptyCartError("Cannot check out an empty cart")

            # Built before posting so a bad customer name or line fails
            # while the ledger is still untouched.
            draft = Invoice.create(
                id=self._new_id(),
                bill_number="",
                customer_name=customer_name,
                items=self._cart.lines,
                date=self._clock(),
            )

            self._ledger.apply_sale(self._cart.sale_lines())

            self._cart.check_out()
            invoice = replace(draft, bill_number=self._invoice_repo.next_bill_number())
            self._invoice_repo.add(invoice)
            self._cart.reset()

        logger.info(
            "Checkout %s for %s: %d units, %s",
            invoice.bill_number, invoice.customer_name,
            invoice.total_quantity, invoice.grand_total,
        )
        return invoice
