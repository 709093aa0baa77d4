"""Application service: Checkout use case.

Builds a cart from a list of item specs in one go and checks it out.
Used by the CLI, where a sale is entered as a single command rather than
built up line by line at a register.
"""

from __future__ import annotations

from stockpos.application.dto import InvoiceDTO, SaleItemSpec, invoice_to_dto
from stockpos.domain.exceptions import EmptyCartError
from stockpos.domain.repository.invoice_repository import InvoiceRepository
from stockpos.domain.service.checkout_service import CheckoutSession
from stockpos.domain.service.inventory_ledger import InventoryLedger


class CheckoutHandler:

    def __init__(
        self,
        ledger: InventoryLedger,
        invoice_repo: InvoiceRepository,
    ) -> None:
        self._ledger = ledger
        self._invoice_repo = invoice_repo

    def handle(self, customer_name: str | None, item_specs: list[SaleItemSpec]) -> InvoiceDTO:
        """Sell the given items.

        Steps:
        1. Merge specs that name the same product.
        2. Add each product to a fresh cart and set its quantity
           (stock-checked by the cart).
        3. Check out: post the sale to the ledger and store the invoice.
        """
        if not item_specs:
            raise EmptyCartError("Cannot check out an empty cart")

        quantities: dict[str, int] = {}
        for spec in item_specs:
            quantities[spec.product_id] = quantities.get(spec.product_id, 0) + spec.quantity

        session = CheckoutSession(self._ledger, self._invoice_repo)
        for product_id, quantity in quantities.items():
            session.add_item(product_id)
            if quantity != 1:
                session.set_line_quantity(product_id, quantity)

        invoice = session.checkout(customer_name)
        return invoice_to_dto(invoice)
