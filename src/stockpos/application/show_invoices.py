"""Application service: Show Invoices use cases (queries)."""

from __future__ import annotations

from stockpos.application.dto import InvoiceDTO, invoice_to_dto
from stockpos.domain.exceptions import NotFoundError
from stockpos.domain.repository.invoice_repository import InvoiceRepository


class ListInvoicesHandler:

    def __init__(self, invoice_repo: InvoiceRepository) -> None:
        self._invoice_repo = invoice_repo

    def handle(self, search: str | None = None) -> list[InvoiceDTO]:
        """Invoices newest first, optionally filtered by bill number or customer."""
        return [invoice_to_dto(inv) for inv in self._invoice_repo.search(search)]


class ShowInvoiceHandler:

    def __init__(self, invoice_repo: InvoiceRepository) -> None:
        self._invoice_repo = invoice_repo

    def handle(self, reference: str) -> InvoiceDTO:
        """Look an invoice up by its ID or its bill number."""
        invoice = (
            self._invoice_repo.get_by_id(reference)
            or self._invoice_repo.get_by_bill_number(reference)
        )
        if invoice is None:
            raise NotFoundError(f"Invoice '{reference}' not found")
        return invoice_to_dto(invoice)
