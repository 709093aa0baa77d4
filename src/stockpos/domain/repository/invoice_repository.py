"""Abstract repository for Invoices: the append-only invoice store."""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockpos.domain.model.invoice import Invoice


class InvoiceRepository(ABC):

    @abstractmethod
    def next_bill_number(self) -> str:
        """Reserve the next bill number (``INV-000001``, ``INV-000002`` ...)."""

    @abstractmethod
    def get_by_id(self, invoice_id: str) -> Invoice | None:
        """Return an invoice by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Invoice]:
        """Return every invoice, newest first."""

    @abstractmethod
    def add(self, invoice: Invoice) -> None:
        """Store a new invoice. Raises ValidationError if the ID exists."""

    # --- Queries built on list_all --------------------------------------------

    def get_by_bill_number(self, bill_number: str) -> Invoice | None:
        wanted = bill_number.strip().upper()
        for invoice in self.list_all():
            if invoice.bill_number.upper() == wanted:
                return invoice
        return None

    def search(self, query: str | None) -> list[Invoice]:
        """Invoices whose bill number or customer name contains *query*."""
        invoices = self.list_all()
        if not query or not query.strip():
            return invoices
        return [invoice for invoice in invoices if invoice.matches(query)]


def format_bill_number(sequence: int) -> str:
    return f"INV-{sequence:06d}"
