"""JSON-file-backed implementation of InvoiceRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from stockpos.domain.exceptions import ValidationError
from stockpos.domain.model.cart import SaleItem
from stockpos.domain.model.invoice import Invoice
from stockpos.domain.model.value_objects import Money, Weight
from stockpos.domain.repository.invoice_repository import (
    InvoiceRepository,
    format_bill_number,
)
from stockpos.infrastructure.persistence.json_file import JsonRecordFile


class JsonInvoiceRepository(InvoiceRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonRecordFile(file_path)

    # --- InvoiceRepository interface ------------------------------------------

    def next_bill_number(self) -> str:
        sequences = [
            int(raw["bill_number"].removeprefix("INV-"))
            for raw in self._file.load()
        ]
        return format_bill_number(max(sequences, default=0) + 1)

    def get_by_id(self, invoice_id: str) -> Invoice | None:
        for raw in self._file.load():
            if raw["id"] == invoice_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Invoice]:
        return [self._to_domain(raw) for raw in reversed(self._file.load())]

    def add(self, invoice: Invoice) -> None:
        records = self._file.load()
        if any(raw["id"] == invoice.id for raw in records):
            raise ValidationError(f"Invoice '{invoice.id}' already exists")
        records.append(self._to_raw(invoice))
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(invoice: Invoice) -> dict:
        return {
            "id": invoice.id,
            "bill_number": invoice.bill_number,
            "date": invoice.date.isoformat(),
            "customer_name": invoice.customer_name,
            "items": [
                {
                    "product_id": item.product_id,
                    "item_name": item.item_name,
                    "quantity": item.quantity,
                    "weight": str(item.weight.kilograms),
                    "price": str(item.price.amount),
                    "currency": item.price.currency,
                }
                for item in invoice.items
            ],
            "total_quantity": invoice.total_quantity,
            "total_weight": str(invoice.total_weight.kilograms),
            "grand_total": str(invoice.grand_total.amount),
            "currency": invoice.grand_total.currency,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Invoice:
        items = tuple(
            SaleItem(
                product_id=i["product_id"],
                item_name=i["item_name"],
                quantity=i["quantity"],
                weight=Weight(Decimal(i["weight"])),
                price=Money(Decimal(i["price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        )
        return Invoice(
            id=raw["id"],
            bill_number=raw["bill_number"],
            customer_name=raw["customer_name"],
            items=items,
            total_quantity=raw["total_quantity"],
            total_weight=Weight(Decimal(raw["total_weight"])),
            grand_total=Money(Decimal(raw["grand_total"]), raw.get("currency", "USD")),
            date=datetime.fromisoformat(raw["date"]),
        )
