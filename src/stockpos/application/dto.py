"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockpos.domain.model.history import InventoryHistoryEntry
from stockpos.domain.model.invoice import Invoice
from stockpos.domain.model.product import Product

DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class SaleItemSpec:
    """Input: what the customer is buying (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    inventory_name: str
    item_name: str
    weight_per_item: str  # formatted, e.g. "0.50 kg"
    quantity: int
    total_weight: str
    price: str  # formatted, e.g. "$25.00"
    date_added: str


@dataclass(frozen=True)
class HistoryEntryDTO:
    product_id: str
    product_name: str
    action_type: str
    previous_quantity: int
    new_quantity: int
    change: int
    updated_by: str
    timestamp: str


@dataclass(frozen=True)
class InvoiceLineDTO:
    item_name: str
    quantity: int
    weight: str
    price: str
    total_price: str


@dataclass(frozen=True)
class InvoiceDTO:
    id: str
    bill_number: str
    date: str
    customer_name: str
    items: list[InvoiceLineDTO]
    total_quantity: int
    total_weight: str
    grand_total: str


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        inventory_name=product.inventory_name,
        item_name=product.item_name,
        weight_per_item=str(product.weight_per_item),
        quantity=product.quantity,
        total_weight=str(product.total_weight),
        price=str(product.price),
        date_added=product.date_added.strftime(DATE_FORMAT),
    )


def history_to_dto(entry: InventoryHistoryEntry) -> HistoryEntryDTO:
    return HistoryEntryDTO(
        product_id=entry.product_id,
        product_name=entry.product_name,
        action_type=entry.action_type.value,
        previous_quantity=entry.previous_quantity,
        new_quantity=entry.new_quantity,
        change=entry.change,
        updated_by=entry.updated_by,
        timestamp=entry.timestamp.strftime(DATE_FORMAT),
    )


def invoice_to_dto(invoice: Invoice) -> InvoiceDTO:
    return InvoiceDTO(
        id=invoice.id,
        bill_number=invoice.bill_number,
        date=invoice.date.strftime(DATE_FORMAT),
        customer_name=invoice.customer_name,
        items=[
            InvoiceLineDTO(
                item_name=item.item_name,
                quantity=item.quantity,
                weight=str(item.weight),
                price=str(item.price),
                total_price=str(item.total_price),
            )
            for item in invoice.items
        ],
        total_quantity=invoice.total_quantity,
        total_weight=str(invoice.total_weight),
        grand_total=str(invoice.grand_total),
    )
