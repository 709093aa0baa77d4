"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from stockpos.domain.model.product import Product
from stockpos.domain.model.value_objects import Money, Weight
from stockpos.domain.repository.product_repository import ProductRepository
from stockpos.infrastructure.persistence.json_file import JsonRecordFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonRecordFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in reversed(self._file.load())]

    def save(self, product: Product) -> None:
        self._file.upsert(self._to_raw(product))

    def delete(self, product_id: str) -> None:
        self._file.remove(product_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "inventory_name": product.inventory_name,
            "item_name": product.item_name,
            "weight_per_item": str(product.weight_per_item.kilograms),
            "quantity": product.quantity,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "date_added": product.date_added.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            inventory_name=raw["inventory_name"],
            item_name=raw["item_name"],
            weight_per_item=Weight(Decimal(raw["weight_per_item"])),
            quantity=raw["quantity"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            date_added=datetime.fromisoformat(raw["date_added"]),
        )
