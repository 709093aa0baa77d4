"""Application service: Add Product use case."""

from __future__ import annotations

from stockpos.application.dto import ProductDTO, product_to_dto
from stockpos.domain.service.inventory_ledger import InventoryLedger


class AddProductHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(
        self,
        inventory_name: str,
        item_name: str,
        weight_per_item: str,
        quantity: int,
        price: str,
    ) -> ProductDTO:
        """Add a new product; its opening stock is logged as an increase."""
        product = self._ledger.create_product(
            inventory_name=inventory_name,
            item_name=item_name,
            weight_per_item=weight_per_item,
            quantity=quantity,
            price=price,
        )
        return product_to_dto(product)
