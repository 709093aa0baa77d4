"""Application service: Update Product use case."""

from __future__ import annotations

from stockpos.application.dto import ProductDTO, product_to_dto
from stockpos.domain.service.inventory_ledger import InventoryLedger


class UpdateProductHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(
        self,
        product_id: str,
        inventory_name: str | None = None,
        item_name: str | None = None,
        weight_per_item: str | None = None,
        quantity: int | None = None,
        price: str | None = None,
    ) -> ProductDTO:
        """Edit a product's fields.

        This does NOT affect carts or invoices; they captured a
        snapshot of the product when the line was added.
        """
        product = self._ledger.update_product(
            product_id,
            inventory_name=inventory_name,
            item_name=item_name,
            weight_per_item=weight_per_item,
            quantity=quantity,
            price=price,
        )
        return product_to_dto(product)
