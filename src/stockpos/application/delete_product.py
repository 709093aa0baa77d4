"""Application service: Delete Product use case."""

from __future__ import annotations

from stockpos.domain.service.inventory_ledger import InventoryLedger


class DeleteProductHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(self, product_id: str) -> str:
        """Delete a product and return its name.  History is kept."""
        product = self._ledger.get_product(product_id)
        self._ledger.delete_product(product_id)
        return product.item_name
