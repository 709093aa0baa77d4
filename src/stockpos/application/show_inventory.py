"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from stockpos.application.dto import ProductDTO, product_to_dto
from stockpos.domain.service.inventory_ledger import InventoryLedger


class ShowInventoryHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(
        self,
        search: str | None = None,
        in_stock_only: bool = False,
    ) -> list[ProductDTO]:
        products = self._ledger.list_products(search=search, in_stock_only=in_stock_only)
        return [product_to_dto(p) for p in products]
