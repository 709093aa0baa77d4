"""Application service: Adjust Stock use case."""

from __future__ import annotations

from stockpos.application.dto import HistoryEntryDTO, history_to_dto
from stockpos.domain.service.inventory_ledger import InventoryLedger


class AdjustStockHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(self, product_id: str, direction: str, amount: int) -> HistoryEntryDTO:
        entry = self._ledger.adjust_quantity(product_id, direction, amount)
        return history_to_dto(entry)
