"""Application service: Show History use case (query)."""

from __future__ import annotations

from stockpos.application.dto import HistoryEntryDTO, history_to_dto
from stockpos.domain.service.inventory_ledger import InventoryLedger


class ShowHistoryHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(
        self,
        product_id: str | None = None,
        action_type: str | None = None,
        search: str | None = None,
    ) -> list[HistoryEntryDTO]:
        entries = self._ledger.history(
            product_id=product_id, action_type=action_type, search=search
        )
        return [history_to_dto(e) for e in entries]
