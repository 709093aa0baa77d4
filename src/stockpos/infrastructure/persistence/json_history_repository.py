"""JSON-file-backed implementation of HistoryRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from stockpos.domain.model.history import ActionType, InventoryHistoryEntry
from stockpos.domain.repository.history_repository import HistoryRepository
from stockpos.infrastructure.persistence.json_file import JsonRecordFile


class JsonHistoryRepository(HistoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonRecordFile(file_path)

    def append(self, entry: InventoryHistoryEntry) -> None:
        records = self._file.load()
        records.append(self._to_raw(entry))
        self._file.persist(records)

    def list_all(self) -> list[InventoryHistoryEntry]:
        return [self._to_domain(raw) for raw in reversed(self._file.load())]

    @staticmethod
    def _to_raw(entry: InventoryHistoryEntry) -> dict:
        return {
            "id": entry.id,
            "product_id": entry.product_id,
            "product_name": entry.product_name,
            "previous_quantity": entry.previous_quantity,
            "new_quantity": entry.new_quantity,
            "action_type": entry.action_type.value,
            "updated_by": entry.updated_by,
            "timestamp": entry.timestamp.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryHistoryEntry:
        return InventoryHistoryEntry(
            id=raw["id"],
            product_id=raw["product_id"],
            product_name=raw["product_name"],
            previous_quantity=raw["previous_quantity"],
            new_quantity=raw["new_quantity"],
            action_type=ActionType(raw["action_type"]),
            updated_by=raw["updated_by"],
            timestamp=datetime.fromisoformat(raw["timestamp"]),
        )
