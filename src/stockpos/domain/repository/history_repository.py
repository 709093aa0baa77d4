"""Abstract repository for the inventory history log (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockpos.domain.model.history import InventoryHistoryEntry


class HistoryRepository(ABC):

    @abstractmethod
    def append(self, entry: InventoryHistoryEntry) -> None:
        """Record a new entry. Entries are never updated or removed."""

    @abstractmethod
    def list_all(self) -> list[InventoryHistoryEntry]:
        """Return every entry, newest first."""
