"""Inventory history: the append-only audit trail of quantity changes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from stockpos.domain.exceptions import ValidationError


class ActionType(Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    SALE = "sale"

    @staticmethod
    def parse(value: ActionType | str) -> ActionType:
        if isinstance(value, ActionType):
            return value
        try:
            return ActionType(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(a.value for a in ActionType)
            raise ValidationError(
                f"Unknown action type {value!r} (expected one of: {allowed})"
            ) from None


@dataclass(frozen=True)
class InventoryHistoryEntry:
    """One recorded quantity change.

    ``product_name`` is a snapshot taken when the entry is written, so
    entries stay readable after the product is renamed or deleted.
    """

    id: str
    product_id: str
    product_name: str
    previous_quantity: int
    new_quantity: int
    action_type: ActionType
    updated_by: str
    timestamp: datetime

    @property
    def change(self) -> int:
        return self.new_quantity - self.previous_quantity
