"""Product aggregate.

A product is one stocked line at one inventory location.  Its quantity
only moves through ``increase``/``decrease`` (audited by the ledger) or
through ``revise`` (a manual correction from the edit form).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from stockpos.domain.exceptions import InsufficientStockError, ValidationError
from stockpos.domain.model.value_objects import Money, Weight, whole_number


def _require_text(value: str | None, label: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{label} is required")
    return str(value).strip()


@dataclass
class Product:
    """Aggregate root for a stocked item.

    Invariants:
    - ``quantity`` is a non-negative integer
    - ``total_weight`` is always ``weight_per_item * quantity``

    Use ``Product.create()`` for new products; ``__init__`` stays simple
    so repositories can reconstitute stored products.
    """

    id: str
    inventory_name: str
    item_name: str
    weight_per_item: Weight
    quantity: int
    price: Money
    date_added: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        id: str,
        inventory_name: str | None,
        item_name: str | None,
        weight_per_item: str | float | int | Decimal | None,
        quantity: object,
        price: str | float | int | Decimal | None,
        date_added: datetime | None = None,
    ) -> Product:
        """Create a new product, enforcing all invariants."""
        if weight_per_item is None:
            raise ValidationError("Weight per item is required")
        if price is None:
            raise ValidationError("Price is required")
        if quantity is None:
            raise ValidationError("Quantity is required")

        return Product(
            id=id,
            inventory_name=_require_text(inventory_name, "Inventory name"),
            item_name=_require_text(item_name, "Item name"),
            weight_per_item=Weight.of(weight_per_item),
            quantity=whole_number(quantity, "Quantity"),
            price=Money.of(price),
            date_added=date_added or datetime.now(timezone.utc),
        )

    # --- Derived values -------------------------------------------------------

    @property
    def total_weight(self) -> Weight:
        return self.weight_per_item * self.quantity

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    # --- Stock movements ------------------------------------------------------

    def increase(self, amount: int) -> None:
        if amount <= 0:
            raise ValidationError("Increase amount must be positive")
        self.quantity += amount

    def decrease(self, amount: int) -> None:
        """Remove *amount* units; refuses to go below zero."""
        if amount <= 0:
            raise ValidationError("Decrease amount must be positive")
        if amount > self.quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {self.item_name} "
                f"(need {amount}, have {self.quantity})"
            )
        self.quantity -= amount

    # --- Edits ----------------------------------------------------------------

    def revise(
        self,
        inventory_name: str | None = None,
        item_name: str | None = None,
        weight_per_item: str | float | int | Decimal | None = None,
        quantity: object = None,
        price: str | float | int | Decimal | None = None,
    ) -> None:
        """Replace the editable fields that are given.

        Every new value is validated before any field is assigned, so a
        bad value leaves the product untouched.
        """
        new_inventory = (
            _require_text(inventory_name, "Inventory name")
            if inventory_name is not None else self.inventory_name
        )
        new_item = (
            _require_text(item_name, "Item name")
            if item_name is not None else self.item_name
        )
        new_weight = (
            Weight.of(weight_per_item)
            if weight_per_item is not None else self.weight_per_item
        )
        new_quantity = (
            whole_number(quantity, "Quantity")
            if quantity is not None else self.quantity
        )
        new_price = Money.of(price) if price is not None else self.price

        self.inventory_name = new_inventory
        self.item_name = new_item
        self.weight_per_item = new_weight
        self.quantity = new_quantity
        self.price = new_price
