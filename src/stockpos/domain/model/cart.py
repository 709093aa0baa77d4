"""Cart aggregate: the pending sale built at the register.

A cart holds ``SaleItem`` snapshots of product fields, not references to
live products: editing a product's price while it sits in a cart does
not change the cart line.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

from stockpos.domain.exceptions import (
    EmptyCartError,
    NotFoundError,
    OutOfStockError,
    ValidationError,
)
from stockpos.domain.model.product import Product
from stockpos.domain.model.value_objects import Money, Weight, whole_number


class CartState(Enum):
    EMPTY = "EMPTY"
    BUILDING = "BUILDING"
    CHECKED_OUT = "CHECKED_OUT"


@dataclass(frozen=True)
class SaleItem:
    """A cart or invoice line with its price and weight locked in."""

    product_id: str
    item_name: str
    quantity: int
    weight: Weight  # per unit
    price: Money  # per unit

    def __post_init__(self) -> None:
        whole_number(self.quantity, "Line quantity", minimum=1)

    @property
    def total_price(self) -> Money:
        return self.price * self.quantity

    @property
    def total_weight(self) -> Weight:
        return self.weight * self.quantity

    def with_quantity(self, quantity: int) -> SaleItem:
        return replace(self, quantity=quantity)

    @staticmethod
    def snapshot(product: Product, quantity: int = 1) -> SaleItem:
        return SaleItem(
            product_id=product.id,
            item_name=product.item_name,
            quantity=quantity,
            weight=product.weight_per_item,
            price=product.price,
        )


@dataclass(frozen=True)
class CartTotals:
    quantity: int
    weight: Weight
    price: Money


def summarize(items: Iterable[SaleItem]) -> CartTotals:
    """Aggregate quantity, weight and price over *items*."""
    quantity = 0
    weight = Weight.zero()
    price = Money.zero()
    for item in items:
        quantity += item.quantity
        weight = weight + item.total_weight
        price = price + item.total_price
    return CartTotals(quantity=quantity, weight=weight, price=price)


class Cart:
    """Aggregate root for a pending sale.

    State machine: EMPTY -> BUILDING -> CHECKED_OUT.  Lines may be
    changed while EMPTY or BUILDING; a checked-out cart accepts nothing
    until ``reset()`` returns it to EMPTY.
    """

    def __init__(self) -> None:
        self._lines: dict[str, SaleItem] = {}
        self._checked_out = False

    # --- Queries --------------------------------------------------------------

    @property
    def state(self) -> CartState:
        if self._checked_out:
            return CartState.CHECKED_OUT
        return CartState.BUILDING if self._lines else CartState.EMPTY

    @property
    def lines(self) -> list[SaleItem]:
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def line_for(self, product_id: str) -> SaleItem | None:
        return self._lines.get(product_id)

    def totals(self) -> CartTotals:
        return summarize(self._lines.values())

    def sale_lines(self) -> list[tuple[str, int]]:
        return [(item.product_id, item.quantity) for item in self._lines.values()]

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> SaleItem:
        """Add one unit of *product*, bounded by its current stock."""
        self._assert_open()
        existing = self._lines.get(product.id)
        in_cart = existing.quantity if existing else 0

        if product.quantity <= 0:
            raise OutOfStockError(f"{product.item_name} is out of stock")
        if in_cart >= product.quantity:
            raise OutOfStockError(
                f"Not enough stock for {product.item_name} "
                f"(only {product.quantity} available)"
            )

        line = existing.with_quantity(in_cart + 1) if existing else SaleItem.snapshot(product)
        self._lines[product.id] = line
        return line

    def set_quantity(self, product: Product, quantity: object) -> SaleItem | None:
        """Set a line's quantity; 0 removes it.  Returns the new line or None."""
        self._assert_open()
        qty = whole_number(quantity, "Quantity")
        existing = self._lines.get(product.id)
        if existing is None:
            raise NotFoundError(f"{product.item_name} is not in the cart")

        if qty == 0:
            del self._lines[product.id]
            return None
        if qty > product.quantity:
            raise OutOfStockError(
                f"Not enough stock for {product.item_name} "
                f"(requested {qty}, only {product.quantity} available)"
            )

        line = existing.with_quantity(qty)
        self._lines[product.id] = line
        return line

    def remove(self, product_id: str) -> None:
        self._assert_open()
        self._lines.pop(product_id, None)

    def check_out(self) -> list[SaleItem]:
        """Close the cart and hand back its lines."""
        self._assert_open()
        if not self._lines:
            raise EmptyCartError("Cannot check out an empty cart")
        self._checked_out = True
        return self.lines

    def reset(self) -> None:
        self._lines.clear()
        self._checked_out = False

    # --- Internal helpers -----------------------------------------------------

    def _assert_open(self) -> None:
        if self._checked_out:
            raise ValidationError("Cart is already checked out")
