"""Invoice: the immutable record of a completed checkout."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

from stockpos.domain.exceptions import EmptyCartError, ValidationError
from stockpos.domain.model.cart import SaleItem, summarize
from stockpos.domain.model.value_objects import Money, Weight

WALK_IN_CUSTOMER = "Walk-in Customer"


def customer_display_name(customer_name: object) -> str:
    """The name printed on an invoice; blank means a walk-in customer."""
    if customer_name is None:
        return WALK_IN_CUSTOMER
    if not isinstance(customer_name, str):
        raise ValidationError(f"Customer name must be text, got {customer_name!r}")
    return customer_name.strip() or WALK_IN_CUSTOMER


@dataclass(frozen=True)
class Invoice:
    """A snapshot of a checkout.

    ``items`` is a tuple of frozen ``SaleItem`` values, so neither the
    lines nor the totals can change after creation.  Use
    ``Invoice.create()`` so the totals are derived from the items.
    """

    id: str
    bill_number: str
    customer_name: str
    items: tuple[SaleItem, ...]
    total_quantity: int
    total_weight: Weight
    grand_total: Money
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        id: str,
        bill_number: str,
        customer_name: str | None,
        items: Iterable[SaleItem],
        date: datetime | None = None,
    ) -> Invoice:
        lines = tuple(items)
        if not lines:
            raise EmptyCartError("An invoice needs at least one line")

        totals = summarize(lines)
        return Invoice(
            id=id,
            bill_number=bill_number,
            customer_name=customer_display_name(customer_name),
            items=lines,
            total_quantity=totals.quantity,
            total_weight=totals.weight,
            grand_total=totals.price,
            date=date or datetime.now(timezone.utc),
        )

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on bill number or customer."""
        needle = query.strip().lower()
        return (
            needle in self.bill_number.lower()
            or needle in self.customer_name.lower()
        )
