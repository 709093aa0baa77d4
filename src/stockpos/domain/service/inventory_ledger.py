"""Domain service: Inventory Ledger.

The ledger is the only writer of products and of the history log.  Every
quantity movement (new product, manual adjustment, sale) goes through it
and leaves exactly one history entry per product touched.

Mutations run under a re-entrant lock so several checkout sessions can
share one ledger: stock is checked and decremented inside the same
critical section, never checked first and acted on later.
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Iterable

from stockpos.domain.exceptions import (
    InsufficientStockError,
    NotFoundError,
    ValidationError,
)
from stockpos.domain.model.history import ActionType, InventoryHistoryEntry
from stockpos.domain.model.product import Product
from stockpos.domain.model.value_objects import whole_number
from stockpos.domain.repository.history_repository import HistoryRepository
from stockpos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

DEFAULT_OPERATOR = "Admin User"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return uuid.uuid4().hex


class InventoryLedger:

    def __init__(
        self,
        product_repo: ProductRepository,
        history_repo: HistoryRepository,
        operator: str = DEFAULT_OPERATOR,
        clock: Clock = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._product_repo = product_repo
        self._history_repo = history_repo
        self._operator = operator
        self._clock = clock
        self._new_id = id_factory
        self._lock = threading.RLock()

    @property
    def operator(self) -> str:
        return self._operator

    # --- Queries --------------------------------------------------------------

    def get_product(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def list_products(
        self,
        search: str | None = None,
        in_stock_only: bool = False,
    ) -> list[Product]:
        """Products whose item name or location contains *search* (case-insensitive)."""
        needle = (search or "").strip().lower()
        return [
            p for p in self._product_repo.list_all()
            if (needle in p.item_name.lower() or needle in p.inventory_name.lower())
            and (p.in_stock or not in_stock_only)
        ]

    def history(
        self,
        product_id: str | None = None,
        action_type: ActionType | str | None = None,
        search: str | None = None,
    ) -> list[InventoryHistoryEntry]:
        """History entries, newest first, narrowed by the given filters.

        *search* matches the product name or the operator who made the
        change, case-insensitively.
        """
        action = ActionType.parse(action_type) if action_type else None
        needle = (search or "").strip().lower()
        return [
            entry for entry in self._history_repo.list_all()
            if (product_id is None or entry.product_id == product_id)
            and (action is None or entry.action_type is action)
            and (
                needle in entry.product_name.lower()
                or needle in entry.updated_by.lower()
            )
        ]

    # --- Product lifecycle ----------------------------------------------------

    def create_product(
        self,
        inventory_name: str | None,
        item_name: str | None,
        weight_per_item: str | float | int | Decimal | None,
        quantity: object,
        price: str | float | int | Decimal | None,
    ) -> Product:
        """Add a product and log its opening stock as an increase from 0."""
        product = Product.create(
            id=self._new_id(),
            inventory_name=inventory_name,
            item_name=item_name,
            weight_per_item=weight_per_item,
            quantity=quantity,
            price=price,
            date_added=self._clock(),
        )
        with self._lock:
            self._product_repo.save(product)
            self._record(product, 0, ActionType.INCREASE)

        logger.info(
            "Created product %s '%s' at %s with %d units",
            product.id, product.item_name, product.inventory_name, product.quantity,
        )
        return product

    def update_product(
        self,
        product_id: str,
        inventory_name: str | None = None,
        item_name: str | None = None,
        weight_per_item: str | float | int | Decimal | None = None,
        quantity: object = None,
        price: str | float | int | Decimal | None = None,
    ) -> Product:
        """Edit a product's fields.

        A quantity changed here is a correction, not a stock movement, so
        no history entry is written.
        """
        with self._lock:
            product = self.get_product(product_id)
            product.revise(
                inventory_name=inventory_name,
                item_name=item_name,
                weight_per_item=weight_per_item,
                quantity=quantity,
                price=price,
            )
            self._product_repo.save(product)

        logger.info("Updated product %s '%s'", product.id, product.item_name)
        return product

    def delete_product(self, product_id: str) -> None:
        """Remove a product.  Its history entries are kept."""
        with self._lock:
            product = self.get_product(product_id)
            self._product_repo.delete(product_id)

        logger.info("Deleted product %s '%s'", product.id, product.item_name)

    # --- Stock movements ------------------------------------------------------

    def adjust_quantity(
        self,
        product_id: str,
        direction: ActionType | str,
        amount: object,
    ) -> InventoryHistoryEntry:
        """Increase or decrease stock by *amount* and log the change.

        A decrease larger than the current stock raises
        InsufficientStockError and changes nothing.
        """
        action = ActionType.parse(direction)
        if action is ActionType.SALE:
            raise ValidationError("Adjustment direction must be increase or decrease")
        units = whole_number(amount, "Amount", minimum=1)

        with self._lock:
            product = self.get_product(product_id)
            previous = product.quantity
            if action is ActionType.INCREASE:
                product.increase(units)
            else:
                product.decrease(units)
            self._product_repo.save(product)
            entry = self._record(product, previous, action)

        logger.info(
            "Adjusted product %s '%s': %s %d (%d -> %d)",
            product.id, product.item_name, action.value, units,
            entry.previous_quantity, entry.new_quantity,
        )
        return entry

    def apply_sale(
        self,
        lines: Iterable[tuple[str, int]],
    ) -> list[InventoryHistoryEntry]:
        """Deduct sold quantities, all or nothing.

        Uses a two-phase approach:
          Phase 1 (load and validate): every product must exist and hold
                    enough stock.  Fails before any mutation.
          Phase 2 (mutate and persist): decrement each product and write
                    one ``sale`` entry whose previous quantity is the
                    pre-sale stock.

        Lines naming the same product are merged before validation.
        """
        requested: dict[str, int] = {}
        for product_id, quantity in lines:
            units = whole_number(quantity, "Sale quantity", minimum=1)
            requested[product_id] = requested.get(product_id, 0) + units
        if not requested:
            raise ValidationError("A sale needs at least one line")

        with self._lock:
            # Phase 1: load every product and validate
            staged: list[tuple[Product, int]] = []
            for product_id, units in requested.items():
                product = self.get_product(product_id)
                if units > product.quantity:
                    raise InsufficientStockError(
                        f"Insufficient stock for {product.item_name} "
                        f"(need {units}, have {product.quantity})"
                    )
                staged.append((product, units))

            # Phase 2: mutate and persist
            entries: list[InventoryHistoryEntry] = []
            for product, units in staged:
                previous = product.quantity
                product.decrease(units)
                self._product_repo.save(product)
                entries.append(self._record(product, previous, ActionType.SALE))

        logger.info(
            "Posted sale of %d units across %d products",
            sum(requested.values()), len(requested),
        )
        return entries

    # --- Internal helpers -----------------------------------------------------

    def _record(
        self,
        product: Product,
        previous_quantity: int,
        action: ActionType,
    ) -> InventoryHistoryEntry:
        entry = InventoryHistoryEntry(
            id=self._new_id(),
            product_id=product.id,
            product_name=product.item_name,
            previous_quantity=previous_quantity,
            new_quantity=product.quantity,
            action_type=action,
            updated_by=self._operator,
            timestamp=self._clock(),
        )
        self._history_repo.append(entry)
        return entry
