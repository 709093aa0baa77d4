"""In-memory implementations of the domain repositories.

These keep everything in dicts and lists for the lifetime of the
process.  They back the HTTP API and the test suite.
"""

from __future__ import annotations

import threading

from stockpos.domain.exceptions import ValidationError
from stockpos.domain.model.history import InventoryHistoryEntry
from stockpos.domain.model.invoice import Invoice
from stockpos.domain.model.product import Product
from stockpos.domain.model.user import User
from stockpos.domain.repository.history_repository import HistoryRepository
from stockpos.domain.repository.invoice_repository import (
    InvoiceRepository,
    format_bill_number,
)
from stockpos.domain.repository.product_repository import ProductRepository
from stockpos.domain.repository.user_repository import UserRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(reversed(self._store.values()))

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)


class InMemoryHistoryRepository(HistoryRepository):

    def __init__(self) -> None:
        self._entries: list[InventoryHistoryEntry] = []

    def append(self, entry: InventoryHistoryEntry) -> None:
        self._entries.append(entry)

    def list_all(self) -> list[InventoryHistoryEntry]:
        return list(reversed(self._entries))


class InMemoryInvoiceRepository(InvoiceRepository):

    def __init__(self) -> None:
        self._store: dict[str, Invoice] = {}
        self._sequence = 0
        self._lock = threading.Lock()

    def next_bill_number(self) -> str:
        with self._lock:
            self._sequence += 1
            return format_bill_number(self._sequence)

    def get_by_id(self, invoice_id: str) -> Invoice | None:
        return self._store.get(invoice_id)

    def list_all(self) -> list[Invoice]:
        return list(reversed(self._store.values()))

    def add(self, invoice: Invoice) -> None:
        with self._lock:
            if invoice.id in self._store:
                raise ValidationError(f"Invoice '{invoice.id}' already exists")
            self._store[invoice.id] = invoice


class InMemoryUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._store: dict[str, User] = {}
        for u in users or []:
            self._store[u.id] = u

    def get_by_id(self, user_id: str) -> User | None:
        return self._store.get(user_id)

    def list_all(self) -> list[User]:
        return list(self._store.values())

    def save(self, user: User) -> None:
        self._store[user.id] = user

    def delete(self, user_id: str) -> None:
        self._store.pop(user_id, None)
