"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockpos.domain.model.user import Role, User
from stockpos.domain.repository.invoice_repository import InvoiceRepository
from stockpos.domain.repository.user_repository import UserRepository
from stockpos.domain.service.checkout_service import CheckoutSession
from stockpos.domain.service.inventory_ledger import InventoryLedger, new_id
from stockpos.infrastructure.config import Settings
from stockpos.infrastructure.persistence.json_history_repository import (
    JsonHistoryRepository,
)
from stockpos.infrastructure.persistence.json_invoice_repository import (
    JsonInvoiceRepository,
)
from stockpos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from stockpos.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from stockpos.infrastructure.persistence.memory_repositories import (
    InMemoryHistoryRepository,
    InMemoryInvoiceRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
)


@dataclass
class Services:
    settings: Settings
    ledger: InventoryLedger
    invoices: InvoiceRepository
    users: UserRepository

    def checkout_session(self) -> CheckoutSession:
        return CheckoutSession(self.ledger, self.invoices)


def in_memory_services(settings: Settings | None = None) -> Services:
    settings = settings or Settings.from_env()
    ledger = InventoryLedger(
        InMemoryProductRepository(),
        InMemoryHistoryRepository(),
        operator=settings.operator,
    )
    return Services(
        settings=settings,
        ledger=ledger,
        invoices=InMemoryInvoiceRepository(),
        users=InMemoryUserRepository(),
    )


def json_services(settings: Settings | None = None) -> Services:
    settings = settings or Settings.from_env()
    data_dir = settings.data_dir
    ledger = InventoryLedger(
        JsonProductRepository(data_dir / "products.json"),
        JsonHistoryRepository(data_dir / "history.json"),
        operator=settings.operator,
    )
    return Services(
        settings=settings,
        ledger=ledger,
        invoices=JsonInvoiceRepository(data_dir / "invoices.json"),
        users=JsonUserRepository(data_dir / "users.json"),
    )


def seed_demo_data(services: Services) -> None:
    """Load the starter catalogue and staff list."""
    ledger = services.ledger
    ledger.create_product("Main Store", "Premium Coffee Beans", "0.5", 120, "25.00")
    ledger.create_product("Warehouse A", "Organic Green Tea", "0.25", 45, "18.50")
    ledger.create_product("Main Store", "Dark Chocolate Bars", "0.1", 8, "5.99")

    services.users.save(User.create(new_id(), "John Doe", "john@example.com", Role.ADMIN))
    services.users.save(User.create(new_id(), "Jane Smith", "jane@example.com", Role.MANAGER))
