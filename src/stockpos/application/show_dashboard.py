"""Application service: Dashboard summary (query)."""

from __future__ import annotations

from dataclasses import dataclass

from stockpos.domain.model.value_objects import Money, Weight
from stockpos.domain.repository.invoice_repository import InvoiceRepository
from stockpos.domain.service.inventory_ledger import Clock, InventoryLedger, utc_now


@dataclass(frozen=True)
class DashboardDTO:
    total_products: int
    total_stock_weight: Weight
    total_revenue: Money
    low_stock_count: int
    sales_today: int


class ShowDashboardHandler:

    def __init__(
        self,
        ledger: InventoryLedger,
        invoice_repo: InvoiceRepository,
        low_stock_threshold: int = 10,
        clock: Clock = utc_now,
    ) -> None:
        self._ledger = ledger
        self._invoice_repo = invoice_repo
        self._low_stock_threshold = low_stock_threshold
        self._clock = clock

    def handle(self) -> DashboardDTO:
        products = self._ledger.list_products()
        invoices = self._invoice_repo.list_all()
        today = self._clock().date()

        stock_weight = Weight.zero()
        for p in products:
            stock_weight = stock_weight + p.total_weight

        revenue = Money.zero()
        for inv in invoices:
            revenue = revenue + inv.grand_total

        return DashboardDTO(
            total_products=len(products),
            total_stock_weight=stock_weight,
            total_revenue=revenue,
            low_stock_count=sum(
                1 for p in products if p.quantity < self._low_stock_threshold
            ),
            sales_today=sum(1 for inv in invoices if inv.date.date() == today),
        )
