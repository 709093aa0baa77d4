"""Invoice store and dashboard routes."""

from __future__ import annotations

from flask import Blueprint, request

from stockpos.application.show_dashboard import ShowDashboardHandler
from stockpos.domain.exceptions import NotFoundError
from stockpos.infrastructure.web.context import current_services
from stockpos.infrastructure.web.serializers import dashboard_json, invoice_json

invoices_bp = Blueprint("invoices", __name__)


@invoices_bp.get("/invoices")
def list_invoices_route():
    invoices = current_services().invoices.search(request.args.get("search"))
    return {"invoices": [invoice_json(inv) for inv in invoices]}, 200


@invoices_bp.get("/invoices/<invoice_id>")
def get_invoice_route(invoice_id: str):
    store = current_services().invoices
    invoice = store.get_by_id(invoice_id) or store.get_by_bill_number(invoice_id)
    if invoice is None:
        raise NotFoundError(f"Invoice '{invoice_id}' not found")
    return invoice_json(invoice), 200


@invoices_bp.get("/dashboard")
def dashboard_route():
    services = current_services()
    summary = ShowDashboardHandler(
        services.ledger,
        services.invoices,
        low_stock_threshold=services.settings.low_stock_threshold,
    ).handle()
    return dashboard_json(summary), 200
