"""JSON shapes for the HTTP API.

Keys are camelCase; money and weights are plain numbers.
"""

from __future__ import annotations

from stockpos.application.show_dashboard import DashboardDTO
from stockpos.domain.model.cart import CartTotals, SaleItem
from stockpos.domain.model.history import InventoryHistoryEntry
from stockpos.domain.model.invoice import Invoice
from stockpos.domain.model.product import Product
from stockpos.domain.model.user import User
from stockpos.domain.service.checkout_service import CheckoutSession


def product_json(product: Product) -> dict:
    return {
        "id": product.id,
        "inventoryName": product.inventory_name,
        "itemName": product.item_name,
        "weightPerItem": float(product.weight_per_item.kilograms),
        "quantity": product.quantity,
        "totalWeight": float(product.total_weight.kilograms),
        "dateAdded": product.date_added.isoformat(),
        "price": float(product.price.amount),
    }


def history_json(entry: InventoryHistoryEntry) -> dict:
    return {
        "id": entry.id,
        "productId": entry.product_id,
        "productName": entry.product_name,
        "previousQuantity": entry.previous_quantity,
        "newQuantity": entry.new_quantity,
        "actionType": entry.action_type.value,
        "updatedBy": entry.updated_by,
        "timestamp": entry.timestamp.isoformat(),
    }


def sale_item_json(item: SaleItem) -> dict:
    return {
        "productId": item.product_id,
        "itemName": item.item_name,
        "quantity": item.quantity,
        "weight": float(item.weight.kilograms),
        "price": float(item.price.amount),
        "totalPrice": float(item.total_price.amount),
    }


def totals_json(totals: CartTotals) -> dict:
    return {
        "quantity": totals.quantity,
        "weight": float(totals.weight.kilograms),
        "price": float(totals.price.amount),
    }


def cart_json(session: CheckoutSession) -> dict:
    return {
        "state": session.state.value,
        "items": [sale_item_json(item) for item in session.lines],
        "totals": totals_json(session.totals()),
    }


def invoice_json(invoice: Invoice) -> dict:
    return {
        "id": invoice.id,
        "billNumber": invoice.bill_number,
        "date": invoice.date.isoformat(),
        "customerName": invoice.customer_name,
        "items": [sale_item_json(item) for item in invoice.items],
        "totalQuantity": invoice.total_quantity,
        "totalWeight": float(invoice.total_weight.kilograms),
        "grandTotal": float(invoice.grand_total.amount),
    }


def user_json(user: User) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role.value,
        "status": user.status.value,
    }


def dashboard_json(summary: DashboardDTO) -> dict:
    return {
        "totalProducts": summary.total_products,
        "totalStockWeight": float(summary.total_stock_weight.kilograms),
        "totalRevenue": float(summary.total_revenue.amount),
        "lowStockAlerts": summary.low_stock_count,
        "salesToday": summary.sales_today,
    }
