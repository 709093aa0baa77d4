"""Inventory ledger routes: products, stock adjustments and history."""

from __future__ import annotations

from flask import Blueprint, request

from stockpos.domain.exceptions import ValidationError
from stockpos.infrastructure.web.context import current_services, json_payload
from stockpos.infrastructure.web.serializers import history_json, product_json

products_bp = Blueprint("products", __name__)

# JSON key -> ledger keyword for the editable product fields
PRODUCT_FIELDS = {
    "inventoryName": "inventory_name",
    "itemName": "item_name",
    "weightPerItem": "weight_per_item",
    "quantity": "quantity",
    "price": "price",
}

TRUTHY = {"1", "true", "yes", "on"}


@products_bp.get("/products")
def list_products_route():
    ledger = current_services().ledger
    products = ledger.list_products(
        search=request.args.get("search"),
        in_stock_only=request.args.get("inStock", "").lower() in TRUTHY,
    )
    return {"products": [product_json(p) for p in products]}, 200


@products_bp.post("/products")
def create_product_route():
    payload = json_payload()
    product = current_services().ledger.create_product(
        **{kw: payload.get(key) for key, kw in PRODUCT_FIELDS.items()}
    )
    return product_json(product), 201


@products_bp.get("/products/<product_id>")
def get_product_route(product_id: str):
    return product_json(current_services().ledger.get_product(product_id)), 200


@products_bp.patch("/products/<product_id>")
def update_product_route(product_id: str):
    payload = json_payload()
    changes = {kw: payload[key] for key, kw in PRODUCT_FIELDS.items() if key in payload}
    product = current_services().ledger.update_product(product_id, **changes)
    return product_json(product), 200


@products_bp.delete("/products/<product_id>")
def delete_product_route(product_id: str):
    current_services().ledger.delete_product(product_id)
    return {"deleted": product_id}, 200


@products_bp.post("/products/<product_id>/adjust")
def adjust_product_route(product_id: str):
    payload = json_payload()
    direction = payload.get("direction")
    if not direction:
        raise ValidationError("direction is required (increase or decrease)")

    ledger = current_services().ledger
    entry = ledger.adjust_quantity(product_id, direction, payload.get("amount"))
    return {
        "product": product_json(ledger.get_product(product_id)),
        "entry": history_json(entry),
    }, 200


@products_bp.get("/history")
def history_route():
    entries = current_services().ledger.history(
        product_id=request.args.get("productId") or None,
        action_type=request.args.get("actionType") or None,
        search=request.args.get("search"),
    )
    return {"history": [history_json(e) for e in entries]}, 200
