"""Cart and checkout routes for the register bound to this app."""

from __future__ import annotations

from flask import Blueprint

from stockpos.domain.exceptions import ValidationError
from stockpos.infrastructure.web.context import current_checkout, json_payload
from stockpos.infrastructure.web.serializers import cart_json, invoice_json

cart_bp = Blueprint("cart", __name__, url_prefix="/cart")


@cart_bp.get("")
def show_cart_route():
    return cart_json(current_checkout()), 200


@cart_bp.post("/items")
def add_item_route():
    product_id = json_payload().get("productId")
    if not product_id:
        raise ValidationError("productId is required")

    session = current_checkout()
    session.add_item(str(product_id))
    return cart_json(session), 201


@cart_bp.patch("/items/<product_id>")
def set_quantity_route(product_id: str):
    payload = json_payload()
    if "quantity" not in payload:
        raise ValidationError("quantity is required")

    session = current_checkout()
    session.set_line_quantity(product_id, payload["quantity"])
    return cart_json(session), 200


@cart_bp.delete("/items/<product_id>")
def remove_item_route(product_id: str):
    session = current_checkout()
    session.remove_item(product_id)
    return cart_json(session), 200


@cart_bp.post("/checkout")
def checkout_route():
    invoice = current_checkout().checkout(json_payload().get("customerName"))
    return invoice_json(invoice), 201
