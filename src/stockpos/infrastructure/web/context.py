"""Access to the services bound to the running Flask app."""

from __future__ import annotations

from flask import current_app, request

from stockpos.domain.exceptions import ValidationError
from stockpos.domain.service.checkout_service import CheckoutSession
from stockpos.infrastructure.bootstrap import Services

EXTENSION_KEY = "stockpos"


def current_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]["services"]


def current_checkout() -> CheckoutSession:
    return current_app.extensions[EXTENSION_KEY]["checkout"]


def json_payload() -> dict:
    """The request body as a dict; an empty or non-JSON body gives ``{}``."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload
