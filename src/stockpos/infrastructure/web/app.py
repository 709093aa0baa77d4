"""Flask application factory for the HTTP API."""

from __future__ import annotations

import logging

from flask import Flask

from stockpos.domain.exceptions import ConflictError, DomainException, NotFoundError
from stockpos.infrastructure.bootstrap import Services, in_memory_services
from stockpos.infrastructure.logging_config import configure_logging
from stockpos.infrastructure.web.context import EXTENSION_KEY

logger = logging.getLogger(__name__)


def status_for(exc: DomainException) -> int:
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, ConflictError):
        return 409
    return 400


def create_app(services: Services | None = None) -> Flask:
    services = services or in_memory_services()
    configure_logging(services.settings.log_level)

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = {
        "services": services,
        "checkout": services.checkout_session(),
    }

    from stockpos.infrastructure.web.cart import cart_bp
    from stockpos.infrastructure.web.invoices import invoices_bp
    from stockpos.infrastructure.web.products import products_bp
    from stockpos.infrastructure.web.users import users_bp

    app.register_blueprint(products_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(invoices_bp)
    app.register_blueprint(users_bp)

    @app.errorhandler(DomainException)
    def handle_domain_error(exc: DomainException):
        status = status_for(exc)
        logger.debug("%s -> %d: %s", type(exc).__name__, status, exc)
        return {"error": str(exc), "type": type(exc).__name__}, status

    return app
