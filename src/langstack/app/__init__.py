"""Application factory exposing a published resolver over HTTP."""

from __future__ import annotations

import logging
from http import HTTPStatus

from flask import Flask, jsonify
from werkzeug.exceptions import NotFound

from langstack.config import I18nSettings, load_settings, validate_backend
from langstack.core import Resolver

from .http import problem_response
from .routes import register_routes
from .routes.translations import EXTENSION_KEY

logger = logging.getLogger(__name__)


def create_app(resolver: Resolver, settings: I18nSettings | None = None) -> Flask:
    """Create and configure the Flask application instance.

    ``resolver`` should wrap a frozen backend; the app only ever reads from it.
    When ``settings`` is omitted they are loaded from the environment.
    """

    settings = settings if settings is not None else load_settings()

    for issue in validate_backend(resolver.backend, settings):
        logger.warning("Catalogue issue: %s", issue)

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = {"resolver": resolver, "settings": settings}

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        return jsonify({"status": "ok", "locales": resolver.available_locales()})

    @app.errorhandler(NotFound)
    def handle_not_found(error: NotFound):
        """Return consistent JSON responses for unknown routes."""

        return problem_response(
            "not_found", status=HTTPStatus.NOT_FOUND, message=error.description
        ).to_response()

    return app


__all__ = ["create_app"]
