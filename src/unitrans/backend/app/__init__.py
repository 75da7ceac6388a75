"""Application factory for the translation proxy."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from warnings import warn

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import BadRequest

from unitrans.backend.config.schema import ConfigurationError
from unitrans.backend.config.settings import ProxySettings
from unitrans.backend.version import get_project_version

from .http import bad_request, configuration_error, validation_error
from .routes import register_routes
from .services import MyMemoryClient, TranslationService
from .services.translation_service import EXTENSION_KEY
from .services.upstream import UpstreamTranslator

_LOGGER = logging.getLogger(__name__)


def _build_upstream(settings: ProxySettings) -> MyMemoryClient:
    return MyMemoryClient(
        settings.upstream_url,
        contact_email=settings.contact_email,
        timeout=settings.upstream_timeout,
    )


def create_app(
    settings: ProxySettings | None = None,
    *,
    upstream: UpstreamTranslator | None = None,
) -> Flask:
    """Create and configure the Flask application instance.

    ``settings`` defaults to :meth:`ProxySettings.from_env`; ``upstream``
    replaces the MyMemory client, which tests use to avoid the network.
    """

    settings = settings or ProxySettings.from_env()

    app = Flask(__name__)
    # The language catalog is ordered; keep keys as inserted.
    app.json.sort_keys = False  # type: ignore[attr-defined]

    if not settings.allowed_origins:
        warn(
            "No allowed origins configured; cross-origin requests will be rejected.",
            stacklevel=1,
        )

    CORS(
        app,
        resources={r"/api/*": {"origins": sorted(settings.allowed_origins)}},
        supports_credentials=False,
        methods=["GET", "OPTIONS", "POST"],
        allow_headers=["Content-Type"],
    )

    app.extensions[EXTENSION_KEY] = TranslationService(
        upstream or _build_upstream(settings),
        autodetect=settings.upstream_autodetect,
    )
    _LOGGER.info("Translation proxy configured for %s", settings.upstream_url)

    register_routes(app)

    @app.route("/api/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": get_project_version(),
        }
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        return bad_request(error.description).to_response()

    @app.errorhandler(ConfigurationError)
    def handle_configuration_error(error: ConfigurationError):
        """Report broken server data as a server fault, not a client one."""

        _LOGGER.error("Configuration error while serving request: %s", error)
        return configuration_error(str(error)).to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Surface request validation errors to clients."""

        return validation_error(str(error)).to_response()

    return app
