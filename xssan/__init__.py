"""xssan — HTML-neutralizing text sanitizers and the Flask service around them.

The sanitizers live in ``xssan.sanitizers`` (or ``xssan.prelude``) and can
be used without the web layer. The `create_app()` factory builds the
JSON service on top of them.
"""
from __future__ import annotations

import structlog
from flask import Flask
from flask_cors import CORS

__version__ = "0.1.0"


def create_app(settings=None) -> Flask:
    """Application factory pattern.

    Creates and configures the Flask application with:
    - Pydantic-based configuration loading
    - Structured logging (structlog)
    - Request ID middleware
    - Global error handlers
    - CORS configuration
    - Sanitize service initialization
    - Blueprint registration (health, sanitize)

    Args:
        settings: Optional Settings instance; `get_settings()` is used if omitted.

    Returns:
        Configured Flask application instance.
    """
    from xssan.config import get_settings
    from xssan.middleware.error_handlers import register_error_handlers
    from xssan.middleware.request_id import init_request_id_middleware
    from xssan.services.sanitize_service import SanitizeService
    from xssan.utils.logger import setup_logging

    settings = settings or get_settings()

    # ── Logging (must be first so all subsequent logs are formatted) ──
    setup_logging(log_level=settings.LOG_LEVEL, log_format=settings.LOG_FORMAT)
    logger = structlog.get_logger(__name__)

    # ── Flask app ─────────────────────────────────────────────────────
    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.SECRET_KEY
    app.config["FLASK_DEBUG"] = settings.FLASK_DEBUG
    app.config["MAX_CONTENT_LENGTH"] = settings.MAX_REQUEST_BYTES
    app.config["SETTINGS"] = settings

    # ── Middleware ─────────────────────────────────────────────────────
    init_request_id_middleware(app)
    register_error_handlers(app)

    # ── CORS ──────────────────────────────────────────────────────────
    origins = settings.CORS_ORIGINS
    CORS(app, resources={
        r"/sanitize": {"origins": origins},
        r"/sanitize/*": {"origins": origins},
        r"/strategies": {"origins": origins},
        r"/health": {"origins": origins},
    }, expose_headers=["X-Request-ID"])

    # ── Services ──────────────────────────────────────────────────────
    app.config["SANITIZE_SERVICE"] = SanitizeService(settings)

    # ── Blueprints ────────────────────────────────────────────────────
    from xssan.routes.health import health_bp
    from xssan.routes.sanitize import sanitize_bp
    app.register_blueprint(health_bp)
    app.register_blueprint(sanitize_bp)

    logger.info(
        "app_started",
        env=settings.FLASK_ENV,
        default_strategy=settings.DEFAULT_STRATEGY,
        cache_enabled=settings.CACHE_ENABLED,
        log_level=settings.LOG_LEVEL,
    )

    return app
