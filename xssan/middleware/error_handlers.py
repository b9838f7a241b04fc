"""Global Flask error handlers for consistent JSON error responses.

Registers handlers for standard HTTP errors and XssanError exceptions,
so the API always answers with:
    { "success": false, "error": { "message": "...", "code": <int> } }

Usage:
    from xssan.middleware.error_handlers import register_error_handlers
    register_error_handlers(app)
"""
from __future__ import annotations

import structlog
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from xssan.models.responses import ErrorResponse
from xssan.utils.exceptions import XssanError

logger = structlog.get_logger(__name__)


def error_response(message: str, code: int):
    """Create a standardized JSON error response.

    Args:
        message: Human-readable error message.
        code: HTTP status code.

    Returns:
        Tuple of (response, status_code).
    """
    body = ErrorResponse(error={"message": message, "code": code})
    return jsonify(body.model_dump()), code


def register_error_handlers(app: Flask) -> None:
    """Register global error handlers on the Flask app.

    Args:
        app: Flask application instance.
    """

    # ── Standard HTTP Errors ──────────────────────────────────────────

    @app.errorhandler(400)
    def bad_request(e):
        return error_response("Bad request", 400)

    @app.errorhandler(404)
    def not_found(e):
        return error_response("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return error_response("Method not allowed", 405)

    @app.errorhandler(413)
    def payload_too_large(e):
        return error_response("Request body too large", 413)

    # ── Application Errors ────────────────────────────────────────────

    @app.errorhandler(XssanError)
    def handle_xssan_error(e: XssanError):
        logger.warning(
            "request_rejected",
            error=e.message,
            error_type=type(e).__name__,
            status_code=e.status_code,
        )
        return error_response(e.message, e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        """Catch any HTTPException not explicitly handled above."""
        return error_response(e.description or "Unknown error", e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        """Last resort handler for unhandled exceptions."""
        logger.error(
            "unexpected_error",
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        return error_response("An unexpected error occurred", 500)
