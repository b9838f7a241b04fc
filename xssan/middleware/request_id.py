"""Per-request correlation ids.

A client-supplied ``X-Request-ID`` is reused; otherwise a UUID4 is minted.
The id is bound into structlog's contextvars for the request and echoed on
the response so callers can match their logs to ours.
"""
from __future__ import annotations

import uuid

import structlog
from flask import Flask, Response, g, request

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128

logger = structlog.get_logger(__name__)


def current_request_id() -> str:
    """Id bound for the current request, or "unknown" if none was bound."""
    return g.get("request_id", "unknown")


def _incoming_request_id() -> str:
    supplied = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if supplied and len(supplied) <= MAX_REQUEST_ID_LENGTH:
        return supplied
    return str(uuid.uuid4())


def init_request_id_middleware(app: Flask) -> None:
    """Register the before/after hooks that bind and echo the request id."""

    @app.before_request
    def bind_request_id() -> None:
        g.request_id = _incoming_request_id()
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=g.request_id,
            method=request.method,
            path=request.path,
        )
        logger.debug("request_started")

    @app.after_request
    def echo_request_id(response: Response) -> Response:
        response.headers[REQUEST_ID_HEADER] = current_request_id()
        logger.debug("request_completed", status=response.status_code)
        return response
