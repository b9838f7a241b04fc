"""structlog setup shared by the app factory and any script using the sanitizers."""
from __future__ import annotations

import logging

import structlog

_RENDERERS = {
    "json": lambda: structlog.processors.JSONRenderer(),
    "console": lambda: structlog.dev.ConsoleRenderer(colors=True),
}

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Route structlog events to stdout as JSON lines or colored console output.

    Events carry the request id bound by ``init_request_id_middleware``.
    Unknown levels fall back to INFO and unknown formats to JSON; Settings
    validates both before they get here.
    """
    level = _LEVELS.get(log_level.upper(), logging.INFO)
    renderer = _RENDERERS.get(log_format, _RENDERERS["json"])()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    # werkzeug request lines go through stdlib logging
    logging.basicConfig(format="%(message)s", level=level)
