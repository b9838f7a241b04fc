"""Health check endpoint.

Exposes GET /health. The service has no external dependencies, so it is
healthy whenever the sanitize service is wired into the app.

Response format:
    {
        "status": "healthy" | "degraded",
        "version": "0.1.0",
        "strategies": ["entities", "escape", "strip_tags", "strip_brackets"],
        "cache": {"enabled": true, "size": 0, "hits": 0, "misses": 0}
    }
"""
from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from xssan import __version__

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health_check():
    """Application health check endpoint.

    Returns:
        200 if the sanitize service is available, 503 otherwise.
    """
    service = current_app.config.get("SANITIZE_SERVICE")
    if service is None:
        return jsonify({"status": "degraded", "version": __version__, "strategies": []}), 503

    cache = service.cache
    cache_info = {"enabled": cache is not None}
    if cache is not None:
        cache_info.update(size=cache.size, hits=cache.hits, misses=cache.misses)

    return jsonify({
        "status": "healthy",
        "version": __version__,
        "strategies": service.available_strategies,
        "cache": cache_info,
    })
