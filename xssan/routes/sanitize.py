"""Sanitize blueprint — the JSON endpoints.

Routes:
    POST /sanitize        → Sanitize one text
    POST /sanitize/batch  → Sanitize a list of texts with one strategy
    GET  /strategies      → List available strategies and the default
"""
from __future__ import annotations

from typing import Any

import structlog
from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from xssan.middleware.error_handlers import error_response
from xssan.models.requests import BatchSanitizeRequest, SanitizeRequest
from xssan.models.responses import BatchSanitizeResponse, SanitizeResponse, StrategyInfo
from xssan.utils.exceptions import InputValidationError

logger = structlog.get_logger(__name__)

sanitize_bp = Blueprint("sanitize", __name__)


def _validation_message(e: ValidationError) -> str:
    errors = e.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Validation error")
    return f"{location}: {message}" if location else message


def _json_body() -> Any:
    return request.get_json(force=True)


@sanitize_bp.route("/sanitize", methods=["POST"])
def sanitize():
    """Sanitize a single text.

    Request JSON:
        {
            "text": "<b onclick='x()'>hi</b>",
            "strategy": "strip_tags"   // optional
        }

    Response JSON:
        {
            "success": true,
            "strategy": "strip_tags",
            "result": "hi",
            "input_length": 23,
            "output_length": 2
        }
    """
    try:
        data = _json_body()
    except BadRequest:
        return error_response("Invalid JSON body", 400)

    try:
        req = SanitizeRequest.model_validate(data)
    except ValidationError as e:
        raise InputValidationError(_validation_message(e)) from e

    service = current_app.config["SANITIZE_SERVICE"]
    strategy = req.strategy or service.default_strategy
    result = service.sanitize(req.text, strategy)

    response = SanitizeResponse(
        strategy=strategy,
        result=result,
        input_length=len(req.text),
        output_length=len(result),
    )
    return jsonify(response.model_dump())


@sanitize_bp.route("/sanitize/batch", methods=["POST"])
def sanitize_batch():
    """Sanitize several texts with one strategy.

    Request JSON:
        { "texts": ["<b>a</b>", "b<i"], "strategy": "strip_tags" }

    Response JSON:
        { "success": true, "strategy": "strip_tags", "results": ["a", "b<i"], "count": 2 }
    """
    try:
        data = _json_body()
    except BadRequest:
        return error_response("Invalid JSON body", 400)

    try:
        req = BatchSanitizeRequest.model_validate(data)
    except ValidationError as e:
        raise InputValidationError(_validation_message(e)) from e

    service = current_app.config["SANITIZE_SERVICE"]
    strategy = req.strategy or service.default_strategy
    results = service.sanitize_many(req.texts, strategy)

    response = BatchSanitizeResponse(strategy=strategy, results=results, count=len(results))
    return jsonify(response.model_dump())


@sanitize_bp.route("/strategies", methods=["GET"])
def list_strategies():
    """List the registered strategies.

    Response JSON:
        { "strategies": [{"name": "...", "description": "..."}], "default": "strip_tags" }
    """
    service = current_app.config["SANITIZE_SERVICE"]
    strategies = [StrategyInfo(**info).model_dump() for info in service.describe()]
    return jsonify({"strategies": strategies, "default": service.default_strategy})
