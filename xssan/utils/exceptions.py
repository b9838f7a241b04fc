"""Custom exception hierarchy for the sanitization service.

The transforms in ``xssan.sanitizers`` never raise. These exceptions belong
to the service and HTTP layers, and all inherit from XssanError so the
global error handlers can render them uniformly.

Hierarchy:
    XssanError (base)
    ├── UnknownStrategyError   — strategy name not registered
    ├── InputTooLargeError     — text longer than MAX_INPUT_LENGTH
    ├── BatchTooLargeError     — more texts than MAX_BATCH_SIZE
    └── InputValidationError   — malformed request payload
"""
from __future__ import annotations


class XssanError(Exception):
    """Base exception for the sanitization service."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UnknownStrategyError(XssanError):
    """Raised when a caller asks for a strategy that is not registered."""

    def __init__(self, strategy: str, available: list[str]) -> None:
        self.strategy = strategy
        self.available = available
        super().__init__(
            message=f"Unknown strategy '{strategy}'. Available: {', '.join(available)}",
            status_code=422,
        )


class InputTooLargeError(XssanError):
    """Raised when a text exceeds the configured maximum length."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(
            message=f"Input is {length} characters; the limit is {limit}.",
            status_code=413,
        )


class BatchTooLargeError(XssanError):
    """Raised when a batch holds more texts than allowed."""

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(
            message=f"Batch has {count} texts; the limit is {limit}.",
            status_code=413,
        )


class InputValidationError(XssanError):
    """Raised when a request payload fails validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=422)
