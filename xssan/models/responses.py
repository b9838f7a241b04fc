"""Pydantic models for API response serialization."""
from __future__ import annotations

from pydantic import BaseModel, Field


class SanitizeResponse(BaseModel):
    """Result of a single sanitize call.

    Attributes:
        success: Whether the request was processed successfully.
        strategy: Strategy that was applied.
        result: Sanitized text.
        input_length: Length of the input in characters.
        output_length: Length of the result in characters.
    """
    success: bool = True
    strategy: str = Field(..., description="Applied strategy")
    result: str = Field(..., description="Sanitized text")
    input_length: int = Field(..., ge=0)
    output_length: int = Field(..., ge=0)


class BatchSanitizeResponse(BaseModel):
    """Result of a batch sanitize call, in request order."""
    success: bool = True
    strategy: str = Field(..., description="Applied strategy")
    results: list[str] = Field(default_factory=list)
    count: int = Field(..., ge=0)


class StrategyInfo(BaseModel):
    name: str
    description: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: dict = Field(..., description="Error details with 'message' and 'code'")
