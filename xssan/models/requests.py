"""Pydantic models for API request validation."""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class SanitizeRequest(BaseModel):
    """Single-text sanitize request.

    Attributes:
        text: Untrusted text. May be empty; it is never stripped or trimmed.
        strategy: Optional strategy name; the service default applies if omitted.
    """
    text: str = Field(..., description="Text to sanitize")
    strategy: str | None = Field(default=None, description="Strategy name")

    @field_validator("strategy")
    @classmethod
    def normalize_strategy(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class BatchSanitizeRequest(BaseModel):
    """Batch sanitize request: one strategy applied to every text."""
    texts: list[str] = Field(..., min_length=1, description="Texts to sanitize")
    strategy: str | None = Field(default=None, description="Strategy name")

    @field_validator("strategy")
    @classmethod
    def normalize_strategy(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None
