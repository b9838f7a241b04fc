"""Centralized service configuration using Pydantic Settings.

Loads configuration from environment variables and a `.env` file with
validation, type coercion and defaults. The sanitization functions
themselves take no configuration; these settings only shape the service
layer and the HTTP app.

Usage:
    from xssan.config import get_settings

    settings = get_settings()  # cached singleton
    print(settings.DEFAULT_STRATEGY)
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Must match the strategy registry in SanitizeService.
STRATEGY_NAMES = ("entities", "escape", "strip_tags", "strip_brackets")


class Settings(BaseSettings):
    """Service settings loaded from environment variables / .env file.

    Every field has a default, so the service starts with no configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Flask ──────────────────────────────────────────────────────────
    FLASK_ENV: str = Field(default="development", description="Flask environment (development/production)")
    FLASK_DEBUG: bool = Field(default=True, description="Enable Flask debug mode")
    SECRET_KEY: str = Field(default="change-me-in-production", description="Flask secret key")
    CORS_ORIGINS: str = Field(default="*", description="Allowed CORS origins for the JSON endpoints")

    # ── Logging ───────────────────────────────────────────────────────
    LOG_LEVEL: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    LOG_FORMAT: str = Field(default="json", description="Log output format ('json' for prod, 'console' for dev)")

    # ── Sanitization ─────────────────────────────────────────────────
    DEFAULT_STRATEGY: str = Field(default="strip_tags", description="Strategy used when a request names none")
    MAX_INPUT_LENGTH: int = Field(default=100_000, ge=1, description="Max characters per text")
    MAX_BATCH_SIZE: int = Field(default=100, ge=1, le=1000, description="Max texts per batch request")
    MAX_REQUEST_BYTES: int = Field(default=2 * 1024 * 1024, ge=1, description="Max JSON request body size (bytes)")

    # ── Cache ─────────────────────────────────────────────────────────
    CACHE_ENABLED: bool = Field(default=True, description="Cache sanitized results")
    CACHE_TTL_SECONDS: int = Field(default=300, ge=0, description="Result cache TTL (seconds)")
    CACHE_MAX_SIZE: int = Field(default=256, ge=1, description="Max number of cached results")

    # ── Validators ────────────────────────────────────────────────────

    @field_validator("SECRET_KEY")
    @classmethod
    def validate_secret_key(cls, v: str, info) -> str:
        """Refuse the default secret key in production."""
        env = info.data.get("FLASK_ENV", "development")
        if env == "production" and v == "change-me-in-production":
            raise ValueError(
                "SECRET_KEY must be changed from the default in production. "
                "Generate one with: python -c \"import secrets; print(secrets.token_hex(32))\""
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate log level."""
        v = v.upper().strip()
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}, got '{v}'")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower().strip()
        if v not in ("json", "console"):
            raise ValueError("LOG_FORMAT must be 'json' or 'console'")
        return v

    @field_validator("DEFAULT_STRATEGY")
    @classmethod
    def validate_default_strategy(cls, v: str) -> str:
        v = v.strip()
        if v not in STRATEGY_NAMES:
            raise ValueError(f"DEFAULT_STRATEGY must be one of {STRATEGY_NAMES}, got '{v}'")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance.

    Uses `lru_cache` so the `.env` file is only read once.
    """
    return Settings()
