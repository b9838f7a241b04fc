"""Sanitize service — maps strategy names to sanitization functions.

The service is what the HTTP routes talk to. For each call it:

1. Resolves the strategy name (or the configured default)
2. Enforces the input and batch size limits
3. Returns a cached result when one is available
4. Otherwise runs the transform and caches the result

The transforms are pure, so caching never changes what a caller gets back.

Usage:
    service = SanitizeService(settings)
    service.sanitize("<b>hi</b>", "strip_tags")  # 'hi'
"""
from __future__ import annotations

from typing import Callable

import structlog

from xssan.config import Settings
from xssan.sanitizers import escape_html, remove_brackets, remove_html_tags, sanitize_string
from xssan.utils.cache import ResultCache
from xssan.utils.exceptions import (
    BatchTooLargeError,
    InputTooLargeError,
    UnknownStrategyError,
)

logger = structlog.get_logger(__name__)

Transform = Callable[[str], str]


class SanitizeService:
    """Dispatches text to a named sanitization strategy.

    Args:
        settings: Service settings (default strategy, limits, cache).
        cache: Optional pre-built cache; one is created from settings when
            caching is enabled and none is given.
    """

    def __init__(self, settings: Settings, cache: ResultCache | None = None) -> None:
        self._settings = settings

        # Map: strategy name → (transform, one-line description)
        self._strategies: dict[str, tuple[Transform, str]] = {
            "entities": (
                sanitize_string,
                "Replace '<' with '&lt;' and '>' with '&rt;'.",
            ),
            "escape": (
                escape_html,
                "Standard HTML escaping of & < > \" '.",
            ),
            "strip_tags": (
                remove_html_tags,
                "Delete bracket-delimited tag spans; unterminated spans are kept.",
            ),
            "strip_brackets": (
                remove_brackets,
                "Delete only the '<' and '>' characters.",
            ),
        }

        if cache is None and settings.CACHE_ENABLED:
            cache = ResultCache(
                ttl_seconds=settings.CACHE_TTL_SECONDS,
                max_size=settings.CACHE_MAX_SIZE,
            )
        self._cache = cache

    @property
    def available_strategies(self) -> list[str]:
        """Return the registered strategy names."""
        return list(self._strategies.keys())

    @property
    def default_strategy(self) -> str:
        return self._settings.DEFAULT_STRATEGY

    @property
    def cache(self) -> ResultCache | None:
        return self._cache

    def describe(self) -> list[dict[str, str]]:
        """Return name and description for every strategy."""
        return [
            {"name": name, "description": description}
            for name, (_, description) in self._strategies.items()
        ]

    def sanitize(self, text: str, strategy: str | None = None) -> str:
        """Sanitize a single text.

        Args:
            text: Untrusted input.
            strategy: Registered strategy name; the configured default if None.

        Returns:
            The transformed text.

        Raises:
            UnknownStrategyError: If the strategy is not registered.
            InputTooLargeError: If the text exceeds MAX_INPUT_LENGTH.
        """
        name = strategy or self.default_strategy
        transform = self._resolve(name)
        self._check_length(text)
        result, cache_hit = self._apply(name, transform, text)

        logger.info(
            "sanitize_completed",
            strategy=name,
            input_length=len(text),
            output_length=len(result),
            cache_hit=cache_hit,
        )
        return result

    def sanitize_many(self, texts: list[str], strategy: str | None = None) -> list[str]:
        """Sanitize a batch of texts with one strategy.

        The whole batch is validated before any text is transformed.

        Raises:
            UnknownStrategyError: If the strategy is not registered.
            BatchTooLargeError: If the batch exceeds MAX_BATCH_SIZE.
            InputTooLargeError: If any text exceeds MAX_INPUT_LENGTH.
        """
        name = strategy or self.default_strategy
        transform = self._resolve(name)

        limit = self._settings.MAX_BATCH_SIZE
        if len(texts) > limit:
            raise BatchTooLargeError(count=len(texts), limit=limit)
        for text in texts:
            self._check_length(text)

        results = []
        hits = 0
        for text in texts:
            result, cache_hit = self._apply(name, transform, text)
            results.append(result)
            hits += cache_hit

        logger.info(
            "sanitize_batch_completed",
            strategy=name,
            count=len(texts),
            cache_hits=hits,
        )
        return results

    # ── Private Helpers ───────────────────────────────────────────────

    def _resolve(self, name: str) -> Transform:
        if name not in self._strategies:
            logger.warning("unknown_strategy", strategy=name)
            raise UnknownStrategyError(strategy=name, available=self.available_strategies)
        return self._strategies[name][0]

    def _check_length(self, text: str) -> None:
        limit = self._settings.MAX_INPUT_LENGTH
        if len(text) > limit:
            raise InputTooLargeError(length=len(text), limit=limit)

    def _apply(self, name: str, transform: Transform, text: str) -> tuple[str, bool]:
        """Run ``transform`` on ``text``, going through the cache if enabled."""
        if self._cache is None:
            return transform(text), False

        key = ResultCache.make_key(name, text)
        cached = self._cache.get(key)
        if cached is not None:
            return cached, True

        result = transform(text)
        self._cache.set(key, result)
        return result, False
