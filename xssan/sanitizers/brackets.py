"""Bracket stripper: drop every ``<`` and ``>``, keep everything else."""
from __future__ import annotations

from typing import Any

_BRACKETS = str.maketrans("", "", "<>")


def remove_brackets(value: Any) -> str:
    """Remove all angle brackets from ``value``.

    Each character is kept or dropped on its own; nested or malformed markup
    gets no special treatment, so tag names and attributes remain as text.

    Examples:
        >>> remove_brackets("<h1>hello</h1>")
        'h1hello/h1'
    """
    text = str(value)
    return text.translate(_BRACKETS)
