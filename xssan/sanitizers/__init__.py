"""Text sanitization transforms.

Every function here is pure: it takes one text value and returns a new one.

- sanitize_string(): entity-encode ``<`` / ``>`` (as ``&lt;`` / ``&rt;``).
- escape_html(): standards-compliant HTML escaping.
- remove_html_tags(): delete bracket-delimited spans.
- remove_brackets(): delete only the ``<`` / ``>`` characters.
"""
from __future__ import annotations

from xssan.sanitizers.brackets import remove_brackets
from xssan.sanitizers.entities import TextBuffer, escape_html, sanitize_string
from xssan.sanitizers.tags import Cursor, ScanState, remove_html_tags

__all__ = [
    "Cursor",
    "ScanState",
    "TextBuffer",
    "escape_html",
    "remove_brackets",
    "remove_html_tags",
    "sanitize_string",
]
