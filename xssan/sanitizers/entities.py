"""Entity encoding of angle brackets.

Provides:
- sanitize_string(): Replace ``<`` with ``&lt;`` and ``>`` with ``&rt;``.
- TextBuffer: Owned mutable text whose ``sanitize()`` encodes it in place.
- escape_html(): Standards-compliant escaping (``&gt;``, quotes, ``&``).

``&rt;`` is not a real HTML entity. It is the substitute existing callers
already receive from ``sanitize_string`` and it stays that way; use
``escape_html`` when browser-correct entities are needed.
"""
from __future__ import annotations

from typing import Any

from markupsafe import escape

LT_ENTITY = "&lt;"
RT_ENTITY = "&rt;"


def _as_text(value: Any) -> str:
    # Plain str: subclasses such as Markup override replace()
    return str(value)


def sanitize_string(value: Any) -> str:
    """Entity-encode every angle bracket in ``value``.

    All ``<`` are replaced first, then all ``>`` on the result of that pass.
    No other character is touched.

    Args:
        value: Text to encode. Non-string values are converted with ``str()``.

    Returns:
        Encoded text.

    Examples:
        >>> sanitize_string("<h1>hi!</h1>")
        '&lt;h1&rt;hi!&lt;/h1&rt;'
    """
    return _as_text(value).replace("<", LT_ENTITY).replace(">", RT_ENTITY)


def escape_html(value: Any) -> str:
    """Escape ``& < > " '`` with standard HTML entities.

    Thin wrapper around :func:`markupsafe.escape` that always returns a
    plain ``str``. Values that are already ``Markup`` are left as they are.

    Examples:
        >>> escape_html("<a href='x'>&</a>")
        '&lt;a href=&#39;x&#39;&gt;&amp;&lt;/a&gt;'
    """
    return str(escape(value))


class TextBuffer:
    """Mutable text owned by a single caller.

    Lets a caller encode text in place instead of rebinding the result::

        buf = TextBuffer("<script>alert(0);</script>")
        buf.sanitize()
        str(buf)  # '&lt;script&rt;alert(0);&lt;/script&rt;'
    """

    __slots__ = ("_text",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = "") -> None:
        self._text = _as_text(value)

    @property
    def text(self) -> str:
        return self._text

    def sanitize(self) -> None:
        """Entity-encode the buffer contents in place."""
        self._text = sanitize_string(self._text)

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextBuffer):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"TextBuffer({self._text!r})"
