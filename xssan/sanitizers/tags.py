"""Tag-stripping scanner.

Removes angle-bracket delimited spans from text in a single left-to-right
pass. This is not an HTML parser: it knows nothing about quoting, comments
or raw-text elements. It applies a fixed set of rules so that malformed,
nested and unterminated markup always produce the same result:

- The first unmatched ``<`` opens a span. Further ``<`` inside the span are
  absorbed; the span still starts at the earliest one.
- A ``>`` closes the open span and the whole span is deleted.
- A ``>`` that directly follows a deletion (a "stray" ``>``) is deleted too,
  so ``<h1<p>>text`` collapses to ``text``. A run of them is absorbed.
- Any other character ends that contiguity; a later ``>`` with no open span
  is plain text.
- A span still open at the end of input is kept verbatim.

Usage:
    from xssan.sanitizers.tags import remove_html_tags

    remove_html_tags("<h1>hi!</h1>")  # 'hi!'
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ScanState(Enum):
    """Scanner states."""

    SCANNING = "scanning"
    INSIDE_TAG = "inside_tag"
    JUST_CLOSED = "just_closed"


@dataclass(frozen=True)
class Cursor:
    """Scanner state plus the span position it refers to.

    ``INSIDE_TAG`` carries the span start and ``JUST_CLOSED`` the end of the
    last deletion; ``SCANNING`` carries nothing. Positions index the output
    built so far, which is the buffer after earlier deletions.
    """

    state: ScanState
    position: int | None = None

    def __post_init__(self) -> None:
        if (self.position is None) != (self.state is ScanState.SCANNING):
            raise ValueError(f"{self.state.name} cannot have position {self.position!r}")


SCANNING = Cursor(ScanState.SCANNING)


def remove_html_tags(value: Any) -> str:
    """Strip every bracket-delimited span from ``value``.

    Args:
        value: Text to clean. Non-string values are converted with ``str()``.

    Returns:
        The text with tag spans removed, always as a plain ``str``.

    Examples:
        >>> remove_html_tags('<p onclick="alert(0)">hello</p>')
        'hello'
        >>> remove_html_tags("<<<hi!")
        '<<<hi!'
    """
    text = str(value)
    if "<" not in text and ">" not in text:
        return text

    # Characters are appended as they are visited; deleting a span truncates
    # the list back to the span start, so each character is visited once.
    out: list[str] = []
    cursor = SCANNING

    for ch in text:
        if ch == "<":
            if cursor.state is not ScanState.INSIDE_TAG:
                cursor = Cursor(ScanState.INSIDE_TAG, len(out))
            out.append(ch)
        elif ch == ">":
            if cursor.state is ScanState.SCANNING:
                out.append(ch)
            else:
                # Closing a span, or a stray '>' joining the previous deletion
                del out[cursor.position:]
                cursor = Cursor(ScanState.JUST_CLOSED, cursor.position)
        else:
            if cursor.state is ScanState.JUST_CLOSED:
                cursor = SCANNING
            out.append(ch)

    return "".join(out)
