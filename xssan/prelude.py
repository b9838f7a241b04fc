"""Convenience imports for library callers.

Usage:
    from xssan.prelude import *

    html = "<h1>Title</h1><p> paragraph.</p>"
    remove_html_tags(html)  # 'Title paragraph.'
    sanitize_string(html)   # '&lt;h1&rt;Title&lt;/h1&rt;&lt;p&rt; paragraph.&lt;/p&rt;'
"""
from xssan.sanitizers import (  # noqa: F401
    TextBuffer,
    escape_html,
    remove_brackets,
    remove_html_tags,
    sanitize_string,
)

__all__ = [
    "TextBuffer",
    "escape_html",
    "remove_brackets",
    "remove_html_tags",
    "sanitize_string",
]
