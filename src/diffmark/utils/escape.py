#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/utils/escape.py
"""Format-specific text escaping utilities.

These functions are plugged into :class:`diffmark.options.RenderOptions` so
that literal diff text never corrupts the markup delimiters of the target
format.

"""

from __future__ import annotations

import html

from rich.markup import escape as _rich_escape


def escape_html(text: str) -> str:
    """Escape HTML special characters, including quotes.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for HTML content and attribute values

    Examples
    --------
        >>> escape_html("a < b & c")
        'a &lt; b &amp; c'

    """
    return html.escape(text, quote=True)


def escape_console(text: str) -> str:
    r"""Escape rich console markup in text content.

    Square brackets that would otherwise open a style tag are backslash
    escaped.

    Examples
    --------
        >>> escape_console("list[int]")
        'list\\[int]'

    """
    return _rich_escape(text)


def no_escape(text: str) -> str:
    """Return text unchanged, for formats without reserved characters."""
    return text
