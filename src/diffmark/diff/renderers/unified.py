#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/diff/renderers/unified.py
"""Unified diff rendering with ANSI colors.

This preset colors unified diff output for terminal display:
- Red for removed lines (starting with -)
- Green for added lines (starting with +)
- Cyan for hunk headers and comments (starting with @, \\ or #)
- Reverse video for the changed characters within paired lines
"""

from __future__ import annotations

from diffmark.constants import (
    ANSI_CYAN,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_REVERSE,
    ANSI_REVERSE_OFF,
)
from diffmark.diff.renderers.markup import Renderer
from diffmark.utils.escape import no_escape


def ansi_renderer(use_color: bool = True) -> Renderer:
    """Return a renderer producing ANSI-colored terminal output.

    Parameters
    ----------
    use_color : bool, default = True
        If False, every tag slot stays empty and the diff passes through
        unchanged

    """
    renderer = Renderer().set_escape(no_escape)
    if not use_color:
        return renderer

    # reverse video is switched off on its own so the line color survives
    return (
        renderer.set_comment(ANSI_CYAN, ANSI_RESET)
        .set_line_added(ANSI_GREEN, ANSI_RESET)
        .set_line_removed(ANSI_RED, ANSI_RESET)
        .set_text_added(ANSI_REVERSE, ANSI_REVERSE_OFF)
        .set_text_removed(ANSI_REVERSE, ANSI_REVERSE_OFF)
        .make()
    )


def colorize_diff(unified: str, use_color: bool = True) -> str:
    """Colorize unified diff output.

    Parameters
    ----------
    unified : str
        Unified diff text
    use_color : bool, default = True
        If True, add ANSI color codes

    Returns
    -------
    str
        Colorized diff text

    """
    return ansi_renderer(use_color=use_color).render_diff(unified)
