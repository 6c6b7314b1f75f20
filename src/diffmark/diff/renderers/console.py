#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/diff/renderers/console.py
"""Rich console markup rendering.

The preset emits ``[style]...[/style]`` markup understood by
:class:`rich.console.Console`, escaping literal brackets in diff text with
:func:`rich.markup.escape`.
"""

from __future__ import annotations

from rich.console import Console

from diffmark.diff.renderers.markup import Renderer
from diffmark.utils.escape import escape_console


def _style(style: str) -> tuple[str, str]:
    return f"[{style}]", f"[/{style}]"


def console_renderer() -> Renderer:
    """Return a renderer producing rich console markup."""
    return (
        Renderer()
        .set_escape(escape_console)
        .set_header_escape(escape_console)
        .set_comment(*_style("cyan"))
        .set_line_added(*_style("green"))
        .set_line_removed(*_style("red"))
        .set_text_added(*_style("reverse"))
        .set_text_removed(*_style("reverse"))
        .make()
    )


def print_diff(unified: str, console: Console | None = None) -> None:
    """Print unified diff text to a rich console with colors.

    Parameters
    ----------
    unified : str
        Unified diff text
    console : Console, optional
        Destination console; a new stdout console is used if omitted

    """
    if console is None:
        console = Console()
    console.print(console_renderer().render_diff(unified), end="", highlight=False, soft_wrap=True)
