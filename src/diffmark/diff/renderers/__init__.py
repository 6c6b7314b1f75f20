#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/diff/renderers/__init__.py
"""Markup renderers for unified diff text.

Available Renderers
-------------------
- Renderer: Configurable tag-pair renderer with intra-line highlighting
- html_renderer / HtmlDiffRenderer: HTML markup and standalone HTML pages
- ansi_renderer / colorize_diff: ANSI-colored output for terminals
- console_renderer / print_diff: rich console markup

Examples
--------
Render a diff as HTML:
    >>> from diffmark.diff import Diff
    >>> from diffmark.diff.renderers import html_renderer
    >>> diff = Diff("notes.txt", "hello\\n", "hullo\\n")
    >>> markup = html_renderer().render_diff(diff.unified())

Define a custom tag scheme:
    >>> from diffmark.diff.renderers import Renderer
    >>> renderer = Renderer().set_line_added("{+", "+}").set_line_removed("{-", "-}")

"""

from diffmark.diff.renderers.batch import BatchPairer, BatchState, RenderBatch, prepare_render_diff
from diffmark.diff.renderers.console import console_renderer, print_diff
from diffmark.diff.renderers.html import HtmlDiffRenderer, html_renderer
from diffmark.diff.renderers.markup import Renderer
from diffmark.diff.renderers.unified import ansi_renderer, colorize_diff

__all__ = [
    "BatchPairer",
    "BatchState",
    "HtmlDiffRenderer",
    "RenderBatch",
    "Renderer",
    "ansi_renderer",
    "colorize_diff",
    "console_renderer",
    "html_renderer",
    "prepare_render_diff",
    "print_diff",
]
