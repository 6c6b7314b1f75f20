#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/diff/renderers/markup.py
"""Markup renderer for unified diff text.

The renderer turns unified diff text into markup for any tag scheme: HTML,
ANSI escape sequences, rich console markup, or custom open/close strings.
Configuration happens through chained setters; rendering depends only on the
current configuration.
"""

from __future__ import annotations

from diff_match_patch import diff_match_patch

from diffmark.constants import (
    COMMENT_PREFIXES,
    LINE_ADDED_PREFIX,
    LINE_REMOVED_PREFIX,
    UNIFIED_HEADER_LINES,
)
from diffmark.diff.renderers.batch import prepare_render_diff
from diffmark.options.markup import EscapeFunc, MarkupTag, RenderOptions


class Renderer:
    """Render unified diffs as tagged markup.

    Every tag slot starts empty, so an unconfigured renderer only escapes the
    diff text. Setters return the renderer so calls can be chained.

    Parameters
    ----------
    options : RenderOptions or None, default = None
        Initial configuration. If None, all slots are empty and HTML escaping
        is used.

    Examples
    --------
    Highlight a changed line:
        >>> renderer = Renderer().set_text_removed("<del>", "</del>").set_text_added("<ins>", "</ins>")
        >>> renderer.render_line("hello", "hullo")
        ('h<del>e</del>llo', 'h<ins>u</ins>llo')

    """

    def __init__(self, options: RenderOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options if options is not None else RenderOptions()
        self._dmp = diff_match_patch()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.options!r})"

    # -- configuration ----------------------------------------------------

    def set_file(self, open_tag: str, close_tag: str) -> Renderer:
        """Set the markup wrapping the entire rendered diff."""
        self.options = self.options.create_updated(file=MarkupTag(open_tag, close_tag))
        return self

    def set_normal(self, open_tag: str, close_tag: str) -> Renderer:
        """Set the markup wrapping each unchanged line."""
        self.options = self.options.create_updated(normal=MarkupTag(open_tag, close_tag))
        return self

    def set_comment(self, open_tag: str, close_tag: str) -> Renderer:
        """Set the markup wrapping hunk headers and lines starting with ``\\`` or ``#``."""
        self.options = self.options.create_updated(comment=MarkupTag(open_tag, close_tag))
        return self

    def set_line_added(self, open_tag: str, close_tag: str) -> Renderer:
        line = self.options.line.create_updated(add=MarkupTag(open_tag, close_tag))
        self.options = self.options.create_updated(line=line)
        return self

    def set_line_removed(self, open_tag: str, close_tag: str) -> Renderer:
        line = self.options.line.create_updated(rem=MarkupTag(open_tag, close_tag))
        self.options = self.options.create_updated(line=line)
        return self

    def set_text_added(self, open_tag: str, close_tag: str) -> Renderer:
        """Set the markup wrapping inserted characters within a paired line."""
        text = self.options.text.create_updated(add=MarkupTag(open_tag, close_tag))
        self.options = self.options.create_updated(text=text)
        return self

    def set_text_removed(self, open_tag: str, close_tag: str) -> Renderer:
        """Set the markup wrapping deleted characters within a paired line."""
        text = self.options.text.create_updated(rem=MarkupTag(open_tag, close_tag))
        self.options = self.options.create_updated(text=text)
        return self

    def set_escape(self, escape: EscapeFunc) -> Renderer:
        """Set the escaping applied to literal diff text."""
        self.options = self.options.create_updated(escape=escape)
        return self

    def set_header_escape(self, escape: EscapeFunc) -> Renderer:
        """Set the escaping applied to the two file header lines."""
        self.options = self.options.create_updated(header_escape=escape)
        return self

    def make(self) -> Renderer:
        """Finish configuration and return the renderer."""
        return self

    def clone(self) -> Renderer:
        """Return an independent renderer with the same configuration.

        Options are frozen, so later setter calls on either renderer replace
        that renderer's options without touching the other.
        """
        return self.__class__(self.options)

    # -- rendering --------------------------------------------------------

    def render_line(self, a: str, b: str) -> tuple[str, str]:
        """Highlight the character differences between two single lines.

        Parameters
        ----------
        a : str
            Removed line, without its ``-`` prefix
        b : str
            Added line, without its ``+`` prefix

        Returns
        -------
        tuple of (str, str)
            Markup for ``a`` with deletions wrapped in the text-removed tags,
            and markup for ``b`` with insertions wrapped in the text-added tags

        """
        escape = self.options.escape
        text_tags = self.options.text
        markup_a: list[str] = []
        markup_b: list[str] = []

        for op, segment in self._dmp.diff_main(a, b, False):
            text = escape(segment)
            if op == diff_match_patch.DIFF_DELETE:
                markup_a.append(text_tags.rem.wrap(text))
            elif op == diff_match_patch.DIFF_INSERT:
                markup_b.append(text_tags.add.wrap(text))
            else:
                markup_a.append(text)
                markup_b.append(text)

        return "".join(markup_a), "".join(markup_b)

    def _line_tag(self, line: str) -> MarkupTag:
        marker = line[:1]
        if marker == LINE_ADDED_PREFIX:
            return self.options.line.add
        if marker == LINE_REMOVED_PREFIX:
            return self.options.line.rem
        if marker in COMMENT_PREFIXES:
            return self.options.comment
        return self.options.normal

    def render_diff(self, unified: str) -> str:
        """Render unified diff text as markup.

        The two file header lines are passed through the header escape only
        (identity unless configured), without tags. Every other line
        is escaped, classified by its first character and wrapped in the
        matching line tags; paired removed/added lines also get intra-line
        highlighting. An empty line is treated as a context line.

        Parameters
        ----------
        unified : str
            Unified diff text

        Returns
        -------
        str
            Markup with one newline-terminated entry per diff line, wrapped
            in the file tags

        """
        original = unified.split("\n")
        if original[-1] == "":
            # terminator of the final line, not an empty line
            original.pop()

        lines = prepare_render_diff(original, self.render_line, self.options.escape)

        output: list[str] = []
        for index, line in enumerate(lines):
            if index < UNIFIED_HEADER_LINES:
                output.append(self.options.header_escape(line))
            else:
                output.append(self._line_tag(line).wrap(line))
            output.append("\n")

        return self.options.file.wrap("".join(output))
