#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/diff/renderers/html.py
"""HTML diff rendering.

:func:`html_renderer` returns a :class:`Renderer` configured with CSS-classed
``<span>`` lines and ``<ins>``/``<del>`` intra-line highlights.
:class:`HtmlDiffRenderer` embeds that markup in a standalone HTML page with
an optional summary of the diff and inline GitHub-style colors.
"""

from __future__ import annotations

from html import escape
from io import StringIO
from typing import Any

from diffmark.constants import (
    HTML_CLASS_COMMENT,
    HTML_CLASS_FILE,
    HTML_CLASS_LINE_ADDED,
    HTML_CLASS_LINE_REMOVED,
    HTML_CLASS_NORMAL,
)
from diffmark.diff.renderers.markup import Renderer
from diffmark.diff.text_diff import Diff
from diffmark.utils.escape import escape_html


def _span(css_class: str) -> tuple[str, str]:
    return f"<span class='{css_class}'>", "</span>"


def html_renderer() -> Renderer:
    """Return a renderer producing HTML markup.

    Examples
    --------
        >>> html_renderer().render_line("a < b", "a > b")
        ('a <del>&lt;</del> b', 'a <ins>&gt;</ins> b')

    """
    return (
        Renderer()
        .set_escape(escape_html)
        .set_header_escape(escape_html)
        .set_file(f"<pre class='{HTML_CLASS_FILE}'>", "</pre>")
        .set_normal(*_span(HTML_CLASS_NORMAL))
        .set_comment(*_span(HTML_CLASS_COMMENT))
        .set_line_added(*_span(HTML_CLASS_LINE_ADDED))
        .set_line_removed(*_span(HTML_CLASS_LINE_REMOVED))
        .set_text_added("<ins>", "</ins>")
        .set_text_removed("<del>", "</del>")
        .make()
    )


class HtmlDiffRenderer:
    """Render diffs as a standalone HTML page.

    Parameters
    ----------
    inline_styles : bool, default = True
        If True, include CSS styles in the output
    show_summary : bool, default = True
        If True and a :class:`Diff` is rendered, list its path and edit counts
        above the diff

    Examples
    --------
        >>> from diffmark.diff import Diff
        >>> page = HtmlDiffRenderer().render(Diff("f.txt", "hello\\n", "hullo\\n"))
        >>> "<ins>u</ins>" in page
        True

    """

    def __init__(
        self,
        inline_styles: bool = True,
        show_summary: bool = True,
    ):
        """Initialize the HTML diff renderer."""
        self.inline_styles = inline_styles
        self.show_summary = show_summary
        self.renderer = html_renderer()

    def render(self, diff: Diff | str) -> str:
        """Render a diff to an HTML page.

        Parameters
        ----------
        diff : Diff or str
            Diff whose full unified output is rendered, or unified diff text

        Returns
        -------
        str
            HTML document

        """
        unified = diff.unified() if isinstance(diff, Diff) else diff

        output = StringIO()
        self._write_html_prefix(output)

        if isinstance(diff, Diff) and self.show_summary:
            self._render_summary(diff, output)

        if unified:
            output.write(self.renderer.render_diff(unified))
        else:
            output.write("      <p><em>No differences found.</em></p>\n")

        self._write_html_suffix(output)
        return output.getvalue()

    def _write_html_prefix(self, output: StringIO) -> None:
        output.write("<!DOCTYPE html>\n")
        output.write("<html lang='en'>\n")
        output.write("<head>\n")
        output.write("  <meta charset='UTF-8'>\n")
        output.write("  <meta name='viewport' content='width=device-width, initial-scale=1.0'>\n")
        output.write("  <title>Diff</title>\n")

        if self.inline_styles:
            output.write("  <style>\n")
            output.write(self._get_css())
            output.write("  </style>\n")

        output.write("</head>\n")
        output.write("<body>\n")
        output.write("  <div class='container'>\n")

    def _write_html_suffix(self, output: StringIO) -> None:
        output.write("  </div>\n")
        output.write("</body>\n")
        output.write("</html>\n")

    def _render_summary(self, diff: Diff, output: StringIO) -> None:
        output.write("      <div class='diff-summary'>\n")
        output.write("        <dl>\n")
        output.write(f"          <dt>File</dt><dd>{escape(diff.path)}</dd>\n")
        output.write(f"          <dt>Edits</dt><dd>{len(diff)}</dd>\n")
        output.write(f"          <dt>Groups</dt><dd>{diff.edit_groups_len()}</dd>\n")
        output.write(f"          <dt>Kept</dt><dd>{diff.keep_len()}</dd>\n")
        output.write("        </dl>\n")
        output.write("      </div>\n")

    def _get_css(self) -> str:
        return f"""
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
            color: #333;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }}
        .container {{
            background-color: white;
            padding: 30px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }}
        .diff-summary {{
            background-color: #f0f4ff;
            border: 1px solid #cbd7f7;
            border-radius: 6px;
            padding: 12px 16px;
            margin-bottom: 20px;
        }}
        .diff-summary dl {{
            display: grid;
            grid-template-columns: max-content 1fr;
            gap: 4px 16px;
            margin: 0;
        }}
        pre.{HTML_CLASS_FILE} {{
            font-family: 'Courier New', Courier, monospace;
            font-size: 14px;
            border: 1px solid #ddd;
            border-radius: 6px;
            padding: 8px 0;
        }}
        pre.{HTML_CLASS_FILE} span {{
            display: inline-block;
            width: 100%;
            padding: 0 12px;
        }}
        .{HTML_CLASS_COMMENT} {{
            color: #5b6b7f;
            background-color: #f1f8ff;
        }}
        .{HTML_CLASS_LINE_ADDED} {{
            background-color: #e6ffed;
            color: #116329;
        }}
        .{HTML_CLASS_LINE_REMOVED} {{
            background-color: #ffeef0;
            color: #82071e;
        }}
        .{HTML_CLASS_LINE_ADDED} ins {{
            background-color: #acf2bd;
            text-decoration: none;
        }}
        .{HTML_CLASS_LINE_REMOVED} del {{
            background-color: #fdb8c0;
            text-decoration: none;
        }}
        """


def render_to_file(diff: Diff | str, output_path: str, **kwargs: Any) -> None:
    """Render a diff to an HTML file.

    Parameters
    ----------
    diff : Diff or str
        Diff or unified diff text to render
    output_path : str
        Destination path for the generated HTML file.
    **kwargs
        Additional keyword arguments forwarded to :class:`HtmlDiffRenderer`.

    """
    renderer = HtmlDiffRenderer(**kwargs)
    html = renderer.render(diff)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)
