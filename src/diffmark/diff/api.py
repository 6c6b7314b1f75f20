#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/diff/api.py
"""Python API for text comparison and diff rendering.

This module provides high-level functions for diffing texts or files and
rendering unified diffs in the supported markup formats.
"""

from __future__ import annotations

import logging
from pathlib import Path

from diffmark.constants import DEFAULT_CONTEXT_LINES, RenderFormat
from diffmark.diff.renderers import Renderer, ansi_renderer, console_renderer, html_renderer
from diffmark.diff.text_diff import Diff
from diffmark.exceptions import ValidationError

logger = logging.getLogger(__name__)


def diff_texts(
    source: str,
    changed: str,
    path: str = "",
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> Diff:
    """Compare two texts and return a navigable diff.

    Parameters
    ----------
    source : str
        Original text
    changed : str
        Updated text
    path : str, default ""
        Logical file name used for the unified diff header labels
    context_lines : int, default 3
        Context lines shown around each change in unified output

    Returns
    -------
    Diff
        Diff with no edits kept yet

    Examples
    --------
        >>> diff = diff_texts("a\\nb\\n", "a\\nc\\n", path="x.txt")
        >>> print(diff.unified(), end="")
        --- a/x.txt
        +++ b/x.txt
        @@ -1,2 +1,2 @@
         a
        -b
        +c

    """
    return Diff(path, source, changed, context_lines=context_lines)


def diff_files(
    old_path: str | Path,
    new_path: str | Path,
    label: str | None = None,
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> Diff:
    """Compare two text files and return a navigable diff.

    Parameters
    ----------
    old_path : str or Path
        Path to the original file
    new_path : str or Path
        Path to the updated file
    label : str, optional
        Logical file name for the diff headers (defaults to ``new_path``)
    context_lines : int, default 3
        Context lines shown around each change in unified output

    Returns
    -------
    Diff
        Diff of the two file contents

    Raises
    ------
    FileNotFoundError
        If either file does not exist

    """
    old_path = Path(old_path)
    new_path = Path(new_path)

    for file_path in (old_path, new_path):
        if not file_path.exists():
            raise FileNotFoundError(f"Source file not found: {file_path}")

    if label is None:
        label = new_path.as_posix()

    logger.debug(f"Comparing {old_path} with {new_path}")
    source = old_path.read_text(encoding="utf-8")
    changed = new_path.read_text(encoding="utf-8")
    return Diff(label, source, changed, context_lines=context_lines)


def get_renderer(format: RenderFormat = "html") -> Renderer:
    """Return a preconfigured renderer for ``format``.

    Parameters
    ----------
    format : {"html", "ansi", "console", "plain"}, default "html"
        - "html": HTML spans with ``<ins>``/``<del>`` highlights
        - "ansi": ANSI colors for terminals
        - "console": rich console markup
        - "plain": no tags and HTML escaping only

    Raises
    ------
    ValidationError
        If format is invalid

    """
    if format == "html":
        return html_renderer()
    if format == "ansi":
        return ansi_renderer()
    if format == "console":
        return console_renderer()
    if format == "plain":
        return Renderer()
    raise ValidationError(
        f"Invalid format: {format}. Must be one of: html, ansi, console, plain",
        parameter_name="format",
        parameter_value=format,
    )


def render_diff(diff: Diff | str, format: RenderFormat = "html") -> str:
    """Render a diff in the specified format.

    Parameters
    ----------
    diff : Diff or str
        Diff whose full unified output is rendered, or unified diff text
    format : {"html", "ansi", "console", "plain"}, default "html"
        Output format, see :func:`get_renderer`

    Returns
    -------
    str
        Rendered markup

    """
    unified = diff.unified() if isinstance(diff, Diff) else diff
    return get_renderer(format).render_diff(unified)
