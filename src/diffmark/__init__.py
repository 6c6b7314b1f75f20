"""diffmark - Navigable text diffs with selective application and markup rendering.

diffmark computes the line edits between two texts, groups neighbouring
edits so a reviewer can step from one change to the next, and lets the
caller keep or skip each edit. Unified diffs and modified text are
regenerated from whatever selection is current, and any unified diff can be
rendered as HTML, ANSI terminal output, rich console markup, or a custom tag
scheme with character-level highlighting of changed lines.

Requirements
------------
- Python 3.10+
- diff-match-patch (intra-line character diffs)
- rich (console markup preset)

Examples
--------
Keep only some of the changes:

    >>> from diffmark import Diff
    >>> diff = Diff("app.cfg", "debug=false\\nhost=x\\nport=80\\n", "debug=true\\nhost=x\\nport=8080\\n")
    >>> diff.edit_groups_len()
    2
    >>> diff.keep_group(0)
    >>> diff.modified_edits()
    'debug=true\\nhost=x\\nport=80\\n'

Render a diff as HTML:

    >>> from diffmark import render_diff
    >>> html = render_diff(diff, format="html")

See Also
--------
diffmark.diff : Diff engine and high-level API
diffmark.diff.renderers : Markup renderers

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "diffmark requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from diffmark.diff import (  # noqa: E402
    Diff,
    EditSpan,
    Position,
    diff_files,
    diff_texts,
    get_renderer,
    render_diff,
)
from diffmark.diff.renderers import Renderer  # noqa: E402
from diffmark.exceptions import ApplyError, DiffmarkError, EditError, ValidationError  # noqa: E402
from diffmark.options import AddRemTags, MarkupTag, RenderOptions  # noqa: E402

__all__ = [
    "AddRemTags",
    "ApplyError",
    "Diff",
    "DiffmarkError",
    "EditError",
    "EditSpan",
    "MarkupTag",
    "Position",
    "RenderOptions",
    "Renderer",
    "ValidationError",
    "__version__",
    "diff_files",
    "diff_texts",
    "get_renderer",
    "render_diff",
]
