#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/diff/__init__.py
"""Text comparison and diff markup.

This module computes line edits between two texts, groups adjacent edits for
navigation, lets callers keep or skip individual edits, and regenerates
unified diffs or modified text from any selection.

Key Features
------------
- Line edits computed with Python's difflib
- Grouping of line-adjacent edits ("next change" navigation)
- Keep/skip selection of edits and groups
- Unified diff output for all, kept, single or grouped edits
- Modified text built from the kept edits only
- Markup rendering with intra-line highlighting (HTML, ANSI, rich, custom)

Examples
--------
Review changes one group at a time:
    >>> from diffmark.diff import Diff
    >>> diff = Diff("notes.txt", "one\\ntwo\\nthree\\n", "one\\n2\\nthree\\n")
    >>> for index in range(diff.edit_groups_len()):
    ...     patch = diff.edit_group(index)
    ...     diff.keep_group(index)
    >>> diff.modified_edits() == diff.changed
    True

"""

from diffmark.diff.edits import EditSpan, Position, apply_edits, compute_edits, split_lines, to_unified
from diffmark.diff.text_diff import Diff, group_edits
from diffmark.diff.api import diff_files, diff_texts, get_renderer, render_diff

__all__ = [
    "Diff",
    "EditSpan",
    "Position",
    "apply_edits",
    "compute_edits",
    "diff_files",
    "diff_texts",
    "get_renderer",
    "group_edits",
    "render_diff",
    "split_lines",
    "to_unified",
]
