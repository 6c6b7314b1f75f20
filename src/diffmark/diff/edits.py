#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/diff/edits.py
"""Line edits between two texts, and the operations built on them.

Edits are computed with Python's :class:`difflib.SequenceMatcher` over
newline-terminated lines. Each edit is a span over the *source* text plus the
text that replaces it. Edits come out ordered by position and never overlap,
which lets any subset of them be applied to the source or rendered as a
unified diff on its own.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Sequence

from diffmark.constants import DEFAULT_CONTEXT_LINES, NO_NEWLINE_MARKER
from diffmark.exceptions import EditError


class Position(NamedTuple):
    """A 1-based (line, column) location in the source text."""

    line: int
    column: int = 1


@dataclass(frozen=True)
class EditSpan:
    """Replace the source text between ``start`` and ``end`` with ``new_text``.

    An empty span is a pure insertion, and an empty ``new_text`` is a pure
    deletion.
    """

    start: Position
    end: Position
    new_text: str = ""

    @property
    def end_line(self) -> int:
        """Line number of the end position, used for grouping."""
        return self.end.line


def split_lines(text: str) -> list[str]:
    r"""Split text into lines that keep their ``\n`` terminators.

    Unlike :meth:`str.splitlines`, only ``\n`` ends a line, so carriage
    returns and other separators stay part of the line content.

    Examples
    --------
        >>> split_lines("a\nb")
        ['a\n', 'b']
        >>> split_lines("a\n")
        ['a\n']

    """
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def compute_edits(source: str, changed: str) -> list[EditSpan]:
    """Compute the ordered line edits turning ``source`` into ``changed``.

    A replaced range yields a deletion followed by an insertion at the end of
    the deleted lines, so every edit touches either removed or added lines
    but never both.

    Parameters
    ----------
    source : str
        Original text
    changed : str
        Updated text

    Returns
    -------
    list of EditSpan
        Non-overlapping edits ordered by source position

    """
    old_lines = split_lines(source)
    new_lines = split_lines(changed)
    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)

    edits: list[EditSpan] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag in ("delete", "replace"):
            edits.append(EditSpan(Position(i1 + 1), Position(i2 + 1)))
        if tag in ("insert", "replace"):
            at = Position(i2 + 1)
            edits.append(EditSpan(at, at, "".join(new_lines[j1:j2])))
    return edits


def _line_offsets(text: str) -> list[int]:
    """Return the character offset at which each line starts.

    The list has one extra entry for the position just past the last line.
    """
    offsets = [0]
    for line in split_lines(text):
        offsets.append(offsets[-1] + len(line))
    return offsets


def _to_offset(position: Position, offsets: Sequence[int], size: int) -> int | None:
    if position.line < 1 or position.line > len(offsets) or position.column < 1:
        return None
    offset = offsets[position.line - 1] + position.column - 1
    if offset > size:
        return None
    return offset


def apply_edits(source: str, edits: Sequence[EditSpan]) -> str:
    """Apply ordered, non-overlapping edits to ``source``.

    Parameters
    ----------
    source : str
        Text the edit positions refer to
    edits : sequence of EditSpan
        Edits sorted by position

    Returns
    -------
    str
        The edited text

    Raises
    ------
    EditError
        If an edit points outside ``source``, ends before it starts, or
        starts before the previous edit ends.

    """
    offsets = _line_offsets(source)
    size = len(source)
    parts: list[str] = []
    last = 0

    for index, edit in enumerate(edits):
        start = _to_offset(edit.start, offsets, size)
        end = _to_offset(edit.end, offsets, size)
        if start is None or end is None:
            raise EditError(f"edit {index} is out of bounds: {edit.start}-{edit.end}", edit_index=index)
        if end < start:
            raise EditError(f"edit {index} ends before it starts: {edit.start}-{edit.end}", edit_index=index)
        if start < last:
            raise EditError(f"edit {index} overlaps the previous edit", edit_index=index)
        parts.append(source[last:start])
        parts.append(edit.new_text)
        last = end

    parts.append(source[last:])
    return "".join(parts)


def _mark_missing_newlines(diff_lines: Iterator[str]) -> Iterator[str]:
    for line in diff_lines:
        if line.endswith("\n"):
            yield line
        else:
            yield f"{line}\n{NO_NEWLINE_MARKER}\n"


def to_unified(
    label_a: str,
    label_b: str,
    source: str,
    edits: Sequence[EditSpan],
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> str:
    """Format the effect of ``edits`` on ``source`` as a unified diff.

    Parameters
    ----------
    label_a : str
        Label for the ``---`` header line
    label_b : str
        Label for the ``+++`` header line
    source : str
        Text the edits apply to
    edits : sequence of EditSpan
        Edits sorted by position
    context_lines : int, default = 3
        Number of unchanged lines shown around each change

    Returns
    -------
    str
        Unified diff text, or an empty string when the edits change nothing

    Raises
    ------
    EditError
        If the edits cannot be applied to ``source``

    """
    if not edits:
        return ""

    modified = apply_edits(source, edits)
    diff_lines = difflib.unified_diff(
        split_lines(source),
        split_lines(modified),
        fromfile=label_a,
        tofile=label_b,
        n=context_lines,
    )
    return "".join(_mark_missing_newlines(diff_lines))
