#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/diff/text_diff.py
"""Navigable, selectively applicable text diffs.

A :class:`Diff` computes the line edits between two texts, clusters
line-adjacent edits into groups for "next change" navigation, and tracks
which edits are kept. Unified diff text and modified text can then be
regenerated from all edits, a single edit, a group, or the kept subset.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from diffmark.constants import CHANGED_LABEL_PREFIX, DEFAULT_CONTEXT_LINES, SOURCE_LABEL_PREFIX
from diffmark.diff.edits import EditSpan, apply_edits, compute_edits, to_unified
from diffmark.exceptions import ApplyError, ValidationError

logger = logging.getLogger(__name__)


def group_edits(edits: list[EditSpan]) -> list[tuple[int, ...]]:
    """Cluster edit indices into runs of line-adjacent edits.

    An edit joins the current group when its end line equals the end line of
    the previous edit or exceeds it by one; otherwise it starts a new group.

    Parameters
    ----------
    edits : list of EditSpan
        Edits ordered by position

    Returns
    -------
    list of tuple of int
        Groups of edit indices, in increasing order, covering every edit

    """
    groups: list[tuple[int, ...]] = []
    group: list[int] = []
    previous_line: int | None = None

    for index, edit in enumerate(edits):
        this_line = edit.end_line
        if previous_line is not None and this_line not in (previous_line, previous_line + 1):
            groups.append(tuple(group))
            group = []
        group.append(index)
        previous_line = this_line

    if group:
        groups.append(tuple(group))
    return groups


class Diff:
    """Edits between a source and a changed text, with keep/skip selection.

    Parameters
    ----------
    path : str
        Logical file name, used only for the unified diff header labels
    source : str
        Original text
    changed : str
        Updated text
    context_lines : int, default = 3
        Number of unchanged lines shown around each change in unified output

    Examples
    --------
        >>> diff = Diff("notes.txt", "one\\ntwo\\n", "one\\n2\\n")
        >>> len(diff), diff.edit_groups_len()
        (2, 1)
        >>> diff.keep_group(0)
        >>> diff.modified_edits()
        'one\\n2\\n'

    """

    def __init__(
        self,
        path: str,
        source: str,
        changed: str,
        *,
        context_lines: int = DEFAULT_CONTEXT_LINES,
    ) -> None:
        """Compute and group the edits between ``source`` and ``changed``."""
        if context_lines < 0:
            raise ValidationError(
                f"context_lines must be non-negative, got {context_lines}",
                parameter_name="context_lines",
                parameter_value=context_lines,
            )
        self._path = path
        self._source = source
        self._changed = changed
        self._context_lines = context_lines
        self._edits = compute_edits(source, changed)
        self._groups = group_edits(self._edits)
        self._keep: set[int] = set()
        logger.debug(f"Diff for {path!r}: {len(self._edits)} edits in {len(self._groups)} groups")

    def __len__(self) -> int:
        """Return the total number of edits, kept or not."""
        return len(self._edits)

    def __repr__(self) -> str:
        return f"Diff(path={self._path!r}, edits={len(self._edits)}, kept={len(self._keep)})"

    @property
    def path(self) -> str:
        """Logical file name used in the unified diff labels."""
        return self._path

    @property
    def source(self) -> str:
        """Original text the edits apply to."""
        return self._source

    @property
    def changed(self) -> str:
        """Updated text the edits were computed against."""
        return self._changed

    @property
    def context_lines(self) -> int:
        """Unchanged lines shown around each change in unified output."""
        return self._context_lines

    @property
    def edits(self) -> tuple[EditSpan, ...]:
        """Snapshot of the edits in position order."""
        return tuple(self._edits)

    @property
    def groups(self) -> tuple[tuple[int, ...], ...]:
        """Edit indices of every group, in order."""
        return tuple(self._groups)

    def _valid_edit(self, index: int) -> bool:
        return 0 <= index < len(self._edits)

    def _valid_group(self, index: int) -> bool:
        return 0 <= index < len(self._groups)

    def _labels(self) -> tuple[str, str]:
        label_a, label_b = SOURCE_LABEL_PREFIX, CHANGED_LABEL_PREFIX
        if self._path and not self._path.startswith("/"):
            label_a += "/"
            label_b += "/"
        return label_a + self._path, label_b + self._path

    def _unified(self, indices: Sequence[int]) -> str:
        label_a, label_b = self._labels()
        edits = [self._edits[index] for index in indices]
        return to_unified(label_a, label_b, self._source, edits, context_lines=self._context_lines)

    # -- counts -----------------------------------------------------------

    def keep_len(self) -> int:
        """Return the number of edits currently kept."""
        return len(self._keep)

    def edit_groups_len(self) -> int:
        """Return the number of edit groups."""
        return len(self._groups)

    # -- selection --------------------------------------------------------

    def keep_all(self) -> None:
        """Keep every edit."""
        self._keep = set(range(len(self._edits)))

    def skip_all(self) -> None:
        """Skip every edit."""
        self._keep = set()

    def keep_edit(self, index: int) -> bool:
        """Keep the edit at ``index``.

        Returns
        -------
        bool
            True if ``index`` addresses an edit, False otherwise (no change)

        """
        if not self._valid_edit(index):
            return False
        self._keep.add(index)
        return True

    def skip_edit(self, index: int) -> bool:
        """Skip the edit at ``index``.

        Returns
        -------
        bool
            True if ``index`` addresses an edit, False otherwise (no change)

        """
        if not self._valid_edit(index):
            return False
        self._keep.discard(index)
        return True

    def keep_group(self, index: int) -> None:
        """Keep every edit of group ``index``; out-of-range groups are ignored."""
        if self._valid_group(index):
            for edit_index in self._groups[index]:
                self.keep_edit(edit_index)

    def skip_group(self, index: int) -> None:
        """Skip every edit of group ``index``; out-of-range groups are ignored."""
        if self._valid_group(index):
            for edit_index in self._groups[index]:
                self.skip_edit(edit_index)

    def is_kept(self, index: int) -> bool:
        """Return whether edit ``index`` is currently kept."""
        return index in self._keep

    def kept_indices(self) -> list[int]:
        """Return the kept edit indices in ascending order."""
        return sorted(self._keep)

    def group_indices(self, index: int) -> tuple[int, ...]:
        """Return the edit indices of group ``index``, or an empty tuple."""
        if not self._valid_group(index):
            return ()
        return self._groups[index]

    # -- edit text --------------------------------------------------------

    def get_edit(self, index: int) -> str | None:
        """Return the replacement text of edit ``index``, or None if out of range."""
        if not self._valid_edit(index):
            return None
        return self._edits[index].new_text

    def set_edit(self, index: int, text: str) -> bool:
        """Replace the replacement text of edit ``index``.

        Positions, and therefore groups, are unaffected.

        Returns
        -------
        bool
            True if ``index`` addresses an edit, False otherwise (no change)

        """
        if not self._valid_edit(index):
            return False
        self._edits[index] = replace(self._edits[index], new_text=text)
        return True

    # -- output -----------------------------------------------------------

    def unified(self) -> str:
        """Return the unified diff of all edits, regardless of selection."""
        return self._unified(range(len(self._edits)))

    def unified_edit(self, index: int) -> str:
        """Return the unified diff of edit ``index`` alone, or "" if out of range."""
        if not self._valid_edit(index):
            return ""
        return self._unified([index])

    def unified_edits(self) -> str:
        """Return the unified diff of the kept edits, in ascending order."""
        return self._unified(self.kept_indices())

    def edit_group(self, index: int) -> str:
        """Return the unified diff of group ``index``, or "" if out of range."""
        if not self._valid_group(index):
            return ""
        return self._unified(self._groups[index])

    def modified_edits(self) -> str:
        """Apply only the kept edits to the source text.

        Returns
        -------
        str
            The source with the kept edits applied in ascending order

        Raises
        ------
        ApplyError
            If the kept edits cannot be applied consistently

        """
        edits = [self._edits[index] for index in self.kept_indices()]
        try:
            return apply_edits(self._source, edits)
        except Exception as e:
            logger.debug(f"Applying {len(edits)} kept edits to {self._path!r} failed: {e}")
            raise ApplyError(f"Failed to apply kept edits: {e}", original_error=e) from e
