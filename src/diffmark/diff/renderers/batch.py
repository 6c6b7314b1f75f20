#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/diff/renderers/batch.py
"""Pairing of removed and added lines for intra-line highlighting.

Within a hunk, a run of removed lines immediately followed by a run of added
lines is collected into a batch. When the run ends, the i-th removal is paired
with the i-th addition and both are re-rendered with character-level markup.
Lines without a partner keep their plain escaped form.

The scan is a single forward pass over an explicit two-state accumulator, so
no lookahead or backtracking is needed. Lines are written to the output in
document order and flushed pairs overwrite their slots by absolute index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Sequence

from diffmark.constants import LINE_ADDED_PREFIX, LINE_REMOVED_PREFIX, UNIFIED_HEADER_LINES
from diffmark.options.markup import EscapeFunc

RenderLineFunc = Callable[[str, str], tuple[str, str]]


class BatchState(Enum):
    """Whether a removals-then-additions run is being collected."""

    NO_BATCH = "no_batch"
    COLLECTING = "collecting"


@dataclass
class RenderBatch:
    """Raw (unescaped) contents of one removals-then-additions run."""

    removed: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)

    def remove(self, line: str) -> None:
        self.removed.append(line)

    def add(self, line: str) -> None:
        self.added.append(line)


class BatchPairer:
    """Rewrite paired removal/addition lines with intra-line markup.

    Parameters
    ----------
    render_line : callable
        Function taking a removed and an added line and returning their
        marked-up forms, as :meth:`Renderer.render_line` does
    escape : callable
        Escaping applied to every line body

    """

    def __init__(self, render_line: RenderLineFunc, escape: EscapeFunc):
        """Initialize the pairer with no batch open."""
        self.render_line = render_line
        self.escape = escape
        self.state = BatchState.NO_BATCH
        self.batch = RenderBatch()

    def prepare(self, original: Sequence[str]) -> list[str]:
        """Escape every body line and apply intra-line markup to paired lines.

        Parameters
        ----------
        original : sequence of str
            Lines of a unified diff, without terminators

        Returns
        -------
        list of str
            One output line per input line, in the same order

        """
        self._reset()
        lines: list[str] = []

        for index, line in enumerate(original):
            if index < UNIFIED_HEADER_LINES:
                lines.append(line)
                continue

            if not line:
                lines.append("")
                self._flush(index, lines)
                continue

            marker, content = line[0], line[1:]
            lines.append(marker + self.escape(content))

            if self.state is BatchState.NO_BATCH:
                if marker == LINE_REMOVED_PREFIX:
                    self._open(content)
                continue

            if marker == LINE_REMOVED_PREFIX:
                if self.batch.added:
                    # removals after additions start a new run
                    self._flush(index, lines)
                    self._open(content)
                else:
                    self.batch.remove(content)
            elif marker == LINE_ADDED_PREFIX:
                self.batch.add(content)
            else:
                self._flush(index, lines)

        self._flush(len(original), lines)
        return lines

    def _reset(self) -> None:
        self.state = BatchState.NO_BATCH
        self.batch = RenderBatch()

    def _open(self, content: str) -> None:
        self.state = BatchState.COLLECTING
        self.batch = RenderBatch()
        self.batch.remove(content)

    def _flush(self, last_index: int, lines: list[str]) -> None:
        """Overwrite the paired lines of the open batch, then close it.

        ``last_index`` is the output index just past the batch: the removals
        occupy the ``num_removed`` slots before the ``num_added`` additions.
        """
        if self.state is BatchState.NO_BATCH:
            return

        num_removed = len(self.batch.removed)
        num_added = len(self.batch.added)
        for i in range(min(num_removed, num_added)):
            markup_a, markup_b = self.render_line(self.batch.removed[i], self.batch.added[i])
            lines[last_index - num_removed - num_added + i] = LINE_REMOVED_PREFIX + markup_a
            lines[last_index - num_added + i] = LINE_ADDED_PREFIX + markup_b

        self._reset()


def prepare_render_diff(
    original: Sequence[str],
    render_line: RenderLineFunc,
    escape: EscapeFunc,
) -> list[str]:
    """Escape unified diff lines and add intra-line markup to paired lines.

    See :class:`BatchPairer` for the pairing rules.
    """
    return BatchPairer(render_line, escape).prepare(original)
