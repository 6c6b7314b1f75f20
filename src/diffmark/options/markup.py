#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffmark/options/markup.py
"""Markup tag configuration for the diff render engine.

A renderer is configured through five independent tag-pair slots. Every slot
defaults to empty strings, meaning the corresponding span is emitted without
any markup until a tag pair is set.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Callable

from diffmark.exceptions import ValidationError
from diffmark.options.base import CloneFrozenMixin
from diffmark.utils.escape import no_escape

EscapeFunc = Callable[[str], str]


@dataclass(frozen=True)
class MarkupTag(CloneFrozenMixin):
    """An open/close string pair wrapping a span of output."""

    open: str = ""
    close: str = ""

    def wrap(self, text: str) -> str:
        """Return ``text`` surrounded by this tag pair."""
        return f"{self.open}{text}{self.close}"


@dataclass(frozen=True)
class AddRemTags(CloneFrozenMixin):
    """Tag pairs for added and removed content."""

    add: MarkupTag = field(default_factory=MarkupTag)
    rem: MarkupTag = field(default_factory=MarkupTag)


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Configuration for :class:`diffmark.diff.renderers.markup.Renderer`.

    Parameters
    ----------
    file : MarkupTag
        Markup wrapping the entire rendered diff
    normal : MarkupTag
        Markup wrapping each context (unchanged) line
    comment : MarkupTag
        Markup wrapping hunk headers and comment lines (``@``, ``\\``, ``#``)
    line : AddRemTags
        Markup wrapping whole added and removed lines
    text : AddRemTags
        Markup wrapping the changed characters within paired lines
    escape : callable
        Escaping applied to all literal diff text before it is wrapped in tags
    header_escape : callable
        Escaping applied to the ``---``/``+++`` header lines, which are
        otherwise emitted unchanged. Identity by default.

    """

    file: MarkupTag = field(
        default_factory=MarkupTag,
        metadata={"help": "Markup wrapping the entire rendered diff"},
    )
    normal: MarkupTag = field(
        default_factory=MarkupTag,
        metadata={"help": "Markup wrapping each unchanged line"},
    )
    comment: MarkupTag = field(
        default_factory=MarkupTag,
        metadata={"help": "Markup wrapping hunk headers and comment lines"},
    )
    line: AddRemTags = field(
        default_factory=AddRemTags,
        metadata={"help": "Markup wrapping whole added and removed lines"},
    )
    text: AddRemTags = field(
        default_factory=AddRemTags,
        metadata={"help": "Markup wrapping changed characters within paired lines"},
    )
    escape: EscapeFunc = field(
        default=html.escape,
        metadata={"help": "Escaping applied to literal diff text before tag-wrapping"},
    )
    header_escape: EscapeFunc = field(
        default=no_escape,
        metadata={"help": "Escaping applied to the two file header lines"},
    )

    def __post_init__(self) -> None:
        """Validate the escaping callables.

        Raises
        ------
        ValidationError
            If ``escape`` or ``header_escape`` is not callable.

        """
        for name in ("escape", "header_escape"):
            value = getattr(self, name)
            if not callable(value):
                raise ValidationError(
                    f"{name} must be callable, got {type(value).__name__}",
                    parameter_name=name,
                    parameter_value=value,
                )
