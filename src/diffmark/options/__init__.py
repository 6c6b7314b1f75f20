#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration objects for diffmark."""

from diffmark.options.base import CloneFrozenMixin
from diffmark.options.markup import AddRemTags, EscapeFunc, MarkupTag, RenderOptions

__all__ = [
    "AddRemTags",
    "CloneFrozenMixin",
    "EscapeFunc",
    "MarkupTag",
    "RenderOptions",
]
