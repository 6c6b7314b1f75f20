#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the diffmark library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Diff Engine - Unified diff formatting defaults
3. Render Engine - Line classification and preset markup
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

RenderFormat = Literal["html", "ansi", "console", "plain"]

# =============================================================================
# Diff Engine
# =============================================================================

DEFAULT_CONTEXT_LINES = 3

# Unified diff header labels; the slash is dropped for empty or absolute paths
SOURCE_LABEL_PREFIX = "a"
CHANGED_LABEL_PREFIX = "b"

NO_NEWLINE_MARKER = "\\ No newline at end of file"

# =============================================================================
# Render Engine
# =============================================================================

# Number of file header lines (--- / +++) at the top of a unified diff
UNIFIED_HEADER_LINES = 2

LINE_ADDED_PREFIX = "+"
LINE_REMOVED_PREFIX = "-"
COMMENT_PREFIXES = frozenset({"@", "\\", "#"})

# ANSI SGR codes used by the terminal preset
ANSI_RED = "\033[31m"
ANSI_GREEN = "\033[32m"
ANSI_CYAN = "\033[36m"
ANSI_RESET = "\033[0m"
ANSI_REVERSE = "\033[7m"
ANSI_REVERSE_OFF = "\033[27m"

# CSS class names used by the HTML preset
HTML_CLASS_FILE = "diff"
HTML_CLASS_NORMAL = "diff-normal"
HTML_CLASS_COMMENT = "diff-comment"
HTML_CLASS_LINE_ADDED = "diff-line-added"
HTML_CLASS_LINE_REMOVED = "diff-line-removed"
