#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for diff/renderers/unified.py ANSI rendering."""

import pytest

from diffmark.diff.renderers.unified import ansi_renderer, colorize_diff

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
RESET = "\033[0m"
REVERSE = "\033[7m"
REVERSE_OFF = "\033[27m"


@pytest.mark.unit
class TestAnsiRenderer:
    """Tests for the ANSI terminal preset."""

    def test_render_without_color(self):
        """Test that disabling color passes the diff through unchanged."""
        unified = "--- old.txt\n+++ new.txt\n@@ -1,3 +1,3 @@\n context <line>\n-deleted line\n+added line\n"
        assert colorize_diff(unified, use_color=False) == unified

    def test_render_with_color_hunk_headers(self):
        """Test that hunk headers are rendered in cyan."""
        unified = "--- a\n+++ b\n@@ -1,3 +1,3 @@\n@@ -10,5 +12,7 @@ function test()\n"
        lines = colorize_diff(unified).split("\n")
        assert lines[2] == f"{CYAN}@@ -1,3 +1,3 @@{RESET}"
        assert lines[3] == f"{CYAN}@@ -10,5 +12,7 @@ function test(){RESET}"

    def test_render_paired_lines(self):
        """Test line colors with reverse video on changed characters."""
        unified = "--- a\n+++ b\n@@ -1 +1 @@\n-hello\n+hullo\n"
        lines = colorize_diff(unified).split("\n")
        assert lines[3] == f"{RED}-h{REVERSE}e{REVERSE_OFF}llo{RESET}"
        assert lines[4] == f"{GREEN}+h{REVERSE}u{REVERSE_OFF}llo{RESET}"

    def test_context_lines_uncolored(self):
        """Test that context lines carry no color codes."""
        unified = "--- a\n+++ b\n@@ -1 +1 @@\n context\n"
        assert colorize_diff(unified).split("\n")[3] == " context"

    def test_headers_pass_through(self):
        """Test that the file headers are not colored as removals or additions."""
        unified = "--- a/f\n+++ b/f\n"
        assert colorize_diff(unified) == unified

    def test_no_escaping(self):
        """Test that terminal output keeps markup characters verbatim."""
        renderer = ansi_renderer()
        assert renderer.render_line("a<b", "a<b") == ("a<b", "a<b")
