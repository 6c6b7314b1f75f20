#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_review_workflow.py
"""Integration tests for reviewing a diff change by change.

These tests walk the same path an interactive reviewer would: compute a diff
from files, step through its groups, accept or amend individual edits, write
the resulting text and render the accepted changes.
"""

import pytest

from diffmark import Diff, diff_files, render_diff
from diffmark.diff.renderers import HtmlDiffRenderer, colorize_diff

SOURCE = "debug=false\nhost=x\nport=80\n"
CHANGED = "debug=true\nhost=x\nport=8080\n"


@pytest.fixture
def config_files(tmp_path):
    old = tmp_path / "app.cfg.orig"
    new = tmp_path / "app.cfg"
    old.write_text(SOURCE, encoding="utf-8")
    new.write_text(CHANGED, encoding="utf-8")
    return old, new


@pytest.mark.integration
class TestReviewWorkflow:
    """Tests for stepping through and applying groups of edits."""

    def test_accept_groups_one_at_a_time(self, config_files):
        """Test that each accepted group shows up in the modified text."""
        old, new = config_files
        diff = diff_files(old, new, label="app.cfg")

        assert diff.edit_groups_len() == 2

        diff.keep_group(0)
        assert diff.modified_edits() == "debug=true\nhost=x\nport=80\n"

        diff.keep_group(1)
        assert diff.modified_edits() == CHANGED

        diff.skip_group(0)
        assert diff.modified_edits() == "debug=false\nhost=x\nport=8080\n"

    def test_amend_edit_before_accepting(self, config_files):
        """Test that an amended edit is applied in place of the computed one."""
        old, new = config_files
        diff = diff_files(old, new, label="app.cfg")

        insertion = diff.group_indices(1)[-1]
        assert diff.get_edit(insertion) == "port=8080\n"
        assert diff.set_edit(insertion, "port=9000\n")

        diff.keep_all()
        result = diff.modified_edits()
        assert result == "debug=true\nhost=x\nport=9000\n"

        new.write_text(result, encoding="utf-8")
        assert diff_files(old, new).edit_groups_len() == 2

    def test_group_unified_output(self):
        """Test that each group renders as its own hunk."""
        diff = Diff("app.cfg", SOURCE, CHANGED, context_lines=0)

        first = diff.edit_group(0)
        second = diff.edit_group(1)

        assert first == "--- a/app.cfg\n+++ b/app.cfg\n@@ -1 +1 @@\n-debug=false\n+debug=true\n"
        assert second == "--- a/app.cfg\n+++ b/app.cfg\n@@ -3 +3 @@\n-port=80\n+port=8080\n"
        assert diff.unified() == first + second[len("--- a/app.cfg\n+++ b/app.cfg\n"):]

    def test_render_accepted_changes(self):
        """Test rendering only the kept edits in every output format."""
        diff = Diff("app.cfg", SOURCE, CHANGED)
        diff.keep_group(1)
        accepted = diff.unified_edits()

        html = render_diff(accepted, format="html")
        assert "-port=80" in html
        assert "+port=80<ins>80</ins>" in html
        assert "debug=true" not in html

        assert colorize_diff(accepted, use_color=False) == accepted

        page = HtmlDiffRenderer(show_summary=False).render(accepted)
        assert "<ins>80</ins>" in page
