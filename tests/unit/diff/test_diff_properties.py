#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Property-based tests for Diff selection and line rendering."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from diffmark.diff.edits import compute_edits
from diffmark.diff.renderers.markup import Renderer
from diffmark.diff.text_diff import Diff
from diffmark.utils.escape import no_escape

# Small alphabets keep common lines frequent so edits interleave with context
lines_strategy = st.lists(st.sampled_from(["a", "b", "c", "", "dd", "e e"]), max_size=12)
texts = lines_strategy.map(lambda lines: "".join(f"{line}\n" for line in lines))
raw_texts = st.text(alphabet="ab\nc", max_size=30)
plain_lines = st.text(alphabet=st.characters(blacklist_characters="<>\n"), max_size=20)


@pytest.mark.property
class TestDiffLaws:
    """Selection laws that hold for any pair of texts."""

    @given(source=raw_texts, changed=raw_texts)
    def test_keep_all_reproduces_changed(self, source, changed):
        """Test that applying every edit yields the changed text."""
        diff = Diff("f", source, changed)
        diff.keep_all()
        assert diff.modified_edits() == changed

    @given(source=raw_texts, changed=raw_texts)
    def test_nothing_kept_reproduces_source(self, source, changed):
        """Test that applying no edits yields the source text."""
        diff = Diff("f", source, changed)
        assert diff.modified_edits() == source
        diff.keep_all()
        diff.skip_all()
        assert diff.modified_edits() == source

    @given(source=texts, changed=texts)
    def test_edit_count_matches_computed_edits(self, source, changed):
        """Test that the diff length equals the computed edit count."""
        assert len(Diff("f", source, changed)) == len(compute_edits(source, changed))

    @given(source=texts, changed=texts)
    def test_groups_partition_edits(self, source, changed):
        """Test that groups cover every edit index exactly once, in order."""
        diff = Diff("f", source, changed)
        flattened = [index for group in diff.groups for index in group]
        assert flattened == list(range(len(diff)))
        assert all(group for group in diff.groups)

    @given(source=texts, changed=texts, data=st.data())
    def test_keep_group_keeps_exactly_its_edits(self, source, changed, data):
        """Test that keeping one group keeps exactly that group's edits."""
        diff = Diff("f", source, changed)
        if diff.edit_groups_len() == 0:
            return
        index = data.draw(st.integers(min_value=0, max_value=diff.edit_groups_len() - 1))

        diff.keep_group(index)

        assert diff.kept_indices() == list(diff.group_indices(index))
        assert diff.unified_edits() == diff.edit_group(index)

    @given(source=texts, changed=texts)
    def test_every_subset_applies(self, source, changed):
        """Test that every other edit still applies cleanly."""
        diff = Diff("f", source, changed)
        for index in range(0, len(diff), 2):
            diff.keep_edit(index)
        assert isinstance(diff.modified_edits(), str)


@pytest.mark.property
class TestRenderLineLaws:
    """Intra-line markup preserves both input lines."""

    @given(a=plain_lines, b=plain_lines)
    def test_untagged_render_is_identity(self, a, b):
        """Test that an unconfigured, non-escaping renderer returns its inputs."""
        assert Renderer().set_escape(no_escape).render_line(a, b) == (a, b)

    @given(a=plain_lines, b=plain_lines)
    def test_stripping_tags_recovers_lines(self, a, b):
        """Test that removing highlight tags reconstructs both lines."""
        renderer = Renderer().set_escape(no_escape).set_text_removed("<d>", "</d>").set_text_added("<i>", "</i>")
        markup_a, markup_b = renderer.render_line(a, b)

        assert markup_a.replace("<d>", "").replace("</d>", "") == a
        assert markup_b.replace("<i>", "").replace("</i>", "") == b
        assert "<i>" not in markup_a
        assert "<d>" not in markup_b
