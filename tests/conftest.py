"""Pytest configuration and shared fixtures for the diffmark test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


TEN_LINES = "".join(f"{letter}\n" for letter in "abcdefghij")


@pytest.fixture
def ten_lines() -> str:
    """Ten one-letter lines, a through j."""
    return TEN_LINES


@pytest.fixture
def two_change_sources() -> tuple[str, str]:
    """Source/changed pair with changes on lines 2 and 9, far enough apart to form two groups."""
    changed = TEN_LINES.replace("b\n", "B\n").replace("i\n", "I\n")
    return TEN_LINES, changed


@pytest.fixture
def hello_unified() -> str:
    """Smallest unified diff with one paired removal and addition."""
    return "--- a/f\n+++ b/f\n@@ -1,1 +1,1 @@\n-hello\n+hullo\n"
