"""Tests for element text normalization."""

import pytest

from page_scraper.normalize import normalize_text


class TestNormalizeTextAbsent:
    @pytest.mark.parametrize("raw", [None, "", "   ", "\n\t \n", " \n"])
    def test_returns_none_for_blank_input(self, raw):
        """Missing or whitespace-only text should yield None, never ''."""
        assert normalize_text(raw) is None


class TestNormalizeTextCollapsing:
    def test_collapses_spaces_and_blank_lines(self):
        """Space runs become one space, blank-line runs one newline."""
        assert normalize_text("a   b\n\n\nc") == "a b\nc"

    def test_trims_and_collapses_inner_spaces(self):
        """Leading and trailing whitespace should be removed."""
        assert normalize_text("  Hello   world  ") == "Hello world"

    def test_collapses_tabs(self):
        """Tabs count as horizontal whitespace."""
        assert normalize_text("one\t\ttwo") == "one two"

    def test_indented_lines_lose_indentation(self):
        """Whitespace around a line break should fold into the newline."""
        html_text = "\n        Title\n        <sub>\n    "
        assert normalize_text(html_text) == "Title\n<sub>"

    def test_whitespace_only_blank_line(self):
        """A line holding only spaces still counts as blank."""
        assert normalize_text("first\n   \n  second") == "first\nsecond"


class TestNormalizeTextIdempotence:
    @pytest.mark.parametrize(
        "text",
        ["Hello world", "a b\nc", "single", "x\ny\nz"],
    )
    def test_normalized_text_is_unchanged(self, text):
        """Normalizing an already clean string should return it as is."""
        assert normalize_text(text) == text
        assert normalize_text(normalize_text(text)) == text
