"""Tests for the scrape report formatter."""

from page_scraper.output import format_report


class TestFormatReport:
    def test_single_entry(self):
        """One text should produce a header and one numbered entry."""
        report = format_report("https://example.com", "h1", 1, ["Title"])
        assert report == (
            'Found 1 elements matching selector "h1" on https://example.com:\n'
            "\n"
            "Element 1: Title\n"
        )

    def test_entries_separated_by_blank_line(self):
        """Each entry should be followed by a blank separator line."""
        report = format_report("https://example.com", "p", 2, ["One", "Two"])
        assert "Element 1: One\n\nElement 2: Two\n" in report

    def test_header_uses_total_matched(self):
        """The header count is the matched count, not the number of entries."""
        report = format_report("U", "X", 5, ["only"])
        assert report.startswith('Found 5 elements matching selector "X" on U:')
        assert "Element 1: only" in report
        assert "Element 2" not in report

    def test_numbering_follows_surviving_texts(self):
        """Entries should be numbered 1..n in the given order."""
        report = format_report("U", "li", 4, ["a", "b", "c"])
        lines = [line for line in report.splitlines() if line.startswith("Element")]
        assert lines == ["Element 1: a", "Element 2: b", "Element 3: c"]

    def test_multiline_text_kept(self):
        """Newlines left by normalization stay inside the entry."""
        report = format_report("U", "div", 1, ["line one\nline two"])
        assert "Element 1: line one\nline two\n" in report
