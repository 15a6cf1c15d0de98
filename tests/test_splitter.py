"""Tests for diff/splitter.py -- split_lines()."""

from docdiff.diff.splitter import split_lines


class TestSplitLines:
    """Tests for split_lines()."""

    def test_none_is_empty(self):
        assert split_lines(None) == []

    def test_empty_string_is_empty(self):
        assert split_lines("") == []

    def test_single_line(self):
        assert split_lines("hello") == ["hello"]

    def test_multiple_lines(self):
        assert split_lines("a\nb\nc") == ["a", "b", "c"]

    def test_trailing_newline_keeps_empty_line(self):
        """A trailing newline produces a trailing empty line."""
        assert split_lines("a\n") == ["a", ""]

    def test_lone_newline(self):
        assert split_lines("\n") == ["", ""]

    def test_carriage_return_stays_attached(self):
        """Only \\n splits; \\r is part of the line content."""
        assert split_lines("a\r\nb") == ["a\r", "b"]

    def test_blank_lines_preserved(self):
        assert split_lines("a\n\n\nb") == ["a", "", "", "b"]
