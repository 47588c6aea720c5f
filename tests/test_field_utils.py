"""Tests for the shared segment helper and filename utilities."""

import pytest

from spkmeta.services.field_utils import join_segments, split_segments, truncate_filename


class TestJoinSegments:
    """Trailing empty segments vanish; internal ones keep their separator."""

    def test_all_empty(self):
        assert join_segments(["", "", ""], "-") == ""

    def test_leading_empty_kept(self):
        assert join_segments(["", "1", "25"], "-") == "-1-25"

    def test_internal_empty_kept(self):
        assert join_segments(["C", "", "1"], "-") == "C--1"

    def test_trailing_empties_trimmed(self):
        assert join_segments(["8", "", ""], "-") == "8"
        assert join_segments(["8", "1", ""], "-") == "8-1"

    def test_extension_with_index(self):
        assert join_segments(["pdf", "2"], ".") == "pdf.2"

    def test_extension_without_index(self):
        assert join_segments(["txt", ""], ".") == "txt"

    def test_index_without_extension(self):
        assert join_segments(["", "3"], ".") == ".3"


class TestSplitSegments:

    def test_pads_missing_positions(self):
        assert split_segments("8", "-", 3) == ["8", "", ""]
        assert split_segments("-7-1", "-", 3) == ["", "7", "1"]

    def test_empty_value(self):
        assert split_segments("", "-", 3) == ["", "", ""]

    def test_too_many_segments(self):
        with pytest.raises(ValueError):
            split_segments("1-2-3-4", "-", 3)


class TestTruncateFilename:

    def test_short_name_unchanged(self):
        assert truncate_filename("photo.jpg") == "photo.jpg"

    def test_keeps_extension(self):
        name = "a" * 40 + ".jpeg"
        result = truncate_filename(name)
        assert len(result) == 32
        assert result.endswith(".jpeg")

    def test_without_extension(self):
        assert truncate_filename("b" * 40) == "b" * 32

    def test_custom_limit(self):
        assert truncate_filename("abcdefgh.txt", limit=8) == "abcd.txt"
