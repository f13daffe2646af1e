"""Tests for marker scanning and overlap resolution."""

import pytest

from hother.include_code.core.exceptions import DuplicateMarkerError
from hother.include_code.core.markers import (
    apply_removals,
    collect_removals,
    find_marker_pair,
    scan_markers,
    split_identifiers,
    strip_inline_markers,
)
from hother.include_code.core.models import MarkerKind

NESTED = [
    "// docs:start:outer",  # 1
    "a();",  # 2
    "// docs:start:inner",  # 3
    "b();",  # 4
    "// docs:end:inner",  # 5
    "c();",  # 6
    "// docs:end:outer",  # 7
]


class TestScanMarkers:
    """Test the single-pass line classification."""

    def test_finds_both_comment_styles(self):
        """Test that // and # comments are recognized."""
        hits = scan_markers(["// docs:start:a", "x = 1", "# docs:end:a"])

        assert [(h.kind, h.line_number, h.identifiers) for h in hits] == [
            (MarkerKind.START, 1, ("a",)),
            (MarkerKind.END, 3, ("a",)),
        ]

    def test_identifier_lists_are_split(self):
        """Test colon-separated identifier lists."""
        hits = scan_markers(["  // docs:start:a:b.c:d-e"])

        assert hits[0].identifiers == ("a", "b.c", "d-e")
        assert hits[0].whole_line is True

    def test_trailing_marker_is_not_whole_line(self):
        """Test markers that follow code on the same line."""
        hits = scan_markers(["let y = 2; // docs:start:bar"])

        assert hits[0].text == "// docs:start:bar"
        assert hits[0].whole_line is False

    def test_requires_whitespace_after_comment(self):
        """Test that //docs:start is not a marker."""
        assert scan_markers(["//docs:start:a", "/* docs:start:a */"]) == []

    def test_membership_is_exact(self):
        """Test that identifiers are not substring matched."""
        hit = scan_markers(["// docs:start:foobar"])[0]

        assert hit.names("foobar")
        assert not hit.names("foo")

    def test_split_identifiers(self):
        """Test splitting helper."""
        assert split_identifiers("a:b") == ("a", "b")


class TestFindMarkerPair:
    """Test locating the target identifier's markers."""

    def test_pair_found(self):
        """Test a simple pair."""
        start, end = find_marker_pair(scan_markers(NESTED), "inner", "f.ts")

        assert start.line_number == 3
        assert end.line_number == 5

    def test_missing_side_is_none(self):
        """Test that a missing side is reported as None."""
        start, end = find_marker_pair(scan_markers(["// docs:start:a"]), "a", "f.ts")

        assert start is not None
        assert end is None

    def test_duplicate_start(self):
        """Test that a repeated start marker raises."""
        hits = scan_markers(["// docs:start:a", "// docs:start:a", "// docs:end:a"])

        with pytest.raises(DuplicateMarkerError) as exc_info:
            find_marker_pair(hits, "a", "f.ts")

        assert exc_info.value.kind == MarkerKind.START
        assert exc_info.value.line_number == 2

    def test_duplicate_through_shared_list(self):
        """Test that a shared list counts as a second marker."""
        hits = scan_markers(["// docs:start:a", "// docs:end:a", "// docs:end:b:a"])

        with pytest.raises(DuplicateMarkerError) as exc_info:
            find_marker_pair(hits, "a", "f.ts")

        assert exc_info.value.kind == MarkerKind.END


class TestRemovalPhases:
    """Test collecting and applying removals."""

    def test_collect_scoped_to_interval(self):
        """Test that removals are limited to the target's bounds."""
        hits = scan_markers(NESTED)

        assert collect_removals(NESTED, hits, "outer", 1, 7) == frozenset({3, 5})

    def test_collect_drops_lines_outside_interval(self):
        """Test that foreign markers outside the snippet are ignored."""
        lines = ["// docs:start:b", "// docs:end:b", "// docs:start:a", "x", "// docs:end:a"]
        hits = scan_markers(lines)

        assert collect_removals(lines, hits, "a", 3, 5) == frozenset()

    def test_collect_matches_repeated_marker_text(self):
        """Test that every line with the same marker text is collected once."""
        lines = ["// docs:start:a", "// docs:start:b", "// docs:end:b", "// docs:start:b", "// docs:end:b", "// docs:end:a"]
        hits = scan_markers(lines)

        assert collect_removals(lines, hits, "a", 1, 6) == frozenset({2, 3, 4, 5})

    def test_apply_removals(self):
        """Test that the body is sliced after removal."""
        body = apply_removals(NESTED, frozenset({3, 5}), 1, 7)

        assert body == ["a();", "b();", "c();"]

    def test_apply_without_removals(self):
        """Test plain slicing between markers."""
        assert apply_removals(NESTED, frozenset(), 3, 5) == ["b();"]

    def test_strip_inline_markers(self):
        """Test that trailing foreign markers are cut from code lines."""
        lines = ["// docs:start:a", "x(); // docs:start:b", "y(); # docs:end:b", "// docs:end:a"]
        hits = scan_markers(lines)

        cleaned, emptied = strip_inline_markers(lines, hits, "a", 1, 4)

        assert cleaned == ["// docs:start:a", "x();", "y();", "// docs:end:a"]
        assert emptied == frozenset()
        assert lines[1] == "x(); // docs:start:b"

    def test_strip_reports_emptied_lines(self):
        """Test that a line holding only foreign markers is reported as emptied."""
        lines = ["// docs:start:a", "// docs:start:b // docs:start:c", "x();", "// docs:end:b // docs:end:c", "// docs:end:a"]
        hits = scan_markers(lines)

        cleaned, emptied = strip_inline_markers(lines, hits, "a", 1, 5)

        assert cleaned[1:4] == ["", "x();", ""]
        assert emptied == frozenset({2, 4})
