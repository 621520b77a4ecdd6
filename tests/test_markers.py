"""Tests for list marker detection and stripping."""

import pytest

from notepane.formatting.markers import (
    ListMarker,
    detect_marker,
    has_marker,
    marker_length,
    strip_list_marker,
)


class TestStripListMarker:
    """Tests for strip_list_marker."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("• Milk", "Milk"),
            ("1. Milk", "Milk"),
            ("12. Milk", "Milk"),
            ("☐ Milk", "Milk"),
            ("☑ Milk", "Milk"),
            ("Milk", "Milk"),
            ("", ""),
        ],
    )
    def test_strips_single_marker(self, line: str, expected: str):
        """Each marker kind is removed from the start of the line."""
        assert strip_list_marker(line) == expected

    def test_strips_only_one_marker(self):
        """Markers are not nested; only the first one goes."""
        assert strip_list_marker("• ☐ Milk") == "☐ Milk"
        assert strip_list_marker("1. • Milk") == "• Milk"

    def test_marker_must_be_at_line_start(self):
        """A marker-like sequence mid-line is ordinary text."""
        assert strip_list_marker("Step 1. Go") == "Step 1. Go"
        assert strip_list_marker(" • Milk") == " • Milk"

    def test_requires_trailing_space(self):
        """A bullet without its space is not a marker."""
        assert strip_list_marker("•Milk") == "•Milk"
        assert strip_list_marker("1.Milk") == "1.Milk"


class TestDetectMarker:
    """Tests for detect_marker and has_marker."""

    def test_detects_each_kind(self):
        """Every marker kind is recognised."""
        assert detect_marker("• a") is ListMarker.BULLET
        assert detect_marker("3. a") is ListMarker.NUMBERED
        assert detect_marker("☑ a") is ListMarker.CHECKBOX

    def test_unknown_prefix_is_no_marker(self):
        """Unrecognised prefixes are never errors."""
        assert detect_marker("- a") is ListMarker.NONE
        assert detect_marker("a. b") is ListMarker.NONE

    def test_has_marker_is_kind_specific(self):
        """has_marker only matches the requested kind."""
        assert has_marker("• a", ListMarker.BULLET)
        assert not has_marker("• a", ListMarker.CHECKBOX)
        assert has_marker("☐ a", ListMarker.CHECKBOX)
        assert not has_marker("☐ a", ListMarker.NONE)

    def test_marker_length(self):
        """marker_length counts the marker's characters."""
        assert marker_length("10. x") == 4
        assert marker_length("☐ x") == 2
        assert marker_length("x") == 0
