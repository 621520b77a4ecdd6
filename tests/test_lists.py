"""Tests for list and checklist toggling."""

import pytest

from notepane.formatting.ir import CharStyle, Document, Selection, TextRun
from notepane.formatting.lists import list_target_range, toggle_list
from notepane.formatting.markers import ListMarker, detect_marker

BASE = 16.0


def whole(doc: Document) -> Selection:
    return Selection.single(0, len(doc))


class TestToggleList:
    """Tests for toggle_list."""

    def test_checklist_scenario(self, body: CharStyle):
        """Checklist on, then off again, over the same lines."""
        doc = Document.plain("Buy milk\nCall mom", body)

        checked, sel = toggle_list(doc, whole(doc), ListMarker.CHECKBOX, BASE)
        assert checked.text == "☐ Buy milk\n☐ Call mom"
        assert sel == Selection.single(0, len(checked))

        restored, _ = toggle_list(checked, sel, ListMarker.CHECKBOX, BASE)
        assert restored.text == "Buy milk\nCall mom"
        assert restored == doc

    def test_reapply_with_original_range(self, body: CharStyle):
        """Re-applying with the pre-edit range still removes every marker."""
        doc = Document.plain("Buy milk\nCall mom", body)
        checked, _ = toggle_list(doc, whole(doc), ListMarker.CHECKBOX, BASE)
        restored, _ = toggle_list(checked, whole(doc), ListMarker.CHECKBOX, BASE)
        assert restored.text == "Buy milk\nCall mom"

    def test_bullets(self, body: CharStyle):
        """Bullets prefix every non-empty line."""
        doc = Document.plain("a\nb", body)
        result, _ = toggle_list(doc, whole(doc), ListMarker.BULLET, BASE)
        assert result.text == "• a\n• b"

    def test_numbering_restarts_at_one(self, body: CharStyle):
        """Numbers always start at 1 regardless of prior markers."""
        doc = Document.plain("7. eggs\n• bread\n☑ jam", body)
        result, _ = toggle_list(doc, whole(doc), ListMarker.NUMBERED, BASE)
        assert result.text == "1. eggs\n2. bread\n3. jam"

    def test_numbering_is_by_line_index(self, body: CharStyle):
        """Blank lines keep their slot in the numbering."""
        doc = Document.plain("a\n\nb", body)
        result, _ = toggle_list(doc, whole(doc), ListMarker.NUMBERED, BASE)
        assert result.text == "1. a\n\n3. b"

    def test_switching_kind_replaces_marker(self, body: CharStyle):
        """Applying another kind swaps markers instead of stacking them."""
        doc = Document.plain("• a\n• b", body)
        result, _ = toggle_list(doc, whole(doc), ListMarker.CHECKBOX, BASE)
        assert result.text == "☐ a\n☐ b"
        for line in result.lines():
            rest = line.text[2:]
            assert detect_marker(rest) is ListMarker.NONE

    def test_any_marked_line_removes_from_all(self, body: CharStyle):
        """One line with the target marker turns the whole range off."""
        doc = Document.plain("• a\nb\n1. c", body)
        result, _ = toggle_list(doc, whole(doc), ListMarker.BULLET, BASE)
        assert result.text == "a\nb\nc"

    def test_empty_lines_pass_through(self, body: CharStyle):
        """Blank lines never get a marker."""
        doc = Document.plain("a\n\nb\n", body)
        result, _ = toggle_list(doc, whole(doc), ListMarker.BULLET, BASE)
        assert result.text == "• a\n\n• b\n"

    def test_marker_only_line_kept_as_is(self, body: CharStyle):
        """A line that is just another kind's marker is emitted unchanged."""
        doc = Document.plain("1. \nb", body)
        result, _ = toggle_list(doc, whole(doc), ListMarker.BULLET, BASE)
        assert result.text == "1. \n• b"

    def test_checkbox_marker_is_tagged(self, body: CharStyle):
        """Inserted checkbox characters carry the clickable tag."""
        doc = Document.plain("task", body)
        result, _ = toggle_list(doc, whole(doc), ListMarker.CHECKBOX, BASE)
        assert result.style_at(0).checkbox and result.style_at(1).checkbox
        assert not result.style_at(2).checkbox
        assert result.style_at(0).size == BASE

    def test_attributes_shift_with_characters(self, mixed_document: Document):
        """Inserting a 2-character marker shifts every style by exactly 2."""
        doc = mixed_document
        result, _ = toggle_list(doc, whole(doc), ListMarker.CHECKBOX, BASE)

        assert result.text == "☐ " + doc.text
        before = {i: doc.style_at(i) for i in range(len(doc))}
        after = {i - 2: result.style_at(i) for i in range(2, len(result))}
        assert before == after

    def test_removal_realigns_attributes(self, mixed_document: Document):
        """Removing a marker shifts styles back with no loss."""
        doc = mixed_document
        marked, sel = toggle_list(doc, whole(doc), ListMarker.NUMBERED, BASE)
        unmarked, _ = toggle_list(marked, sel, ListMarker.NUMBERED, BASE)
        assert unmarked == doc

    def test_surrounding_text_untouched(self, body: CharStyle):
        """Only the selected lines change."""
        doc = Document.plain("keep\nx\ny\nkeep", body)
        start = doc.text.index("x")
        result, sel = toggle_list(doc, Selection.single(start, 3), ListMarker.BULLET, BASE)
        assert result.text == "keep\n• x\n• y\nkeep"
        assert sel == Selection.single(start, 7)

    def test_only_first_range_is_used(self, body: CharStyle):
        """Later ranges of a multi-range selection are ignored."""
        doc = Document.plain("a\nb\nc", body)
        result, _ = toggle_list(doc, Selection.of((0, 1), (4, 1)), ListMarker.BULLET, BASE)
        assert result.text == "• a\nb\nc"

    def test_caret_edits_its_line(self, body: CharStyle):
        """A caret applies the list to the line it sits on."""
        doc = Document.plain("first\nsecond", body)
        result, sel = toggle_list(doc, Selection.caret(8), ListMarker.CHECKBOX, BASE)
        assert result.text == "first\n☐ second"
        assert sel == Selection.single(6, 8)

    def test_separator_styles_preserved(self, body: CharStyle):
        """Original line separators keep their own style."""
        odd = body.with_(italic=True)
        doc = Document.from_runs([TextRun("a", body), TextRun("\n", odd), TextRun("b", body)])
        result, _ = toggle_list(doc, whole(doc), ListMarker.BULLET, BASE)
        assert result.text == "• a\n• b"
        assert result.style_at(3) == odd

    def test_no_ranges_is_noop(self, body: CharStyle):
        """An empty selection changes nothing."""
        doc = Document.plain("a", body)
        result, sel = toggle_list(doc, Selection(), ListMarker.BULLET, BASE)
        assert result == doc
        assert sel == Selection()

    def test_none_kind_rejected(self, body: CharStyle):
        """NONE is not something to toggle."""
        with pytest.raises(ValueError):
            toggle_list(Document.plain("a", body), Selection.single(0, 1), ListMarker.NONE, BASE)


class TestListTargetRange:
    """Tests for list_target_range."""

    def test_caret_expands_to_line(self):
        """A caret covers its whole line."""
        doc = Document.plain("ab\ncd\nef")
        rng = list_target_range(doc, Selection.caret(4))
        assert (rng.start, rng.length) == (3, 2)

    def test_range_is_clamped(self):
        """Ranges past the end are clamped."""
        doc = Document.plain("abc")
        rng = list_target_range(doc, Selection.single(1, 99))
        assert (rng.start, rng.length) == (1, 2)
