"""Tests for checkbox click toggling."""

from notepane.formatting.checkbox import toggle_checkbox_at
from notepane.formatting.ir import CharStyle, Document, TextRun


class TestToggleCheckboxAt:
    """Tests for toggle_checkbox_at."""

    def test_checked_becomes_unchecked(self, body: CharStyle):
        """Clicking the second character of a checked line unchecks it."""
        doc = Document.plain("☐ Todo\n☑ Done\nplain", body)
        index = doc.text.index("☑") + 1

        result, absorbed = toggle_checkbox_at(doc, index)

        assert absorbed is True
        assert result.text == "☐ Todo\n☐ Done\nplain"

    def test_unchecked_becomes_checked(self, body: CharStyle):
        """Clicking an empty box checks it."""
        doc = Document.plain("☐ Todo", body)
        result, absorbed = toggle_checkbox_at(doc, 0)
        assert absorbed is True
        assert result.text == "☑ Todo"

    def test_styles_kept(self, body: CharStyle):
        """The replacement reuses the marker's styles; nothing else moves."""
        marker = body.with_(checkbox=True)
        doc = Document.from_runs([
            TextRun("☐ ", marker),
            TextRun("Todo", body.with_(bold=True)),
        ])
        result, _ = toggle_checkbox_at(doc, 1)
        assert result.styles == doc.styles
        assert len(result) == len(doc)

    def test_click_on_text_not_absorbed(self, body: CharStyle):
        """Clicks past the marker fall through to caret placement."""
        doc = Document.plain("☐ Todo", body)
        result, absorbed = toggle_checkbox_at(doc, 4)
        assert absorbed is False
        assert result is doc

    def test_other_lines_not_absorbed(self, body: CharStyle):
        """Lines without a checkbox are left alone."""
        doc = Document.plain("• item\nplain", body)
        assert toggle_checkbox_at(doc, 0) == (doc, False)
        assert toggle_checkbox_at(doc, 8) == (doc, False)

    def test_out_of_range_index(self, body: CharStyle):
        """Indices outside the document are ignored."""
        doc = Document.plain("☐ a", body)
        assert toggle_checkbox_at(doc, -1)[1] is False
        assert toggle_checkbox_at(doc, 10)[1] is False

    def test_toggle_twice_restores(self, body: CharStyle):
        """Two clicks return to the original document."""
        doc = Document.plain("a\n☐ b", body)
        once, _ = toggle_checkbox_at(doc, 2)
        twice, _ = toggle_checkbox_at(once, 2)
        assert once.text == "a\n☑ b"
        assert twice == doc
