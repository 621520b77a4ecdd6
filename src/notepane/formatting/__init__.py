"""Styled document model and the formatting operations over it."""

from notepane.formatting.ir import (
    HEADING_SIZES,
    CharStyle,
    Document,
    Line,
    Selection,
    TextRange,
    TextRun,
    TextStyle,
)
from notepane.formatting.markers import ListMarker, detect_marker, strip_list_marker
from notepane.formatting.styles import StyleAxis, apply_heading, insert_link, toggle_style
from notepane.formatting.lists import toggle_list
from notepane.formatting.checkbox import toggle_checkbox_at
from notepane.formatting.engine import Operation, apply
from notepane.formatting.parser import MarkdownParser

__all__ = [
    "HEADING_SIZES",
    "CharStyle",
    "Document",
    "Line",
    "Selection",
    "TextRange",
    "TextRun",
    "TextStyle",
    "ListMarker",
    "detect_marker",
    "strip_list_marker",
    "StyleAxis",
    "apply_heading",
    "insert_link",
    "toggle_style",
    "toggle_list",
    "toggle_checkbox_at",
    "Operation",
    "apply",
    "MarkdownParser",
]
