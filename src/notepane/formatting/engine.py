"""Formatting operation dispatcher.

``apply`` is the single entry point the host UI calls with the current
document, selection and the button that was pressed. It is a pure
function: the caller feeds the current buffer in and applies the
returned document and selection back.
"""

from enum import Enum

from notepane.formatting.ir import Document, Selection
from notepane.formatting.lists import toggle_list
from notepane.formatting.markers import ListMarker
from notepane.formatting.styles import StyleAxis, apply_heading, toggle_style


class Operation(str, Enum):
    """Formatting actions available in the editor toolbar."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    HEADING_1 = "h1"
    HEADING_2 = "h2"
    HEADING_3 = "h3"
    BODY = "body"
    BULLET_LIST = "bullet"
    NUMBERED_LIST = "numbered"
    CHECKLIST = "checklist"


_STYLE_AXES = {
    Operation.BOLD: StyleAxis.BOLD,
    Operation.ITALIC: StyleAxis.ITALIC,
    Operation.UNDERLINE: StyleAxis.UNDERLINE,
}

_HEADING_LEVELS = {
    Operation.HEADING_1: 1,
    Operation.HEADING_2: 2,
    Operation.HEADING_3: 3,
    Operation.BODY: 0,
}

_LIST_KINDS = {
    Operation.BULLET_LIST: ListMarker.BULLET,
    Operation.NUMBERED_LIST: ListMarker.NUMBERED,
    Operation.CHECKLIST: ListMarker.CHECKBOX,
}


def is_structural(operation: Operation) -> bool:
    """True for operations that insert or remove characters."""
    return operation in _LIST_KINDS


def apply(
    document: Document,
    selection: Selection,
    operation: Operation,
    base_size: float,
) -> tuple[Document, Selection]:
    """Run ``operation`` over ``selection`` and return the new state.

    Out-of-bounds ranges are clamped to the document; a selection with no
    ranges at all is a silent no-op.
    """
    if not selection.ranges:
        return document, selection
    selection = selection.normalized(len(document))

    if operation in _STYLE_AXES:
        return toggle_style(document, selection, _STYLE_AXES[operation])
    if operation in _HEADING_LEVELS:
        return apply_heading(document, selection, _HEADING_LEVELS[operation], base_size)
    if operation in _LIST_KINDS:
        return toggle_list(document, selection, _LIST_KINDS[operation], base_size)
    raise ValueError(f"Unsupported operation: {operation}")
