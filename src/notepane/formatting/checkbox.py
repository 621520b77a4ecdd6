"""Interactive checklist support: flipping a checkbox marker on click."""

from notepane.formatting.ir import Document
from notepane.formatting.markers import CHECKED_BOX, UNCHECKED_BOX

_FLIPPED = {
    UNCHECKED_BOX: CHECKED_BOX,
    CHECKED_BOX: UNCHECKED_BOX,
}


def toggle_checkbox_at(document: Document, index: int) -> tuple[Document, bool]:
    """Flip the checkbox on the line clicked at character ``index``.

    The click only counts when it lands on the two marker characters at
    the start of the line. The replacement keeps the styles of the
    characters it replaces, so nothing moves and no attributes are lost.

    Returns:
        Tuple of (document, absorbed). ``absorbed`` is False when the
        click was not on a checkbox and should fall through to normal
        caret placement; the document is then returned untouched.
    """
    if not 0 <= index <= len(document):
        return document, False

    line_start = document.line_start(index)
    marker_end = line_start + len(UNCHECKED_BOX)
    if index >= marker_end or marker_end > len(document):
        return document, False

    current = document.text[line_start:marker_end]
    flipped = _FLIPPED.get(current)
    if flipped is None:
        return document, False

    replacement = Document(flipped, document.styles[line_start:marker_end])
    return document.replace(line_start, marker_end, replacement), True
