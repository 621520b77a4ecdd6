"""Bulleted list, numbered list and checklist toggling."""

import logging

from notepane.formatting.ir import (
    CharStyle,
    Document,
    Selection,
    TextRange,
    LINE_SEPARATORS,
)
from notepane.formatting.markers import (
    BULLET_MARKER,
    UNCHECKED_BOX,
    ListMarker,
    has_marker,
    marker_length,
    numbered_marker,
)

logger = logging.getLogger(__name__)


def _split_lines(segment: Document) -> tuple[list[Document], list[Document]]:
    """Split ``segment`` into styled lines and the separators between them.

    There is always exactly one more line than separators.
    """
    lines: list[Document] = []
    separators: list[Document] = []
    start = 0
    for i, char in enumerate(segment.text):
        if char in LINE_SEPARATORS:
            lines.append(segment.slice(start, i))
            separators.append(segment.slice(i, i + 1))
            start = i + 1
    lines.append(segment.slice(start, len(segment)))
    return lines, separators


def _marker_for(kind: ListMarker, index: int, base_size: float) -> Document:
    body = CharStyle.body(base_size)
    if kind is ListMarker.BULLET:
        return Document.plain(BULLET_MARKER, body)
    if kind is ListMarker.NUMBERED:
        return Document.plain(numbered_marker(index), body)
    if kind is ListMarker.CHECKBOX:
        return Document.plain(UNCHECKED_BOX, body.with_(checkbox=True))
    raise ValueError(f"Not a list marker kind: {kind}")


def _strip_line(line: Document, fallback: CharStyle) -> Document:
    """Drop the line's marker, keeping each remaining character's own style."""
    offset = marker_length(line.text)
    cleaned = line.text[offset:]
    return Document(
        cleaned,
        [line.style_at(offset + i, fallback) for i in range(len(cleaned))],
    )


def list_target_range(document: Document, selection: Selection) -> TextRange:
    """Range a list operation edits: the first range, or the caret's line."""
    rng = selection.normalized(len(document)).first
    if rng is None:
        return TextRange(0, 0)
    if rng.is_empty:
        line = document.line_at(rng.start)
        return TextRange(line.start, line.end - line.start)
    return rng


def toggle_list(
    document: Document,
    selection: Selection,
    kind: ListMarker,
    base_size: float,
) -> tuple[Document, Selection]:
    """Toggle a list marker on every line of the first selected range.

    If any line in the range already carries a marker of ``kind`` the
    markers are removed from all lines; otherwise every non-empty line is
    re-marked with ``kind`` after stripping whatever marker it had. Only
    the first range of a multi-range selection is edited.

    Args:
        document: Document to edit
        selection: Selection; a caret edits the line it sits on
        kind: Bullet, numbered or checkbox
        base_size: Body font size used for inserted markers and separators

    Returns:
        Tuple of (new document, selection covering the rebuilt range)
    """
    if kind is ListMarker.NONE:
        raise ValueError("toggle_list needs a concrete marker kind")
    if not selection.ranges:
        return document, selection

    rng = list_target_range(document, selection)
    segment = document.slice(rng.start, rng.end)
    lines, separators = _split_lines(segment)
    body = CharStyle.body(base_size)

    removing = any(has_marker(line.text, kind) for line in lines)

    rebuilt = Document()
    for index, line in enumerate(lines):
        stripped = _strip_line(line, body)
        if removing:
            rebuilt += stripped
        elif stripped.text:
            rebuilt += _marker_for(kind, index + 1, base_size) + stripped
        else:
            rebuilt += line

        if index < len(lines) - 1:
            separator = separators[index] if index < len(separators) else None
            rebuilt += separator if separator is not None else Document.plain("\n", body)

    logger.debug(
        "%s %s markers on %d line(s) in [%d, %d)",
        "Removed" if removing else "Applied", kind.value, len(lines), rng.start, rng.end,
    )
    result = document.replace(rng.start, rng.end, rebuilt)
    return result, Selection.single(rng.start, len(rebuilt))
