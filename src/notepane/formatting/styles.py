"""Character-level style operations: bold/italic/underline, headings, links."""

import logging
from enum import Enum
from typing import Optional

from notepane.formatting.ir import (
    HEADING_SIZES,
    CharStyle,
    Document,
    Selection,
    TextRange,
)

logger = logging.getLogger(__name__)


class StyleAxis(Enum):
    """Binary style attributes that can be toggled over a range."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"


def _is_set(style: CharStyle, axis: StyleAxis) -> bool:
    return getattr(style, axis.value)


def range_has_style(document: Document, rng: TextRange, axis: StyleAxis) -> bool:
    """True iff every character in ``rng`` has the ``axis`` bit set."""
    if rng.is_empty:
        return False
    return all(_is_set(document.style_at(i), axis) for i in range(rng.start, rng.end))


def toggle_style(
    document: Document,
    selection: Selection,
    axis: StyleAxis,
) -> tuple[Document, Selection]:
    """Toggle ``axis`` over every non-empty range of the selection.

    A range that is uniformly set is cleared; anything else (including a
    mixed range) is set. Only the ``axis`` field changes, so the other
    font trait and the point size survive either way.

    Args:
        document: Document to edit
        selection: Ranges to toggle; carets are ignored
        axis: Bold, italic or underline

    Returns:
        Tuple of (new document, unchanged selection)
    """
    result = document
    for rng in selection.normalized(len(document)):
        if rng.is_empty:
            continue
        new_value = not range_has_style(result, rng, axis)
        result = result.restyle(
            rng.start, rng.end, lambda s: s.with_(**{axis.value: new_value})
        )
        logger.debug(
            "%s %s on [%d, %d)",
            "Set" if new_value else "Cleared", axis.value, rng.start, rng.end,
        )
    return result, selection


def heading_style(level: int, base_size: float) -> tuple[float, bool]:
    """Return the (size, bold) pair that ``level`` implies; 0 means body."""
    if level in HEADING_SIZES:
        return HEADING_SIZES[level], True
    if level == 0:
        return base_size, False
    raise ValueError(f"Unknown heading level: {level}. Expected 0-3.")


def apply_heading(
    document: Document,
    selection: Selection,
    level: int,
    base_size: float,
) -> tuple[Document, Selection]:
    """Apply heading ``level`` (1-3) or body text (0) to each selected range.

    If a range already matches the level's size and weight exactly it is
    reset to body text instead, which makes the heading buttons toggles.
    Underline, italic, links and checkbox tags are left alone.
    """
    size, bold = heading_style(level, base_size)
    result = document
    for rng in selection.normalized(len(document)):
        if rng.is_empty:
            continue
        already = all(
            style.has_font and style.size == size and style.bold == bold
            for style in result.styles[rng.start:rng.end]
        )
        if already:
            target_size, target_bold = base_size, False
        else:
            target_size, target_bold = size, bold
        result = result.restyle(
            rng.start,
            rng.end,
            lambda s: s.with_(size=target_size, bold=target_bold),
        )
    return result, selection


def insert_link(
    document: Document,
    selection: Selection,
    url: str,
    title: Optional[str],
    base_size: float,
) -> tuple[Document, Selection]:
    """Turn the first selected range into a link, or insert one at the caret.

    A non-empty range keeps its text and gains the link target plus an
    underline. A caret inserts ``title`` (or the URL itself when no title
    is given) as underlined body text and moves the caret past it.
    """
    normalized = selection.normalized(len(document))
    rng = normalized.first
    if rng is None or not url:
        return document, selection

    if not rng.is_empty:
        result = document.restyle(
            rng.start, rng.end, lambda s: s.with_(link=url, underline=True)
        )
        return result, selection

    label = title or url
    inserted = Document.plain(
        label, CharStyle(size=base_size, underline=True, link=url)
    )
    result = document.replace(rng.start, rng.start, inserted)
    return result, Selection.caret(rng.start + len(label))
