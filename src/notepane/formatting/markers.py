"""List marker detection and stripping.

Markers are literal text at the start of a line:

- ``"• "`` for bulleted lists
- ``"<n>. "`` for numbered lists
- ``"☐ "`` / ``"☑ "`` for checklists (unchecked / checked)

They carry no separate data field, so every helper here works on plain
strings and leaves attribute bookkeeping to the caller.
"""

import re
from enum import Enum


BULLET_MARKER = "• "
UNCHECKED_BOX = "☐ "
CHECKED_BOX = "☑ "
CHECKBOX_MARKERS = (UNCHECKED_BOX, CHECKED_BOX)

NUMBERED_PATTERN = re.compile(r"^\d+\. ")


class ListMarker(Enum):
    """Kind of list marker found at the start of a line."""

    NONE = "none"
    BULLET = "bullet"
    NUMBERED = "numbered"
    CHECKBOX = "checkbox"


def numbered_marker(index: int) -> str:
    """Marker text for the 1-based ``index`` of a numbered list."""
    return f"{index}. "


def has_marker(line: str, kind: ListMarker) -> bool:
    """Check whether ``line`` starts with a marker of ``kind``."""
    if kind is ListMarker.BULLET:
        return line.startswith(BULLET_MARKER)
    if kind is ListMarker.NUMBERED:
        return NUMBERED_PATTERN.match(line) is not None
    if kind is ListMarker.CHECKBOX:
        return line.startswith(CHECKBOX_MARKERS)
    return False


def detect_marker(line: str) -> ListMarker:
    """Return the kind of marker ``line`` starts with, if any.

    Checked in the same order the stripper uses. Anything that matches
    no known pattern is reported as ``ListMarker.NONE``.
    """
    for kind in (ListMarker.BULLET, ListMarker.NUMBERED, ListMarker.CHECKBOX):
        if has_marker(line, kind):
            return kind
    return ListMarker.NONE


def marker_length(line: str) -> int:
    """Number of leading characters taken by the line's marker (0 if none)."""
    if line.startswith(BULLET_MARKER):
        return len(BULLET_MARKER)
    match = NUMBERED_PATTERN.match(line)
    if match:
        return match.end()
    if line.startswith(CHECKBOX_MARKERS):
        return len(UNCHECKED_BOX)
    return 0


def strip_list_marker(line: str) -> str:
    """Remove at most one leading list marker from ``line``.

    Bullet, numbered and checkbox markers are tried in that order and only
    the first match is removed; markers never nest.
    """
    return line[marker_length(line):]
