"""Intermediate Representation for formatted note text.

This module defines the styled document model that every formatting
operation reads and returns. A document is an ordered sequence of
characters, each carrying its own CharStyle. Attribute runs and lines
are derived views, recomputed on demand and never stored.
"""

from dataclasses import dataclass, field, replace
from enum import Flag, auto
from typing import Iterable, Iterator, Optional


# =============================================================================
# Character styles
# =============================================================================

# Point sizes for heading levels 1-3 (all bold)
HEADING_SIZES: dict[int, float] = {1: 24.0, 2: 20.0, 3: 18.0}

# Characters that end a line
LINE_SEPARATORS = frozenset("\n\r\u2028\u2029")


class TextStyle(Flag):
    """Text styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    UNDERLINE = auto()


@dataclass(frozen=True)
class CharStyle:
    """Formatting attributes carried by a single character.

    Attributes:
        bold: Bold font trait
        italic: Italic font trait
        underline: Single underline
        size: Font point size, or None when the character has no font info
        checkbox: Marks a clickable checklist marker character
        link: Target URL when the character is part of a link
    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    size: Optional[float] = None
    checkbox: bool = False
    link: Optional[str] = None

    @classmethod
    def body(cls, size: float) -> "CharStyle":
        """Plain body text at the given size."""
        return cls(size=size)

    @property
    def has_font(self) -> bool:
        return self.size is not None

    @property
    def text_style(self) -> TextStyle:
        """Collapse the boolean traits into TextStyle flags."""
        style = TextStyle.NONE
        if self.bold:
            style |= TextStyle.BOLD
        if self.italic:
            style |= TextStyle.ITALIC
        if self.underline:
            style |= TextStyle.UNDERLINE
        return style

    @property
    def font_variant(self) -> str:
        """Resolve the concrete font face for renderers."""
        if self.bold and self.italic:
            return "bold-italic"
        if self.bold:
            return "bold"
        if self.italic:
            return "italic"
        return "regular"

    def heading_level(self) -> int:
        """Derive the heading level (0 = body) from size and weight."""
        if self.size is None or not self.bold:
            return 0
        for level, size in HEADING_SIZES.items():
            if self.size == size:
                return level
        return 0

    def with_(self, **changes) -> "CharStyle":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass
class TextRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content
        style: The CharStyle shared by every character of the run
    """

    text: str
    style: CharStyle = field(default_factory=CharStyle)

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return self.style.bold

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return self.style.italic

    @property
    def underline(self) -> bool:
        """Check if this run is underlined."""
        return self.style.underline

    def __str__(self) -> str:
        return self.text


# =============================================================================
# Ranges and selections
# =============================================================================

@dataclass(frozen=True)
class TextRange:
    """Half-open range ``[start, start + length)`` over character indices."""

    start: int
    length: int = 0

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def is_empty(self) -> bool:
        return self.length <= 0

    def clamp(self, size: int) -> "TextRange":
        """Clamp the range so it never extends past ``size``."""
        start = max(0, min(self.start, size))
        end = max(start, min(self.end, size))
        return TextRange(start, end - start)

    def contains(self, index: int) -> bool:
        return self.start <= index < self.end


@dataclass(frozen=True)
class Selection:
    """Ordered set of disjoint ranges; a zero-length range is a caret."""

    ranges: tuple[TextRange, ...] = ()

    @classmethod
    def caret(cls, position: int) -> "Selection":
        return cls((TextRange(position, 0),))

    @classmethod
    def single(cls, start: int, length: int) -> "Selection":
        return cls((TextRange(start, length),))

    @classmethod
    def of(cls, *pairs: tuple[int, int]) -> "Selection":
        """Build a selection from ``(start, length)`` pairs."""
        return cls(tuple(TextRange(start, length) for start, length in pairs))

    @property
    def first(self) -> Optional[TextRange]:
        return self.ranges[0] if self.ranges else None

    @property
    def is_empty(self) -> bool:
        """True when no range selects any character."""
        return all(r.is_empty for r in self.ranges)

    def normalized(self, size: int) -> "Selection":
        """Clamp to ``size``, sort, and merge overlapping ranges."""
        clamped = sorted(
            (r.clamp(size) for r in self.ranges),
            key=lambda r: (r.start, r.length),
        )
        merged: list[TextRange] = []
        for rng in clamped:
            if merged and not rng.is_empty and rng.start < merged[-1].end:
                last = merged[-1]
                merged[-1] = TextRange(last.start, max(last.end, rng.end) - last.start)
            elif merged and rng.is_empty and merged[-1].contains(rng.start):
                continue
            else:
                merged.append(rng)
        return Selection(tuple(merged))

    def __iter__(self) -> Iterator[TextRange]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)


# =============================================================================
# Document
# =============================================================================

@dataclass(frozen=True)
class Line:
    """A derived line view: ``text`` spans ``[start, end)``, separator excluded."""

    start: int
    end: int
    text: str

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


class Document:
    """An ordered sequence of (character, CharStyle) pairs.

    Documents are treated as values: every editing operation returns a
    new Document rather than mutating the one it was given.
    """

    __slots__ = ("_text", "_styles")

    def __init__(self, text: str = "", styles: Optional[Iterable[CharStyle]] = None) -> None:
        style_list = list(styles) if styles is not None else [CharStyle()] * len(text)
        if len(style_list) != len(text):
            raise ValueError(
                f"Style count {len(style_list)} does not match text length {len(text)}"
            )
        self._text = text
        self._styles = tuple(style_list)

    @classmethod
    def plain(cls, text: str, style: Optional[CharStyle] = None) -> "Document":
        """Create a document whose characters all share one style."""
        return cls(text, [style or CharStyle()] * len(text))

    @classmethod
    def from_runs(cls, runs: Iterable[TextRun]) -> "Document":
        """Create a document from a sequence of styled runs."""
        text_parts: list[str] = []
        styles: list[CharStyle] = []
        for run in runs:
            text_parts.append(run.text)
            styles.extend([run.style] * len(run.text))
        return cls("".join(text_parts), styles)

    @property
    def text(self) -> str:
        """Plain projection: the character sequence without attributes."""
        return self._text

    @property
    def styles(self) -> tuple[CharStyle, ...]:
        return self._styles

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._text == other._text and self._styles == other._styles

    def __hash__(self) -> int:
        return hash((self._text, self._styles))

    def __repr__(self) -> str:
        return f"Document({self._text!r}, runs={len(self.runs)})"

    def __str__(self) -> str:
        return self._text

    def style_at(self, index: int, default: Optional[CharStyle] = None) -> CharStyle:
        """Style of the character at ``index``; ``default`` when out of range."""
        if 0 <= index < len(self._styles):
            return self._styles[index]
        return default if default is not None else CharStyle()

    @property
    def runs(self) -> list[TextRun]:
        """Maximal attribute runs, in document order."""
        runs: list[TextRun] = []
        start = 0
        for i in range(1, len(self._text) + 1):
            if i == len(self._text) or self._styles[i] != self._styles[start]:
                runs.append(TextRun(self._text[start:i], self._styles[start]))
                start = i
        return runs

    def slice(self, start: int, end: int) -> "Document":
        return Document(self._text[start:end], self._styles[start:end])

    def concat(self, other: "Document") -> "Document":
        return Document(self._text + other._text, self._styles + other._styles)

    def __add__(self, other: "Document") -> "Document":
        return self.concat(other)

    def replace(self, start: int, end: int, other: "Document") -> "Document":
        """Replace ``[start, end)`` with ``other``."""
        return Document(
            self._text[:start] + other._text + self._text[end:],
            self._styles[:start] + other._styles + self._styles[end:],
        )

    def restyle(self, start: int, end: int, fn) -> "Document":
        """Apply ``fn(CharStyle) -> CharStyle`` to every character in ``[start, end)``."""
        styles = list(self._styles)
        for i in range(start, end):
            styles[i] = fn(styles[i])
        return Document(self._text, styles)

    # -------------------------------------------------------------------------
    # Line views
    # -------------------------------------------------------------------------

    def lines(self) -> list[Line]:
        """Split into lines on line separators."""
        lines: list[Line] = []
        start = 0
        for i, char in enumerate(self._text):
            if char in LINE_SEPARATORS:
                lines.append(Line(start, i, self._text[start:i]))
                start = i + 1
        lines.append(Line(start, len(self._text), self._text[start:]))
        return lines

    def line_start(self, index: int) -> int:
        """Offset of the first character of the line containing ``index``."""
        index = max(0, min(index, len(self._text)))
        pos = index
        while pos > 0 and self._text[pos - 1] not in LINE_SEPARATORS:
            pos -= 1
        return pos

    def line_end(self, index: int) -> int:
        """Offset of the separator (or document end) closing the line at ``index``."""
        pos = max(0, min(index, len(self._text)))
        while pos < len(self._text) and self._text[pos] not in LINE_SEPARATORS:
            pos += 1
        return pos

    def line_at(self, index: int) -> Line:
        start = self.line_start(index)
        end = self.line_end(index)
        return Line(start, end, self._text[start:end])
