"""Markdown-style text parser for building styled documents.

Used when importing ``.txt``/``.md`` files and when rendering a note
back to markdown.
"""

import re
from itertools import groupby

from notepane.formatting.ir import (
    HEADING_SIZES,
    CharStyle,
    Document,
    TextRun,
    TextStyle,
)


class MarkdownParser:
    """Parse markdown formatting into a styled Document."""

    # Heading prefixes: "# ", "## ", "### "
    HEADING_PATTERN = re.compile(r"^(#{1,3}) ")

    UNDERLINE_OPEN = "<u>"
    UNDERLINE_CLOSE = "</u>"

    def __init__(self, base_size: float = 16.0) -> None:
        self.base_size = base_size

    def parse(self, markdown_text: str) -> Document:
        """Convert markdown text to a Document.

        Lines are kept as-is (no paragraph folding) so the plain projection
        matches what the user typed, minus the markup.

        Args:
            markdown_text: Text using ``**bold**``, ``*italic*``,
                ``<u>underline</u>`` and ``#`` heading prefixes

        Returns:
            Document with one style per character
        """
        doc = Document()
        lines = markdown_text.split("\n")
        for index, line in enumerate(lines):
            doc += self._parse_line(line)
            if index < len(lines) - 1:
                doc += Document.plain("\n", CharStyle.body(self.base_size))
        return doc

    def _parse_line(self, line: str) -> Document:
        """Parse a single line into styled characters."""
        size = self.base_size
        heading = False
        match = self.HEADING_PATTERN.match(line)
        if match:
            size = HEADING_SIZES[len(match.group(1))]
            heading = True
            line = line[match.end():]

        runs: list[TextRun] = []
        for segment_text, style in self._tokenize_markdown(line):
            if not segment_text:
                continue
            runs.append(TextRun(
                text=segment_text,
                style=CharStyle(
                    bold=heading or TextStyle.BOLD in style,
                    italic=TextStyle.ITALIC in style,
                    underline=TextStyle.UNDERLINE in style,
                    size=size,
                ),
            ))
        return Document.from_runs(runs)

    def _tokenize_markdown(self, text: str) -> list[tuple[str, TextStyle]]:
        """Tokenize markdown into (text, style) pairs.

        Handles:
        - <u>underline</u> (may wrap the markers below)
        - ***bold italic***
        - **bold**
        - *italic* (closes at the first unescaped ``*``)
        - backslash escapes (``\\*``, ``\\#``, ``\\<``, ``\\\\``)
        - plain text
        """
        segments: list[tuple[str, TextStyle]] = []
        pos = 0

        while pos < len(text):
            # Escaped character is always literal
            if text[pos] == "\\" and pos + 1 < len(text):
                segments.append((text[pos + 1], TextStyle.NONE))
                pos += 2
                continue

            # Check for underline (<u>...</u>)
            if text.startswith(self.UNDERLINE_OPEN, pos):
                start = pos + len(self.UNDERLINE_OPEN)
                end = self._find_unescaped(text, self.UNDERLINE_CLOSE, start)
                if end != -1:
                    for content, style in self._tokenize_markdown(text[start:end]):
                        segments.append((content, style | TextStyle.UNDERLINE))
                    pos = end + len(self.UNDERLINE_CLOSE)
                    continue

            # Check for bold-italic (***)
            if text[pos : pos + 3] == "***":
                end = self._find_unescaped(text, "***", pos + 3)
                if end != -1:
                    segments.append(
                        (self._unescape(text[pos + 3 : end]), TextStyle.BOLD | TextStyle.ITALIC)
                    )
                    pos = end + 3
                    continue

            # Check for bold (**)
            if text[pos : pos + 2] == "**":
                end = self._find_unescaped(text, "**", pos + 2)
                if end != -1:
                    segments.append((self._unescape(text[pos + 2 : end]), TextStyle.BOLD))
                    pos = end + 2
                    continue

            # Check for italic (*)
            if text[pos] == "*" and (pos + 1 < len(text) and text[pos + 1] != "*"):
                end = self._find_unescaped(text, "*", pos + 1)
                if end != -1:
                    segments.append((self._unescape(text[pos + 1 : end]), TextStyle.ITALIC))
                    pos = end + 1
                    continue

            # Plain text - find next formatting marker or escape
            next_marker = len(text)
            for marker in ["*", "\\", self.UNDERLINE_OPEN]:
                idx = text.find(marker, pos)
                if idx != -1 and idx < next_marker:
                    next_marker = idx

            # Add plain text segment (at least one character)
            end_pos = next_marker if next_marker > pos else pos + 1
            segments.append((text[pos:end_pos], TextStyle.NONE))
            pos = end_pos

        return self._merge_plain(segments)

    @staticmethod
    def _find_unescaped(text: str, marker: str, start: int) -> int:
        """Like ``str.find`` but skips characters preceded by a backslash."""
        pos = start
        while pos < len(text):
            if text[pos] == "\\":
                pos += 2
                continue
            if text.startswith(marker, pos):
                return pos
            pos += 1
        return -1

    @staticmethod
    def _unescape(text: str) -> str:
        return re.sub(r"\\(.)", r"\1", text)

    @classmethod
    def _escape(cls, text: str) -> str:
        """Escape characters the tokenizer would read as markup."""
        text = text.replace("\\", "\\\\").replace("*", "\\*")
        return text.replace(cls.UNDERLINE_OPEN, "\\" + cls.UNDERLINE_OPEN).replace(
            cls.UNDERLINE_CLOSE, "\\" + cls.UNDERLINE_CLOSE
        )

    @staticmethod
    def _merge_plain(
        segments: list[tuple[str, TextStyle]],
    ) -> list[tuple[str, TextStyle]]:
        """Join adjacent segments that ended up with the same style."""
        merged: list[tuple[str, TextStyle]] = []
        for text, style in segments:
            if merged and merged[-1][1] == style:
                merged[-1] = (merged[-1][0] + text, style)
            else:
                merged.append((text, style))
        return merged

    def to_markdown(self, doc: Document) -> str:
        """Convert a Document back to markdown.

        A line whose characters all share one heading level gets a ``#``
        prefix and drops the bold markup the heading already implies.
        Adjacent runs that differ only in attributes markdown cannot carry
        (size, links) are wrapped together, and literal markup characters
        are backslash-escaped so ``parse`` reads the same text back.
        """
        lines: list[str] = []

        for line in doc.lines():
            segment = doc.slice(line.start, line.end)
            levels = {style.heading_level() for style in segment.styles}
            heading = levels.pop() if len(levels) == 1 else 0

            def markup(run: TextRun) -> tuple[bool, bool, bool]:
                return run.bold and not heading, run.italic, run.underline

            line_parts: list[str] = []
            for (bold, italic, underline), group in groupby(segment.runs, key=markup):
                text = self._escape("".join(run.text for run in group))
                if bold and italic:
                    text = f"***{text}***"
                elif bold:
                    text = f"**{text}**"
                elif italic:
                    text = f"*{text}*"
                if underline:
                    text = f"{self.UNDERLINE_OPEN}{text}{self.UNDERLINE_CLOSE}"
                line_parts.append(text)

            rendered = "".join(line_parts)
            if heading:
                rendered = "#" * heading + " " + rendered
            elif self.HEADING_PATTERN.match(rendered):
                rendered = "\\" + rendered
            lines.append(rendered)

        return "\n".join(lines)
