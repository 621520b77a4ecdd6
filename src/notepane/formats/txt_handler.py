"""Plain text and markdown file handler."""

from pathlib import Path

from notepane.formats.base import FormatHandler
from notepane.formatting.ir import Document
from notepane.formatting.parser import MarkdownParser


class TXTHandler(FormatHandler):
    """Handler for plain text (.txt) and markdown (.md) files.

    Formatting is carried via markdown-style syntax:
    - **bold** for bold text
    - *italic* for italic text
    - <u>underline</u> for underlined text
    - "# ", "## ", "### " line prefixes for headings
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt", ".md")

    def read(self, path: Path) -> Document:
        """Read markdown-styled text from file."""
        text = path.read_text(encoding="utf-8")
        return MarkdownParser(self.base_size).parse(text)

    def write(self, document: Document, path: Path) -> None:
        """Write the document as markdown-styled plain text.

        The output can be read in any text editor or rendered by
        markdown viewers.
        """
        content = MarkdownParser(self.base_size).to_markdown(document)
        path.write_text(content, encoding="utf-8")
