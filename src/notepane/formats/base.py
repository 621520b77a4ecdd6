"""Abstract base class for note format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from notepane.formatting.ir import Document


class FormatHandler(ABC):
    """Abstract base class for note format handlers.

    Each handler renders a styled Document to a file format and reads
    a file of that format back into a Document. Formats that cannot
    carry styling read back as body text.
    """

    def __init__(self, base_size: float = 16.0) -> None:
        self.base_size = base_size

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.rtf',))."""
        ...

    @abstractmethod
    def read(self, path: Path) -> Document:
        """Read a document from ``path``.

        Args:
            path: Path to the input file

        Returns:
            Styled Document (body style where the format has no styling)
        """
        ...

    @abstractmethod
    def write(self, document: Document, path: Path) -> None:
        """Write a styled document to ``path``.

        Args:
            document: The Document to render
            path: Path to write the output file
        """
        ...
