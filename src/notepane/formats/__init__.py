"""Note format handlers for notepane."""

from notepane.formats.base import FormatHandler
from notepane.formats.txt_handler import TXTHandler
from notepane.formats.docx_handler import DOCXHandler
from notepane.formats.rtf_handler import RTFHandler
from notepane.formats.styled import SerializationError, decode_document, encode_document

__all__ = [
    "FormatHandler",
    "TXTHandler",
    "DOCXHandler",
    "RTFHandler",
    "SerializationError",
    "decode_document",
    "encode_document",
]

# Map file extensions to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    ".txt": TXTHandler,
    ".md": TXTHandler,
    ".docx": DOCXHandler,
    ".rtf": RTFHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())


def get_handler(extension: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a file extension."""
    ext = extension.lower()
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported file format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
