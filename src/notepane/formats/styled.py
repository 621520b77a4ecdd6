"""Styled projection of a Document.

The styled form is a JSON list of attribute runs stored alongside the
plain-text projection of each note. It round-trips every CharStyle field.
"""

from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from notepane.formatting.ir import CharStyle, Document, TextRun

FORMAT_VERSION = 1


class SerializationError(Exception):
    """Styled content could not be encoded or decoded."""

    pass


class StyledRun(BaseModel):
    """One attribute run in the styled projection."""

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    size: Optional[float] = None
    checkbox: bool = False
    link: Optional[str] = None

    @classmethod
    def from_run(cls, run: TextRun) -> "StyledRun":
        style = run.style
        return cls(
            text=run.text,
            bold=style.bold,
            italic=style.italic,
            underline=style.underline,
            size=style.size,
            checkbox=style.checkbox,
            link=style.link,
        )

    def to_run(self) -> TextRun:
        return TextRun(
            text=self.text,
            style=CharStyle(
                bold=self.bold,
                italic=self.italic,
                underline=self.underline,
                size=self.size,
                checkbox=self.checkbox,
                link=self.link,
            ),
        )


class StyledContent(BaseModel):
    """Versioned container for a document's runs."""

    version: int = FORMAT_VERSION
    runs: list[StyledRun] = Field(default_factory=list)


def encode_document(document: Document) -> str:
    """Serialize ``document`` to its styled JSON form."""
    try:
        content = StyledContent(runs=[StyledRun.from_run(r) for r in document.runs])
        return content.model_dump_json()
    except (ValueError, TypeError) as e:
        raise SerializationError(f"Could not encode document: {e}") from e


def decode_document(data: str) -> Document:
    """Rebuild a Document from its styled JSON form.

    Raises:
        SerializationError: If ``data`` is not a valid styled blob
    """
    try:
        content = StyledContent.model_validate_json(data)
    except ValidationError as e:
        raise SerializationError(f"Invalid styled content: {e}") from e
    if content.version != FORMAT_VERSION:
        raise SerializationError(
            f"Unsupported styled content version: {content.version}"
        )
    return Document.from_runs(run.to_run() for run in content.runs)
