"""Microsoft Word (.docx) file handler."""

from pathlib import Path
from zipfile import BadZipFile

from docx import Document as WordDocument
from docx.opc.exceptions import PackageNotFoundError
from docx.shared import Pt, RGBColor

from notepane.formats.base import FormatHandler
from notepane.formatting.ir import CharStyle, Document, TextRun


LINK_COLOR = RGBColor(25, 118, 210)  # Blue


class DOCXHandler(FormatHandler):
    """Handler for Microsoft Word (.docx) files.

    Uses python-docx for reading and writing with run-level support
    for bold, italic, underline and font size. Each line of the note
    becomes one paragraph.
    """

    def __init__(self, base_size: float = 16.0, font_name: str = "Calibri") -> None:
        super().__init__(base_size)
        self.font_name = font_name

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".docx",)

    def read(self, path: Path) -> Document:
        """Read paragraphs and run formatting from a DOCX file.

        Raises:
            ValueError: If the file is not a Word document
        """
        try:
            doc = WordDocument(str(path))
        except (PackageNotFoundError, BadZipFile) as e:
            raise ValueError(f"Not a valid DOCX file: {path.name}") from e
        body = CharStyle.body(self.base_size)
        result = Document()

        for index, para in enumerate(doc.paragraphs):
            if index > 0:
                result += Document.plain("\n", body)
            runs: list[TextRun] = []
            for run in para.runs:
                if not run.text:
                    continue
                size = run.font.size.pt if run.font.size is not None else self.base_size
                runs.append(TextRun(
                    text=run.text,
                    style=CharStyle(
                        bold=bool(run.bold),
                        italic=bool(run.italic),
                        underline=bool(run.underline),
                        size=size,
                    ),
                ))
            result += Document.from_runs(runs)

        return result

    def write(self, document: Document, path: Path) -> None:
        """Write the document to a DOCX file.

        Creates a new Word document with run-level formatting.
        """
        doc = WordDocument()

        # Set default font
        style = doc.styles["Normal"]
        font = style.font
        font.name = self.font_name
        font.size = Pt(self.base_size)

        for line in document.lines():
            para = doc.add_paragraph()
            segment = document.slice(line.start, line.end)
            for text_run in segment.runs:
                run = para.add_run(text_run.text)
                run.bold = text_run.bold
                run.italic = text_run.italic
                run.underline = text_run.underline
                if text_run.style.size is not None:
                    run.font.size = Pt(text_run.style.size)
                if text_run.style.link:
                    run.font.color.rgb = LINK_COLOR

        doc.save(str(path))
