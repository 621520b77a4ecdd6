"""Rich Text Format (.rtf) file handler."""

from pathlib import Path

from striprtf.striprtf import rtf_to_text

from notepane.formats.base import FormatHandler
from notepane.formatting.ir import CharStyle, Document, TextStyle


RTF_CONTROLS = {
    TextStyle.BOLD: "\\b",
    TextStyle.ITALIC: "\\i",
    TextStyle.UNDERLINE: "\\ul",
}


class RTFHandler(FormatHandler):
    """Handler for Rich Text Format (.rtf) files.

    Uses striprtf for reading RTF files, so styling is not read back.
    Writing creates RTF with bold, italic, underline and font sizes.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".rtf",)

    def read(self, path: Path) -> Document:
        """Extract plain text from RTF file as body text."""
        rtf_content = path.read_text(encoding="utf-8", errors="ignore")
        text = rtf_to_text(rtf_content)
        return Document.plain(text, CharStyle.body(self.base_size))

    @staticmethod
    def _escape(text: str) -> str:
        """Escape RTF control characters and non-ASCII code points."""
        text = (
            text.replace("\\", "\\\\")
            .replace("{", "\\{")
            .replace("}", "\\}")
        )
        escaped_text = ""
        for char in text:
            if char == "\n":
                escaped_text += "\\par\n"
            elif ord(char) > 127:
                # RTF Unicode: \uN? where N is a signed 16-bit decimal value
                code = ord(char)
                if code > 0xFFFF:
                    escaped_text += "?"
                    continue
                if code > 32767:
                    code -= 65536
                escaped_text += f"\\u{code}?"
            else:
                escaped_text += char
        return escaped_text

    def write(self, document: Document, path: Path) -> None:
        """Write the document to an RTF file."""
        base_half_points = int(round(self.base_size * 2))
        rtf_parts: list[str] = [
            r"{\rtf1\ansi\deff0",
            r"{\fonttbl{\f0 Helvetica;}}",
            r"{\colortbl;\red0\green0\blue0;}",
            f"\\f0\\fs{base_half_points} ",
        ]

        for run in document.runs:
            style = run.style
            text = self._escape(run.text.replace("\r", "\n"))

            controls = ""
            if style.has_font:
                controls += f"\\fs{int(round(style.size * 2))}"
            for flag, control in RTF_CONTROLS.items():
                if flag in style.text_style:
                    controls += control

            if controls:
                rtf_parts.append(f"{{{controls} {text}}}")
            else:
                rtf_parts.append(text)

        rtf_parts.append("}")
        path.write_text("".join(rtf_parts), encoding="utf-8")
