"""Tests for note package import and export."""

import json

import pytest
from datetime import date
from pathlib import Path

from notepane.core.exchange import (
    ExchangeError,
    export_note,
    export_notes,
    import_file,
    note_filename,
    notes_filename,
)
from notepane.core.models import Note
from notepane.core.store import NoteStore
from notepane.formats.docx_handler import DOCXHandler
from notepane.formats.styled import decode_document
from notepane.formatting.ir import CharStyle, Document, TextRun


class TestFilenames:
    """Tests for default package names."""

    def test_single_note_name(self):
        """Test that spaces in the title become underscores."""
        assert note_filename(Note(title="Trip plan 2")) == "Trip_plan_2.note"

    def test_multi_note_name(self):
        """Test that multi-note packages are stamped with the date."""
        assert notes_filename(date(2024, 3, 9)) == "Notes_2024-03-09.notes"


class TestExport:
    """Tests for exporting notes."""

    def test_export_note_into_directory(self, tmp_path: Path):
        """Test exporting one note as a JSON object with camelCase keys."""
        note = Note(title="Trip plan", content="Tent", tags=["outdoors"], is_favorite=True)
        note.content_data = '{"version": 1, "runs": []}'

        path = export_note(note, tmp_path)

        assert path == tmp_path / "Trip_plan.note"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["title"] == "Trip plan"
        assert data["isFavorite"] is True
        assert "createdAt" in data
        assert "content_data" not in data
        assert "id" not in data

    def test_export_notes_to_file(self, tmp_path: Path):
        """Test exporting several notes as a JSON array."""
        target = tmp_path / "backup.notes"
        path = export_notes([Note(title="a"), Note(title="b")], target)

        assert path == target
        data = json.loads(path.read_text(encoding="utf-8"))
        assert [item["title"] for item in data] == ["a", "b"]

    def test_export_to_missing_directory_raises(self, tmp_path: Path):
        """Test that write failures raise ExchangeError."""
        with pytest.raises(ExchangeError):
            export_note(Note(title="a"), tmp_path / "missing" / "a.note")


class TestImport:
    """Tests for importing notes."""

    def test_round_trip_single(self, tmp_path: Path, store: NoteStore):
        """Test that an exported note imports with a fresh id and same fields."""
        original = Note(title="Trip", content="Tent", tags=["x"], category="Home", color="red")
        path = export_note(original, tmp_path)

        imported = import_file(path, store)

        assert len(imported) == 1
        note = imported[0]
        assert note.id != original.id
        assert note.title == "Trip"
        assert note.content == "Tent"
        assert note.category == "Home"
        assert note.color == "red"
        assert note.created_at == original.created_at
        assert store.get(note.id) is note

    def test_round_trip_many(self, tmp_path: Path, store: NoteStore):
        """Test importing a multi-note package."""
        path = export_notes([Note(title="a"), Note(title="b")], tmp_path / "all.notes")
        imported = import_file(path, store)
        assert [n.title for n in imported] == ["a", "b"]
        assert len(store) == 2

    def test_invalid_package(self, tmp_path: Path, store: NoteStore):
        """Test that malformed packages raise ExchangeError."""
        path = tmp_path / "bad.note"
        path.write_text('{"content": "no title"}', encoding="utf-8")
        with pytest.raises(ExchangeError, match="Invalid note package"):
            import_file(path, store)
        assert len(store) == 0

    def test_unknown_extension(self, tmp_path: Path, store: NoteStore):
        """Test that other file types are refused."""
        path = tmp_path / "notes.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ExchangeError, match="Unsupported file"):
            import_file(path, store)

    def test_missing_file(self, tmp_path: Path, store: NoteStore):
        """Test that unreadable files raise ExchangeError."""
        with pytest.raises(ExchangeError, match="Could not read"):
            import_file(tmp_path / "gone.note", store)


class TestImportDocument:
    """Tests for importing txt/md/rtf/docx files as notes."""

    def test_markdown_keeps_formatting(self, tmp_path: Path, store: NoteStore):
        """Test that a markdown file becomes a note with styled content."""
        path = tmp_path / "Trip_plan.md"
        path.write_text("# Trip\nPack **tent**", encoding="utf-8")

        [note] = import_file(path, store, base_size=14.0)

        assert note.title == "Trip plan"
        assert note.content == "Trip\nPack tent"
        assert note.category == "Uncategorized"
        document = decode_document(note.content_data)
        assert document.style_at(0).heading_level() == 1
        assert document.style_at(note.content.index("tent")).bold
        assert document.style_at(note.content.index("Pack")).size == 14.0
        assert store.get(note.id) is note

    def test_docx(self, tmp_path: Path, store: NoteStore):
        """Test that a Word document imports with its run formatting."""
        path = tmp_path / "report.docx"
        source = Document.from_runs([
            TextRun("Summary ", CharStyle(size=16.0)),
            TextRun("done", CharStyle(size=16.0, italic=True)),
        ])
        DOCXHandler().write(source, path)

        [note] = import_file(path, store)

        assert note.title == "report"
        assert note.content == "Summary done"
        assert decode_document(note.content_data).style_at(8).italic

    def test_invalid_docx(self, tmp_path: Path, store: NoteStore):
        """Test that a file that is not a Word document is refused."""
        path = tmp_path / "fake.docx"
        path.write_text("not a zip", encoding="utf-8")

        with pytest.raises(ExchangeError, match="Could not import fake.docx"):
            import_file(path, store)
        assert len(store) == 0

    def test_missing_document(self, tmp_path: Path, store: NoteStore):
        """Test that unreadable documents raise ExchangeError."""
        with pytest.raises(ExchangeError, match="Could not import"):
            import_file(tmp_path / "gone.txt", store)
