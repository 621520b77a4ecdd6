"""Single-note and multi-note export/import packages.

A ``.note`` file holds one JSON object, a ``.notes`` file a JSON array.
Both carry only the portable fields of a note: title, plain content,
tags, category, favorite flag, timestamps and color. Document files
(txt, md, rtf, docx) can also be imported as new notes.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from notepane.core.models import Note, NoteData
from notepane.core.store import NoteStore
from notepane.formats import SUPPORTED_EXTENSIONS, SerializationError, encode_document, get_handler

logger = logging.getLogger(__name__)

NOTE_EXTENSION = ".note"
NOTES_EXTENSION = ".notes"

_many = TypeAdapter(list[NoteData])


class ExchangeError(Exception):
    """A note package could not be written or read."""

    pass


def note_filename(note: Note) -> str:
    """File name for a single-note package: spaces become underscores."""
    return f"{note.title.replace(' ', '_')}{NOTE_EXTENSION}"


def notes_filename(today: Optional[date] = None) -> str:
    """File name for a multi-note package, stamped with the date."""
    today = today or date.today()
    return f"Notes_{today.isoformat()}{NOTES_EXTENSION}"


def _resolve_target(target: Path, default_name: str) -> Path:
    """Treat an existing directory as "save inside it with the default name"."""
    if target.is_dir():
        return target / default_name
    return target


def export_note(note: Note, target: Path) -> Path:
    """Write ``note`` as a single-note package and return the file path."""
    path = _resolve_target(target, note_filename(note))
    data = NoteData.from_note(note).model_dump_json(by_alias=True, indent=2)
    try:
        path.write_text(data, encoding="utf-8")
    except OSError as e:
        raise ExchangeError(f"Could not export note to {path}: {e}") from e
    logger.info("Exported note %r to %s", note.title, path)
    return path


def export_notes(notes: list[Note], target: Path) -> Path:
    """Write ``notes`` as a multi-note package and return the file path."""
    path = _resolve_target(target, notes_filename())
    records = [NoteData.from_note(n) for n in notes]
    data = _many.dump_json(records, by_alias=True, indent=2)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise ExchangeError(f"Could not export notes to {path}: {e}") from e
    logger.info("Exported %d note(s) to %s", len(records), path)
    return path


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ExchangeError(f"Could not read {path}: {e}") from e


def import_note(path: Path, store: NoteStore) -> Note:
    """Read a single-note package into ``store`` (not saved)."""
    try:
        record = NoteData.model_validate_json(_read(path))
    except ValidationError as e:
        raise ExchangeError(f"Invalid note package {path.name}: {e}") from e
    return store.add(record.to_note())


def import_notes(path: Path, store: NoteStore) -> list[Note]:
    """Read a multi-note package into ``store`` (not saved)."""
    try:
        records = _many.validate_json(_read(path))
    except ValidationError as e:
        raise ExchangeError(f"Invalid notes package {path.name}: {e}") from e
    return [store.add(record.to_note()) for record in records]


def import_document(path: Path, store: NoteStore, base_size: float = 16.0) -> Note:
    """Read a txt, md, rtf or docx file into a new note (not saved).

    The note is titled after the file name, with underscores read as
    spaces, and keeps whatever formatting the format carries.
    """
    try:
        handler_cls = get_handler(path.suffix)
        document = handler_cls(base_size=base_size).read(path)
        styled = encode_document(document)
    except (OSError, ValueError, SerializationError) as e:
        raise ExchangeError(f"Could not import {path.name}: {e}") from e

    note = store.create_note(title=path.stem.replace("_", " "), content=document.text)
    note.content_data = styled
    return note


def import_file(path: Path, store: NoteStore, base_size: float = 16.0) -> list[Note]:
    """Import a package or a document file, choosing by extension."""
    ext = path.suffix.lower()
    if ext == NOTE_EXTENSION:
        notes = [import_note(path, store)]
    elif ext == NOTES_EXTENSION:
        notes = import_notes(path, store)
    elif ext in SUPPORTED_EXTENSIONS:
        notes = [import_document(path, store, base_size)]
    else:
        raise ExchangeError(
            f"Unsupported file: {ext or path.name}. Expected "
            f"{', '.join((NOTE_EXTENSION, NOTES_EXTENSION, *SUPPORTED_EXTENSIONS))}"
        )
    logger.info("Imported %d note(s) from %s", len(notes), path)
    return notes
