"""Notes, their storage, exchange packages and editing sessions."""

from notepane.core.models import Note, NoteData
from notepane.core.store import NoteStore, StoreError
from notepane.core.exchange import ExchangeError, export_note, export_notes, import_file
from notepane.core.session import EditorSession

__all__ = [
    "Note",
    "NoteData",
    "NoteStore",
    "StoreError",
    "ExchangeError",
    "export_note",
    "export_notes",
    "import_file",
    "EditorSession",
]
