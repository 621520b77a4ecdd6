"""JSON-file backed note collection."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from notepane.core.models import ALL_NOTES, FAVORITES, Note

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Note"

WELCOME_CONTENT = """## Your first note

notepane keeps local notes with:
• Categories to organise notes
• Tags for quick lookup
• An editor with text formatting
• Import and export of notes

Create your next note with the "new" command!"""


class StoreError(Exception):
    """The note collection could not be loaded, saved or queried."""

    pass


class _StoreFile(BaseModel):
    """On-disk layout of the collection."""

    version: int = 1
    notes: list[Note] = Field(default_factory=list)


class NoteStore:
    """A collection of notes persisted to a single JSON file.

    Every mutating method leaves saving to the caller, except the
    convenience helpers that say otherwise.
    """

    def __init__(self, path: Path, default_category: str = "Uncategorized") -> None:
        self.path = path
        self.default_category = default_category
        self._notes: dict[str, Note] = {}
        self.load()

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self) -> None:
        """(Re)load notes from disk. A missing file is an empty store."""
        self._notes = {}
        if not self.path.exists():
            return
        try:
            data = _StoreFile.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            raise StoreError(f"Could not load notes from {self.path}: {e}") from e
        self._notes = {note.id: note for note in data.notes}
        logger.debug("Loaded %d note(s) from %s", len(self._notes), self.path)

    def save(self) -> None:
        """Write the collection atomically (temp file, then replace)."""
        payload = _StoreFile(notes=list(self._notes.values())).model_dump_json(indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=".notes-", suffix=".json", dir=self.path.parent
            )
        except OSError as e:
            raise StoreError(f"Could not save notes to {self.path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StoreError(f"Could not save notes to {self.path}: {e}") from e
        logger.debug("Saved %d note(s) to %s", len(self._notes), self.path)

    # -------------------------------------------------------------------------
    # Collection access
    # -------------------------------------------------------------------------

    @property
    def notes(self) -> list[Note]:
        return list(self._notes.values())

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self):
        return iter(list(self._notes.values()))

    def add(self, note: Note) -> Note:
        self._notes[note.id] = note
        return note

    def get(self, note_id: str) -> Note:
        """Find a note by full id or by a unique id prefix.

        Raises:
            StoreError: If the id is empty, or no note or more than one
                note matches
        """
        if not note_id:
            raise StoreError("A note id is required")
        if note_id in self._notes:
            return self._notes[note_id]
        matches = [n for key, n in self._notes.items() if key.startswith(note_id)]
        if len(matches) == 1:
            return matches[0]
        if not matches:
            raise StoreError(f"No note with id {note_id!r}")
        raise StoreError(f"Id prefix {note_id!r} is ambiguous ({len(matches)} notes)")

    def delete(self, note_id: str) -> Note:
        note = self.get(note_id)
        del self._notes[note.id]
        return note

    def delete_all(self) -> int:
        count = len(self._notes)
        self._notes.clear()
        return count

    def create_note(
        self,
        title: Optional[str] = None,
        category: Optional[str] = None,
        content: str = "",
    ) -> Note:
        """Add a new note; "All Notes" and "Favorites" are not real categories."""
        if category in (None, "", ALL_NOTES, FAVORITES):
            category = self.default_category
        note = Note(title=title or DEFAULT_TITLE, category=category, content=content)
        return self.add(note)

    def ensure_welcome_note(self) -> Optional[Note]:
        """Seed a welcome note into an empty store and save it."""
        if self._notes:
            return None
        note = Note(
            title="Welcome to notepane!",
            content=WELCOME_CONTENT,
            tags=["welcome", "tutorial"],
            category="Getting Started",
            is_favorite=True,
            color="green",
        )
        self.add(note)
        self.save()
        return note

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def categories(self) -> list[str]:
        """Every note category plus the two library pseudo-categories."""
        cats = {note.category for note in self._notes.values()}
        cats.update((ALL_NOTES, FAVORITES))
        return sorted(cats)

    def user_categories(self) -> list[str]:
        return [c for c in self.categories() if c not in (ALL_NOTES, FAVORITES)]

    def all_tags(self) -> list[str]:
        return sorted({tag for note in self._notes.values() for tag in note.tags})

    def filter_notes(
        self,
        category: Optional[str] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[Note]:
        """Filter by category, tag and search text, newest first."""
        filtered = list(self._notes.values())

        if category and category != ALL_NOTES:
            if category == FAVORITES:
                filtered = [n for n in filtered if n.is_favorite]
            else:
                filtered = [n for n in filtered if n.category == category]

        if tag:
            filtered = [n for n in filtered if tag in n.tags]

        if search:
            filtered = [n for n in filtered if n.matches(search)]

        return sorted(filtered, key=lambda n: n.updated_at, reverse=True)

    def quick_search(self, text: str) -> list[Note]:
        """Title/content search used by the quick-open palette."""
        if not text:
            return self.notes
        needle = text.casefold()
        return [
            n for n in self._notes.values()
            if needle in n.title.casefold() or needle in n.content.casefold()
        ]
