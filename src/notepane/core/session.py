"""Editor session: owns the styled document of one open note."""

import logging
from typing import Optional

from notepane.config import Settings, get_settings
from notepane.core.models import Note
from notepane.core.store import NoteStore, StoreError
from notepane.formats.styled import SerializationError, decode_document, encode_document
from notepane.formatting.checkbox import toggle_checkbox_at
from notepane.formatting.engine import Operation, apply
from notepane.formatting.ir import CharStyle, Document, Selection
from notepane.formatting.styles import insert_link

logger = logging.getLogger(__name__)


class EditorSession:
    """Single owner of a note's Document while it is open.

    Every mutation replaces the in-memory document, then writes both the
    plain and the styled projection back into the note and saves the
    store. A failed save is logged and reported through the return
    value; the in-memory document is never rolled back.
    """

    def __init__(
        self,
        note: Note,
        store: NoteStore,
        settings: Optional[Settings] = None,
    ) -> None:
        self.note = note
        self.store = store
        self.settings = settings or get_settings()
        self.document = self._open()
        self.selection = Selection.caret(len(self.document))
        self.last_error: Optional[str] = None

    @property
    def base_size(self) -> float:
        return self.settings.font_size

    def _open(self) -> Document:
        """Build the document from the note's styled data, else its plain text."""
        if self.note.content_data:
            try:
                return decode_document(self.note.content_data)
            except SerializationError as e:
                logger.warning(
                    "Styled content of %r is unreadable, using plain text: %s",
                    self.note.title, e,
                )
        return Document.plain(self.note.content, CharStyle.body(self.base_size))

    def commit(self) -> bool:
        """Write the document into the note and save the store.

        Returns:
            True if both projections were stored and saved
        """
        try:
            styled = encode_document(self.document)
        except SerializationError as e:
            self.last_error = str(e)
            logger.error("Could not serialize %r: %s", self.note.title, e)
            return False

        self.note.content = self.document.text
        self.note.content_data = styled
        self.note.touch()
        try:
            self.store.save()
        except StoreError as e:
            self.last_error = str(e)
            logger.error("Could not save %r: %s", self.note.title, e)
            return False

        self.last_error = None
        return True

    def _update(self, document: Document, selection: Selection) -> bool:
        changed = document != self.document
        self.document = document
        self.selection = selection
        if not changed:
            return True
        return self.commit()

    def apply(self, operation: Operation, selection: Optional[Selection] = None) -> bool:
        """Run a toolbar operation over ``selection`` (default: current selection)."""
        document, new_selection = apply(
            self.document,
            selection if selection is not None else self.selection,
            operation,
            self.base_size,
        )
        logger.debug("Applied %s to %r", operation.value, self.note.title)
        return self._update(document, new_selection)

    def click(self, index: int) -> bool:
        """Handle a click at ``index``; True if it toggled a checkbox."""
        document, absorbed = toggle_checkbox_at(self.document, index)
        if not absorbed:
            self.selection = Selection.caret(max(0, min(index, len(self.document))))
            return False
        self._update(document, self.selection)
        return True

    def insert_link(
        self,
        url: str,
        title: Optional[str] = None,
        selection: Optional[Selection] = None,
    ) -> bool:
        document, new_selection = insert_link(
            self.document,
            selection if selection is not None else self.selection,
            url,
            title,
            self.base_size,
        )
        return self._update(document, new_selection)

    def set_text(self, text: str) -> bool:
        """Replace the whole body with unformatted text."""
        document = Document.plain(text, CharStyle.body(self.base_size))
        return self._update(document, Selection.caret(len(document)))
