"""Core data models for notepane."""

from datetime import datetime, timezone
from typing import Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

NoteColor = Literal["blue", "green", "red", "yellow", "purple"]
NOTE_COLORS: tuple[str, ...] = ("blue", "green", "red", "yellow", "purple")

ALL_NOTES = "All Notes"
FAVORITES = "Favorites"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(BaseModel):
    """A stored note.

    ``content`` is the plain-text projection used for search and previews;
    ``content_data`` is the styled projection (see ``formats.styled``) and
    is ``None`` until the note has been edited with formatting.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    title: str
    content: str = ""
    content_data: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    category: str = "Uncategorized"
    is_favorite: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    color: NoteColor = "blue"

    def touch(self) -> None:
        """Mark the note as modified now."""
        self.updated_at = utcnow()

    def toggle_favorite(self) -> bool:
        self.is_favorite = not self.is_favorite
        return self.is_favorite

    def add_tag(self, tag: str) -> bool:
        """Add ``tag`` unless already present. Returns True if it was added."""
        tag = tag.strip()
        if not tag or tag in self.tags:
            return False
        self.tags = [*self.tags, tag]
        return True

    def remove_tag(self, tag: str) -> bool:
        if tag not in self.tags:
            return False
        self.tags = [t for t in self.tags if t != tag]
        return True

    def matches(self, text: str) -> bool:
        """Case-insensitive match against title, content and tags."""
        needle = text.casefold()
        return (
            needle in self.title.casefold()
            or needle in self.content.casefold()
            or any(needle in tag.casefold() for tag in self.tags)
        )


class NoteData(BaseModel):
    """Portable export record for a single note.

    Only the plain content travels; styled attributes stay local.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str
    content: str = ""
    tags: list[str] = Field(default_factory=list)
    category: str = "Uncategorized"
    is_favorite: bool = Field(default=False, alias="isFavorite")
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=utcnow, alias="updatedAt")
    color: NoteColor = "blue"

    @classmethod
    def from_note(cls, note: Note) -> "NoteData":
        return cls(
            title=note.title,
            content=note.content,
            tags=list(note.tags),
            category=note.category,
            is_favorite=note.is_favorite,
            created_at=note.created_at,
            updated_at=note.updated_at,
            color=note.color,
        )

    def to_note(self) -> Note:
        """Create a new note (fresh id, no styled content) from this record."""
        return Note(
            title=self.title,
            content=self.content,
            tags=list(self.tags),
            category=self.category,
            is_favorite=self.is_favorite,
            created_at=self.created_at,
            updated_at=self.updated_at,
            color=self.color,
        )
