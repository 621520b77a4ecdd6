"""Pytest fixtures for notepane tests."""

import pytest
from pathlib import Path

from notepane import config
from notepane.config import Settings
from notepane.core.store import NoteStore
from notepane.formatting.ir import CharStyle, Document, TextRun

BASE_SIZE = 16.0


@pytest.fixture
def body() -> CharStyle:
    """Body text style at the default size."""
    return CharStyle.body(BASE_SIZE)


@pytest.fixture
def mixed_document(body: CharStyle) -> Document:
    """A single line with bold, italic and plain runs."""
    return Document.from_runs([
        TextRun("Buy ", body),
        TextRun("fresh", body.with_(bold=True)),
        TextRun(" milk ", body),
        TextRun("today", body.with_(italic=True, underline=True)),
    ])


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings pointing at a temporary data directory."""
    data_dir = tmp_path / "data"
    monkeypatch.setenv("NOTEPANE_DATA_DIR", str(data_dir))
    monkeypatch.setattr(config, "_settings", None)
    return config.get_settings()


@pytest.fixture
def store(settings: Settings) -> NoteStore:
    """An empty note store in the temporary data directory."""
    return NoteStore(settings.store_path, settings.default_category)
