"""Command-line interface for notepane."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from notepane import __version__
from notepane.config import AVAILABLE_FONTS, get_settings
from notepane.core.exchange import ExchangeError, export_note, export_notes, import_file
from notepane.core.models import ALL_NOTES, FAVORITES, NOTE_COLORS, Note
from notepane.core.session import EditorSession
from notepane.core.store import NoteStore, StoreError
from notepane.formats import SUPPORTED_EXTENSIONS, get_handler
from notepane.formatting.engine import Operation, is_structural
from notepane.formatting.ir import Document, Selection, TextRange
from notepane.formatting.parser import MarkdownParser
from notepane.log import setup_logging

app = typer.Typer(
    name="notepane",
    help="Keep local notes with categories, tags and rich-text formatting.",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"notepane v{__version__}")
        raise typer.Exit()


def parse_range(value: str) -> TextRange:
    """Parse ``START:LENGTH`` (or a bare ``START`` caret) into a TextRange."""
    start, _, length = value.partition(":")
    try:
        return TextRange(int(start), int(length) if length else 0)
    except ValueError:
        raise typer.BadParameter(f"Expected START:LENGTH, got {value!r}")


def build_selection(ranges: Optional[list[str]], document: Document) -> Selection:
    """Selection from ``--range`` options; the whole note when none are given."""
    if not ranges:
        return Selection.single(0, len(document))
    return Selection(tuple(parse_range(r) for r in ranges))


def open_store() -> NoteStore:
    settings = get_settings()
    try:
        return NoteStore(settings.store_path, settings.default_category)
    except StoreError as e:
        fail(str(e))


def fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


def find_note(store: NoteStore, note_id: str) -> Note:
    try:
        return store.get(note_id)
    except StoreError as e:
        fail(str(e))


def save(store: NoteStore) -> None:
    try:
        store.save()
    except StoreError as e:
        fail(str(e))


def commit_or_fail(session: EditorSession, ok: bool) -> None:
    if not ok:
        fail(session.last_error or "Could not save note")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Keep local notes with categories, tags and rich-text formatting.

    Examples:

        python notes.py new "Groceries" --category Home

        python notes.py format 3fa2 checklist

        python notes.py format 3fa2 bold --range 0:5

        python notes.py list --category Favorites --search milk
    """
    setup_logging(verbose)


# =============================================================================
# Notes
# =============================================================================

@app.command()
def new(
    title: Optional[str] = typer.Argument(None, help="Note title"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Category"),
    content: str = typer.Option("", "--content", help="Initial plain text"),
) -> None:
    """Create a new note."""
    store = open_store()
    note = store.create_note(title=title, category=category, content=content)
    save(store)
    console.print(f"[green]Created:[/green] {note.title} [dim]({note.id[:8]})[/dim]")


@app.command("list")
def list_notes(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Category, 'All Notes' or 'Favorites'"),
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Only notes with this tag"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Search title, content and tags"),
) -> None:
    """List notes, newest first."""
    store = open_store()
    if store.ensure_welcome_note():
        console.print("[blue]Created a welcome note to get you started.[/blue]")

    notes = store.filter_notes(category=category, tag=tag, search=search)
    if not notes:
        console.print(
            "[yellow]No notes found.[/yellow] "
            "Try changing your search or create a new note."
        )
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Id", style="dim")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Tags")
    table.add_column("Updated", style="dim")
    for note in notes:
        title = Text(note.title, style=note.color)
        if note.is_favorite:
            title.append(" ★", style="yellow")
        tags = ", ".join(note.tags[:3])
        if len(note.tags) > 3:
            tags += f" +{len(note.tags) - 3}"
        table.add_row(
            note.id[:8],
            title,
            note.category,
            tags,
            note.updated_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


@app.command()
def show(
    note_id: str = typer.Argument(..., help="Note id or id prefix"),
    markdown: bool = typer.Option(False, "--markdown", "-m", help="Show formatting as markdown"),
    runs: bool = typer.Option(False, "--runs", help="List attribute runs"),
) -> None:
    """Print a note."""
    store = open_store()
    note = find_note(store, note_id)
    session = EditorSession(note, store)

    console.print(f"[bold]{note.title}[/bold]  [dim]{note.category}[/dim]")
    if note.tags:
        console.print(f"[dim]Tags:[/dim] {', '.join(note.tags)}")

    if runs:
        table = Table(show_header=True, header_style="bold")
        for column in ("Start", "Text", "Style", "Size"):
            table.add_column(column)
        offset = 0
        for run in session.document.runs:
            flags = [run.style.font_variant]
            flags += [name for name in ("underline", "checkbox") if getattr(run.style, name)]
            if run.style.link:
                flags.append(f"link={run.style.link}")
            table.add_row(
                str(offset),
                repr(run.text),
                " ".join(flags),
                "-" if run.style.size is None else f"{run.style.size:g}",
            )
            offset += len(run.text)
        console.print(table)
    elif markdown:
        console.print(
            MarkdownParser(session.base_size).to_markdown(session.document),
            markup=False,
            highlight=False,
        )
    else:
        console.print(session.document.text, markup=False, highlight=False)


@app.command()
def edit(
    note_id: str = typer.Argument(..., help="Note id or id prefix"),
    text: Optional[str] = typer.Argument(None, help="New body text"),
    title: Optional[str] = typer.Option(None, "--title", help="New title"),
    from_file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, help="Read body text from a file"),
) -> None:
    """Replace a note's title and/or body text."""
    store = open_store()
    note = find_note(store, note_id)

    if title is not None:
        note.title = title
        note.touch()
        save(store)

    if from_file is not None:
        text = from_file.read_text(encoding="utf-8")
    if text is not None:
        session = EditorSession(note, store)
        commit_or_fail(session, session.set_text(text))
    console.print(f"[green]Saved:[/green] {note.title}")


@app.command("format")
def format_note(
    note_id: str = typer.Argument(..., help="Note id or id prefix"),
    operation: Operation = typer.Argument(..., help="Formatting action"),
    ranges: Optional[list[str]] = typer.Option(
        None,
        "--range",
        "-r",
        help="START:LENGTH range to format (repeatable; default: whole note)",
    ),
) -> None:
    """Apply a formatting action to part of a note."""
    store = open_store()
    note = find_note(store, note_id)
    session = EditorSession(note, store)
    selection = build_selection(ranges, session.document)

    commit_or_fail(session, session.apply(operation, selection))
    # List operations move text, so report where the edited range now sits
    first = session.selection.first
    where = ""
    if is_structural(operation) and first is not None:
        where = f" [dim](selection {first.start}:{first.length})[/dim]"
    console.print(f"[green]Applied {operation.value}:[/green] {note.title}{where}")


@app.command()
def check(
    note_id: str = typer.Argument(..., help="Note id or id prefix"),
    index: int = typer.Argument(..., help="Character index of the click"),
) -> None:
    """Toggle the checklist box at a character index."""
    store = open_store()
    note = find_note(store, note_id)
    session = EditorSession(note, store)

    if not session.click(index):
        console.print("[yellow]No checkbox at that position.[/yellow]")
        raise typer.Exit(1)
    commit_or_fail(session, session.last_error is None)
    line = session.document.line_at(index)
    console.print(f"[green]Toggled:[/green] {line.text}", highlight=False)


@app.command()
def link(
    note_id: str = typer.Argument(..., help="Note id or id prefix"),
    url: str = typer.Argument(..., help="Link target"),
    title: Optional[str] = typer.Option(None, "--title", help="Link text to insert at a caret"),
    at: str = typer.Option(..., "--range", "-r", help="START:LENGTH to link, or START to insert"),
) -> None:
    """Link a range of text, or insert a link at a position."""
    store = open_store()
    note = find_note(store, note_id)
    session = EditorSession(note, store)
    selection = Selection((parse_range(at),))
    commit_or_fail(session, session.insert_link(url, title, selection))
    console.print(f"[green]Linked:[/green] {url}")


@app.command()
def favorite(note_id: str = typer.Argument(..., help="Note id or id prefix")) -> None:
    """Add a note to, or remove it from, favorites."""
    store = open_store()
    note = find_note(store, note_id)
    state = note.toggle_favorite()
    save(store)
    verb = "Added to" if state else "Removed from"
    console.print(f"[green]{verb} favorites:[/green] {note.title}")


@app.command()
def tag(
    note_id: str = typer.Argument(..., help="Note id or id prefix"),
    name: str = typer.Argument(..., help="Tag to add"),
) -> None:
    """Add a tag to a note."""
    store = open_store()
    note = find_note(store, note_id)
    if note.add_tag(name):
        save(store)
        console.print(f"[green]Tagged:[/green] {note.title} +{name}")
    else:
        console.print(f"[yellow]Unchanged:[/yellow] {note.title} already has that tag")


@app.command()
def untag(
    note_id: str = typer.Argument(..., help="Note id or id prefix"),
    name: str = typer.Argument(..., help="Tag to remove"),
) -> None:
    """Remove a tag from a note."""
    store = open_store()
    note = find_note(store, note_id)
    if note.remove_tag(name):
        save(store)
        console.print(f"[green]Untagged:[/green] {note.title} -{name}")
    else:
        console.print(f"[yellow]Unchanged:[/yellow] {note.title} has no tag {name!r}")


@app.command()
def move(
    note_id: str = typer.Argument(..., help="Note id or id prefix"),
    category: str = typer.Argument(..., help="Target category"),
) -> None:
    """Move a note to another category."""
    store = open_store()
    note = find_note(store, note_id)
    note.category = category
    save(store)
    console.print(f"[green]Moved:[/green] {note.title} -> {category}")


@app.command()
def color(
    note_id: str = typer.Argument(..., help="Note id or id prefix"),
    name: str = typer.Argument(..., help=f"One of: {', '.join(NOTE_COLORS)}"),
) -> None:
    """Set a note's color tag."""
    if name not in NOTE_COLORS:
        fail(f"Unknown color {name!r}. Choose from: {', '.join(NOTE_COLORS)}")
    store = open_store()
    note = find_note(store, note_id)
    note.color = name
    save(store)
    console.print(f"[green]Color set:[/green] {note.title} [{name}]●[/{name}]")


@app.command()
def delete(note_id: str = typer.Argument(..., help="Note id or id prefix")) -> None:
    """Delete a note."""
    store = open_store()
    try:
        note = store.delete(note_id)
    except StoreError as e:
        fail(str(e))
    save(store)
    console.print(f"[green]Deleted:[/green] {note.title}")


@app.command("delete-all")
def delete_all(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        prompt="Are you sure you want to delete all notes? This action cannot be undone.",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Delete every note."""
    if not yes:
        console.print("[yellow]Cancelled.[/yellow]")
        raise typer.Exit(1)
    store = open_store()
    count = store.delete_all()
    save(store)
    console.print(f"[green]Deleted {count} note(s)[/green]")


# =============================================================================
# Import / export / render
# =============================================================================

@app.command("export")
def export_cmd(
    note_ids: Optional[list[str]] = typer.Argument(None, help="Notes to export (default: all)"),
    output: Path = typer.Option(Path("."), "--output", "-o", help="File or directory to write"),
) -> None:
    """Export one note as .note, or several as .notes."""
    store = open_store()
    try:
        if note_ids and len(note_ids) == 1:
            path = export_note(find_note(store, note_ids[0]), output)
        else:
            notes = [find_note(store, n) for n in note_ids] if note_ids else store.notes
            path = export_notes(notes, output)
    except ExchangeError as e:
        fail(str(e))
    console.print(f"[green]Exported:[/green] {path}")


@app.command("import")
def import_cmd(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help=f".note or .notes package, or a document ({', '.join(SUPPORTED_EXTENSIONS)})",
    ),
) -> None:
    """Import notes from a package, or a document file as a new note."""
    store = open_store()
    try:
        notes = import_file(path, store, get_settings().font_size)
    except ExchangeError as e:
        fail(str(e))
    save(store)
    console.print(f"[green]Imported {len(notes)} note(s)[/green]")


@app.command()
def render(
    note_id: str = typer.Argument(..., help="Note id or id prefix"),
    output: Path = typer.Argument(..., help=f"Output file ({', '.join(SUPPORTED_EXTENSIONS)})"),
) -> None:
    """Write a note with its formatting to a txt, md, rtf or docx file."""
    try:
        handler_cls = get_handler(output.suffix)
    except ValueError as e:
        fail(str(e))
    store = open_store()
    note = find_note(store, note_id)
    session = EditorSession(note, store)
    try:
        handler_cls(base_size=session.base_size).write(session.document, output)
    except OSError as e:
        fail(f"Could not write {output}: {e}")
    console.print(f"[green]Rendered:[/green] {output}")


# =============================================================================
# Library views
# =============================================================================

@app.command()
def categories() -> None:
    """List categories with note counts."""
    store = open_store()
    for category in (ALL_NOTES, FAVORITES, *store.user_categories()):
        count = len(store.filter_notes(category=category))
        console.print(f"{category} [dim]({count})[/dim]")


@app.command()
def search(
    text: str = typer.Argument(..., help="Text to look for in titles and content"),
) -> None:
    """Quickly find notes by title or content."""
    store = open_store()
    notes = store.quick_search(text)
    if not notes:
        console.print(f"[yellow]No notes match {text!r}.[/yellow]")
        return
    for note in notes:
        console.print(f"[dim]{note.id[:8]}[/dim]  {note.title}", highlight=False)


@app.command()
def tags() -> None:
    """List every tag in use."""
    store = open_store()
    names = store.all_tags()
    if not names:
        console.print("[yellow]No tags yet.[/yellow]")
        return
    console.print(", ".join(names))


@app.command()
def settings() -> None:
    """Show the active settings."""
    current = get_settings()
    table = Table(show_header=True, header_style="bold")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("Font", current.font_name)
    table.add_row("Font size", f"{current.font_size:g}")
    table.add_row("Accent color", current.accent_color)
    table.add_row("Auto save", "on" if current.enable_auto_save else "off")
    table.add_row("Auto save interval", f"{current.auto_save_interval:g} seconds")
    table.add_row("Default category", current.default_category)
    table.add_row("Data directory", str(current.data_dir))
    console.print(table)
    if current.font_name not in AVAILABLE_FONTS:
        console.print(
            f"[yellow]Warning:[/yellow] font {current.font_name!r} is not one of "
            f"{', '.join(AVAILABLE_FONTS)}"
        )


if __name__ == "__main__":
    app()
