"""
Bookshelf — Note CLI
======================

Usage:
    notes add MyNote "This is my first note."
    notes read MyNote
    notes delete MyNote

The action is a positional argument rather than a Typer subcommand so that
an unknown action prints "Action not recognized!" and exits 0 instead of
producing a usage error. Options go before the action:

    notes --notes-dir ./notes add weather "-5 degrees"

Exit codes:
    0  success, unknown action, or rejected input (empty title/content)
    1  note missing on read/delete, or any file system error
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from bookshelf.config import settings
from bookshelf.exceptions import (
    NoteNotFoundError,
    NoteStorageError,
    ValidationError,
)
from bookshelf.logging_config import setup_logging
from bookshelf.services.note_service import NoteService

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Add, read and delete plain-text notes stored as <title>.txt files.",
)


async def _add(service: NoteService, title: str, content: str) -> None:
    await service.add_note(title, content)
    typer.echo(f"Note {title} added!")


async def _read(service: NoteService, title: str, content: str) -> None:
    data = await service.read_note(title)
    typer.echo(f"Reading Note: {title}\n\n{data}")


async def _delete(service: NoteService, title: str, content: str) -> None:
    await service.delete_note(title)
    typer.echo(f"Note {title} deleted!")


ACTIONS = {
    "add": _add,
    "read": _read,
    "delete": _delete,
}


# Everything after the action is positional, so content may start with "-"
@app.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False}
)
def main(
    action: str = typer.Argument("", help="One of: add, read, delete."),
    title: str = typer.Argument("", help="Note title; the file is <title>.txt."),
    content: str = typer.Argument("", help="Note content (add only)."),
    notes_dir: Optional[Path] = typer.Option(
        None,
        "--notes-dir",
        "-d",
        help="Directory holding note files. Defaults to NOTES_DIR or the current directory.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log file operations to stderr."),
) -> None:
    """Run one note action."""
    setup_logging("INFO" if verbose else "WARNING", stream=sys.stderr)

    handler = ACTIONS.get(action)
    if handler is None:
        typer.echo("Action not recognized!")
        return

    service = NoteService(notes_dir if notes_dir is not None else settings.notes_dir)
    logger.info("%s %r in %s", action, title, service.notes_dir)

    try:
        asyncio.run(handler(service, title, content))
    except ValidationError as e:
        typer.echo(e.message)
    except (NoteNotFoundError, NoteStorageError) as e:
        typer.echo(e.message)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
