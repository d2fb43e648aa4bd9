"""
Bookshelf — Note File Service
===============================

What:  Stores notes as plain UTF-8 text files, one file per title.
Why:   Gives the note CLI a small, testable store with explicit errors.
How:   <notes_dir>/<title>.txt; async file I/O via aiofiles.
Who:   Called by the note CLI (bookshelf.cli).

Directory Structure:
    notes_dir/
    ├── groceries.txt
    └── MyNote.txt

Title handling:
    The title is used verbatim as the filename stem. Titles that resolve
    outside notes_dir (e.g. "../secrets") are rejected before any I/O.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import aiofiles
import aiofiles.os

from bookshelf.config import settings
from bookshelf.exceptions import NoteNotFoundError, NoteStorageError, ValidationError

logger = logging.getLogger(__name__)

NOTE_EXTENSION = ".txt"
# Files are opened with newline="" so content round-trips unchanged.
# Undecodable bytes read back as U+FFFD.
NOTE_ENCODING = "utf-8"


class NoteService:
    """
    File-backed note store.

    Every operation touches exactly one file:
        add_note()    → write (create or overwrite, never append)
        read_note()   → read in full
        delete_note() → unlink

    Errors:
        ValidationError    empty title/content, title escapes notes_dir
        NoteNotFoundError  file missing on read/delete
        NoteStorageError   any other OS error
    """

    def __init__(self, notes_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            notes_dir: Override the configured notes directory (used by the
                       CLI's --notes-dir option and by tests).
        """
        self.notes_dir = Path(notes_dir if notes_dir is not None else settings.notes_dir)

    def note_path(self, title: str) -> Path:
        """
        Resolve the file path for a title.

        Raises:
            ValidationError if the title is empty or escapes notes_dir.
        """
        if not title:
            raise ValidationError(message="Title cannot be empty", field="title")

        root = self.notes_dir.resolve()
        path = (root / f"{title}{NOTE_EXTENSION}").resolve()
        if not path.is_relative_to(root):
            raise ValidationError(
                message=f"Note title '{title}' points outside the notes directory",
                field="title",
                context={"notes_dir": str(root)},
            )
        return path

    async def add_note(self, title: str, content: str) -> Path:
        """
        Write a note, replacing any existing note with the same title.

        Returns:
            Path of the written file.
        """
        if not title or not content:
            raise ValidationError(message="Title and content cannot be empty")

        path = self.note_path(title)
        try:
            async with aiofiles.open(path, "w", encoding=NOTE_ENCODING, newline="") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to write note %s: %s", path, str(e))
            raise NoteStorageError(
                message=f"Could not save note {title}: {e.strerror or e}",
                context={"path": str(path), "os_error": str(e)},
            ) from e

        logger.info("Note written: %s (%d chars)", path.name, len(content))
        return path

    async def read_note(self, title: str) -> str:
        """Return the full content of a note."""
        path = self.note_path(title)
        try:
            async with aiofiles.open(
                path, "r", encoding=NOTE_ENCODING, errors="replace", newline=""
            ) as f:
                return await f.read()
        except FileNotFoundError as e:
            raise NoteNotFoundError(title, context={"path": str(path)}) from e
        except OSError as e:
            logger.error("Failed to read note %s: %s", path, str(e))
            raise NoteStorageError(
                message=f"Could not read note {title}: {e.strerror or e}",
                context={"path": str(path), "os_error": str(e)},
            ) from e

    async def delete_note(self, title: str) -> None:
        """Remove a note file."""
        path = self.note_path(title)
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError as e:
            raise NoteNotFoundError(title, context={"path": str(path)}) from e
        except OSError as e:
            logger.error("Failed to delete note %s: %s", path, str(e))
            raise NoteStorageError(
                message=f"Could not delete note {title}: {e.strerror or e}",
                context={"path": str(path), "os_error": str(e)},
            ) from e

        logger.info("Note deleted: %s", path.name)
