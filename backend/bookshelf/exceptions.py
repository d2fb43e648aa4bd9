"""
Bookshelf — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for both programs.
Why:   Store and file errors become explicit types the caller must handle,
       instead of crashing the process. The service maps them to HTTP
       status codes; the note CLI maps them to messages and exit codes.
How:   Each exception class carries a message and optional context dict.

Exception Hierarchy:
    BookshelfError (base)          → 500
    ├── ValidationError            → 400 / CLI: message, exit 0
    ├── NotFoundError              → 404 (empty body)
    │   └── NoteNotFoundError      → CLI: message, exit 1
    ├── NoteStorageError           → CLI: message, exit 1
    └── DatabaseError              → 500 (generic message, details logged)
"""

from typing import Any, Dict, Optional


class BookshelfError(Exception):
    """
    Base exception for all Bookshelf errors.

    Attributes:
        message:  User-facing error description (safe to print or return)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BookshelfError):
    """
    Raised when user input is rejected before any I/O happens.

    When:    Empty note title/content, note title escaping the notes directory.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(BookshelfError):
    """
    Raised when a requested resource does not exist.

    When:    PUT/DELETE /books/{id} with no matching record.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class NoteNotFoundError(NotFoundError):
    """Raised when <title>.txt does not exist on read or delete."""

    def __init__(self, title: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(resource="Note", resource_id=title, context=context)
        self.title = title


class NoteStorageError(BookshelfError):
    """
    Raised when a note file operation fails for a reason other than absence.

    When:    Permission denied, disk full, title names a directory, etc.
    """

    def __init__(
        self,
        message: str = "Note storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(BookshelfError):
    """
    Raised when the book store fails.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The driver error
    is kept in context and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
