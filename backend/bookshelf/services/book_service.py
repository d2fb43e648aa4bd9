"""
Bookshelf — Book Service
==========================

What:  Create, list, update and delete book records.
Why:   Keeps route handlers thin and turns store failures into DatabaseError.
How:   One ORM call per operation against the request's AsyncSession.
       Writes are committed here, before the route returns, so a failed
       commit is reported as a 500 and never follows a 2xx.
Who:   Called by the /books route handlers.

No domain validation sits between the request body and the store. What
the client sends, minus unknown fields, is what gets written.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import asc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.exceptions import DatabaseError, NotFoundError
from bookshelf.models.book import Book
from bookshelf.schemas.book import BookPayload, BookResponse

logger = logging.getLogger(__name__)


def _parse_id(book_id: str) -> Optional[UUID]:
    """Malformed identifiers cannot match any record."""
    try:
        return UUID(str(book_id))
    except ValueError:
        return None


def _to_response(book: Book) -> BookResponse:
    return BookResponse(
        id=book.id,
        title=book.title,
        author=book.author,
        summary=book.summary,
        price=book.price,
    )


class BookService:
    """
    Stateless pass-through to the book store.

    Error Handling Strategy:
        - Missing record → NotFoundError (404)
        - Any SQLAlchemy error → DatabaseError (500), original logged
    """

    async def create_book(self, db: AsyncSession, payload: BookPayload) -> BookResponse:
        """
        Persist a new book built from the request body.

        Returns:
            BookResponse including the generated identifier.
        """
        try:
            book = Book(**payload.model_dump())
            db.add(book)
            await db.flush()
            await db.commit()
            logger.info("Book created: %s", book.id)
            return _to_response(book)

        except SQLAlchemyError as e:
            logger.error("Database error creating book: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the book. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

    async def list_books(self, db: AsyncSession) -> List[BookResponse]:
        """Return every book in insertion order. No paging, no filters."""
        try:
            result = await db.execute(select(Book).order_by(asc(Book.created_at)))
            return [_to_response(book) for book in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error("Database error listing books: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve books. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

    async def _get_book(self, db: AsyncSession, book_id: str) -> Book:
        uuid_ = _parse_id(book_id)
        if uuid_ is None:
            raise NotFoundError(resource="book", resource_id=book_id)

        result = await db.execute(select(Book).where(Book.id == uuid_))
        book = result.scalar_one_or_none()
        if book is None:
            raise NotFoundError(resource="book", resource_id=book_id)
        return book

    async def update_book(
        self,
        db: AsyncSession,
        book_id: str,
        payload: BookPayload,
    ) -> BookResponse:
        """
        Apply the fields present in the body to an existing book.

        Partial merge: fields absent from the body keep their stored value.

        Returns:
            The record after the update.

        Raises:
            NotFoundError: No book has this identifier
            DatabaseError: Query, flush or commit failed
        """
        try:
            book = await self._get_book(db, book_id)
            for field, value in payload.model_dump(exclude_unset=True).items():
                setattr(book, field, value)
            await db.flush()
            await db.commit()
            logger.info("Book updated: %s", book.id)
            return _to_response(book)

        except SQLAlchemyError as e:
            logger.error("Database error updating book %s: %s", book_id, str(e))
            raise DatabaseError(
                message="Could not update the book. Please try again.",
                context={"book_id": book_id, "error_type": type(e).__name__},
            ) from e

    async def delete_book(self, db: AsyncSession, book_id: str) -> None:
        """
        Remove a book by identifier.

        Raises:
            NotFoundError: No book has this identifier
            DatabaseError: Query, flush or commit failed
        """
        try:
            book = await self._get_book(db, book_id)
            await db.delete(book)
            await db.flush()
            await db.commit()
            logger.info("Book deleted: %s", book_id)

        except SQLAlchemyError as e:
            logger.error("Database error deleting book %s: %s", book_id, str(e))
            raise DatabaseError(
                message="Could not delete the book. Please try again.",
                context={"book_id": book_id, "error_type": type(e).__name__},
            ) from e


# ── Singleton Instance ────────────────────────────────────────────────────
book_service = BookService()
