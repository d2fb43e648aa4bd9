"""
Bookshelf — Book Route Handlers
=================================

What:  POST/GET /books and PUT/DELETE /books/{book_id}.
How:   Each handler forwards the body or identifier to BookService and sets
       the status code. No authentication, paging, filtering or required
       fields at any route.

Status codes:
    POST   → 201 with the created record
    GET    → 200 with a list of every record
    PUT    → 200 with the updated record, 404 (empty body) if missing
    DELETE → 204 empty, 404 (empty body) if missing
    Store failure on any route → 500 (see register_exception_handlers)
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.database import get_db_session
from bookshelf.schemas.book import BookPayload, BookResponse, ErrorResponse
from bookshelf.services.book_service import book_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["Books"])

_NOT_FOUND = {404: {"description": "No book with this identifier (empty body)"}}
_SERVER_ERROR = {500: {"description": "Store error", "model": ErrorResponse}}


@router.post(
    "",
    status_code=201,
    response_model=BookResponse,
    responses={**_SERVER_ERROR},
    summary="Create a book",
)
async def create_book(
    payload: Optional[BookPayload] = None,
    db: AsyncSession = Depends(get_db_session),
) -> BookResponse:
    """
    Store the body as a new book. Every field is optional; a missing body
    creates an empty record.
    """
    return await book_service.create_book(db=db, payload=payload or BookPayload())


@router.get(
    "",
    response_model=List[BookResponse],
    responses={**_SERVER_ERROR},
    summary="List all books",
)
async def list_books(
    db: AsyncSession = Depends(get_db_session),
) -> List[BookResponse]:
    """Return the whole collection. Query parameters are ignored."""
    return await book_service.list_books(db=db)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Update a book",
)
async def update_book(
    book_id: str,
    payload: Optional[BookPayload] = None,
    db: AsyncSession = Depends(get_db_session),
) -> BookResponse:
    """
    Merge the fields present in the body into the stored book.

    Args:
        book_id: Kept as a plain string; a malformed UUID is a 404, not a 422.
    """
    return await book_service.update_book(
        db=db, book_id=book_id, payload=payload or BookPayload()
    )


@router.delete(
    "/{book_id}",
    status_code=204,
    response_class=Response,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete a book",
)
async def delete_book(
    book_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await book_service.delete_book(db=db, book_id=book_id)
    return Response(status_code=204)
