"""
Bookshelf — Book SQLAlchemy Model
===================================

What:  ORM model representing the `books` table.
Who:   Used by BookService for CRUD operations and by Alembic for schema management.

Table Design:
    - Every content column is nullable: no field is required and no value
      is range-checked (price may be negative).
    - UUID primary key generated in Python, so the identifier is known
      right after flush without a round-trip.
    - created_at gives the full-collection listing a stable insertion order.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Float, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.database import Base


class Book(Base):
    """
    A book record.

    Lifecycle:
        1. Created by POST /books from whatever fields the body carries
        2. Fields overwritten by PUT /books/{id} (partial merge)
        3. Removed by DELETE /books/{id}
    """

    __tablename__ = "books"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    author: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    summary: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_books_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title={self.title!r})>"
