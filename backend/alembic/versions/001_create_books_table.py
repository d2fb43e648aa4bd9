"""Create books table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `books` table.
How:   Mirrors bookshelf/models/book.py: UUID key, four nullable content
       columns, created_at for listing order.

Rollback: downgrade() drops the table (all book data lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "books",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        # No content column is required and none is range-checked
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("author", sa.Text(), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_books_created_at", "books", ["created_at"])


def downgrade() -> None:
    op.drop_index("idx_books_created_at", table_name="books")
    op.drop_table("books")
