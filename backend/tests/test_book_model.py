"""Tests for the books table definition."""

from sqlalchemy import Text

from bookshelf.models.book import Book


def test_text_columns_have_no_length_limit():
    columns = Book.__table__.c
    for name in ("title", "author", "summary"):
        assert isinstance(columns[name].type, Text)
        assert columns[name].type.length is None


def test_all_book_fields_are_nullable():
    columns = Book.__table__.c
    assert all(columns[name].nullable for name in ("title", "author", "summary", "price"))
