"""
Bookshelf — Test Configuration (conftest.py)
==============================================

Shared pytest fixtures for the entire test suite.

Function-scoped fixtures:
    ├── mock_db_session: Mock AsyncSession (service unit tests, no DB)
    ├── sample_book_data: Field values for a stored book
    ├── notes_dir: Empty temporary notes directory
    ├── cli_runner: Typer CliRunner for the note CLI
    └── test_client: HTTPX AsyncClient against the real app + SQLite store
"""

import logging
import os
import tempfile
from uuid import uuid4

# Override settings BEFORE any bookshelf import: the settings singleton and
# the engine are created at import time
_TEST_DIR = tempfile.mkdtemp(prefix="bookshelf_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["NOTES_DIR"] = _TEST_DIR
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from typer.testing import CliRunner  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = book
        result = await book_service.update_book(mock_db_session, book_id, payload)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_book_data():
    return {
        "id": uuid4(),
        "title": "Dune",
        "author": "Frank Herbert",
        "summary": "Spice, sand and politics.",
        "price": 9.99,
    }


@pytest.fixture
def notes_dir(tmp_path):
    path = tmp_path / "notes"
    path.mkdir()
    return path


@pytest.fixture
def cli_runner():
    """
    Typer CliRunner for the note CLI.

    The CLI attaches a root handler bound to the runner's captured stderr,
    which is closed once invoke() returns; that handler is dropped afterwards.
    """
    root = logging.getLogger()
    before, level = set(root.handlers), root.level
    yield CliRunner()
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    ASGITransport does not run the lifespan, so tables are created here and
    dropped afterwards. The engine is disposed so no pooled connection
    outlives this test's event loop.
    """
    from bookshelf.database import Base, create_tables, engine
    from bookshelf.main import app

    await create_tables()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
