"""
Bookshelf — Database Session Management
=========================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine, provides a session dependency that
       auto-commits on success and auto-rolls-back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Concurrency:
    Each request gets its own session. Concurrent requests interleave at
    database awaits; ordering between two writers to the same record is
    left to the database.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from bookshelf.config import settings


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        "echo": settings.log_level == "DEBUG",
    }
    # SQLite pools do not accept sizing arguments
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after commit, outside
# the session context
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object used by create_tables() and Alembic.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back the transaction and re-raises
        5. Always: closes the session (returns connection to pool)
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables() -> None:
    """Create any missing tables registered on Base.metadata."""
    # Model modules register themselves on import
    from bookshelf.models import book  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Closes all connections in the pool (called on shutdown)."""
    await engine.dispose()
