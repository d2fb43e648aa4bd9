"""
Alembic Migration Environment
===============================

What:  Runs Bookshelf schema migrations with the async engine.
How:   The URL comes from bookshelf.config (DATABASE_URL), never from
       alembic.ini. Online migrations open an AsyncEngine and hand a sync
       connection to Alembic through run_sync().
Who:   `alembic upgrade head` in deployments that set DB_CREATE_TABLES=false.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from bookshelf.config import settings
from bookshelf.database import Base
from bookshelf.models.book import Book  # noqa: F401  (registers the books table)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

config.set_main_option("sqlalchemy.url", settings.database_url)


def run_migrations_offline() -> None:
    """Emit SQL to stdout without a database connection (alembic upgrade --sql)."""
    context.configure(
        url=settings.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_async() -> None:
    # NullPool: a migration run opens exactly one connection
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    async with engine.connect() as connection:
        await connection.run_sync(_migrate)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(_migrate_async())
