"""
Database connection management.

Provides the async SQLAlchemy engine (the connection pool) and the
session factory bound to it. The engine is created once per process by
the API's service container and passed explicitly to whoever needs it.

Dependencies: sqlalchemy, people.configs
System role: Database connection lifecycle management
"""

import logging
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from people.configs.database import DatabaseSettings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """Turn on FK enforcement (and with it ON DELETE CASCADE) for SQLite."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_async_engine(db_config: DatabaseSettings, **engine_kwargs: Any) -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling and health checks.

    pool_pre_ping=True verifies connections before use to detect
    stale/broken connections early. Pool sizing is skipped for SQLite,
    whose pools do not accept it.

    Args:
        db_config: Database settings
        **engine_kwargs: Extra keyword arguments for create_async_engine

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_async_engine(settings.database)
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    url = db_config.database_url
    is_sqlite = url.startswith("sqlite")

    options: dict[str, Any] = {"echo": db_config.echo_sql, "pool_pre_ping": True}
    if not is_sqlite:
        options.update(
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            pool_timeout=db_config.pool_timeout,
        )
    options.update(engine_kwargs)

    engine = create_async_engine(url, **options)
    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Create async session factory for database operations.

    Returns fresh async_sessionmaker bound to engine with autoflush=False
    for explicit transaction control and predictable behavior.

    Args:
        engine: Async engine owning the connection pool

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control

    Usage:
        SessionFactory = get_async_session_factory(engine)
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


async def ping(engine: AsyncEngine) -> None:
    """
    Run a trivial query to verify the database is reachable.

    Raises:
        SQLAlchemyError: If no connection can be established
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
