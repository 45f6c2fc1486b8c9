"""
Database schema creation.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, people.configs
System role: Database schema initialization

Usage:
    python -m people.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from people.boundary.db.base import Base
from people.boundary.db.connection import ping

# Import all models to register them with Base.metadata
from people.boundary.db.models.user_model import UserModel  # noqa: F401
from people.boundary.db.models.email_model import EmailModel  # noqa: F401
from people.boundary.db.models.friend_model import FriendModel  # noqa: F401

logger = logging.getLogger(__name__)


async def ensure_schema(engine: AsyncEngine) -> None:
    """
    Create the users, emails and friends tables and the friends index.

    Idempotent: only missing tables and indexes are created, so it is
    safe to run on every startup. Existing tables remain unchanged.

    Args:
        engine: Async engine to run DDL on

    Raises:
        SQLAlchemyError: If the database is unreachable or DDL fails
    """
    await ping(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Async engine to run DDL on
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


async def _main() -> None:
    from people.boundary.db.connection import get_async_engine
    from people.configs import get_settings
    from people.observability.logger import configure_logging

    settings = get_settings()
    configure_logging(settings.log_level)
    engine = get_async_engine(settings.database)
    try:
        await ensure_schema(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(_main())
