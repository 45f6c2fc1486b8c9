"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite engine and session, enrichment client mock
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.pool import StaticPool

from people.boundary.db.connection import get_async_engine, get_async_session_factory
from people.boundary.db.create_tables import drop_all_tables, ensure_schema
from people.boundary.enrichment.enrichment_client import EnrichmentClient
from people.configs.database import DatabaseSettings


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with the full schema applied.

    StaticPool keeps the single connection alive so every session sees
    the same database.
    """
    engine = get_async_engine(
        DatabaseSettings(url="sqlite+aiosqlite:///:memory:"),
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await ensure_schema(engine)
    yield engine

    # Cleanup
    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
async def test_async_db(test_engine):
    """
    Create a session on the in-memory database.

    Yields:
        AsyncSession: Test database session
    """
    session_factory = get_async_session_factory(test_engine)
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_enrichment():
    """
    Create mock EnrichmentClient for testing.

    Returns:
        AsyncMock: Enrichment client answering 30 / "female" / "US"
    """
    client = AsyncMock(spec=EnrichmentClient)
    client.age = AsyncMock(return_value=30)
    client.gender = AsyncMock(return_value="female")
    client.nationality = AsyncMock(return_value="US")
    return client
