"""
Dependency injection container.

The ServiceCache owns the process-wide resources (settings, the database
engine with its connection pool, the session factory and the shared
HTTP client). One instance is created per application in the lifespan
handler and stored on ``app.state``; factory functions below pull it
from the request so nothing lives in module globals.

Dependencies: people.configs, people.application, people.boundary
System role: DI container for service injection
"""

from typing import AsyncGenerator

import httpx
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from people.application.services import UserService
from people.boundary.db.connection import get_async_engine, get_async_session_factory
from people.boundary.enrichment.enrichment_client import EnrichmentClient
from people.configs import Settings


class ServiceCache:
    """Container for lazily created, shared service instances."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker | None = None
        self._http_client: httpx.AsyncClient | None = None
        self._enrichment_client: EnrichmentClient | None = None

    @property
    def engine(self) -> AsyncEngine:
        """Get cached database engine (connection pool)."""
        if self._engine is None:
            self._engine = get_async_engine(self.settings.database)
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker:
        """Get cached session factory bound to the engine."""
        if self._session_factory is None:
            self._session_factory = get_async_session_factory(self.engine)
        return self._session_factory

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get cached HTTP client for outbound lookups."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.settings.enrichment.timeout,
            )
        return self._http_client

    @property
    def enrichment_client(self) -> EnrichmentClient:
        """Get cached enrichment client."""
        if self._enrichment_client is None:
            config = self.settings.enrichment
            self._enrichment_client = EnrichmentClient(
                age_url=config.age_url,
                gender_url=config.gender_url,
                nationality_url=config.nationality_url,
                http_client=self.http_client,
            )
        return self._enrichment_client

    async def aclose(self) -> None:
        """Close the HTTP client and dispose of the connection pool."""
        if self._http_client is not None:
            await self._http_client.aclose()
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        self._http_client = None
        self._enrichment_client = None


def get_service_cache(request: Request) -> ServiceCache:
    """Get the service cache of the running application."""
    return request.app.state.services


async def get_async_db(
    cache: ServiceCache = Depends(get_service_cache),
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new database session for each request and ensures it's closed
    (its connection returned to the pool) after the route completes, even
    if exceptions occur.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)
    """
    async with cache.session_factory() as session:
        yield session


def get_enrichment_client(
    cache: ServiceCache = Depends(get_service_cache),
) -> EnrichmentClient:
    """Get shared enrichment client."""
    return cache.enrichment_client


def get_user_service(
    db: AsyncSession = Depends(get_async_db),
    enrichment: EnrichmentClient = Depends(get_enrichment_client),
) -> UserService:
    """
    Get user service instance.

    Args:
        db: Async database session (injected via Depends)
        enrichment: Enrichment client (injected via Depends)

    Returns:
        UserService: User service instance
    """
    return UserService(db=db, enrichment=enrichment)
