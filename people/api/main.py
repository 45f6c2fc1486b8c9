"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, people.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from people.api.deps.dependencies import ServiceCache
from people.api.routers.users.user_error_handling import register_error_handlers
from people.boundary.db.create_tables import ensure_schema
from people.configs import Settings, get_settings
from people.observability import configure_logging
from people.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import health_router, users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup loads settings (missing values are fatal), builds the service
    container and applies the schema. Shutdown releases the HTTP client
    and the connection pool.
    """
    settings: Settings = app.state.settings
    if settings is None:
        settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    cache = ServiceCache(settings)
    app.state.services = cache
    try:
        await ensure_schema(cache.engine)
        # Trigger property access to build the shared HTTP client
        _ = cache.enrichment_client
        logger.info("Service cache ready")

        yield
    finally:
        # Shutdown
        await cache.aclose()
        logger.info("Service cache closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Settings to use instead of the ones loaded from the environment

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="People API",
        description="Users with enriched demographics, emails and friendships",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.services = None

    register_error_handlers(app)

    # Add observability middleware (last added runs first)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the application with uvicorn."""
    server = get_settings().server
    uvicorn.run(
        "people.api.main:app",
        host=server.host,
        port=server.port,
    )


if __name__ == "__main__":
    run()
