"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_async_db,
    get_enrichment_client,
    get_service_cache,
    get_user_service,
)

__all__ = [
    "ServiceCache",
    "get_async_db",
    "get_enrichment_client",
    "get_service_cache",
    "get_user_service",
]
