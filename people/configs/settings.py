"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from people.configs.base import BaseSettings
from people.configs.database import DatabaseSettings
from people.configs.enrichment import EnrichmentSettings
from people.configs.server import ServerSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings, loaded when Settings() is instantiated
    server: ServerSettings = Field(default_factory=ServerSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    enrichment: EnrichmentSettings = Field(default_factory=EnrichmentSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Raises:
        pydantic.ValidationError: If a required value (enrichment URLs) is missing

    Usage:
        from people.configs import get_settings
        settings = get_settings()
    """
    return Settings()
