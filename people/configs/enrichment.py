"""
Enrichment service configuration settings.

Base URLs of the three name-keyed lookup services used when a user
is created. The URLs have no defaults: startup fails when any is missing.

Dependencies: pydantic, pydantic_settings
System role: External enrichment API configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnrichmentSettings(BaseSettings):
    """Age, gender and nationality lookup endpoints."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ENRICHMENT_",
        case_sensitive=False,
        extra="ignore",
    )

    age_url: str = Field(..., description="Age lookup base URL (e.g. https://api.agify.io)")
    gender_url: str = Field(..., description="Gender lookup base URL (e.g. https://api.genderize.io)")
    nationality_url: str = Field(
        ...,
        description="Nationality lookup base URL (e.g. https://api.nationalize.io)",
    )
    timeout: float = Field(default=10.0, description="Per-request timeout in seconds")
