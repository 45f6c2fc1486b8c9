"""
Enrichment boundary: name-keyed demographic lookups.

Exports:
  - EnrichmentClient: Age, gender and nationality lookups over HTTP
  - AgeData, GenderData, NationalityData, CountryData: Response schemas
"""

from people.boundary.enrichment.enrichment_client import EnrichmentClient
from people.boundary.enrichment.enrichment_schemas import (
    AgeData,
    CountryData,
    GenderData,
    NationalityData,
)

__all__ = [
    "EnrichmentClient",
    "AgeData",
    "CountryData",
    "GenderData",
    "NationalityData",
]
