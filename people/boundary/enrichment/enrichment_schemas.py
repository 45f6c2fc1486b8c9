"""
Enrichment response schemas.

Pydantic models for the JSON bodies returned by the age, gender and
nationality lookup services (agify / genderize / nationalize shapes).

Dependencies: pydantic
System role: Type definitions for enrichment responses
"""

from pydantic import BaseModel, Field


class AgeData(BaseModel):
    """Age lookup response. ``age`` is null when the name is unknown."""

    count: int = Field(default=0, description="Number of samples behind the estimate")
    name: str = Field(default="", description="Name that was looked up")
    age: int | None = Field(default=None, ge=0, le=255, description="Estimated age")


class GenderData(BaseModel):
    """Gender lookup response. ``gender`` is null when the name is unknown."""

    count: int = Field(default=0, description="Number of samples behind the estimate")
    name: str = Field(default="", description="Name that was looked up")
    gender: str | None = Field(default=None, description="Gender label")
    probability: float = Field(default=0.0, description="Confidence of the label")


class CountryData(BaseModel):
    """One candidate nationality."""

    country_id: str = Field(description="ISO 3166-1 alpha-2 country code")
    probability: float = Field(default=0.0, description="Probability of this country")


class NationalityData(BaseModel):
    """Nationality lookup response with a ranked country list."""

    count: int = Field(default=0, description="Number of samples behind the estimate")
    name: str = Field(default="", description="Name that was looked up")
    country: list[CountryData] = Field(default_factory=list, description="Candidate countries")

    def top_country(self) -> CountryData | None:
        """Return the highest-probability country, or None if the list is empty."""
        if not self.country:
            return None
        return max(self.country, key=lambda c: c.probability)
