"""
HTTP client for the enrichment lookup services.

Translates a first name into age, gender and nationality with three
independent GET requests. No retries and no caching: every call goes
to the remote service and any failure surfaces as EnrichmentError.

Dependencies: httpx, pydantic, people.core.exceptions
System role: External demographic lookups for user creation
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from people.boundary.enrichment.enrichment_schemas import AgeData, GenderData, NationalityData
from people.core.exceptions import EnrichmentError, NationalityNotFoundError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class EnrichmentClient:
    """Age, gender and nationality lookups keyed by first name."""

    def __init__(
        self,
        age_url: str,
        gender_url: str,
        nationality_url: str,
        http_client: httpx.AsyncClient,
    ) -> None:
        """
        Initialize enrichment client.

        Args:
            age_url: Base URL of the age lookup service
            gender_url: Base URL of the gender lookup service
            nationality_url: Base URL of the nationality lookup service
            http_client: Shared async HTTP client (owns timeouts and the connection pool)

        Raises:
            ValueError: If any base URL is empty
        """
        if not age_url or not gender_url or not nationality_url:
            raise ValueError("Age URL, gender URL and nationality URL are required")
        self.age_url = age_url
        self.gender_url = gender_url
        self.nationality_url = nationality_url
        self._http = http_client

    async def age(self, name: str) -> int:
        """
        Look up the estimated age for a first name.

        An unknown name (``"age": null``) yields 0.

        Raises:
            EnrichmentError: On transport failure or bad response
        """
        data = await self._fetch(self.age_url, name, AgeData, "age")
        if data.age is None:
            logger.warning("No age known for name", extra={"lookup_name": name})
            return 0
        return data.age

    async def gender(self, name: str) -> str:
        """
        Look up the gender label for a first name.

        An unknown name (``"gender": null``) yields an empty label.

        Raises:
            EnrichmentError: On transport failure or bad response
        """
        data = await self._fetch(self.gender_url, name, GenderData, "gender")
        if data.gender is None:
            logger.warning("No gender known for name", extra={"lookup_name": name})
            return ""
        return data.gender

    async def nationality(self, name: str) -> str:
        """
        Look up the most probable country code for a first name.

        Raises:
            NationalityNotFoundError: If the service returns no countries
            EnrichmentError: On transport failure or bad response
        """
        data = await self._fetch(self.nationality_url, name, NationalityData, "nationality")
        top = data.top_country()
        if top is None:
            logger.warning("Empty country list", extra={"lookup_name": name})
            raise NationalityNotFoundError(name)
        return top.country_id

    async def _fetch(
        self,
        url: str,
        name: str,
        schema: type[SchemaT],
        attribute: str,
    ) -> SchemaT:
        """GET ``url?name=<name>`` and parse the JSON body into ``schema``."""
        try:
            response = await self._http.get(url, params={"name": name})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(
                f"Error getting {attribute} by request",
                extra={"lookup_name": name, "url": url, "error": str(e)},
            )
            raise EnrichmentError(
                f"{attribute.capitalize()} lookup failed",
                attribute=attribute,
                name=name,
                details={"error_type": type(e).__name__},
            ) from e

        try:
            return schema.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(
                f"Error parsing {attribute} response body",
                extra={"lookup_name": name, "error": str(e)},
            )
            raise EnrichmentError(
                f"Unparseable {attribute} response",
                attribute=attribute,
                name=name,
            ) from e
