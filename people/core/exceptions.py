"""
Exception hierarchy for the people service.

Every failure surfaced by the persistence, enrichment and orchestration
layers is a PeopleError whose ``kind`` is one member of the closed
ErrorKind enumeration. Callers branch on ``kind`` (or the subclass),
never on message text.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

import enum
from typing import Any


class ErrorKind(str, enum.Enum):
    """Discriminator for PeopleError."""

    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    ENRICHMENT = "enrichment"
    STORAGE = "storage"


class PeopleError(Exception):
    """Base exception for all people service errors."""

    kind: ErrorKind = ErrorKind.STORAGE

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NotFoundError(PeopleError):
    """Raised when a query yields no rows or a mutation affects none."""

    kind = ErrorKind.NOT_FOUND


class InvalidInputError(PeopleError):
    """Raised when a batch argument is empty or an input is malformed."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid input error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class EnrichmentError(PeopleError):
    """Raised when an external age/gender/nationality lookup fails."""

    kind = ErrorKind.ENRICHMENT

    def __init__(
        self,
        message: str,
        attribute: str,
        name: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize enrichment error.

        Args:
            message: Error message
            attribute: Looked-up attribute ("age", "gender" or "nationality")
            name: First name the lookup was keyed by
            details: Additional context
        """
        details = details or {}
        details.update({"attribute": attribute, "name": name})
        self.attribute = attribute
        self.name = name
        super().__init__(message, details)


class NationalityNotFoundError(EnrichmentError):
    """Raised when the nationality lookup returns an empty country list."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"No nationality found for name {name!r}",
            attribute="nationality",
            name=name,
        )


class StorageError(PeopleError):
    """Raised for any other persistence failure (connectivity, constraints)."""

    kind = ErrorKind.STORAGE

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Persistence operation that failed
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
