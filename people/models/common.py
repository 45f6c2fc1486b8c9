"""
Common response models.

Success and error bodies shared by every endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field

# Largest value of a BIGINT primary key
MAX_ID = 2**63 - 1


class MessageResponse(BaseModel):
    """Success body for mutating endpoints."""

    message: str = Field(description="Human-readable outcome", examples=["OK"])


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Short error category label")
    message: str = Field(description="Error detail")
