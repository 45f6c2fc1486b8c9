"""
Email schemas.

Dependencies: pydantic
System role: Email API contracts
"""

from typing import Annotated

from pydantic import BaseModel, Field

from people.models.common import MAX_ID

EmailID = Annotated[int, Field(ge=0, le=MAX_ID, description="Email identifier")]


class AddEmailsRequest(BaseModel):
    """Request schema for attaching addresses to a user."""

    emails: list[str] = Field(..., description="Addresses to add")


class DeleteEmailsRequest(BaseModel):
    """Request schema for deleting emails by id."""

    ids: list[EmailID] = Field(..., description="Email ids to delete")


class EmailResponse(BaseModel):
    """One stored address."""

    id: int
    user_id: int
    email: str


class EmailsResponse(BaseModel):
    """Response schema for a user's addresses."""

    emails: list[EmailResponse]
