"""
User domain models and schemas.

Request/response schemas for user operations. Fields are flat: a user
body carries its names next to the enriched attributes.

Dependencies: pydantic
System role: User API contracts
"""

from typing import Annotated

from pydantic import BaseModel, Field

from people.models.common import MAX_ID

UserID = Annotated[int, Field(ge=0, le=MAX_ID, description="User identifier")]


class CreateUserRequest(BaseModel):
    """Request schema for creating a user; the rest is looked up by first name."""

    first_name: str = Field(..., min_length=1, description="First name (enrichment key)")
    last_name: str = Field(default="", description="Last name")


class UpdateUserRequest(BaseModel):
    """Request schema for overwriting every user field."""

    first_name: str = Field(..., min_length=1, description="First name")
    last_name: str = Field(default="", description="Last name")
    gender: str = Field(default="", description="Gender label")
    nationality: str = Field(default="", description="Country code")
    age: int = Field(default=0, ge=0, le=255, description="Age in years")


class UserInfo(BaseModel):
    """A user together with the addresses it owns."""

    id: int
    first_name: str
    last_name: str
    gender: str
    nationality: str
    age: int
    emails: list[str] = Field(default_factory=list)


class UserResponse(BaseModel):
    """Response schema for a single user lookup."""

    user: UserInfo


class UsersResponse(BaseModel):
    """Response schema for listing all users."""

    users: list[UserInfo]


class CreateUserResponse(BaseModel):
    """Response schema for user creation."""

    user_id: int
