"""
User API endpoints.

Routes:
- GET /users/{last_name} - Get user by last name
- GET /users - List all users
- GET /users/{id}/emails - List user's emails
- GET /users/{id}/friends - List user's friends
- POST /users - Create user (enriched by first name)
- POST /users/{id}/emails - Add emails
- POST /users/{id}/friends - Add friends
- PUT /users/{id} - Overwrite user
- DELETE /users/emails - Delete emails by id
- DELETE /users/{id} - Delete user
- DELETE /users/{id}/friends - Delete friendships

Dependencies: people.application.services, people.models
System role: User management HTTP API
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from people.api.deps.dependencies import get_user_service
from people.application.services.user_service import UserService
from people.models.common import MAX_ID, ErrorResponse, MessageResponse
from people.models.email import AddEmailsRequest, DeleteEmailsRequest, EmailsResponse
from people.models.friend import AddFriendsRequest, DeleteFriendsRequest, FriendsResponse
from people.models.user import (
    CreateUserRequest,
    CreateUserResponse,
    UpdateUserRequest,
    UserResponse,
    UsersResponse,
)

from .user_responses import (
    map_emails_to_response,
    map_friends_to_response,
    map_user_to_response,
    map_users_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

UserIDPath = Annotated[int, Path(ge=0, le=MAX_ID, description="User ID")]

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("", response_model=UsersResponse, responses=_ERRORS)
async def get_all_users(
    user_service: UserService = Depends(get_user_service),
) -> UsersResponse:
    """
    List every user with its emails, ordered by id.

    Raises:
        404: No users stored
    """
    users = await user_service.get_all_users()
    return map_users_to_response(users)


@router.get("/{last_name}", response_model=UserResponse, responses=_ERRORS)
async def get_user(
    last_name: str,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Get a user with its emails.

    The path segment is matched against last names; when several users
    share one, the earliest created wins.

    Raises:
        404: No user with that last name
    """
    user = await user_service.get_user_by_last_name(last_name)
    return map_user_to_response(user)


@router.get("/{user_id}/emails", response_model=EmailsResponse, responses=_ERRORS)
async def get_user_emails(
    user_id: UserIDPath,
    user_service: UserService = Depends(get_user_service),
) -> EmailsResponse:
    """List a user's emails."""
    emails = await user_service.get_user_emails(user_id)
    return map_emails_to_response(emails)


@router.get("/{user_id}/friends", response_model=FriendsResponse, responses=_ERRORS)
async def get_user_friends(
    user_id: UserIDPath,
    user_service: UserService = Depends(get_user_service),
) -> FriendsResponse:
    """List a user's friends regardless of which side of the pair it is on."""
    friends = await user_service.get_user_friends(user_id)
    return map_friends_to_response(friends)


@router.post("", response_model=CreateUserResponse, responses=_ERRORS)
async def create_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> CreateUserResponse:
    """
    Create a user; age, gender and nationality are looked up by first name.

    Args:
        request: CreateUserRequest with first_name, last_name
        user_service: Injected UserService

    Returns:
        CreateUserResponse: Id of the new user

    Raises:
        400: Invalid request
        404: No nationality known for the first name
        500: Lookup or storage failure
    """
    logger.info(
        "Creating new user",
        extra={"first_name": request.first_name, "has_last_name": bool(request.last_name)},
    )
    user_id = await user_service.create_user(request.first_name, request.last_name)
    return CreateUserResponse(user_id=user_id)


@router.post("/{user_id}/emails", response_model=MessageResponse, responses=_ERRORS)
async def add_user_emails(
    user_id: UserIDPath,
    request: AddEmailsRequest,
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Attach emails to a user; addresses already stored are skipped."""
    await user_service.add_user_emails(user_id, request.emails)
    return MessageResponse(message="Emails added successfully")


@router.post("/{user_id}/friends", response_model=MessageResponse, responses=_ERRORS)
async def add_user_friends(
    user_id: UserIDPath,
    request: AddFriendsRequest,
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Befriend a user with others; existing friendships are skipped."""
    await user_service.add_user_friends(user_id, request.friends_ids)
    return MessageResponse(message="Friends added successfully")


@router.put("/{user_id}", response_model=MessageResponse, responses=_ERRORS)
async def update_user(
    user_id: UserIDPath,
    request: UpdateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """
    Overwrite every field of a user.

    Raises:
        400: Invalid request
        404: User not found
    """
    await user_service.update_user(
        user_id,
        first_name=request.first_name,
        last_name=request.last_name,
        gender=request.gender,
        nationality=request.nationality,
        age=request.age,
    )
    return MessageResponse(message="User updated successfully")


# Registered before DELETE /{user_id} so "emails" is not parsed as an id
@router.delete("/emails", response_model=MessageResponse, responses=_ERRORS)
async def delete_emails(
    request: DeleteEmailsRequest,
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete emails by id."""
    await user_service.delete_emails(request.ids)
    return MessageResponse(message="Emails deleted successfully")


@router.delete("/{user_id}", response_model=MessageResponse, responses=_ERRORS)
async def delete_user(
    user_id: UserIDPath,
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete a user; its emails and friendships go with it."""
    await user_service.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")


@router.delete("/{user_id}/friends", response_model=MessageResponse, responses=_ERRORS)
async def delete_user_friends(
    user_id: UserIDPath,
    request: DeleteFriendsRequest,
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """
    Delete friendships listed in the body.

    Pairs may name the two users in either order. The path id is
    validated but the body alone selects what is removed.
    """
    logger.info(
        "Deleting friendships",
        extra={"user_id": user_id, "pair_count": len(request.friends)},
    )
    await user_service.delete_user_friends(
        (pair.id_first_friend, pair.id_second_friend) for pair in request.friends
    )
    return MessageResponse(message="Friendships deleted successfully")
