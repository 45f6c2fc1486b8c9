"""
User response mapping utilities.

Transforms service-layer dictionaries into Pydantic response models.

Dependencies: people.models
System role: User response transformation
"""

from typing import Any

from people.models.email import EmailResponse, EmailsResponse
from people.models.friend import FriendResponse, FriendsResponse
from people.models.user import UserInfo, UserResponse, UsersResponse


def map_user_to_info(user_data: dict[str, Any]) -> UserInfo:
    """
    Transform user data dictionary into UserInfo.

    Args:
        user_data: Dictionary containing user fields
            Expected keys: id, first_name, last_name, gender, nationality, age, emails

    Returns:
        UserInfo: Pydantic model for API response
    """
    return UserInfo(**user_data)


def map_user_to_response(user_data: dict[str, Any]) -> UserResponse:
    return UserResponse(user=map_user_to_info(user_data))


def map_users_to_response(users_data: list[dict[str, Any]]) -> UsersResponse:
    return UsersResponse(users=[map_user_to_info(user) for user in users_data])


def map_emails_to_response(emails_data: list[dict[str, Any]]) -> EmailsResponse:
    """
    Transform list of email dictionaries into EmailsResponse.

    Args:
        emails_data: List of dictionaries with keys id, user_id, email

    Returns:
        EmailsResponse: Pydantic model for API response
    """
    return EmailsResponse(emails=[EmailResponse(**email) for email in emails_data])


def map_friends_to_response(friends_data: list[dict[str, Any]]) -> FriendsResponse:
    return FriendsResponse(friends=[FriendResponse(**friend) for friend in friends_data])
