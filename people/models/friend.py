"""
Friendship schemas.

Dependencies: pydantic
System role: Friendship API contracts
"""

from pydantic import BaseModel, Field

from people.models.user import UserID


class AddFriendsRequest(BaseModel):
    """Request schema for befriending a user with others."""

    friends_ids: list[UserID] = Field(..., description="Ids of the new friends")


class FriendshipPair(BaseModel):
    """Two user ids in any order."""

    id_first_friend: UserID
    id_second_friend: UserID


class DeleteFriendsRequest(BaseModel):
    """Request schema for deleting friendships."""

    friends: list[FriendshipPair] = Field(..., description="Friendships to delete")


class FriendResponse(BaseModel):
    """A user seen as someone's friend."""

    friend_id: int
    first_name: str
    last_name: str


class FriendsResponse(BaseModel):
    """Response schema for a user's friends."""

    friends: list[FriendResponse]
