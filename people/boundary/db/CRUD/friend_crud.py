"""
Friendship CRUD operations.

Friendships are unordered, so every write goes through
``canonical_pair`` first: (a, b) and (b, a) both become (min, max).
That keeps inserts deduplicated by the primary key and lets deletes
match regardless of argument order.

Dependencies: sqlalchemy, people.boundary.db.models
System role: Friendship persistence operations
"""

import logging
from typing import Iterable, Sequence

from sqlalchemy import Row, and_, delete, or_, select, tuple_
from sqlalchemy.ext.asyncio import AsyncSession

from people.boundary.db.CRUD.base_crud import chunked, insert_ignore, storage_errors
from people.boundary.db.models.friend_model import FriendModel
from people.boundary.db.models.user_model import UserModel
from people.core.exceptions import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)


def canonical_pair(first: int, second: int) -> tuple[int, int]:
    """Return the pair ordered smaller id first."""
    return (first, second) if first < second else (second, first)


class FriendCRUD:
    """CRUD operations for FriendModel."""

    model = FriendModel

    @storage_errors("get_user_friends")
    async def get_user_friends(
        self,
        session: AsyncSession,
        user_id: int,
    ) -> Sequence[Row]:
        """
        Retrieve every user connected to ``user_id``.

        Matches the stored pair in either column.

        Args:
            session: Async database session
            user_id: User whose friends are listed

        Returns:
            Rows with ``friend_id``, ``first_name``, ``last_name`` ordered by id

        Raises:
            NotFoundError: If the user has no friends or does not exist
        """
        stmt = (
            select(
                UserModel.id.label("friend_id"),
                UserModel.first_name,
                UserModel.last_name,
            )
            .join(
                FriendModel,
                or_(
                    and_(
                        FriendModel.id_first_friend == user_id,
                        FriendModel.id_second_friend == UserModel.id,
                    ),
                    and_(
                        FriendModel.id_second_friend == user_id,
                        FriendModel.id_first_friend == UserModel.id,
                    ),
                ),
            )
            .order_by(UserModel.id)
        )
        result = await session.execute(stmt)
        friends = result.all()
        if not friends:
            logger.warning("No rows in friends", extra={"user_id": user_id})
            raise NotFoundError(f"No friends found for user {user_id}")
        return friends

    @storage_errors("add_user_friendships")
    async def add_user_friendships(
        self,
        session: AsyncSession,
        user_id: int,
        friend_ids: Sequence[int],
    ) -> None:
        """
        Befriend ``user_id`` with each of ``friend_ids``.

        Self-references are skipped with a warning; pairs that already
        exist are left untouched.

        Raises:
            InvalidInputError: If friend_ids is empty
            StorageError: If a referenced user does not exist or the database fails
        """
        if not friend_ids:
            logger.error("No friends found!", extra={"user_id": user_id})
            raise InvalidInputError("No friend ids provided", field="friends_ids")

        pairs = []
        for friend_id in friend_ids:
            if friend_id == user_id:
                logger.warning(
                    "Attempted to add self as friend",
                    extra={"user_id": user_id},
                )
                continue
            pairs.append(canonical_pair(user_id, friend_id))

        pairs = list(dict.fromkeys(pairs))
        if not pairs:
            return

        for batch in chunked(pairs):
            stmt = insert_ignore(session, FriendModel).values(
                [
                    {"id_first_friend": low, "id_second_friend": high}
                    for low, high in batch
                ]
            )
            await session.execute(stmt)

    @storage_errors("delete_friendships")
    async def delete_friendships(
        self,
        session: AsyncSession,
        pairs: Iterable[tuple[int, int]],
    ) -> None:
        """
        Delete friendships given as id pairs in any order.

        Pairs that do not exist are ignored.

        Raises:
            InvalidInputError: If pairs is empty
        """
        canonical = list(dict.fromkeys(canonical_pair(a, b) for a, b in pairs))
        if not canonical:
            logger.error("No friendships found!")
            raise InvalidInputError("No friendships provided", field="friends")

        pair_key = tuple_(FriendModel.id_first_friend, FriendModel.id_second_friend)
        for batch in chunked(canonical):
            stmt = (
                delete(FriendModel)
                .where(pair_key.in_(batch))
                .execution_options(synchronize_session=False)
            )
            await session.execute(stmt)


friend_crud = FriendCRUD()
