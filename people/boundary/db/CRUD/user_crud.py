"""
User CRUD operations.

Provides user reads joined with their emails, creation, full-row
update and delete. Emails and friendships of a deleted user go away
through the foreign-key cascade.

Dependencies: sqlalchemy, people.boundary.db.models
System role: User persistence operations
"""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from people.boundary.db.CRUD.base_crud import BaseCRUD, storage_errors
from people.boundary.db.models.user_model import UserModel
from people.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class UserCRUD(BaseCRUD[UserModel]):
    """
    CRUD operations for UserModel.

    Extends BaseCRUD with eager loading of emails and NotFoundError
    signalling for empty reads and zero-row mutations.
    """

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    @storage_errors("get_all_users")
    async def get_all_users(self, session: AsyncSession) -> Sequence[UserModel]:
        """
        Retrieve every user with emails eagerly loaded.

        Args:
            session: Async database session

        Returns:
            Users ordered by id; ``emails`` is an empty list for users without any

        Raises:
            NotFoundError: If there are no users
        """
        stmt = (
            select(UserModel)
            .options(selectinload(UserModel.emails))
            .order_by(UserModel.id)
        )
        result = await session.execute(stmt)
        users = result.scalars().all()
        if not users:
            logger.warning("No rows in users")
            raise NotFoundError("No users found")
        return users

    @storage_errors("get_user_by_last_name")
    async def get_user_by_last_name(
        self,
        session: AsyncSession,
        last_name: str,
    ) -> UserModel:
        """
        Retrieve the first user (lowest id) with the given last name.

        Args:
            session: Async database session
            last_name: Exact last name to match

        Returns:
            UserModel with emails loaded

        Raises:
            NotFoundError: If no user has that last name
        """
        stmt = (
            select(UserModel)
            .where(UserModel.last_name == last_name)
            .options(selectinload(UserModel.emails))
            .order_by(UserModel.id)
            .limit(1)
        )
        result = await session.execute(stmt)
        user = result.scalars().first()
        if user is None:
            logger.warning("No such row in users", extra={"last_name": last_name})
            raise NotFoundError(f"User with last name {last_name!r} not found")
        return user

    @storage_errors("create_user")
    async def create_user(
        self,
        session: AsyncSession,
        first_name: str,
        last_name: str,
        gender: str,
        nationality: str,
        age: int,
    ) -> int:
        """
        Insert one user.

        Returns:
            int: Generated user id
        """
        user = await self.create(
            session,
            first_name=first_name,
            last_name=last_name,
            gender=gender,
            nationality=nationality,
            age=age,
        )
        return user.id

    @storage_errors("update_user")
    async def update_user(
        self,
        session: AsyncSession,
        user_id: int,
        first_name: str,
        last_name: str,
        gender: str,
        nationality: str,
        age: int,
    ) -> None:
        """
        Overwrite every column of a user.

        Raises:
            NotFoundError: If no row has that id
        """
        updated = await self.update_by_id(
            session,
            user_id,
            first_name=first_name,
            last_name=last_name,
            gender=gender,
            nationality=nationality,
            age=age,
        )
        if not updated:
            logger.warning("Update matched no user", extra={"user_id": user_id})
            raise NotFoundError(f"Not found user with id {user_id}")

    @storage_errors("delete_user")
    async def delete_user(self, session: AsyncSession, user_id: int) -> None:
        """
        Delete a user; owned emails and friendships cascade.

        Raises:
            NotFoundError: If no row has that id
        """
        deleted = await self.delete_by_id(session, user_id)
        if not deleted:
            logger.warning("Delete matched no user", extra={"user_id": user_id})
            raise NotFoundError(f"Not found user with id {user_id}")


user_crud = UserCRUD()
