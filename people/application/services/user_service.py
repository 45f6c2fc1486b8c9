"""
User service orchestrator.

Composes the enrichment client and the CRUD layer. User creation runs
the three lookups, then a single insert; every other operation is a
pass-through to persistence. Each call is its own transaction:
mutations are committed on success and rolled back on failure.

Errors: PeopleError subclasses (NotFoundError, InvalidInputError,
EnrichmentError, StorageError) propagate unchanged; anything else is
wrapped in StorageError. Every failure is logged before it propagates.

Dependencies: people.boundary.db.CRUD, people.boundary.enrichment
System role: User use case orchestration
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from people.boundary.db.CRUD.email_crud import email_crud
from people.boundary.db.CRUD.friend_crud import friend_crud
from people.boundary.db.CRUD.user_crud import user_crud
from people.boundary.db.models.user_model import UserModel
from people.boundary.enrichment.enrichment_client import EnrichmentClient
from people.core.exceptions import PeopleError, StorageError
from people.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


def _user_to_dict(user: UserModel) -> dict:
    return {
        "id": user.id,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "gender": user.gender,
        "nationality": user.nationality,
        "age": user.age,
        "emails": [e.email for e in user.emails],
    }


class UserService:
    """User service orchestrator."""

    def __init__(self, db: AsyncSession, enrichment: EnrichmentClient) -> None:
        """
        Initialize user service.

        Args:
            db: Async SQLAlchemy session (one per request)
            enrichment: Client for the age/gender/nationality lookups
        """
        self.db = db
        self.enrichment = enrichment

    @asynccontextmanager
    async def _operation(
        self,
        action: str,
        mutates: bool = False,
        **context,
    ) -> AsyncIterator[None]:
        """Log, translate and (for mutations) commit or roll back one call."""
        try:
            yield
            if mutates:
                await self.db.commit()
        except PeopleError as e:
            if mutates:
                await self.db.rollback()
            log_exception_with_context(logger, f"Can't {action}", e, **context)
            raise
        except Exception as e:
            if mutates:
                await self.db.rollback()
            log_exception_with_context(logger, f"Can't {action}", e, **context)
            raise StorageError(f"Failed to {action}", operation=action) from e

    async def get_user_by_last_name(self, last_name: str) -> dict:
        """
        Get the first user with the given last name.

        Returns:
            dict: User fields plus ``emails`` (list of addresses)

        Raises:
            NotFoundError: If no user has that last name
        """
        async with self._operation("get user info", last_name=last_name):
            user = await user_crud.get_user_by_last_name(self.db, last_name)
        return _user_to_dict(user)

    async def get_all_users(self) -> list[dict]:
        """
        Get every user with its emails.

        Raises:
            NotFoundError: If there are no users
        """
        async with self._operation("get all users info"):
            users = await user_crud.get_all_users(self.db)
        return [_user_to_dict(u) for u in users]

    async def get_user_emails(self, user_id: int) -> list[dict]:
        """
        Get a user's emails.

        Raises:
            NotFoundError: If the user has none or does not exist
        """
        async with self._operation("get user's emails", user_id=user_id):
            emails = await email_crud.get_user_emails(self.db, user_id)
        return [
            {"id": e.id, "user_id": e.user_id, "email": e.email}
            for e in emails
        ]

    async def get_user_friends(self, user_id: int) -> list[dict]:
        """
        Get a user's friends.

        Raises:
            NotFoundError: If the user has none or does not exist
        """
        async with self._operation("get user's friends", user_id=user_id):
            friends = await friend_crud.get_user_friends(self.db, user_id)
        return [
            {
                "friend_id": f.friend_id,
                "first_name": f.first_name,
                "last_name": f.last_name,
            }
            for f in friends
        ]

    async def create_user(self, first_name: str, last_name: str = "") -> int:
        """
        Enrich a name and store the resulting user.

        The lookups run before anything is written, so a failed lookup
        leaves the database untouched.

        Args:
            first_name: First name, also the enrichment key
            last_name: Last name

        Returns:
            int: Generated user id

        Raises:
            EnrichmentError: If any lookup fails
            StorageError: If the insert fails
        """
        async with self._operation("add user", mutates=True, first_name=first_name):
            age, gender, nationality = await self._enrich(first_name)
            user_id = await user_crud.create_user(
                self.db,
                first_name=first_name,
                last_name=last_name,
                gender=gender,
                nationality=nationality,
                age=age,
            )

        logger.info(
            "User created",
            extra={"user_id": user_id, "nationality": nationality, "age": age},
        )
        return user_id

    async def _enrich(self, first_name: str) -> tuple[int, str, str]:
        """
        Run the age, gender and nationality lookups concurrently.

        The first failure cancels the lookups still in flight and is
        re-raised.

        Returns:
            tuple[int, str, str]: (age, gender, nationality)
        """
        age_task = asyncio.create_task(self.enrichment.age(first_name))
        gender_task = asyncio.create_task(self.enrichment.gender(first_name))
        nationality_task = asyncio.create_task(self.enrichment.nationality(first_name))
        tasks = (age_task, gender_task, nationality_task)

        try:
            await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        return age_task.result(), gender_task.result(), nationality_task.result()

    async def add_user_emails(self, user_id: int, emails: list[str]) -> None:
        """
        Attach addresses to a user; addresses already stored are skipped.

        Raises:
            InvalidInputError: If emails is empty
        """
        async with self._operation("add user's emails", mutates=True, user_id=user_id, emails=emails):
            await email_crud.add_user_emails(self.db, user_id, emails)

    async def add_user_friends(self, user_id: int, friend_ids: list[int]) -> None:
        """
        Befriend a user with others; self-references are skipped.

        Raises:
            InvalidInputError: If friend_ids is empty
        """
        async with self._operation("add user friends", mutates=True, user_id=user_id, friend_ids=friend_ids):
            await friend_crud.add_user_friendships(self.db, user_id, friend_ids)

    async def update_user(
        self,
        user_id: int,
        first_name: str,
        last_name: str,
        gender: str,
        nationality: str,
        age: int,
    ) -> None:
        """
        Overwrite every field of a user.

        Raises:
            NotFoundError: If the user does not exist
        """
        async with self._operation("update user", mutates=True, user_id=user_id):
            await user_crud.update_user(
                self.db,
                user_id,
                first_name=first_name,
                last_name=last_name,
                gender=gender,
                nationality=nationality,
                age=age,
            )

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user together with its emails and friendships.

        Raises:
            NotFoundError: If the user does not exist
        """
        async with self._operation("delete user", mutates=True, user_id=user_id):
            await user_crud.delete_user(self.db, user_id)

    async def delete_emails(self, email_ids: list[int]) -> None:
        """
        Delete emails by id.

        Raises:
            InvalidInputError: If email_ids is empty
        """
        async with self._operation("delete emails", mutates=True, email_ids=email_ids):
            await email_crud.delete_emails(self.db, email_ids)

    async def delete_user_friends(self, pairs: Iterable[tuple[int, int]]) -> None:
        """
        Delete friendships given as id pairs in either order.

        Raises:
            InvalidInputError: If pairs is empty
        """
        pairs = list(pairs)
        async with self._operation("delete user friends", mutates=True, pairs=pairs):
            await friend_crud.delete_friendships(self.db, pairs)
