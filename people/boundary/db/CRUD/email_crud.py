"""
Email CRUD operations.

Dependencies: sqlalchemy, people.boundary.db.models
System role: Email persistence operations
"""

import logging
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from people.boundary.db.CRUD.base_crud import BaseCRUD, chunked, insert_ignore, storage_errors
from people.boundary.db.models.email_model import EmailModel
from people.core.exceptions import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)


class EmailCRUD(BaseCRUD[EmailModel]):
    """
    CRUD operations for EmailModel.

    Batch inserts and deletes are sent in chunks of BATCH_SIZE rows. Inserting
    an address that already exists (for any user) is silently skipped.
    """

    def __init__(self) -> None:
        """Initialize EmailCRUD with EmailModel."""
        super().__init__(EmailModel)

    @storage_errors("get_user_emails")
    async def get_user_emails(
        self,
        session: AsyncSession,
        user_id: int,
    ) -> Sequence[EmailModel]:
        """
        Retrieve all emails owned by a user.

        Args:
            session: Async database session
            user_id: Owning user id

        Returns:
            Emails ordered by id

        Raises:
            NotFoundError: If the user has no emails or does not exist
        """
        stmt = (
            select(EmailModel)
            .where(EmailModel.user_id == user_id)
            .order_by(EmailModel.id)
        )
        result = await session.execute(stmt)
        emails = result.scalars().all()
        if not emails:
            logger.warning("No rows in emails", extra={"user_id": user_id})
            raise NotFoundError(f"No emails found for user {user_id}")
        return emails

    @storage_errors("add_user_emails")
    async def add_user_emails(
        self,
        session: AsyncSession,
        user_id: int,
        emails: Sequence[str],
    ) -> None:
        """
        Attach one or more addresses to a user.

        Addresses are whitespace-trimmed; blank entries are dropped.

        Args:
            session: Async database session
            user_id: Owning user id
            emails: Addresses to insert

        Raises:
            InvalidInputError: If no non-blank address was given
            StorageError: If the user does not exist or the database fails
        """
        cleaned = list(dict.fromkeys(e.strip() for e in emails if e and e.strip()))
        if not cleaned:
            logger.error("No emails found!", extra={"user_id": user_id})
            raise InvalidInputError("No emails provided", field="emails")

        for batch in chunked(cleaned):
            stmt = insert_ignore(session, EmailModel).values(
                [{"user_id": user_id, "email": email} for email in batch]
            )
            await session.execute(stmt)

    @storage_errors("delete_emails")
    async def delete_emails(self, session: AsyncSession, email_ids: Sequence[int]) -> None:
        """
        Delete emails by id; ids that do not exist are ignored.

        Raises:
            InvalidInputError: If email_ids is empty
        """
        if not email_ids:
            logger.error("No email ids found!")
            raise InvalidInputError("No email ids provided", field="ids")

        for batch in chunked(list(dict.fromkeys(email_ids))):
            stmt = (
                delete(EmailModel)
                .where(EmailModel.id.in_(batch))
                .execution_options(synchronize_session=False)
            )
            await session.execute(stmt)


email_crud = EmailCRUD()
