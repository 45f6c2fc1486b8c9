"""
Test suite for UserCRUD against an in-memory SQLite database.

System role: Verification of user persistence layer
"""

import pytest
from sqlalchemy import select

from people.boundary.db.CRUD.email_crud import email_crud
from people.boundary.db.CRUD.friend_crud import friend_crud
from people.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from people.boundary.db.models import EmailModel, FriendModel, UserModel
from people.core.exceptions import NotFoundError


async def _create(session, first_name="Alice", last_name="Smith", **fields):
    values = {"gender": "female", "nationality": "US", "age": 30}
    values.update(fields)
    return await user_crud.create_user(
        session, first_name=first_name, last_name=last_name, **values
    )


class TestUserCRUDInit:
    """Test suite for UserCRUD initialization."""

    def test_init_should_set_model_to_user_model(self) -> None:
        crud = UserCRUD()

        assert crud.model == UserModel


class TestUserCRUDCreate:
    """Test suite for UserCRUD.create_user()."""

    async def test_create_user_should_return_generated_ids(self, test_async_db) -> None:
        first = await _create(test_async_db)
        second = await _create(test_async_db, first_name="Bob", last_name="Jones")

        assert first == 1
        assert second == 2

    async def test_created_user_should_have_no_emails(self, test_async_db) -> None:
        await _create(test_async_db)

        user = await user_crud.get_user_by_last_name(test_async_db, "Smith")

        assert user.first_name == "Alice"
        assert user.age == 30
        assert user.emails == []


class TestUserCRUDReads:
    """Test suite for UserCRUD read operations."""

    async def test_get_all_users_should_raise_not_found_when_empty(self, test_async_db) -> None:
        with pytest.raises(NotFoundError):
            await user_crud.get_all_users(test_async_db)

    async def test_get_all_users_should_return_users_ordered_with_emails(
        self, test_async_db
    ) -> None:
        alice = await _create(test_async_db)
        await _create(test_async_db, first_name="Bob", last_name="Jones")
        await email_crud.add_user_emails(test_async_db, alice, ["alice@example.com"])

        users = await user_crud.get_all_users(test_async_db)

        assert [u.first_name for u in users] == ["Alice", "Bob"]
        assert [e.email for e in users[0].emails] == ["alice@example.com"]
        assert users[1].emails == []

    async def test_get_user_by_last_name_should_return_lowest_id(self, test_async_db) -> None:
        await _create(test_async_db, first_name="Alice")
        await _create(test_async_db, first_name="Anna")

        user = await user_crud.get_user_by_last_name(test_async_db, "Smith")

        assert user.id == 1
        assert user.first_name == "Alice"

    async def test_get_user_by_last_name_should_raise_not_found(self, test_async_db) -> None:
        await _create(test_async_db)

        with pytest.raises(NotFoundError):
            await user_crud.get_user_by_last_name(test_async_db, "Nobody")


class TestUserCRUDUpdate:
    """Test suite for UserCRUD.update_user()."""

    async def test_update_user_should_overwrite_every_field(self, test_async_db) -> None:
        user_id = await _create(test_async_db)

        await user_crud.update_user(
            test_async_db,
            user_id,
            first_name="Alicia",
            last_name="Brown",
            gender="female",
            nationality="GB",
            age=41,
        )
        test_async_db.expire_all()
        user = await user_crud.get_user_by_last_name(test_async_db, "Brown")

        assert user.id == user_id
        assert user.first_name == "Alicia"
        assert user.nationality == "GB"
        assert user.age == 41

    async def test_update_user_should_raise_not_found_for_missing_id(
        self, test_async_db
    ) -> None:
        user_id = await _create(test_async_db)

        with pytest.raises(NotFoundError):
            await user_crud.update_user(
                test_async_db,
                999,
                first_name="X",
                last_name="Y",
                gender="male",
                nationality="DE",
                age=1,
            )

        test_async_db.expire_all()
        rows = (await test_async_db.execute(select(UserModel))).scalars().all()
        assert [(u.id, u.first_name, u.last_name, u.gender, u.nationality, u.age) for u in rows] == [
            (user_id, "Alice", "Smith", "female", "US", 30)
        ]


class TestUserCRUDDelete:
    """Test suite for UserCRUD.delete_user()."""

    async def test_delete_user_should_cascade_emails_and_friendships(
        self, test_async_db
    ) -> None:
        alice = await _create(test_async_db)
        bob = await _create(test_async_db, first_name="Bob", last_name="Jones")
        await email_crud.add_user_emails(test_async_db, alice, ["alice@example.com"])
        await friend_crud.add_user_friendships(test_async_db, alice, [bob])

        await user_crud.delete_user(test_async_db, alice)

        emails = (await test_async_db.execute(select(EmailModel))).scalars().all()
        friends = (await test_async_db.execute(select(FriendModel))).scalars().all()
        assert emails == []
        assert friends == []
        with pytest.raises(NotFoundError):
            await friend_crud.get_user_friends(test_async_db, bob)

    async def test_delete_user_should_raise_not_found_for_missing_id(
        self, test_async_db
    ) -> None:
        with pytest.raises(NotFoundError):
            await user_crud.delete_user(test_async_db, 42)
