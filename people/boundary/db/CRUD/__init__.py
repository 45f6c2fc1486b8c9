"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from people.boundary.db.CRUD import user_crud, email_crud, friend_crud

    # Use singleton instances
    users = await user_crud.get_all_users(db)

    # Or instantiate classes directly for custom behavior
    from people.boundary.db.CRUD import UserCRUD
    custom_crud = UserCRUD()
"""

from people.boundary.db.CRUD.base_crud import BaseCRUD, insert_ignore, storage_errors
from people.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from people.boundary.db.CRUD.email_crud import EmailCRUD, email_crud
from people.boundary.db.CRUD.friend_crud import FriendCRUD, canonical_pair, friend_crud

__all__ = [
    "BaseCRUD",
    "insert_ignore",
    "storage_errors",
    "UserCRUD",
    "user_crud",
    "EmailCRUD",
    "email_crud",
    "FriendCRUD",
    "friend_crud",
    "canonical_pair",
]
