"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIDMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), ping(): Connection management
  - ensure_schema(): Idempotent table and index creation
  - UserModel, EmailModel, FriendModel: Core domain entities
  - user_crud, email_crud, friend_crud: CRUD operation singletons

Dependencies: sqlalchemy, people.configs
System role: Relational storage for users, their emails and friendships
"""

from people.boundary.db.base import Base, IntegerIDMixin
from people.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
    ping,
)
from people.boundary.db.create_tables import ensure_schema
from people.boundary.db.models import EmailModel, FriendModel, UserModel
from people.boundary.db.CRUD import (
    BaseCRUD,
    EmailCRUD,
    FriendCRUD,
    UserCRUD,
    canonical_pair,
    email_crud,
    friend_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    "ping",
    "ensure_schema",
    # Models
    "UserModel",
    "EmailModel",
    "FriendModel",
    # CRUD classes
    "BaseCRUD",
    "UserCRUD",
    "EmailCRUD",
    "FriendCRUD",
    "canonical_pair",
    # CRUD singletons
    "user_crud",
    "email_crud",
    "friend_crud",
]
