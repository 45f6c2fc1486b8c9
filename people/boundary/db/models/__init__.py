"""
Database models package.

Exports:
  - UserModel: Person record enriched at creation time
  - EmailModel: Globally unique email owned by one user
  - FriendModel: Canonical (low, high) friendship pair

Dependencies: sqlalchemy, people.boundary.db.base
System role: Database model definitions for domain entities
"""

from people.boundary.db.models.user_model import UserModel
from people.boundary.db.models.email_model import EmailModel
from people.boundary.db.models.friend_model import FriendModel

__all__ = [
    "UserModel",
    "EmailModel",
    "FriendModel",
]
