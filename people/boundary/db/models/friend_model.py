"""
Friendship ORM model.

Dependencies: sqlalchemy, people.boundary.db.base
System role: Friendship persistence
"""

from sqlalchemy import CheckConstraint, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from people.boundary.db.base import Base, BigIntID


class FriendModel(Base):
    """
    Unordered friendship stored as a canonical (low, high) id pair.

    The pair itself is the primary key and the check constraint rejects
    self-pairs and reversed pairs, so (A, B) and (B, A) can only ever be
    one row. The secondary index serves lookups by the second column.

    Attributes:
        id_first_friend: Smaller user id of the pair
        id_second_friend: Larger user id of the pair
    """

    __tablename__ = "friends"
    __table_args__ = (
        CheckConstraint(
            "id_first_friend < id_second_friend",
            name="ck_friends_canonical_order",
        ),
        Index("id_second_first_friend", "id_second_friend", "id_first_friend"),
    )

    id_first_friend: Mapped[int] = mapped_column(
        BigIntID,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True,
    )
    id_second_friend: Mapped[int] = mapped_column(
        BigIntID,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True,
    )
