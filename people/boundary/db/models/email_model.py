"""
Email ORM model.

Dependencies: sqlalchemy, people.boundary.db.base
System role: Email persistence
"""

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from people.boundary.db.base import Base, BigIntID, IntegerIDMixin


class EmailModel(Base, IntegerIDMixin):
    """
    Email address owned by exactly one user.

    The address is unique across all users, not per user.

    Attributes:
        id: Generated primary key
        user_id: Owning user (ON DELETE CASCADE)
        email: Address text, globally unique
    """

    __tablename__ = "emails"

    user_id: Mapped[int] = mapped_column(
        BigIntID,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    # Relationships
    user = relationship("UserModel", back_populates="emails")
