"""
User ORM model.

Represents a person with demographic attributes filled in by the
enrichment services when the user is created.

Dependencies: sqlalchemy, people.boundary.db.base
System role: User persistence
"""

from sqlalchemy import SmallInteger, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from people.boundary.db.base import Base, IntegerIDMixin


class UserModel(Base, IntegerIDMixin):
    """
    User ORM model.

    Deleting a user removes its emails and every friendship it takes
    part in through ON DELETE CASCADE foreign keys; the ORM side is
    declared passive so the database does the work.

    Attributes:
        id: Generated primary key
        first_name: Given name, the enrichment lookup key
        last_name: Family name (may be empty)
        gender: Gender label from the gender lookup
        nationality: Country code from the nationality lookup
        age: Age from the age lookup (0-255)
        emails: EmailModel rows owned by this user

    Relationships:
        emails: One-to-many with EmailModel (cascade delete on user removal)
    """

    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    gender: Mapped[str] = mapped_column(Text, nullable=False)
    nationality: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[int] = mapped_column(SmallInteger, nullable=False)

    # Relationships
    emails = relationship(
        "EmailModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="EmailModel.id",
    )
