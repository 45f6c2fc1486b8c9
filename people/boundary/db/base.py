"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and the integer primary key
mixin shared by users and emails.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# BIGINT on PostgreSQL; SQLite only autoincrements an INTEGER primary key.
BigIntID = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class IntegerIDMixin:
    """
    Mixin providing a database-generated integer primary key.

    Attributes:
        id: Auto-incrementing 64-bit primary key, assigned on insert
    """

    id: Mapped[int] = mapped_column(
        BigIntID,
        primary_key=True,
        autoincrement=True,
    )
