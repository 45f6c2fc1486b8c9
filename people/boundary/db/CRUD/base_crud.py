"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations that can be
inherited and extended by model-specific CRUD classes, plus the two
helpers every model-specific class relies on: translating driver
failures into StorageError and building conflict-tolerant inserts.

Dependencies: sqlalchemy, people.core.exceptions
System role: Foundation for all database CRUD operations
"""

import functools
import logging
from typing import Any, Awaitable, Callable, Generic, Iterator, Sequence, TypeVar

from sqlalchemy import delete, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.dml import Insert

from people.boundary.db.base import Base
from people.core.exceptions import StorageError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
F = TypeVar("F", bound=Callable[..., Awaitable[Any]])
T = TypeVar("T")

# Rows per statement; keeps bind parameters under the asyncpg and SQLite limits
BATCH_SIZE = 400

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def storage_errors(operation: str) -> Callable[[F], F]:
    """
    Decorator converting SQLAlchemy failures into StorageError.

    The driver message goes to the log and to ``details``; the public
    message only names the operation.

    Args:
        operation: Operation name used in logs and the error message
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as e:
                logger.error(
                    f"Database error during {operation}",
                    extra={"operation": operation, "error_type": type(e).__name__, "error": str(e)},
                )
                raise StorageError(
                    f"Database error during {operation}",
                    operation=operation,
                    details={"error_type": type(e).__name__},
                ) from e

        return wrapper  # type: ignore

    return decorator


def insert_ignore(session: AsyncSession, model: type[Base]) -> Insert:
    """
    Build ``INSERT ... ON CONFLICT DO NOTHING`` for the session's dialect.

    Args:
        session: Async database session (bound to an engine)
        model: Target ORM model

    Returns:
        Insert: Statement that skips rows violating a unique/primary key

    Raises:
        StorageError: If the dialect has no ON CONFLICT support
    """
    dialect = session.bind.dialect.name
    insert_factory = _INSERT_BY_DIALECT.get(dialect)
    if insert_factory is None:
        raise StorageError(
            f"Conflict-tolerant insert is not supported on {dialect}",
            operation="insert_ignore",
        )
    return insert_factory(model).on_conflict_do_nothing()


def chunked(items: Sequence[T], size: int = BATCH_SIZE) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of at most ``size`` items."""
    for start in range(0, len(items), size):
        yield items[start:start + size]


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses should specify the model class and can override or extend
    these methods for model-specific behavior.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def update_by_id(
        self,
        session: AsyncSession,
        id: int,
        **kwargs,
    ) -> bool:
        """
        Update a record by primary key.

        Args:
            session: Async database session
            id: Integer primary key
            **kwargs: Fields to update with new values

        Returns:
            True if a row was updated, False if not found
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**kwargs)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def delete_by_id(self, session: AsyncSession, id: int) -> bool:
        """
        Delete a record by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            True if record was deleted, False if not found
        """
        stmt = (
            delete(self.model)
            .where(self.model.id == id)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount > 0
