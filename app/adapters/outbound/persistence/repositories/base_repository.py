# app/adapters/outbound/persistence/repositories/base_repository.py (async version)

from typing import Any, Generic, Optional, Type, TypeVar
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
import logging

from app.adapters.outbound.persistence.models.base_model import Base
from app.domain.exceptions import (
    ResourceAlreadyExistsException,
    DatabaseOperationException
)

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)

# Configure logger
logger = logging.getLogger(__name__)


class AsyncCRUDBase(Generic[ModelType]):
    """
    Async base class for implementing the Repository pattern.

    Provides the lookups and deletion every entity shares, with consistent
    error handling and logging.

    Attributes:
        model: SQLAlchemy model class
        logger: Configured logger for the class
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize the repository with an SQLAlchemy model.

        Args:
            model: SQLAlchemy model class associated with this repository
        """
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        Get an entity by ID, without eager-loading its associations.

        Args:
            db: Async database session
            id: ID of the entity

        Returns:
            Entity found or None if it doesn't exist
        """
        try:
            return await db.get(self.model, id)
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error fetching {self.model.__name__}",
                original_error=e
            )

    async def exists(self, db: AsyncSession, id: Any) -> bool:
        """
        Check if an entity with the given ID exists.

        Args:
            db: Async database session
            id: ID of the entity

        Returns:
            True if it exists, False otherwise

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(self.model.id).where(self.model.id == id)
            result = await db.execute(select(query.exists()))
            return bool(result.scalar())
        except SQLAlchemyError as e:
            self.logger.error(f"Error checking existence of {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error checking existence of {self.model.__name__}",
                original_error=e
            )

    async def count(self, db: AsyncSession) -> int:
        """
        Count every row of the entity's table.

        Args:
            db: Async database session

        Returns:
            Number of rows

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            result = await db.execute(select(func.count()).select_from(self.model))
            return result.scalar_one()
        except SQLAlchemyError as e:
            self.logger.error(f"Error counting {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error counting {self.model.__name__}s",
                original_error=e
            )

    async def delete(self, db: AsyncSession, *, id: Any) -> bool:
        """
        Delete an entity by ID. Rows that reference it go with it (ON DELETE CASCADE).

        Args:
            db: Async database session
            id: ID of the entity to delete

        Returns:
            True if an entity was removed, False if none had this ID

        Raises:
            DatabaseOperationException: In case of database error
        """
        obj = await self.get(db, id=id)
        if not obj:
            return False

        try:
            await db.delete(obj)
            await db.commit()
        except SQLAlchemyError as e:
            await self._rollback_and_raise(db, e, "deleting")

        self.logger.info(f"{self.model.__name__} with ID {id} removed")
        return True

    async def _rollback_and_raise(self, db: AsyncSession, e: SQLAlchemyError, action: str) -> None:
        """
        Roll the current transaction back as a whole and translate the error.

        Args:
            db: Async database session
            e: Error raised by SQLAlchemy
            action: Verb used in log and error messages (ex: "creating")

        Raises:
            ResourceAlreadyExistsException: If a uniqueness constraint is violated
            DatabaseOperationException: For any other database error
        """
        await db.rollback()
        if isinstance(e, IntegrityError):
            error_msg = str(e).lower()
            if 'unique' in error_msg or 'duplicate' in error_msg:
                self.logger.warning(f"Uniqueness violation {action} {self.model.__name__}: {str(e)}")
                raise ResourceAlreadyExistsException(
                    detail=f"{self.model.__name__} with these data already exists"
                ) from e
            self.logger.error(f"Integrity error {action} {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Integrity error {action} {self.model.__name__}",
                original_error=e
            ) from e

        self.logger.error(f"Error {action} {self.model.__name__}: {str(e)}")
        raise DatabaseOperationException(
            detail=f"Error {action} {self.model.__name__}",
            original_error=e
        ) from e
