# app/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import List, Optional, Dict, Any, Generic, Iterable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar('T')


class IRepository(Generic[T], ABC):
    """Generic repository interface."""

    @abstractmethod
    async def list(self, db: AsyncSession) -> List[T]:
        """List every entity with its associations loaded."""
        pass

    @abstractmethod
    async def get_by_id(self, db: AsyncSession, id: Any) -> Optional[T]:
        """Get entity by ID with its associations loaded, or None."""
        pass

    @abstractmethod
    async def exists(self, db: AsyncSession, id: Any) -> bool:
        """Check whether an entity with this ID exists."""
        pass

    @abstractmethod
    async def count(self, db: AsyncSession) -> int:
        """Count all entities."""
        pass


class IUserRepository(IRepository[T], ABC):
    """User repository interface."""

    @abstractmethod
    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[T]:
        """Get user by email."""
        pass

    @abstractmethod
    async def create(self, db: AsyncSession, *, db_obj: T) -> T:
        """Persist a new user with its group associations."""
        pass

    @abstractmethod
    async def update(self, db: AsyncSession, *, db_obj: T, user_groups: Iterable[Any]) -> T:
        """Persist changes and replace the user's group associations."""
        pass

    @abstractmethod
    async def delete(self, db: AsyncSession, *, id: Any) -> bool:
        """Delete a user by ID. Returns False when there was nothing to delete."""
        pass

    @abstractmethod
    async def count_by_group(self, db: AsyncSession) -> Dict[int, int]:
        """Number of members per group ID, for groups with at least one member."""
        pass


class IGroupRepository(IRepository[T], ABC):
    """Group repository interface."""

    @abstractmethod
    async def get_missing_ids(self, db: AsyncSession, ids: Iterable[int]) -> List[int]:
        """Return the IDs among `ids` that do not match any group."""
        pass
