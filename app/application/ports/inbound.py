# app/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import List, Optional

from app.application.dtos.group_dto import GroupOutput
from app.application.dtos.user_dto import UserCreate, UserOutput, UserUpdate, UserCountByGroupOutput


class IUserUseCase(ABC):
    """Interface for user-related use cases."""

    @abstractmethod
    async def list_users(self) -> List[UserOutput]:
        """List every user with groups and permissions."""
        pass

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[UserOutput]:
        """Get user by ID, or None."""
        pass

    @abstractmethod
    async def create_user(self, data: UserCreate) -> UserOutput:
        """Create a new user."""
        pass

    @abstractmethod
    async def update_user(self, user_id: int, data: UserUpdate) -> UserOutput:
        """Update user data and group membership."""
        pass

    @abstractmethod
    async def delete_user(self, user_id: int) -> bool:
        """Delete a user. Returns False if it did not exist."""
        pass

    @abstractmethod
    async def count_users(self) -> int:
        """Total number of users."""
        pass

    @abstractmethod
    async def count_users_by_group(self) -> List[UserCountByGroupOutput]:
        """Number of users in every group."""
        pass


class IGroupUseCase(ABC):
    """Interface for group-related use cases."""

    @abstractmethod
    async def list_groups(self) -> List[GroupOutput]:
        """List every group with its permissions."""
        pass

    @abstractmethod
    async def get_group(self, group_id: int) -> Optional[GroupOutput]:
        """Get group by ID, or None."""
        pass
