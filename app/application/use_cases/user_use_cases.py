# app/application/use_cases/user_use_cases.py (async version)

"""
Service for user management.

This module implements the service for user operations:
listing, lookup, creation, update with group membership, deletion
and membership statistics.
"""

import logging
from typing import Iterable, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.models import User, UserGroup
from app.adapters.outbound.persistence.repositories.user_repository import user_repository
from app.adapters.outbound.persistence.repositories.group_repository import group_repository
from app.application.dtos.mappers import to_user_output
from app.application.dtos.user_dto import UserCreate, UserUpdate, UserOutput, UserCountByGroupOutput
from app.application.ports.inbound import IUserUseCase
from app.application.ports.outbound import IUserRepository, IGroupRepository
from app.domain.exceptions import (
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
)
from app.shared.utils.datetime_utils import utcnow

# Configure logger
logger = logging.getLogger(__name__)


class AsyncUserService(IUserUseCase):
    """
    Service for user management.

    Read operations return None for a missing user; operations that
    modify a named user raise ResourceNotFoundException instead.
    """

    def __init__(
            self,
            db_session: AsyncSession,
            users: IUserRepository = user_repository,
            groups: IGroupRepository = group_repository,
    ):
        """
        Initialize the service with a database session.

        Args:
            db_session: Active AsyncSession
            users: User repository
            groups: Group repository
        """
        self.db = db_session
        self.users = users
        self.groups = groups

    async def _ensure_email_available(self, email: str) -> None:
        """
        Raises:
            ResourceAlreadyExistsException: If a user already owns this email
        """
        if await self.users.get_by_email(self.db, email=email):
            logger.warning(f"Email already in use: {email}")
            raise ResourceAlreadyExistsException(
                detail=f"User with email {email} already exists."
            )

    async def _ensure_groups_exist(self, group_ids: Iterable[int]) -> None:
        """
        Raises:
            ResourceNotFoundException: If any of the group IDs is unknown
        """
        missing = await self.groups.get_missing_ids(self.db, group_ids)
        if missing:
            logger.warning(f"Unknown group IDs requested: {missing}")
            raise ResourceNotFoundException(
                detail=f"Groups with IDs {missing} not found."
            )

    @staticmethod
    def _build_memberships(group_ids: Iterable[int]) -> List[UserGroup]:
        """One UserGroup per distinct group ID, all joined now."""
        now = utcnow()
        return [UserGroup(group_id=group_id, joined_date=now) for group_id in dict.fromkeys(group_ids)]

    async def _reload(self, user_id: int) -> UserOutput:
        user = await self.users.get_by_id(self.db, id=user_id)
        return to_user_output(user)

    async def list_users(self) -> List[UserOutput]:
        """
        List every user with groups and permissions.

        Returns:
            List of UserOutput ordered by ID
        """
        users = await self.users.list(self.db)
        return [to_user_output(user) for user in users]

    async def get_user(self, user_id: int) -> Optional[UserOutput]:
        """
        Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            UserOutput, or None if the user doesn't exist
        """
        user = await self.users.get_by_id(self.db, id=user_id)
        if not user:
            logger.info(f"User not found: ID {user_id}")
            return None
        return to_user_output(user)

    async def create_user(self, data: UserCreate) -> UserOutput:
        """
        Create a new active user and its group memberships.

        Args:
            data: Creation data

        Returns:
            The created user, re-read with groups and permissions

        Raises:
            ResourceAlreadyExistsException: If the email is already in use
            ResourceNotFoundException: If a requested group doesn't exist
            DatabaseOperationException: If there's an error in the process
        """
        await self._ensure_email_available(data.email)
        await self._ensure_groups_exist(data.group_ids)

        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone_number=data.phone_number,
            created_date=utcnow(),
            is_active=True,
            user_groups=self._build_memberships(data.group_ids),
        )

        created = await self.users.create(self.db, db_obj=user)
        logger.info(f"User created: {created.email} (ID {created.id})")
        return await self._reload(created.id)

    async def update_user(self, user_id: int, data: UserUpdate) -> UserOutput:
        """
        Overwrite a user's data and replace its group memberships.

        Args:
            user_id: User ID
            data: Update data

        Returns:
            The updated user, re-read with groups and permissions

        Raises:
            ResourceNotFoundException: If the user or a requested group doesn't exist
            ResourceAlreadyExistsException: If the new email belongs to another user
            DatabaseOperationException: If there's an error in the process
        """
        user = await self.users.get_by_id(self.db, id=user_id)
        if not user:
            logger.warning(f"Attempt to update non-existent user: {user_id}")
            raise ResourceNotFoundException(
                detail=f"User with ID {user_id} not found."
            )

        if data.email != user.email:
            await self._ensure_email_available(data.email)
        await self._ensure_groups_exist(data.group_ids)

        user.first_name = data.first_name
        user.last_name = data.last_name
        user.email = data.email
        user.phone_number = data.phone_number
        user.is_active = data.is_active

        await self.users.update(self.db, db_obj=user, user_groups=self._build_memberships(data.group_ids))
        logger.info(f"User updated: ID {user_id}")
        return await self._reload(user_id)

    async def delete_user(self, user_id: int) -> bool:
        """
        Delete a user and its group memberships.

        Args:
            user_id: User ID

        Returns:
            True if the user was deleted, False if it didn't exist
        """
        deleted = await self.users.delete(self.db, id=user_id)
        if deleted:
            logger.info(f"User deleted: ID {user_id}")
        else:
            logger.info(f"Attempt to delete non-existent user: {user_id}")
        return deleted

    async def count_users(self) -> int:
        return await self.users.count(self.db)

    async def count_users_by_group(self) -> List[UserCountByGroupOutput]:
        """
        Count the members of every group, including empty ones.

        Returns:
            One UserCountByGroupOutput per existing group, ordered by group ID
        """
        groups = await self.groups.list(self.db)
        counts = await self.users.count_by_group(self.db)

        return [
            UserCountByGroupOutput(
                group_id=group.id,
                group_name=group.name,
                user_count=counts.get(group.id, 0),
            )
            for group in groups
        ]
