# app/adapters/outbound/persistence/repositories/user_repository.py (async version)

"""
Repository for user operations.

This module implements the repository that performs database operations
related to users and their group memberships, implementing the
IUserRepository interface.
"""

from typing import Optional, List, Dict, Iterable
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.models import User, UserGroup, Group, GroupPermission
from app.application.ports.outbound import IUserRepository
from app.domain.exceptions import DatabaseOperationException
from app.shared.utils.datetime_utils import utcnow

# Loads user -> groups -> permissions in batched SELECTs
USER_GRAPH_OPTIONS = (
    selectinload(User.user_groups)
    .selectinload(UserGroup.group)
    .selectinload(Group.group_permissions)
    .selectinload(GroupPermission.permission),
)


class AsyncUserCRUD(AsyncCRUDBase[User], IUserRepository[User]):
    """
    Async implementation of the repository for the User entity.

    Extends AsyncCRUDBase with user-specific operations,
    such as email lookup and group membership replacement.
    """

    async def list(self, db: AsyncSession) -> List[User]:
        """
        List every user with groups and permissions loaded.

        Args:
            db: Async database session

        Returns:
            Users ordered by ID

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(User).options(*USER_GRAPH_OPTIONS).order_by(User.id)
            result = await db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing users: {str(e)}")
            raise DatabaseOperationException(
                detail="Error listing users",
                original_error=e
            )

    async def get_by_id(self, db: AsyncSession, id: int) -> Optional[User]:
        """
        Find a user by ID with groups and permissions loaded.

        Args:
            db: Async database session
            id: User ID

        Returns:
            User found or None if it doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = (
                select(User)
                .options(*USER_GRAPH_OPTIONS)
                .where(User.id == id)
                .execution_options(populate_existing=True)
            )
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching user with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error fetching user",
                original_error=e
            )

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        """
        Find a user by email.

        Args:
            db: Async database session
            email: User's email

        Returns:
            User found or None if doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(User).where(User.email == email)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching user by email '{email}': {e}")
            raise DatabaseOperationException(
                detail="Error fetching user by email",
                original_error=e
            )

    async def create(self, db: AsyncSession, *, db_obj: User) -> User:
        """
        Persist a new user together with its UserGroup rows.

        Args:
            db: Async database session
            db_obj: Transient User, with its memberships in `user_groups`

        Returns:
            The persisted User, with its generated ID

        Raises:
            ResourceAlreadyExistsException: If the email is already in use
            DatabaseOperationException: In case of database error
        """
        try:
            db.add(db_obj)
            await db.commit()
        except SQLAlchemyError as e:
            await self._rollback_and_raise(db, e, "creating")

        self.logger.info(f"User created with ID: {db_obj.id}")
        return db_obj

    async def update(self, db: AsyncSession, *, db_obj: User, user_groups: Iterable[UserGroup]) -> User:
        """
        Persist the changes made to a user and replace its group memberships.

        The user's existing UserGroup rows are deleted and `user_groups`
        inserted in the same transaction; on failure nothing is applied.

        Args:
            db: Async database session
            db_obj: Persistent User carrying the new field values
            user_groups: Transient UserGroup rows that become the new membership set

        Returns:
            Updated User

        Raises:
            ResourceAlreadyExistsException: If the new email is already in use
            DatabaseOperationException: In case of database error
        """
        try:
            db_obj.modified_date = utcnow()

            # Only the rows owned by this user are touched
            await db.execute(
                delete(UserGroup)
                .where(UserGroup.user_id == db_obj.id)
                .execution_options(synchronize_session="fetch")
            )
            db.expire(db_obj, ["user_groups"])

            for link in user_groups:
                link.user_id = db_obj.id
                db.add(link)

            await db.commit()
        except SQLAlchemyError as e:
            await self._rollback_and_raise(db, e, "updating")

        self.logger.info(f"User with ID {db_obj.id} updated")
        return db_obj

    async def count_by_group(self, db: AsyncSession) -> Dict[int, int]:
        """
        Count the members of every group that has at least one.

        Args:
            db: Async database session

        Returns:
            Mapping of group ID to number of UserGroup rows

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = (
                select(UserGroup.group_id, func.count(UserGroup.user_id))
                .group_by(UserGroup.group_id)
            )
            result = await db.execute(query)
            return {group_id: count for group_id, count in result.all()}
        except SQLAlchemyError as e:
            self.logger.error(f"Error counting users by group: {str(e)}")
            raise DatabaseOperationException(
                detail="Error counting users by group",
                original_error=e
            )


# Public instance to be used by use cases
user_repository = AsyncUserCRUD(User)
