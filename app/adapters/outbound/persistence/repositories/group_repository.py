# app/adapters/outbound/persistence/repositories/group_repository.py (async version)

"""
Repository for group operations.
"""

from typing import Iterable, List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.models import Group, GroupPermission
from app.application.ports.outbound import IGroupRepository
from app.domain.exceptions import DatabaseOperationException

GROUP_GRAPH_OPTIONS = (
    selectinload(Group.group_permissions).selectinload(GroupPermission.permission),
)


class AsyncGroupCRUD(AsyncCRUDBase[Group], IGroupRepository[Group]):
    """
    Async implementation of the repository for the Group entity.
    Groups are always returned with their permissions loaded.
    """

    async def list(self, db: AsyncSession) -> List[Group]:
        """
        List every group with its permissions.

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(Group).options(*GROUP_GRAPH_OPTIONS).order_by(Group.id)
            result = await db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing groups: {str(e)}")
            raise DatabaseOperationException(
                detail="Error listing groups",
                original_error=e
            )

    async def get_by_id(self, db: AsyncSession, id: int) -> Optional[Group]:
        """
        Find a group by ID with its permissions.

        Returns:
            Group found or None if it doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = (
                select(Group)
                .options(*GROUP_GRAPH_OPTIONS)
                .where(Group.id == id)
                .execution_options(populate_existing=True)
            )
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching group with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error fetching group",
                original_error=e
            )

    async def get_missing_ids(self, db: AsyncSession, ids: Iterable[int]) -> List[int]:
        """
        Return the IDs among `ids` that do not match any group, in input order.

        Raises:
            DatabaseOperationException: In case of database error
        """
        wanted = list(dict.fromkeys(ids))
        if not wanted:
            return []

        try:
            result = await db.execute(select(Group.id).where(Group.id.in_(wanted)))
            found = set(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(f"Error checking group IDs {wanted}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error checking group IDs",
                original_error=e
            )

        return [group_id for group_id in wanted if group_id not in found]


# Public instance to be used by use cases
group_repository = AsyncGroupCRUD(Group)
