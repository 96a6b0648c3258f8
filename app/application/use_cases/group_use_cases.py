# app/application/use_cases/group_use_cases.py (async version)

"""
Service for group queries.
"""

import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.repositories.group_repository import group_repository
from app.application.dtos.group_dto import GroupOutput
from app.application.dtos.mappers import to_group_output
from app.application.ports.inbound import IGroupUseCase
from app.application.ports.outbound import IGroupRepository

# Configure logger
logger = logging.getLogger(__name__)


class AsyncGroupService(IGroupUseCase):
    """
    Read-only service for groups and the permissions granted to them.
    """

    def __init__(self, db_session: AsyncSession, groups: IGroupRepository = group_repository):
        self.db = db_session
        self.groups = groups

    async def list_groups(self) -> List[GroupOutput]:
        groups = await self.groups.list(self.db)
        return [to_group_output(group) for group in groups]

    async def get_group(self, group_id: int) -> Optional[GroupOutput]:
        """
        Get a group by ID.

        Returns:
            GroupOutput, or None if the group doesn't exist
        """
        group = await self.groups.get_by_id(self.db, id=group_id)
        if not group:
            logger.info(f"Group not found: ID {group_id}")
            return None
        return to_group_output(group)
