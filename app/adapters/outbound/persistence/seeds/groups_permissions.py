# app/adapters/outbound/persistence/seeds/groups_permissions.py

"""
Seed script for the default groups, permissions and grants.
"""

import logging
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.models import Group, Permission, GroupPermission
from app.adapters.outbound.persistence.seeds.default_data import GROUPS, PERMISSIONS, GROUP_PERMISSIONS
from app.shared.utils.datetime_utils import utcnow

logger = logging.getLogger(__name__)


async def run_groups_permissions_seed(db: AsyncSession) -> None:
    """
    Insert the default groups, permissions and grants that are missing.

    Rows that already exist are left untouched, so the seed can run on every startup.
    """
    now = utcnow()

    # Groups
    for data in GROUPS:
        group = await db.get(Group, data["id"])
        if not group:
            db.add(Group(created_date=now, **data))
            logger.info(f"Group '{data['name']}' created.")
        else:
            logger.debug(f"Group '{data['name']}' already exists.")

    # Permissions
    for data in PERMISSIONS:
        permission = await db.get(Permission, data["id"])
        if not permission:
            db.add(Permission(created_date=now, **data))
            logger.info(f"Permission '{data['name']}' created.")
        else:
            logger.debug(f"Permission '{data['name']}' already exists.")

    await db.flush()

    # Grants
    result = await db.execute(select(GroupPermission.group_id, GroupPermission.permission_id))
    existing = set(result.all())
    for group_id, permission_ids in GROUP_PERMISSIONS.items():
        for permission_id in permission_ids:
            if (group_id, permission_id) not in existing:
                db.add(GroupPermission(group_id=group_id, permission_id=permission_id, granted_date=now))
                logger.info(f"Permission {permission_id} granted to group {group_id}.")

    await db.commit()
    logger.info("Groups and permissions seed finished successfully.")
