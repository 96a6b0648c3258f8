# app/application/dtos/mappers.py

"""
Conversion of ORM entities into output DTOs.

The entities must come from a repository read that eagerly loaded
their associations; nothing here triggers a database access.
"""

from app.adapters.outbound.persistence.models import User, Group, Permission
from app.application.dtos.group_dto import GroupOutput, PermissionOutput
from app.application.dtos.user_dto import UserOutput


def to_permission_output(permission: Permission) -> PermissionOutput:
    return PermissionOutput(
        id=permission.id,
        name=permission.name,
        description=permission.description,
        created_date=permission.created_date,
    )


def to_group_output(group: Group) -> GroupOutput:
    return GroupOutput(
        id=group.id,
        name=group.name,
        description=group.description,
        created_date=group.created_date,
        permissions=[to_permission_output(permission) for permission in group.permissions],
    )


def to_user_output(user: User) -> UserOutput:
    """
    Convert a user and its memberships into a UserOutput.

    Args:
        user: User loaded with user_groups -> group -> group_permissions -> permission

    Returns:
        UserOutput with nested groups and permissions
    """
    return UserOutput(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        phone_number=user.phone_number,
        created_date=user.created_date,
        modified_date=user.modified_date,
        is_active=user.is_active,
        groups=[to_group_output(link.group) for link in user.user_groups],
    )
