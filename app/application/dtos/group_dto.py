# app/application/dtos/group_dto.py

"""
Schemas for groups and permissions.
"""

from typing import List, Optional
from pydantic import Field

from app.application.dtos.base_dto import CustomBaseModel
from app.shared.utils.datetime_utils import UtcDatetime


class PermissionOutput(CustomBaseModel):
    id: int
    name: str
    description: Optional[str] = None
    created_date: UtcDatetime


class GroupOutput(CustomBaseModel):
    """
    Schema for returning a group with its permissions.
    """
    id: int
    name: str
    description: Optional[str] = None
    created_date: UtcDatetime
    permissions: List[PermissionOutput] = Field(default_factory=list)
