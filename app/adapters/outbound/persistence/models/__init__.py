# app/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

This module exports every SQLAlchemy model of the system,
so importing it registers all tables on Base.metadata.
"""

# Import Base
from app.adapters.outbound.persistence.models.base_model import Base

# Main models
from app.adapters.outbound.persistence.models.user_model import User
from app.adapters.outbound.persistence.models.group_model import Group
from app.adapters.outbound.persistence.models.permission_model import Permission

# Association models
from app.adapters.outbound.persistence.models.user_group_model import UserGroup
from app.adapters.outbound.persistence.models.group_permission_model import GroupPermission

# Export all models
__all__ = [
    # Base
    "Base",

    # Main models
    "User",
    "Group",
    "Permission",

    # Association models
    "UserGroup",
    "GroupPermission",
]
