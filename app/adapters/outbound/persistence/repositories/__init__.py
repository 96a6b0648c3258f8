# app/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
Repositories module.

This module exports the repository classes and instances
for the system entities, implementing the Repository pattern.
"""

# Import repository classes
from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.repositories.user_repository import AsyncUserCRUD
from app.adapters.outbound.persistence.repositories.group_repository import AsyncGroupCRUD

# Import singleton instances
from app.adapters.outbound.persistence.repositories.user_repository import user_repository
from app.adapters.outbound.persistence.repositories.group_repository import group_repository

# Export all classes and instances
__all__ = [
    # Classes
    "AsyncCRUDBase",
    "AsyncUserCRUD",
    "AsyncGroupCRUD",

    # Instances
    "user_repository",
    "group_repository",
]
