# app/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines the functions that provide database sessions
and services via FastAPI Depends().
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.database import get_db
from app.application.use_cases.user_use_cases import AsyncUserService
from app.application.use_cases.group_use_cases import AsyncGroupService

########################################################################
# Database Session Management
########################################################################

get_session = get_db


########################################################################
# Services
########################################################################

async def get_user_service(db: AsyncSession = Depends(get_session)) -> AsyncUserService:
    """User service bound to the request's session."""
    return AsyncUserService(db)


async def get_group_service(db: AsyncSession = Depends(get_session)) -> AsyncGroupService:
    """Group service bound to the request's session."""
    return AsyncGroupService(db)
