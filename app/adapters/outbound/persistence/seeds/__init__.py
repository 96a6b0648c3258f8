# app/adapters/outbound/persistence/seeds/__init__.py

"""
Seeds module for database initialization.

This module contains the functions that populate the database
with the initial data the system needs.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.seeds.groups_permissions import run_groups_permissions_seed

# Configure logger
logger = logging.getLogger(__name__)


async def run_all_seeds(db: AsyncSession) -> None:
    """
    Run every seed script in order.

    Args:
        db: Async database session
    """
    logger.info("Running all seeds")

    try:
        await run_groups_permissions_seed(db)
    except Exception as e:
        await db.rollback()
        logger.error(f"Error running seeds: {str(e)}")
        raise

    logger.info("All seeds finished successfully")
