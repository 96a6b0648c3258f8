# app/adapters/outbound/persistence/database.py (async version)

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

# ─── Base definition ───────────────────────────────────────────────────────────
# Parent class of every ORM model, holds the metadata
Base = declarative_base()
# ────────────────────────────────────────────────────────────────────────────────


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """
    SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless the pragma
    is switched on for every new connection.
    """

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for the given URL.

    SQLite URLs get a foreign-key pragma listener (and a StaticPool for
    in-memory databases); server databases get a sized connection pool.
    """
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url.endswith("://"):
            options["poolclass"] = StaticPool
        async_engine = create_async_engine(database_url, echo=echo, **options)
        enable_sqlite_foreign_keys(async_engine)
        return async_engine

    return create_async_engine(
        database_url,
        echo=echo,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
    )


def build_session_factory(async_engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=async_engine,
        autoflush=False,
        expire_on_commit=False,
    )


logger.info(f"Connecting to database: {settings.DATABASE_URL.split('@')[-1]}")

try:
    engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
    AsyncSessionLocal = build_session_factory(engine)
    logger.info("Async database connection configured successfully")
except SQLAlchemyError as e:
    logger.error(f"Error connecting to database: {str(e)}")
    raise


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Provides an async context for database operations,
    committing on success, rolling back on error and always closing the session.

    Yields:
        AsyncSession: SQLAlchemy async session

    Example:
        ```python
        async with get_db_context() as db:
            users = await user_repository.list(db)
        ```
    """
    session = AsyncSessionLocal()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    async with get_db_context() as session:
        yield session


async def create_schema(async_engine: AsyncEngine = None) -> None:
    """Create every table registered on Base.metadata that does not exist yet."""
    # Register every model on the metadata before create_all
    import app.adapters.outbound.persistence.models  # noqa: F401

    async with (async_engine or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
