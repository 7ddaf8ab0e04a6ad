"""
Database Configuration
======================

SQLAlchemy async database setup and session management.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
    AsyncEngine,
)
from sqlalchemy.pool import NullPool

from agent_ledger.core.config import settings
from agent_ledger.models.base import Base


# In tests, pooled connections outlive the event loop that created them
# and fail during teardown.
_engine_kwargs = dict(
    echo=settings.DEBUG,
    pool_pre_ping=True,
)

if settings.APP_ENV == "test":
    _engine_kwargs["poolclass"] = NullPool

engine: AsyncEngine = create_async_engine(settings.DATABASE_URL, **_engine_kwargs)

# Session factory
async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def create_db_and_tables() -> None:
    """
    Create database tables if they don't exist.

    Schema migrations are managed outside this service; this is
    primarily for development convenience.
    """
    # Register every model on the metadata before create_all
    import agent_ledger.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates a new database session for each request and ensures
    proper cleanup after the request is complete.

    Yields:
        AsyncSession: Database session for the request
    """
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
