"""Database connection and session management."""

import logging
import os
from collections.abc import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings

logger = logging.getLogger(__name__)

# Lazy database initialization - don't create engine at import time
engine = None
async_session_factory = None


def _async_database_url(database_url: str) -> str:
    """Convert a PostgreSQL URL to its asyncpg form."""
    if database_url.startswith("postgresql+psycopg2://"):
        return database_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql+asyncpg://", 1)
    return database_url


def _initialize_database():
    """Initialize database engine and session factory."""
    global engine, async_session_factory

    if engine is not None:
        return  # Already initialized

    if os.getenv("TESTING") == "true":
        # Keep as None for testing - will be overridden in test fixtures
        return

    engine = create_async_engine(
        _async_database_url(settings.DATABASE_URL),
        pool_size=settings.MAX_CONNECTIONS,
        max_overflow=0,
        pool_pre_ping=True,
        echo=False,
    )

    # Create session factory
    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


async def get_session() -> AsyncGenerator[AsyncSession | None, None]:
    """Get database session.

    Yields ``None`` when the engine cannot be created, so callers can answer
    from the static office dataset instead.

    Yields:
        AsyncSession: Database session, or None when the store is unavailable
    """
    # Initialize database on first use
    try:
        _initialize_database()
    except (SQLAlchemyError, ValueError) as e:
        logger.warning(f"Database engine unavailable: {e}")

    if async_session_factory is None:
        yield None
        return

    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    global engine, async_session_factory

    if engine is not None:
        await engine.dispose()
    engine = None
    async_session_factory = None
