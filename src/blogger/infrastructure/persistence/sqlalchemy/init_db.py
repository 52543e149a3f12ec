"""Database initialization utilities."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Import models to register with Base.metadata
import blogger_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from blogger.infrastructure.persistence.sqlalchemy.models.base import Base
from blogger_config.settings import get_settings

logger = logging.getLogger(__name__)


def _get_engine() -> AsyncEngine:
    """Get the database engine for initialization."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    Engines passed in by the caller are left open.
    """
    owned = engine is None
    engine = engine or _get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if owned:
        await engine.dispose()
    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    owned = engine is None
    engine = engine or _get_engine()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    if owned:
        await engine.dispose()
    logger.info("Database tables dropped successfully")


def database_display_name(database_url: str) -> str:
    """Strip credentials from a database URL for display."""
    return database_url.split("@")[-1] if "@" in database_url else database_url
