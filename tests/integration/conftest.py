"""Shared fixtures for integration tests (in-memory SQLite)."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from blogger.infrastructure.persistence.sqlalchemy.init_db import create_tables


@pytest.fixture
async def test_db_engine():
    """Create an in-memory SQLite database with every table."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(test_db_engine):
    session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_maker() as session:
        yield session
