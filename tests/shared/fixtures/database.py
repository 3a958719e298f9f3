"""
SQLite fixtures for persistence tests.

Each test gets a fresh in-memory database with all tables created.

Usage:
    async def test_something(db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.add("user@example.com", "hash")
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from gatehouse.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine():
    """
    Create an async engine on a private in-memory SQLite database.

    StaticPool keeps the single connection alive so the schema survives
    between sessions.
    """
    engine = create_async_engine(
        SQLITE_MEMORY_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await drop_tables(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine):
    """Provide a session that is rolled back after the test."""
    session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session
        await session.rollback()
