"""Module for session functionality."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def create_engine(database_url: str) -> AsyncEngine:
    """Create engine.

    Args:
        database_url: SQLAlchemy async database URL.

    Returns:
        Async engine bound to the URL.
    """
    return create_async_engine(database_url, echo=False)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create sessionmaker.

    Args:
        engine: Engine the sessions are bound to.

    Returns:
        Session factory that keeps loaded attributes after commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False)
