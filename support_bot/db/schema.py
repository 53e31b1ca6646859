"""Database schema preparation."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from support_bot.db import Base
from support_bot.db import models  # noqa: F401  registers tables on Base.metadata

SUPPORTED_DIALECTS = {"sqlite", "postgresql"}


async def prepare_database(engine: AsyncEngine) -> None:
    """Create missing tables.

    Existing tables are left untouched.

    Args:
        engine: SQLAlchemy async engine.

    Raises:
        RuntimeError: If the engine dialect is not supported.
    """
    if engine.dialect.name not in SUPPORTED_DIALECTS:
        raise RuntimeError(
            f"Unsupported database dialect: {engine.dialect.name}. "
            "Use sqlite+aiosqlite or postgresql+asyncpg."
        )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
