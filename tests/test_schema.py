from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from sqlalchemy import inspect

from support_bot.db.schema import prepare_database


async def test_prepare_database_creates_options_table(engine):
    async with engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    assert "simple_options" in tables


async def test_prepare_database_is_idempotent(engine):
    await prepare_database(engine)


async def test_prepare_database_rejects_unknown_dialect():
    engine = MagicMock()
    engine.dialect.name = "mysql"

    with pytest.raises(RuntimeError, match="Unsupported database dialect"):
        await prepare_database(engine)
