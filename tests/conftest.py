from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from support_bot.db.schema import prepare_database
from support_bot.db.session import create_engine, create_sessionmaker
from support_bot.services.options import OptionStore
from tests.helpers import sent_message


@pytest.fixture
async def engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await prepare_database(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def option_store(engine):
    return OptionStore(create_sessionmaker(engine))


@pytest.fixture
def bot():
    """Bot API client stub: regular member actor, sends succeed in chat 7."""
    bot = AsyncMock()
    bot.get_chat_member.return_value = SimpleNamespace(status="member")
    bot.send_message.return_value = sent_message(42, 7)
    return bot
