from __future__ import annotations

from sqlalchemy import func, select

from support_bot.db.models import SimpleOption
from support_bot.db.session import create_sessionmaker
from support_bot.services.options import GLOBAL_SCOPE, chat_scope


async def test_missing_option_returns_default(option_store):
    assert await option_store.get("welcome_message_id") is None
    assert await option_store.get("welcome_message_id", default="x") == "x"
    assert await option_store.get_int("welcome_message_id", default=0) == 0


async def test_set_overwrites_existing_value(option_store, engine):
    await option_store.set("welcome_message_id", 42)
    await option_store.set("welcome_message_id", 99)

    assert await option_store.get("welcome_message_id") == "99"
    async with create_sessionmaker(engine)() as session:
        count = await session.scalar(select(func.count()).select_from(SimpleOption))
    assert count == 1


async def test_scopes_are_independent(option_store):
    await option_store.set("welcome_message_id", 1, scope=chat_scope(7))
    await option_store.set("welcome_message_id", 2, scope=chat_scope(8))

    assert await option_store.get_int("welcome_message_id", scope=chat_scope(7)) == 1
    assert await option_store.get_int("welcome_message_id", scope=chat_scope(8)) == 2
    assert await option_store.get("welcome_message_id", scope=GLOBAL_SCOPE) is None


async def test_get_int_ignores_non_numeric(option_store):
    await option_store.set("welcome_message_id", "'; DROP TABLE simple_options; --")

    assert await option_store.get_int("welcome_message_id") is None
    assert (
        await option_store.get("welcome_message_id")
        == "'; DROP TABLE simple_options; --"
    )


async def test_delete(option_store):
    await option_store.set("welcome_message_id", 42)

    assert await option_store.delete("welcome_message_id") is True
    assert await option_store.delete("welcome_message_id") is False
    assert await option_store.get("welcome_message_id") is None


def test_chat_scope():
    assert chat_scope(-100123) == "chat:-100123"
