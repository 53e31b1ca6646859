"""Module for main functionality."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.client.session.aiohttp import AiohttpSession
from sqlalchemy.engine.url import make_url

from support_bot.config import Settings, load_settings
from support_bot.db.schema import prepare_database
from support_bot.db.session import create_engine, create_sessionmaker
from support_bot.handlers import new_members
from support_bot.middlewares import ContextMiddleware
from support_bot.services.options import OptionStore

logger = logging.getLogger(__name__)


def _ensure_sqlite_dir(database_url: str) -> None:
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite") or not url.database:
        return
    if url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def build_dispatcher(option_store: OptionStore, settings: Settings) -> Dispatcher:
    """Create a dispatcher with middlewares and routers attached.

    Args:
        option_store: Option store shared by handlers.
        settings: Application settings.

    Returns:
        Configured dispatcher.
    """
    dp = Dispatcher()
    dp.update.outer_middleware(ContextMiddleware(option_store, settings))
    dp.include_router(new_members.router)
    return dp


async def main() -> None:
    """Handle main."""
    settings = load_settings()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )

    _ensure_sqlite_dir(settings.database_url)
    engine = create_engine(settings.database_url)
    await prepare_database(engine)
    option_store = OptionStore(create_sessionmaker(engine))

    session = AiohttpSession(timeout=settings.http_timeout)
    bot = Bot(
        token=settings.bot_token,
        session=session,
        default=DefaultBotProperties(parse_mode="HTML"),
    )
    dp = build_dispatcher(option_store, settings)

    logger.info("starting polling")
    try:
        await dp.start_polling(bot)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
