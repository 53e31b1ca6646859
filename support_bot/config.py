"""Module for config functionality."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_GROUP_NAME = "PHP Telegram Support Bot"
DEFAULT_RULES_URL = "https://telegram.me/PHP_Telegram_Support_Bot?start="


@dataclass(frozen=True)
class Settings:
    """Represent Settings.

    Attributes:
        bot_token: Telegram bot token.
        database_url: SQLAlchemy async database URL.
        default_group_name: Group name used when the chat has no title.
        rules_url: Link to the rules shown in the welcome message.
        log_level: Root logging level name.
        http_timeout: Timeout for Bot API requests, in seconds.
    """

    bot_token: str
    database_url: str
    default_group_name: str
    rules_url: str
    log_level: str
    http_timeout: int


def load_settings() -> Settings:
    """Load settings from the environment and the repository ``.env`` file.

    Returns:
        Parsed settings.

    Raises:
        RuntimeError: If ``BOT_TOKEN`` is not set.
    """
    env_path = Path(__file__).resolve().parents[1] / ".env"
    load_dotenv(dotenv_path=env_path)

    bot_token = os.getenv("BOT_TOKEN", "").strip()
    if not bot_token:
        raise RuntimeError("BOT_TOKEN is required")

    database_url = os.getenv(
        "DATABASE_URL", "sqlite+aiosqlite:///./data/bot.db"
    ).strip()
    default_group_name = (
        os.getenv("DEFAULT_GROUP_NAME", "").strip() or DEFAULT_GROUP_NAME
    )
    rules_url = os.getenv("RULES_URL", "").strip() or DEFAULT_RULES_URL
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    http_timeout = int(os.getenv("HTTP_TIMEOUT", "90"))

    return Settings(
        bot_token=bot_token,
        database_url=database_url,
        default_group_name=default_group_name,
        rules_url=rules_url,
        log_level=log_level,
        http_timeout=http_timeout,
    )
