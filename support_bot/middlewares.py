"""Module for middlewares functionality."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict

from aiogram.dispatcher.middlewares.base import BaseMiddleware

from support_bot.config import Settings
from support_bot.services.options import OptionStore


class ContextMiddleware(BaseMiddleware):
    """Expose shared services to handlers.

    Handlers receive ``settings`` and ``option_store`` as keyword arguments.
    """

    def __init__(self, option_store: OptionStore, settings: Settings) -> None:
        super().__init__()
        self._option_store = option_store
        self._settings = settings

    async def __call__(
        self,
        handler: Callable[[Any, Dict[str, Any]], Awaitable[Any]],
        event: Any,
        data: Dict[str, Any],
    ) -> Any:
        data["option_store"] = self._option_store
        data["settings"] = self._settings
        return await handler(event, data)
