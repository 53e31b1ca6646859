from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

from aiogram.exceptions import TelegramBadRequest


def sent_message(message_id: int, chat_id: int) -> SimpleNamespace:
    return SimpleNamespace(message_id=message_id, chat=SimpleNamespace(id=chat_id))


def api_error(text: str = "Bad Request: something went wrong") -> TelegramBadRequest:
    return TelegramBadRequest(method=MagicMock(), message=text)
