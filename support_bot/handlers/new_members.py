"""New chat members handler for group chats."""

from __future__ import annotations

from aiogram import F, Router
from aiogram.types import Message

from support_bot.config import Settings
from support_bot.services.options import OptionStore
from support_bot.services.welcome import MemberEvent, NewMemberWelcomeHandler

router = Router()


@router.message(F.new_chat_members)
async def on_new_chat_members(
    message: Message,
    settings: Settings,
    option_store: OptionStore,
) -> None:
    """Kick disallowed bots and welcome new users."""
    event = MemberEvent.from_message(
        message, default_group_name=settings.default_group_name
    )
    handler = NewMemberWelcomeHandler(
        message.bot, option_store, rules_url=settings.rules_url
    )
    await handler.handle(event)
