"""Gatekeeping and welcome messages for new chat members."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from aiogram import Bot
from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramAPIError
from aiogram.types import LinkPreviewOptions, Message

from support_bot.services.options import OptionStore, chat_scope
from support_bot.utils.roles import is_privileged_status
from support_bot.utils.texts import user_mention, welcome_text

logger = logging.getLogger(__name__)

WELCOME_MESSAGE_OPTION = "welcome_message_id"


@dataclass(frozen=True)
class Member:
    """Represent a member added to a chat."""

    id: int
    display_name: str
    is_bot: bool


@dataclass(frozen=True)
class MemberEvent:
    """Represent a single "new chat members" event.

    Attributes:
        chat_id: Chat the members were added to.
        actor_user_id: User who added the members (or joined themselves).
        group_name: Chat title.
        added_members: Added members in the order Telegram reports them.
    """

    chat_id: int
    actor_user_id: int
    group_name: str
    added_members: tuple[Member, ...] = ()

    @classmethod
    def from_message(
        cls, message: Message, *, default_group_name: str
    ) -> MemberEvent:
        """Build an event from a ``new_chat_members`` service message.

        Args:
            message: Incoming service message.
            default_group_name: Name used when the chat has no title.

        Returns:
            Event populated from the message.
        """
        members = tuple(
            Member(id=user.id, display_name=user.first_name, is_bot=user.is_bot)
            for user in message.new_chat_members or []
        )
        actor_id = message.from_user.id if message.from_user else 0
        return cls(
            chat_id=message.chat.id,
            actor_user_id=actor_id,
            group_name=message.chat.title or default_group_name,
            added_members=members,
        )


def split_members(members: Iterable[Member]) -> tuple[list[Member], list[Member]]:
    """Split members into human users and bots, keeping their order."""
    users: list[Member] = []
    bots: list[Member] = []
    for member in members:
        if member.is_bot:
            bots.append(member)
            continue
        users.append(member)
    return users, bots


class NewMemberWelcomeHandler:
    """Kick bots added by regular members and refresh the welcome message.

    The previous welcome message id is kept per chat in the option store, so
    only the most recent welcome stays visible.
    """

    def __init__(self, bot: Bot, options: OptionStore, *, rules_url: str) -> None:
        self._bot = bot
        self._options = options
        self._rules_url = rules_url

    async def handle(self, event: MemberEvent) -> Message | None:
        """Process one event.

        Returns:
            The sent welcome message, or None if nothing was sent.
        """
        users, bots = split_members(event.added_members)
        await self.kick_disallowed_bots(event, bots)
        return await self.refresh_welcome_message(event, users)

    async def is_privileged(self, chat_id: int, user_id: int) -> bool:
        """Check whether the user is the chat creator or an administrator."""
        try:
            member = await self._bot.get_chat_member(chat_id, user_id)
        except TelegramAPIError as exc:
            logger.warning(
                "chat member lookup failed chat_id=%s user_id=%s: %s",
                chat_id,
                user_id,
                exc,
            )
            return False
        return is_privileged_status(getattr(member, "status", None))

    async def kick_disallowed_bots(
        self, event: MemberEvent, bots: list[Member]
    ) -> list[int]:
        """Remove bots unless they were added by a privileged actor.

        Args:
            event: Event the bots came with.
            bots: Bots added in the event.

        Returns:
            Ids of the bots that were removed.
        """
        if not bots:
            return []
        if await self.is_privileged(event.chat_id, event.actor_user_id):
            return []

        kicked: list[int] = []
        for member in bots:
            try:
                await self._bot.ban_chat_member(event.chat_id, member.id)
            except TelegramAPIError as exc:
                logger.warning(
                    "bot kick failed chat_id=%s bot_id=%s: %s",
                    event.chat_id,
                    member.id,
                    exc,
                )
                continue
            kicked.append(member.id)
        if kicked:
            logger.info(
                "kicked bots chat_id=%s added_by=%s bot_ids=%s",
                event.chat_id,
                event.actor_user_id,
                kicked,
            )
        return kicked

    async def refresh_welcome_message(
        self, event: MemberEvent, users: list[Member]
    ) -> Message | None:
        """Send a new welcome message and delete the previous one.

        Args:
            event: Event the users came with.
            users: Human members to greet.

        Returns:
            The sent message, or None if there was nobody to greet or sending
            failed.
        """
        if not users:
            return None

        text = welcome_text(
            (user_mention(user.id, user.display_name) for user in users),
            group_name=event.group_name,
            rules_url=self._rules_url,
        )
        try:
            sent = await self._bot.send_message(
                event.chat_id,
                text,
                parse_mode=ParseMode.HTML,
                link_preview_options=LinkPreviewOptions(is_disabled=True),
            )
        except TelegramAPIError as exc:
            logger.warning("welcome send failed chat_id=%s: %s", event.chat_id, exc)
            return None

        new_message_id = sent.message_id
        chat_id = sent.chat.id
        if new_message_id and chat_id:
            scope = chat_scope(chat_id)
            old_message_id = await self._options.get_int(
                WELCOME_MESSAGE_OPTION, scope=scope
            )
            if old_message_id:
                await self._delete_message(chat_id, old_message_id)
            await self._options.set(WELCOME_MESSAGE_OPTION, new_message_id, scope=scope)

        return sent

    async def _delete_message(self, chat_id: int, message_id: int) -> None:
        try:
            await self._bot.delete_message(chat_id, message_id)
        except TelegramAPIError as exc:
            logger.warning(
                "old welcome delete failed chat_id=%s message_id=%s: %s",
                chat_id,
                message_id,
                exc,
            )
