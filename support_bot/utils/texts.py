"""Message texts."""

from __future__ import annotations

import html
from typing import Iterable

USER_MENTION_TEMPLATE = '<a href="tg://user?id={user_id}">{name}</a>'

CHAT_WELCOME_TEXT = (
    "Welcome {users} to the <b>{group_name}</b> group\n"
    "Please remember that this is <b>NOT</b> the Telegram Support Chat.\n"
    'Read the <a href="{rules_url}">Rules</a> that apply here.'
)


def user_mention(user_id: int, name: str) -> str:
    """Build an HTML mention for a user; the name is escaped."""
    return USER_MENTION_TEMPLATE.format(user_id=user_id, name=html.escape(name))


def welcome_text(
    mentions: Iterable[str],
    *,
    group_name: str,
    rules_url: str,
) -> str:
    """Render the welcome message.

    Args:
        mentions: Pre-rendered user mentions.
        group_name: Chat title; inserted as is.
        rules_url: Link to the chat rules.

    Returns:
        HTML message text.
    """
    return CHAT_WELCOME_TEXT.format(
        users=", ".join(mentions),
        group_name=group_name,
        rules_url=rules_url,
    )
