"""Module for roles functionality."""

from __future__ import annotations

from aiogram.enums import ChatMemberStatus

PRIVILEGED_STATUSES = {
    ChatMemberStatus.CREATOR.value,
    ChatMemberStatus.ADMINISTRATOR.value,
}


def is_privileged_status(status: ChatMemberStatus | str | None) -> bool:
    """Check whether a chat member status may add bots to the chat.

    Args:
        status: Chat member status as reported by the Bot API.

    Returns:
        True for the chat creator and administrators.
    """
    return getattr(status, "value", status) in PRIVILEGED_STATUSES
