"""Scoped key-value option storage."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from support_bot.db.models import SimpleOption

GLOBAL_SCOPE = "global"


def chat_scope(chat_id: int) -> str:
    """Return the option scope for a single chat."""
    return f"chat:{chat_id}"


class OptionStore:
    """Read and write named option values.

    Every value lives under a ``scope``. Writes are upserts: setting an
    existing name replaces its value instead of adding a row.
    """

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]) -> None:
        self._sessionmaker = sessionmaker

    async def get(
        self,
        name: str,
        *,
        scope: str = GLOBAL_SCOPE,
        default: str | None = None,
    ) -> str | None:
        """Get an option value.

        Args:
            name: Option name.
            scope: Option scope.
            default: Value returned when the option is absent.

        Returns:
            Stored value or ``default``.
        """
        async with self._sessionmaker() as session:
            result = await session.execute(
                select(SimpleOption.value).where(
                    SimpleOption.scope == scope,
                    SimpleOption.name == name,
                )
            )
            value = result.scalar_one_or_none()
        return default if value is None else value

    async def get_int(
        self,
        name: str,
        *,
        scope: str = GLOBAL_SCOPE,
        default: int | None = None,
    ) -> int | None:
        """Get an option value as an integer.

        Values that do not parse as integers are treated as absent.
        """
        raw = await self.get(name, scope=scope)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            return default

    async def set(
        self,
        name: str,
        value: str | int,
        *,
        scope: str = GLOBAL_SCOPE,
    ) -> None:
        """Set an option value, replacing any previous one.

        Args:
            name: Option name.
            value: New value; stored as text.
            scope: Option scope.
        """
        async with self._sessionmaker() as session:
            result = await session.execute(
                select(SimpleOption).where(
                    SimpleOption.scope == scope,
                    SimpleOption.name == name,
                )
            )
            option = result.scalar_one_or_none()
            if option:
                option.value = str(value)
            else:
                session.add(SimpleOption(scope=scope, name=name, value=str(value)))
            await session.commit()

    async def delete(self, name: str, *, scope: str = GLOBAL_SCOPE) -> bool:
        """Delete an option.

        Returns:
            True if a stored value was removed.
        """
        async with self._sessionmaker() as session:
            result = await session.execute(
                delete(SimpleOption).where(
                    SimpleOption.scope == scope,
                    SimpleOption.name == name,
                )
            )
            await session.commit()
        return bool(result.rowcount)
