"""Module for models functionality."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from support_bot.db.base import Base


class SimpleOption(Base):
    """Represent a named option value.

    Options are grouped by ``scope`` so that the same name can hold one value
    per chat (``chat:<id>``) or a single process-wide value (``global``).

    Attributes:
        __tablename__: Table name.
        id: Surrogate primary key.
        scope: Namespace the option belongs to.
        name: Option name, unique within its scope.
        value: Stored value as text.
        updated_at: Time of the last write.
    """

    __tablename__ = "simple_options"
    __table_args__ = (
        UniqueConstraint("scope", "name", name="uq_simple_options_scope_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    scope: Mapped[str] = mapped_column(String(64), default="global")
    name: Mapped[str] = mapped_column(String(64))
    value: Mapped[str | None] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
