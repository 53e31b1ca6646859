from support_bot.db.base import Base

__all__ = ["Base"]
