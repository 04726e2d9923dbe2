"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBPlayer(Base):
    __tablename__ = "players"
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    display_name: Mapped[str]
    region: Mapped[str] = mapped_column(index=True)
    email: Mapped[str] = mapped_column(unique=True)
    levels_completed: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
