"""SQLAlchemy declarative Base and shared column helpers."""

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


def utcnow() -> datetime:
    """Timezone-aware now; used as the client-side default for timestamp columns."""
    return datetime.now(timezone.utc)
