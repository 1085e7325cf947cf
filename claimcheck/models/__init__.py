# claimcheck/models/__init__.py

from datetime import datetime, timezone
from sqlalchemy.orm import declarative_base


Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat_utc(value: datetime | None) -> str | None:
    """Stored timestamps are naive UTC; emit them with an explicit +00:00 offset."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


from .user import User  # noqa: E402
from .history import SearchHistory  # noqa: E402
