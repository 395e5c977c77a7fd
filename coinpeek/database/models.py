from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class UTCDateTime(TypeDecorator):
    """DateTime column that always round-trips as an aware UTC value.

    SQLite has no timezone storage, so aware values are normalized to UTC
    before writing and naive values are assumed to be UTC already.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc)


class Item(Base):
    """A single timestamped record.

    The primary key is assigned by SQLite on insert; until the row is
    flushed ``id`` is ``None``.
    """

    __tablename__ = "items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    timestamp = Column(UTCDateTime, nullable=False)

    def __init__(self, timestamp: datetime):
        if timestamp is None:
            raise ValueError("Item timestamp is required")
        self.timestamp = timestamp

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return f"Item(id={self.id}, timestamp={self.timestamp})"
