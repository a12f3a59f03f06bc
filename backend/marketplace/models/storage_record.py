"""Storage Record ORM — one row per logical marketplace record.

Invariants:
    - key is the primary key (listings, accounts, admin session, current user)
    - value holds the whole JSON document for that key
    - updated_at refreshed on every write

Design Decisions:
    - JSON column for whole collections: every mutation rewrites the full
      collection, so the row is never partially updated
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.db.base import Base


class StorageRecord(Base):
    """Key/value record holding one JSON document."""
    __tablename__ = "storage_records"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
