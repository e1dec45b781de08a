"""
Base mixins for models.

This module provides the timestamp fields shared by every blog entity.
"""

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin(SQLModel):
    """
    Mixin adding ``created_at`` / ``updated_at`` to a table model.

    Fields:
        created_at: Set once when the row is inserted
        updated_at: Refreshed by ``touch()`` on every successful update

    Usage:
        class MyModel(TimestampMixin, table=True):
            id: Optional[int] = Field(default=None, primary_key=True)
            name: str

    Both fields default to the current time, but creation code should pass the
    same instant to both so that a new row has ``created_at == updated_at``.
    """

    # Stored as naive UTC, no offset
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=False), nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=False), nullable=False)

    def touch(self) -> None:
        """Bump ``updated_at``; the new value is always strictly later than the old one."""
        now = utcnow()
        if self.updated_at is not None and now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now
