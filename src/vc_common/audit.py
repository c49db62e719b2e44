"""Audit timestamps shared by persisted entities.

Entities embed an ``AuditInfo`` instead of inheriting from a common base.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values pass through."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


@dataclass
class AuditInfo:
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @classmethod
    def now(cls) -> "AuditInfo":
        ts = utc_now()
        return cls(created_at=ts, updated_at=ts)

    def touch(self, at: datetime | None = None) -> None:
        self.updated_at = at or utc_now()
