"""UTC 시간 헬퍼.

UTC time helpers. SQLite returns naive datetimes for timezone-aware columns,
so values read back from the database are normalized before comparison.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """현재 UTC 시각 (Current time, timezone-aware UTC)."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """naive datetime은 UTC로 간주합니다 (Treat naive datetimes as UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
