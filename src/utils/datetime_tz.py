from __future__ import annotations

from datetime import datetime, timezone

from zoneinfo import ZoneInfo

# Default application timezone aligned with frontend
DEFAULT_TIMEZONE_NAME = "America/Guayaquil"
DEFAULT_TZ = ZoneInfo(DEFAULT_TIMEZONE_NAME)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC, assuming DEFAULT_TZ for naive values."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=DEFAULT_TZ)
    return dt.astimezone(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Attach UTC to naive values read back from the database (stored as UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 datetime (optional trailing 'Z') into UTC.

    Naive values are read in DEFAULT_TZ. Raises ``ValueError`` on bad input.
    """
    s = value.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    return to_utc(datetime.fromisoformat(s))
