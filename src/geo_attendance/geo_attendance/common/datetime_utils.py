from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional


def now_utc() -> datetime:
    """Current aware UTC time; the default when callers pass no `now`."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones.

    Raises OverflowError for aware values whose UTC equivalent falls outside
    the datetime range.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_instant(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string, datetime, or epoch milliseconds into aware UTC.

    Returns None when the value cannot be read as an instant.
    """
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, datetime):
            return as_utc(value)
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        if isinstance(value, str) and value.strip():
            text = value.strip()
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            return as_utc(datetime.fromisoformat(text))
    except (OverflowError, OSError, ValueError):
        return None
    return None
