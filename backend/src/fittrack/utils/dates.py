from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Tuple


def utcnow() -> datetime:
    """Current time as a naive UTC datetime (the internal timestamp representation)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def normalize_timestamp(value: Any) -> datetime:
    """Normalize ``YYYY-MM-DD``, ISO timestamps, dates and datetimes to naive UTC.

    - ``date`` / ``YYYY-MM-DD`` -> midnight of that day
    - aware datetimes (or strings with offset / ``Z``) are converted to UTC first
    - anything else (epoch numbers included) is rejected with ``ValueError``
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        text = value.strip()
        if len(text) == 10:
            return datetime.combine(date.fromisoformat(text), time.min)
        if text.endswith("Z") or text.endswith("z"):
            text = text[:-1] + "+00:00"
        return normalize_timestamp(datetime.fromisoformat(text))
    raise ValueError(f"expected a date or an ISO 8601 timestamp, got {type(value).__name__}")


def as_day(value: Any) -> date:
    """Calendar-date portion of a timestamp-like value."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return normalize_timestamp(value).date()


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)
