"""Date parsing and rendering for date-formatted fields."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

_FALLBACK_FORMATS = (
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M:%S",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%b %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
)


def parse_date(value: Any) -> datetime | None:
    """Parse a JSON value into a datetime.

    Accepts ISO-8601 strings, a few common US and RFC 2822 forms, and numbers
    as epoch milliseconds. Returns None when the value is not a date.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


def _as_utc(dt: datetime) -> datetime:
    # Naive datetimes are taken to be UTC.
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def epoch_millis(dt: datetime) -> int:
    return int(_as_utc(dt).timestamp() * 1000)


def short_date(dt: datetime) -> str:
    """``M/D/YYYY`` in the datetime's own offset."""
    return f"{dt.month}/{dt.day}/{dt.year}"


def iso_date(dt: datetime) -> str:
    """UTC calendar date as ``YYYY-MM-DD``."""
    return _as_utc(dt).date().isoformat()


def relative_age(dt: datetime, now: datetime | None = None) -> str:
    """Age bucketed into seconds, minutes, hours or days (``5m ago``)."""
    if now is None:
        now = datetime.now(timezone.utc)
    seconds = math.floor((_as_utc(now) - _as_utc(dt)).total_seconds())
    if seconds < 60:
        return f"{seconds}s ago"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"
