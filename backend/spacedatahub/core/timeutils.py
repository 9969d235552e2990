"""
Date/time helpers shared by the DONKI client and the impact engine.

DONKI works in UTC throughout: query windows are UTC calendar dates and
timestamps look like ``2024-05-10T12:00Z``.
"""

import math
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Tuple


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def default_date_window(now: Optional[datetime] = None, lookback_days: int = 10) -> Tuple[date, date]:
    """
    Default DONKI query window: (now - lookback_days, now), truncated to UTC dates.
    """
    now = now or utcnow()
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    start = now - timedelta(days=lookback_days)
    return start.date(), now.date()


def parse_timestamp(value) -> Optional[datetime]:
    """
    Parse a DONKI timestamp into an aware UTC datetime.

    Returns None for missing or unparseable values. Naive timestamps are
    taken to be UTC.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        # Offsets at the edges of the datetime range cannot be shifted to UTC
        return None


def hours_until(arrival: datetime, now: datetime) -> int:
    """Whole hours from now to arrival, rounded half-up."""
    hours = (arrival - now).total_seconds() / 3600.0
    return math.floor(hours + 0.5)
