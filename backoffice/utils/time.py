"""Time window helpers used for per-day order queries."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone


def day_window_utc(day: date) -> tuple[datetime, datetime]:
    """Return [start, end) UTC boundaries of the given calendar day.

    Orders are stored with UTC timestamps, so day filtering uses UTC
    boundaries as well.
    """
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)
