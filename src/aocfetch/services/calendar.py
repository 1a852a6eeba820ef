"""Puzzle calendar utilities.

The puzzle service unlocks each day at midnight UTC-5, so "today" is always
computed in that fixed offset rather than the host's local timezone.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

SERVICE_UTC_OFFSET_HOURS = -5


def service_now(
    now: datetime | None = None, *, utc_offset_hours: int = SERVICE_UTC_OFFSET_HOURS
) -> datetime:
    """Return `now` (default: the current instant) in the service timezone.

    Naive datetimes are interpreted as UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone(timedelta(hours=utc_offset_hours)))


def default_day_year(
    now: datetime | None = None, *, utc_offset_hours: int = SERVICE_UTC_OFFSET_HOURS
) -> tuple[int, int]:
    """Return the (day, year) pair used when no explicit arguments are given."""
    current = service_now(now, utc_offset_hours=utc_offset_hours)
    return current.day, current.year


__all__ = ["SERVICE_UTC_OFFSET_HOURS", "default_day_year", "service_now"]
