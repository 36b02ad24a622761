"""UTC clock and calendar-month arithmetic."""

import calendar
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def add_months(value: datetime, months: int) -> datetime:
    """Shift a datetime by whole calendar months.

    The day is clamped to the last day of the target month, so
    Nov 30 + 3 months lands on Feb 28 (or 29 in a leap year).
    Time of day and tzinfo are preserved.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)
