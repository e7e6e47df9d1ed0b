from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Optional, Union


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value: Union[date, str, None]) -> Optional[date]:
    """Accept a date or a naive YYYY-MM-DD string; None when it cannot be read."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip()[:10])
    except ValueError:
        return None


def clock_to_minutes(value: Optional[str]) -> Optional[int]:
    """Convert a wall-clock 'HH:MM' (or 'HH:MM:SS') into minutes after midnight.

    Returns None for missing or malformed values instead of raising.
    """
    if not value:
        return None
    parts = str(value).strip().split(":")
    if len(parts) < 2:
        return None
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError:
        return None
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return None
    return hours * 60 + minutes


def whole_years_between(start: date, end: date) -> int:
    """Completed years from start to end, never negative."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return max(years, 0)


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]

