"""
Date utilities for LifeOS.

Every engine function works on plain calendar days. These helpers
normalize whatever the caller has (date, datetime, ISO string) down to
a day so that time-of-day never affects a count.
"""

import math
from datetime import date, datetime, timedelta
from typing import Union
from zoneinfo import ZoneInfo

DayLike = Union[date, datetime, str]


def as_day(value: DayLike) -> date:
    """
    Normalize a date-like value to a calendar day.

    Examples:
        date(2024, 3, 1) -> date(2024, 3, 1)
        datetime(2024, 3, 1, 23, 59) -> date(2024, 3, 1)
        "2024-03-01" -> date(2024, 3, 1)

    Raises:
        ValueError: if a string is not an ISO date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


def days_between(earlier: DayLike, later: DayLike) -> int:
    """
    Whole calendar days between two days, ignoring direction.

    Both ends are taken at midnight, so the ceiling of the absolute
    difference is simply the day count.
    """
    delta = as_day(later) - as_day(earlier)
    return math.ceil(abs(delta.total_seconds()) / timedelta(days=1).total_seconds())


def previous_day(value: DayLike) -> date:
    """The calendar day before the given one."""
    return as_day(value) - timedelta(days=1)


def today_in(timezone: str) -> date:
    """
    Current calendar day in the given timezone.

    Read once per command and pass the result down.
    """
    return datetime.now(ZoneInfo(timezone)).date()


def format_day_human(day: DayLike, today: DayLike) -> str:
    """
    Describe a day relative to today.

    Examples:
        same day -> "today"
        1 day back -> "yesterday"
        5 days back -> "5 days ago"
    """
    delta = (as_day(today) - as_day(day)).days

    if delta == 0:
        return "today"
    elif delta == 1:
        return "yesterday"
    elif delta == -1:
        return "tomorrow"
    elif delta > 1:
        return f"{delta} days ago"
    else:
        return f"in {-delta} days"
