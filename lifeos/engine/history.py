"""
Day history ordering.

Lock and streak checks never trust the caller's ordering. They go
through here to get an explicitly sorted, date-unique snapshot.
"""

from datetime import date
from typing import Dict, Iterable, List, Optional

from lifeos.core.models import DayLog
from lifeos.core.utils import as_day


def unique_by_date(records: Iterable[DayLog]) -> Dict[date, DayLog]:
    """
    Index records by calendar day.

    Duplicate dates: the last occurrence wins.
    """
    by_date: Dict[date, DayLog] = {}
    for record in records:
        by_date[as_day(record.date)] = record
    return by_date


def sort_by_date(records: Iterable[DayLog], descending: bool = False) -> List[DayLog]:
    """Date-unique records in chronological (or reverse) order."""
    by_date = unique_by_date(records)
    return [by_date[day] for day in sorted(by_date, reverse=descending)]


def find_by_date(records: Iterable[DayLog], day) -> Optional[DayLog]:
    """Record for an exact calendar day, if any."""
    return unique_by_date(records).get(as_day(day))


def latest_record(records: Iterable[DayLog]) -> Optional[DayLog]:
    """Chronologically latest record, or None for an empty history."""
    ordered = sort_by_date(records, descending=True)
    return ordered[0] if ordered else None
