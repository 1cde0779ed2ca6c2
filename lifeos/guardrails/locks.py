"""
Access locks.

Two gates decide whether the app may be used today:

- Shutdown gate: yesterday was logged but its shutdown ritual is
  unfinished, so today stays closed until yesterday is re-saved.
- Inactivity lockout: no log for more than the allowed number of days
  freezes everything except the log form.

Both take "today" from the caller and never touch storage.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from lifeos.core.config import Config
from lifeos.core.models import DayLog
from lifeos.core.utils import as_day, days_between, previous_day
from lifeos.engine.history import find_by_date, latest_record

logger = logging.getLogger(__name__)

DEFAULT_LOCKOUT_MAX_GAP_DAYS = 2


class LockWarning:
    """A lock reported to the user."""

    def __init__(self, category: str, message: str, blocking_date: Optional[date] = None):
        self.category = category
        self.message = message
        self.blocking_date = blocking_date

    def __str__(self) -> str:
        return f"[{self.category}] {self.message}"


def is_shutdown_locked(records: Iterable[DayLog], today) -> bool:
    """
    Check whether today's entry flow is locked by yesterday's shutdown.

    No record for yesterday means no lock: gaps are the lockout's job.
    """
    yesterday = find_by_date(records, previous_day(today))
    return yesterday is not None and not yesterday.shutdown_complete


def days_since_last_log(records: Iterable[DayLog], today) -> Optional[int]:
    """Whole days between the latest record and today. None if nothing logged."""
    latest = latest_record(records)
    if latest is None:
        return None
    return days_between(latest.date, today)


def is_locked_out(
    records: Iterable[DayLog],
    today,
    max_gap_days: int = DEFAULT_LOCKOUT_MAX_GAP_DAYS,
) -> bool:
    """
    Check whether prolonged absence froze the app.

    Locked when the latest log is more than max_gap_days away from today.
    An empty history never locks.
    """
    gap = days_since_last_log(records, today)
    return gap is not None and gap > max_gap_days


def check_shutdown_gate(records: List[DayLog], today) -> Optional[LockWarning]:
    """
    Shutdown gate as a user-facing warning.
    """
    if is_shutdown_locked(records, today):
        yesterday = previous_day(today)
        return LockWarning(
            "SHUTDOWN_INCOMPLETE",
            f"Shutdown ritual for {yesterday.isoformat()} is incomplete. "
            f"Complete yesterday's log to unlock today.",
            blocking_date=yesterday,
        )

    return None


def check_inactivity_lockout(
    records: List[DayLog],
    today,
    max_gap_days: int = DEFAULT_LOCKOUT_MAX_GAP_DAYS,
) -> Optional[LockWarning]:
    """
    Inactivity lockout as a user-facing warning.
    """
    if is_locked_out(records, today, max_gap_days):
        gap = days_since_last_log(records, today)
        return LockWarning(
            "INACTIVITY_LOCK",
            f"No log for {gap} days. Analytics and history are locked. "
            f"Log today to unlock.",
            blocking_date=as_day(today),
        )

    return None


def check_locks(
    records: Iterable[DayLog],
    today,
    config: Optional[Config] = None,
) -> List[LockWarning]:
    """
    Run all lock checks.

    Returns list of warnings (empty if the app is open).
    """
    records = list(records)
    max_gap = config.lockout_max_gap_days if config else DEFAULT_LOCKOUT_MAX_GAP_DAYS

    warnings: List[LockWarning] = []

    lockout_warning = check_inactivity_lockout(records, today, max_gap)
    if lockout_warning:
        warnings.append(lockout_warning)

    shutdown_warning = check_shutdown_gate(records, today)
    if shutdown_warning:
        warnings.append(shutdown_warning)

    for warning in warnings:
        logger.warning(f"Lock: {warning}")

    return warnings


def print_locks(
    records: Iterable[DayLog],
    today,
    config: Optional[Config] = None,
) -> List[LockWarning]:
    """
    Run lock checks and print them to stdout.
    """
    warnings = check_locks(records, today, config)

    if not warnings:
        print("No locks. Today is open.")
        return warnings

    print("\nLocks:")
    print("-" * 50)
    for warning in warnings:
        print(f"  {warning}")
    print()

    return warnings
