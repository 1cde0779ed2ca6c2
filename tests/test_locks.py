"""
Unit tests for access locks.

Tests the shutdown gate and the inactivity lockout against
fixed dates, never the wall clock.
"""

import pytest
import sys
from datetime import date, datetime, timedelta
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lifeos.core.config import Config
from lifeos.core.models import DayLog
from lifeos.guardrails.locks import (
    check_locks,
    days_since_last_log,
    is_locked_out,
    is_shutdown_locked,
)

TODAY = date(2024, 3, 15)


def make_log(days_ago: int, shutdown_complete: bool = True) -> DayLog:
    return DayLog(
        date=TODAY - timedelta(days=days_ago),
        answers={},
        shutdown_complete=shutdown_complete,
    )


class TestInactivityLockout:
    """Test multi-day absence lockout."""

    def test_empty_history_never_locks(self):
        """First use is open."""
        assert is_locked_out([], TODAY) is False
        assert days_since_last_log([], TODAY) is None

    def test_three_days_locks(self):
        """Latest log three days back -> locked."""
        assert is_locked_out([make_log(3)], TODAY) is True

    def test_two_days_open(self):
        """Latest log two days back -> still open."""
        assert is_locked_out([make_log(2)], TODAY) is False

    def test_uses_latest_not_first(self):
        """Input order does not matter."""
        logs = [make_log(5), make_log(1), make_log(10)]
        assert days_since_last_log(logs, TODAY) == 1
        assert is_locked_out(logs, TODAY) is False

    def test_time_of_day_ignored(self):
        """A late-night timestamp still counts as its calendar day."""
        today_evening = datetime(2024, 3, 15, 23, 59)
        assert days_since_last_log([make_log(2)], today_evening) == 2
        assert is_locked_out([make_log(2)], today_evening) is False

    def test_configurable_gap(self):
        """Stricter gap locks sooner."""
        assert is_locked_out([make_log(2)], TODAY, max_gap_days=1) is True


class TestShutdownGate:
    """Test the day-to-day shutdown chain."""

    def test_yesterday_complete_unlocks(self):
        """All shutdown answers given yesterday -> today open."""
        assert is_shutdown_locked([make_log(1, True)], TODAY) is False

    def test_yesterday_incomplete_locks(self):
        """Unfinished ritual yesterday -> today locked."""
        assert is_shutdown_locked([make_log(1, False)], TODAY) is True

    def test_no_yesterday_unlocks(self):
        """Gap days are not this gate's concern."""
        assert is_shutdown_locked([make_log(2, False)], TODAY) is False
        assert is_shutdown_locked([], TODAY) is False

    def test_today_incomplete_does_not_lock_today(self):
        """Only yesterday's record matters."""
        assert is_shutdown_locked([make_log(0, False)], TODAY) is False

    def test_duplicate_dates_last_wins(self):
        """A later copy of yesterday replaces the earlier one."""
        logs = [make_log(1, False), make_log(1, True)]
        assert is_shutdown_locked(logs, TODAY) is False

    def test_string_today(self):
        """ISO strings are accepted for today."""
        assert is_shutdown_locked([make_log(1, False)], "2024-03-15") is True


class TestCheckLocks:
    """Test the combined lock runner."""

    def test_open_day(self):
        """No locks -> empty list."""
        assert check_locks([make_log(1, True)], TODAY) == []

    def test_shutdown_warning(self):
        """Shutdown lock names the day to fix."""
        warnings = check_locks([make_log(1, False)], TODAY)
        assert len(warnings) == 1
        assert warnings[0].category == "SHUTDOWN_INCOMPLETE"
        assert warnings[0].blocking_date == date(2024, 3, 14)
        assert "2024-03-14" in str(warnings[0])

    def test_lockout_warning(self):
        """Absence lock reports the gap."""
        warnings = check_locks([make_log(4)], TODAY)
        assert [w.category for w in warnings] == ["INACTIVITY_LOCK"]
        assert "4 days" in warnings[0].message

    def test_config_gap(self):
        """Config overrides the default lockout gap."""
        config = Config(lockout_max_gap_days=5)
        assert check_locks([make_log(4)], TODAY, config) == []
