"""
Tests for the weekly review.
"""

import pytest
import sys
from datetime import date, timedelta
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lifeos.core.config import Config
from lifeos.core.models import DayLog, PressureLevel
from lifeos.ingest.daily import save_day_log
from lifeos.review.weekly import export_weekly_review, format_weekly_review, get_weekly_stats

TODAY = date(2024, 3, 15)


def make_log(days_ago: int, pressure=PressureLevel.MEDIUM, shutdown=True, excuse="None") -> DayLog:
    return DayLog(
        date=TODAY - timedelta(days=days_ago),
        answers={"namaz": 5, "creationMinutes": 90, "excuseType": excuse},
        discipline_score=70,
        time_integrity_score=80,
        creation_ratio=0.6,
        pressure_level=pressure,
        shutdown_complete=shutdown,
        photo_path="photo.jpg",
    )


class TestWeeklyStats:
    """Test stats over the review window."""

    def test_empty_window(self):
        """No logs in range -> zero counts."""
        stats = get_weekly_stats([make_log(30)], TODAY)
        assert stats["total_logs"] == 0
        assert stats["missed_days"] == 7
        assert stats["avg_discipline"] is None

    def test_window_bounds(self):
        """Today and the six days before it are in; day seven is out."""
        logs = [make_log(i) for i in range(8)]
        stats = get_weekly_stats(logs, TODAY)
        assert stats["total_logs"] == 7
        assert stats["missed_days"] == 0
        assert stats["logs"][0].date == date(2024, 3, 9)

    def test_breakdowns(self):
        """Pressure counts, shutdown share, top excuse, streak."""
        logs = [
            make_log(0, PressureLevel.HIGH, excuse="Tired"),
            make_log(1, PressureLevel.HIGH, shutdown=False, excuse="Tired"),
            make_log(2, PressureLevel.LOW, excuse="Bored"),
            make_log(3, PressureLevel.MEDIUM),
        ]
        stats = get_weekly_stats(logs, TODAY)

        assert stats["pressure_breakdown"] == {"LOW": 1, "MEDIUM": 1, "HIGH": 2}
        assert stats["shutdown_complete_pct"] == 75
        assert stats["top_excuse"] == "Tired"
        assert stats["streak"] == 4
        assert stats["avg_creation_ratio"] == pytest.approx(0.6)


class TestFormatWeeklyReview:
    """Test the plain-text report."""

    def test_empty(self):
        """No logs -> review focus questions."""
        text = format_weekly_review(get_weekly_stats([], TODAY))
        assert "No days logged" in text

    def test_missed_days_suggestion(self):
        """Missing days take priority as the ONE change."""
        text = format_weekly_review(get_weekly_stats([make_log(0), make_log(1)], TODAY))
        assert "Days missed: 5" in text
        assert "ONE CHANGE NEXT WEEK:" in text
        assert "Log every single day" in text

    def test_shutdown_suggestion(self):
        """Full week with an open shutdown asks to close the ritual."""
        logs = [make_log(i, shutdown=(i != 3)) for i in range(7)]
        text = format_weekly_review(get_weekly_stats(logs, TODAY))
        assert "Finish the shutdown ritual" in text


class TestExportWeeklyReview:
    """Test file export."""

    def test_export(self, tmp_path):
        """Review is written to the requested path."""
        config = Config(database_path=str(tmp_path / "lifeos.db"))
        save_day_log(config, TODAY, {"namaz": 5, "creationMinutes": 60})

        target = tmp_path / "reviews" / "week.txt"
        path = export_weekly_review(config, 7, filepath=str(target), today=TODAY)

        assert path == str(target)
        assert "Days logged: 1" in target.read_text()
