"""
Tests for daily log storage.

Runs against a throwaway SQLite database per test.
"""

import pytest
import sys
from datetime import date
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lifeos.core.config import Config
from lifeos.core.db import init_db, session_scope
from lifeos.core.models import DayLog, PressureLevel, ThinkingQuality
from lifeos.ingest.daily import (
    attach_analysis,
    get_day_log,
    get_or_start_day,
    load_day_logs,
    log_to_dict,
    new_day_log,
    save_day_log,
)
from lifeos.notify.ai import DailyAnalysis

DAY = date(2024, 3, 15)

ANSWERS = {
    "namaz": 5,
    "exercise": True,
    "creationMinutes": 150,
    "consumptionMinutes": 30,
    "shutdownRespect": True,
    "shutdownStupidity": True,
    "shutdownRepeat": "Late coffee",
}


@pytest.fixture
def config(tmp_path):
    return Config(database_path=str(tmp_path / "lifeos.db"), photo_dir=str(tmp_path / "photos"))


class TestNewDayLog:
    """Test the unsaved default record."""

    def test_defaults(self):
        """A fresh day starts with neutral derived values."""
        log = new_day_log("2024-03-15")
        assert log.date == DAY
        assert log.answers == {}
        assert log.discipline_score == 0
        assert log.time_integrity_score == 100
        assert log.creation_ratio == 0.0
        assert log.pressure_level == PressureLevel.LOW
        assert log.shutdown_complete is False
        assert log.photo_present is False

    def test_get_or_start_day_without_entry(self, config):
        """Nothing stored -> fresh unsaved day."""
        log = get_or_start_day(config, DAY)
        assert log.id is None
        assert log.answers == {}


class TestSessionScope:
    """Test the day log database session."""

    def test_creates_database_directory(self, tmp_path):
        """The database folder is created on first use."""
        config = Config(database_path=str(tmp_path / "nested" / "lifeos.db"))
        init_db(config)
        assert (tmp_path / "nested" / "lifeos.db").exists()

    def test_failed_save_rolls_back(self, config):
        """An error inside the scope leaves no half-written day."""
        init_db(config)
        with pytest.raises(RuntimeError):
            with session_scope(config) as session:
                session.add(new_day_log(DAY))
                session.flush()
                raise RuntimeError("interrupted")

        assert get_day_log(config, DAY) is None

    def test_logs_readable_after_close(self, config):
        """Loaded logs keep their values once the scope has closed."""
        save_day_log(config, DAY, ANSWERS)
        with session_scope(config) as session:
            log = session.query(DayLog).filter(DayLog.date == DAY).first()

        assert log.discipline_score == 95
        assert log.answers["namaz"] == 5


class TestSaveDayLog:
    """Test save and upsert."""

    def test_save_scores_answers(self, config):
        """Derived fields come from the saved answers."""
        log = save_day_log(config, DAY, ANSWERS)

        assert log.discipline_score == 95
        assert log.time_integrity_score == 94
        assert log.creation_ratio == 0.83
        assert log.pressure_level == PressureLevel.LOW
        assert log.shutdown_complete is True
        assert log.synced is False

    def test_upsert_by_date(self, config):
        """Saving the same day twice keeps one row with the new answers."""
        save_day_log(config, DAY, ANSWERS)
        save_day_log(config, DAY, {**ANSWERS, "namaz": 2, "shutdownRepeat": ""})

        logs = load_day_logs(config)
        assert len(logs) == 1
        assert logs[0].answers["namaz"] == 2
        assert logs[0].pressure_level == PressureLevel.HIGH
        assert logs[0].shutdown_complete is False

    def test_same_answers_same_scores(self, config):
        """Re-saving identical answers yields identical derived fields."""
        first = save_day_log(config, DAY, ANSWERS)
        second = save_day_log(config, DAY, dict(ANSWERS))

        for field in ("discipline_score", "time_integrity_score", "creation_ratio",
                      "pressure_level", "shutdown_complete"):
            assert getattr(first, field) == getattr(second, field)

    def test_load_is_oldest_first(self, config):
        """Stored order is chronological."""
        save_day_log(config, date(2024, 3, 15), ANSWERS)
        save_day_log(config, date(2024, 3, 13), ANSWERS)
        save_day_log(config, date(2024, 3, 14), ANSWERS)

        assert [log.date for log in load_day_logs(config)] == [
            date(2024, 3, 13),
            date(2024, 3, 14),
            date(2024, 3, 15),
        ]

    def test_photo_kept_on_resave(self, config):
        """Saving without a new photo keeps the attached one."""
        save_day_log(config, DAY, ANSWERS, photo_path="data/photos/2024-03-15.jpg")
        log = save_day_log(config, DAY, ANSWERS)
        assert log.photo_present is True
        assert get_day_log(config, DAY).photo_path == "data/photos/2024-03-15.jpg"


class TestAttachAnalysis:
    """Test AI annotations."""

    def test_annotations_do_not_touch_scores(self, config):
        """Only the annotation columns change."""
        saved = save_day_log(config, DAY, ANSWERS)
        analysis = DailyAnalysis(
            text="Audit",
            daily_direction="Write before email.",
            reality_check="Top 30%.",
            thinking_quality=ThinkingQuality.STRATEGIC,
        )

        log = attach_analysis(config, DAY, analysis)

        assert log.daily_direction == "Write before email."
        assert log.thinking_quality == ThinkingQuality.STRATEGIC
        assert log.discipline_score == saved.discipline_score
        assert log.pressure_level == saved.pressure_level

    def test_annotations_survive_resave(self, config):
        """Correcting answers keeps the analysis."""
        save_day_log(config, DAY, ANSWERS)
        attach_analysis(config, DAY, DailyAnalysis("Audit", "Go.", "Average.", ThinkingQuality.PRACTICAL))

        log = save_day_log(config, DAY, {**ANSWERS, "namaz": 4})

        assert log.ai_analysis == "Audit"
        assert log.thinking_quality == ThinkingQuality.PRACTICAL
        assert log.pressure_level == PressureLevel.HIGH

    def test_missing_day(self, config):
        """No log -> nothing attached."""
        analysis = DailyAnalysis("Audit", "Go.", "Average.", ThinkingQuality.SURFACE)
        assert attach_analysis(config, DAY, analysis) is None


class TestLogToDict:
    """Test export flattening."""

    def test_row(self, config):
        """Derived columns first, booleans as Yes/No, unanswered as blank."""
        row = log_to_dict(save_day_log(config, DAY, ANSWERS))

        assert row["date"] == "2024-03-15"
        assert row["pressure_level"] == "LOW"
        assert row["shutdown_complete"] == "Yes"
        assert row["exercise"] == "Yes"
        assert row["water"] == ""
        assert list(row)[:3] == ["date", "discipline_score", "time_integrity_score"]
