"""
Daily log storage.

The only place day logs are written. Every save recomputes all derived
fields from the answers being saved and upserts by date.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from lifeos.core.config import Config
from lifeos.core.models import DayLog, PressureLevel
from lifeos.core.db import init_db, session_scope
from lifeos.core.questions import DAILY_QUESTIONS, QuestionDefinition
from lifeos.core.utils import as_day
from lifeos.engine.scoring import score_answers

logger = logging.getLogger(__name__)


def new_day_log(day) -> DayLog:
    """
    Blank log for a day with no entry yet.

    Not persisted until saved.
    """
    return DayLog(
        date=as_day(day),
        answers={},
        discipline_score=0,
        time_integrity_score=100,
        creation_ratio=0.0,
        pressure_level=PressureLevel.LOW,
        shutdown_complete=False,
        synced=False,
    )


def apply_derived_fields(
    log: DayLog,
    questions: Optional[List[QuestionDefinition]] = None,
) -> DayLog:
    """Recompute every derived column from the log's current answers."""
    scores = score_answers(log.answers, questions)

    log.discipline_score = scores.discipline_score
    log.time_integrity_score = scores.time_integrity_score
    log.creation_ratio = scores.creation_ratio
    log.pressure_level = scores.pressure_level
    log.shutdown_complete = scores.shutdown_complete

    return log


def load_day_logs(config: Config) -> List[DayLog]:
    """
    All day logs, oldest first.
    """
    init_db(config)

    with session_scope(config) as session:
        logs = session.query(DayLog).order_by(DayLog.date).all()
        return logs


def get_day_log(config: Config, day) -> Optional[DayLog]:
    """
    Stored log for a day, if any.
    """
    init_db(config)

    with session_scope(config) as session:
        return session.query(DayLog).filter(DayLog.date == as_day(day)).first()


def get_or_start_day(config: Config, day) -> DayLog:
    """Stored log for the day, or a fresh unsaved one."""
    return get_day_log(config, day) or new_day_log(day)


def save_day_log(
    config: Config,
    day,
    answers: Mapping[str, Any],
    photo_path: Optional[str] = None,
    questions: Optional[List[QuestionDefinition]] = None,
) -> DayLog:
    """
    Save a day's answers.

    Replaces the stored answers for that date (or creates the row),
    recomputes every derived field, and keeps existing AI annotations.
    A photo_path of None keeps the photo already attached.
    """
    init_db(config)
    target = as_day(day)
    catalog = DAILY_QUESTIONS if questions is None else questions

    with session_scope(config) as session:
        log = session.query(DayLog).filter(DayLog.date == target).first()

        if log is None:
            log = new_day_log(target)
            session.add(log)
            action = "Created"
        else:
            action = "Updated"

        log.answers = dict(answers)
        if photo_path is not None:
            log.photo_path = photo_path or None
        log.synced = False
        log.updated_at = datetime.utcnow()
        apply_derived_fields(log, catalog)

        session.flush()

        logger.info(
            f"{action} day log {target}: discipline={log.discipline_score} "
            f"integrity={log.time_integrity_score} ratio={log.creation_ratio} "
            f"pressure={log.pressure_level.value} shutdown={log.shutdown_complete}"
        )

        return log


def attach_analysis(config: Config, day, analysis) -> Optional[DayLog]:
    """
    Attach AI annotations to an already scored day.

    Only the annotation columns change. Returns None if the day has no log.
    """
    init_db(config)
    target = as_day(day)

    with session_scope(config) as session:
        log = session.query(DayLog).filter(DayLog.date == target).first()

        if log is None:
            logger.warning(f"No day log for {target}, analysis not attached")
            return None

        log.ai_analysis = analysis.text
        log.daily_direction = analysis.daily_direction
        log.reality_check = analysis.reality_check
        log.thinking_quality = analysis.thinking_quality

        logger.info(f"Attached AI analysis to {target}")
        return log


def log_to_dict(log: DayLog, questions: Optional[List[QuestionDefinition]] = None) -> Dict[str, Any]:
    """
    Flatten a day log for export: derived columns, then every catalog answer.
    """
    catalog = DAILY_QUESTIONS if questions is None else questions
    answers = log.answers or {}

    row: Dict[str, Any] = {
        "date": as_day(log.date).isoformat(),
        "discipline_score": log.discipline_score,
        "time_integrity_score": log.time_integrity_score,
        "creation_ratio": log.creation_ratio,
        "pressure_level": log.pressure_level.value if log.pressure_level else "",
        "shutdown_complete": "Yes" if log.shutdown_complete else "No",
        "photo": "Yes" if log.photo_present else "No",
    }
    for question in catalog:
        value = answers.get(question.id, "")
        if isinstance(value, bool):
            value = "Yes" if value else "No"
        row[question.id] = value

    row["daily_direction"] = log.daily_direction or ""
    row["thinking_quality"] = log.thinking_quality.value if log.thinking_quality else ""
    return row
