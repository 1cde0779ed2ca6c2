"""
Discipline engine for LifeOS.

Pure scoring of one day's answers and ordering of the day history.
"""

from lifeos.engine.scoring import (
    DailyAnswers,
    DerivedScores,
    calculate_creation_ratio,
    calculate_discipline_score,
    calculate_pressure_level,
    calculate_time_integrity_score,
    is_shutdown_complete,
    score_answers,
)
from lifeos.engine.history import sort_by_date, latest_record

__all__ = [
    "DailyAnswers",
    "DerivedScores",
    "calculate_creation_ratio",
    "calculate_discipline_score",
    "calculate_pressure_level",
    "calculate_time_integrity_score",
    "is_shutdown_complete",
    "score_answers",
    "sort_by_date",
    "latest_record",
]
