"""
Strict compliance streak.

Counts consecutive strict days ending today or yesterday. A strict day
has every prayer, some creation time, and an identity photo.
"""

import logging
from typing import Iterable

from lifeos.core.models import DayLog
from lifeos.core.utils import as_day, previous_day
from lifeos.engine.history import sort_by_date
from lifeos.engine.scoring import DailyAnswers

logger = logging.getLogger(__name__)

DEFAULT_REQUIRED_NAMAZ = 5
DEFAULT_MAX_GAP_DAYS = 1.5


def is_strict_day(record: DayLog, required_namaz: int = DEFAULT_REQUIRED_NAMAZ) -> bool:
    """
    Check one day against the strict bar.

    Exactly the required namaz count, strictly positive creation minutes,
    photo attached.
    """
    answers = DailyAnswers.from_mapping(record.answers)
    return (
        answers.namaz == required_namaz
        and answers.creation_minutes > 0
        and record.photo_present
    )


def calculate_strict_streak(
    records: Iterable[DayLog],
    today,
    required_namaz: int = DEFAULT_REQUIRED_NAMAZ,
    max_gap_days: float = DEFAULT_MAX_GAP_DAYS,
) -> int:
    """
    Current strict streak.

    Zero when the latest log is neither today nor yesterday. Otherwise
    walks back from the latest log, stopping at the first non-strict day
    or at a gap wider than max_gap_days.
    """
    ordered = sort_by_date(records, descending=True)
    if not ordered:
        return 0

    today = as_day(today)
    latest = as_day(ordered[0].date)
    if latest not in (today, previous_day(today)):
        logger.debug(f"Streak broken: latest log {latest} is not today or yesterday")
        return 0

    streak = 0
    for index, record in enumerate(ordered):
        if not is_strict_day(record, required_namaz):
            break
        streak += 1

        if index + 1 < len(ordered):
            gap = as_day(record.date) - as_day(ordered[index + 1].date)
            if gap.days > max_gap_days:
                break

    return streak
