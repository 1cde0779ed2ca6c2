"""
Daily scoring.

Pure functions mapping one day's raw answers to derived metrics.
No I/O and no failure modes: missing or unreadable answers fall back
to zero / False.
"""

import logging
import math
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Optional

from lifeos.core.models import PressureLevel
from lifeos.core.questions import QuestionDefinition, get_shutdown_questions

logger = logging.getLogger(__name__)

ENGINE_KEYS = ("creationMinutes", "consumptionMinutes", "namaz", "exercise")

# Discipline score
BASE_DISCIPLINE = 50
NAMAZ_POINTS = 4
EXERCISE_BONUS = 10
CREATION_HIGH_MINUTES = 120
CREATION_HIGH_BONUS = 15
CREATION_LOW_MINUTES = 60
CREATION_LOW_BONUS = 5
CONSUMPTION_PENALTY_MINUTES = 120
CONSUMPTION_PENALTY = 10
CONSUMPTION_SEVERE_MINUTES = 240
CONSUMPTION_SEVERE_PENALTY = 20

# Time integrity
CONSUMPTION_MINUTES_PER_POINT = 5
CONSUMPTION_OVER_CREATION_PENALTY = 15

# Pressure
HIGH_PRESSURE_CONSUMPTION = 180
FULL_NAMAZ = 5
LOW_PRESSURE_CREATION = 120
LOW_PRESSURE_CONSUMPTION = 60


def _as_number(value: Any) -> float:
    """Read a numeric answer. Missing, unparsable or negative -> 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0
    return int(number) if number.is_integer() else number


def _as_bool(value: Any) -> bool:
    """Read a boolean answer. Missing -> False."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "y", "1")
    if isinstance(value, (int, float)):
        return value != 0
    return False


def _clamp(value: float, low: int = 0, high: int = 100) -> int:
    return int(min(high, max(low, value)))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass
class DailyAnswers:
    """
    Typed view of the answers the engine depends on.

    Everything else the user answered is carried untouched in ``extras``.
    """
    creation_minutes: float = 0
    consumption_minutes: float = 0
    namaz: float = 0
    exercise: bool = False
    extras: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, answers: Optional[Mapping[str, Any]]) -> "DailyAnswers":
        """Build from a raw answer map, applying defaults."""
        answers = answers or {}
        return cls(
            creation_minutes=_as_number(answers.get("creationMinutes")),
            consumption_minutes=_as_number(answers.get("consumptionMinutes")),
            namaz=_as_number(answers.get("namaz")),
            exercise=_as_bool(answers.get("exercise")),
            extras={k: v for k, v in answers.items() if k not in ENGINE_KEYS},
        )


def _view(answers) -> DailyAnswers:
    if isinstance(answers, DailyAnswers):
        return answers
    return DailyAnswers.from_mapping(answers)


def calculate_discipline_score(answers) -> int:
    """
    Discipline score (0-100).

    Base 50, +4 per namaz, +10 for exercise, creation bonus,
    cumulative consumption penalty.
    """
    a = _view(answers)

    score = BASE_DISCIPLINE
    score += a.namaz * NAMAZ_POINTS
    if a.exercise:
        score += EXERCISE_BONUS

    if a.creation_minutes > CREATION_HIGH_MINUTES:
        score += CREATION_HIGH_BONUS
    elif a.creation_minutes > CREATION_LOW_MINUTES:
        score += CREATION_LOW_BONUS

    if a.consumption_minutes > CONSUMPTION_PENALTY_MINUTES:
        score -= CONSUMPTION_PENALTY
    if a.consumption_minutes > CONSUMPTION_SEVERE_MINUTES:
        score -= CONSUMPTION_SEVERE_PENALTY

    return _clamp(score)


def calculate_time_integrity_score(answers) -> int:
    """
    Time integrity score (0-100).

    Lose one point per 5 consumed minutes, and 15 more if
    consumption beat creation.
    """
    a = _view(answers)

    score = 100
    score -= _round_half_up(a.consumption_minutes / CONSUMPTION_MINUTES_PER_POINT)
    if a.consumption_minutes > a.creation_minutes:
        score -= CONSUMPTION_OVER_CREATION_PENALTY

    return _clamp(score)


def calculate_creation_ratio(answers) -> float:
    """Share of tracked minutes spent creating, two decimals, halves up. 0 when nothing tracked."""
    a = _view(answers)
    total = a.creation_minutes + a.consumption_minutes
    if total == 0:
        return 0.0
    ratio = Decimal(str(a.creation_minutes / total))
    return float(ratio.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def calculate_pressure_level(answers) -> PressureLevel:
    """
    Pressure for the next day.

    HIGH wins over LOW: heavy consumption or missed prayers always
    mean mandatory discomfort.
    """
    a = _view(answers)

    if a.consumption_minutes > HIGH_PRESSURE_CONSUMPTION or a.namaz < FULL_NAMAZ:
        return PressureLevel.HIGH
    if a.creation_minutes > LOW_PRESSURE_CREATION and a.consumption_minutes < LOW_PRESSURE_CONSUMPTION:
        return PressureLevel.LOW
    return PressureLevel.MEDIUM


def is_answered(value: Any) -> bool:
    """An answer counts if it is present and not blank. False is an answer."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def is_shutdown_complete(
    answers: Optional[Mapping[str, Any]],
    questions: Optional[List[QuestionDefinition]] = None,
) -> bool:
    """True iff every shutdown ritual question has an answer."""
    answers = answers or {}
    return all(is_answered(answers.get(q.id)) for q in get_shutdown_questions(questions))


@dataclass(frozen=True)
class DerivedScores:
    """Every derived field of a day log."""
    discipline_score: int
    time_integrity_score: int
    creation_ratio: float
    pressure_level: PressureLevel
    shutdown_complete: bool


def score_answers(
    answers: Optional[Mapping[str, Any]],
    questions: Optional[List[QuestionDefinition]] = None,
) -> DerivedScores:
    """Compute all derived fields from one answers snapshot."""
    view = DailyAnswers.from_mapping(answers)

    scores = DerivedScores(
        discipline_score=calculate_discipline_score(view),
        time_integrity_score=calculate_time_integrity_score(view),
        creation_ratio=calculate_creation_ratio(view),
        pressure_level=calculate_pressure_level(view),
        shutdown_complete=is_shutdown_complete(answers, questions),
    )

    logger.debug(f"Scored answers: {scores}")
    return scores
