"""
Daily question catalog.

The fixed set of questions answered once per day. The discipline engine
reads only a handful of ids; the rest feed the log form, export and AI.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class QuestionType(str, Enum):
    """Answer kind expected by a question."""
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    SCALE = "SCALE"  # 1-5
    TEXT = "TEXT"
    SELECT = "SELECT"


SHUTDOWN_CATEGORY = "shutdown"

CATEGORY_TITLES = {
    "identity": "Identity & Visual Proof",
    "work": "Work & Creation",
    "decisions": "Decisions & Intelligence",
    "energy": "Energy",
    "discipline": "Discipline",
    "health": "Health",
    "money": "Money Awareness",
    "shutdown": "Shutdown Ritual",
}


@dataclass(frozen=True)
class QuestionDefinition:
    """A single daily question."""
    id: str
    label: str
    type: QuestionType
    category: str
    options: Optional[Tuple[str, ...]] = None

    @property
    def is_shutdown(self) -> bool:
        return self.category == SHUTDOWN_CATEGORY


def _q(id: str, label: str, type: QuestionType, category: str, options=None) -> QuestionDefinition:
    return QuestionDefinition(
        id=id,
        label=label,
        type=type,
        category=category,
        options=tuple(options) if options else None,
    )


DAILY_QUESTIONS: List[QuestionDefinition] = [
    # Identity & visual proof
    _q("faceMatch", "Did your face today match the man you want to become?", QuestionType.BOOLEAN, "identity"),
    _q("identityCheck", "Did actions match identity?", QuestionType.SELECT, "identity", ["Yes", "Partial", "No"]),
    _q("visibleWeakness", "What visible weakness do you notice today?", QuestionType.TEXT, "identity"),

    # Work & creation
    _q("businessWork", "Deep Work / Business done?", QuestionType.BOOLEAN, "work"),
    _q("creationMinutes", "Minutes Created (Building, Writing, Coding)", QuestionType.NUMBER, "work"),
    _q("consumptionMinutes", "Minutes Consumed (Social, Videos, Reading)", QuestionType.NUMBER, "work"),
    _q("skillInvested", "Primary Skill: Minutes Invested", QuestionType.NUMBER, "work"),

    # Decisions
    _q("goodDecision", "One GOOD decision made today", QuestionType.TEXT, "decisions"),
    _q("badDecision", "One BAD decision made today", QuestionType.TEXT, "decisions"),
    _q("decisionEmotion", "Emotion during bad decision", QuestionType.SELECT, "decisions",
       ["Calm", "Rushed", "Emotional", "Bored"]),
    _q("thinkingContent", "What did you think deeply about?", QuestionType.TEXT, "decisions"),
    _q("excuseType", "What excuse tried to appear today?", QuestionType.SELECT, "decisions",
       ["None", "Tired", "Bored", "Distracted", "Emotional"]),

    # Energy & health
    _q("energyMorning", "Morning Energy (1-5)", QuestionType.SCALE, "energy"),
    _q("energyAfternoon", "Afternoon Energy (1-5)", QuestionType.SCALE, "energy"),
    _q("energyNight", "Night Energy (1-5)", QuestionType.SCALE, "energy"),
    _q("namaz", "Namaz Prayed (0-5)", QuestionType.NUMBER, "discipline"),
    _q("exercise", "Exercise Done?", QuestionType.BOOLEAN, "health"),
    _q("water", "Water Intake (Liters)", QuestionType.NUMBER, "health"),

    # Money
    _q("moneySpent", "Money Spent Today (Estimate)", QuestionType.NUMBER, "money"),
    _q("spendingCategory", "Primary Spending Category", QuestionType.SELECT, "money",
       ["None", "Food", "Transport", "Investment", "Useless"]),

    # Shutdown ritual (mandatory for next day access)
    _q("shutdownRespect", "Did I respect my time today?", QuestionType.BOOLEAN, SHUTDOWN_CATEGORY),
    _q("shutdownStupidity", "Did I avoid obvious stupidity?", QuestionType.BOOLEAN, SHUTDOWN_CATEGORY),
    _q("shutdownRepeat", "What must not repeat tomorrow?", QuestionType.TEXT, SHUTDOWN_CATEGORY),
]


def get_shutdown_questions(
    questions: Optional[List[QuestionDefinition]] = None,
) -> List[QuestionDefinition]:
    """Questions that make up the shutdown ritual."""
    catalog = DAILY_QUESTIONS if questions is None else questions
    return [q for q in catalog if q.is_shutdown]
