"""
Database models for LifeOS.

Models: DayLog.
"""

import datetime as dt
from enum import Enum
from typing import Any, Dict, Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum as SQLEnum,
    Float,
    Integer,
    JSON,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class PressureLevel(str, Enum):
    """How hard tomorrow should push."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class ThinkingQuality(str, Enum):
    """Depth of the day's deep-thought answer, as judged by the AI analyst."""
    SURFACE = "Surface"
    PRACTICAL = "Practical"
    STRATEGIC = "Strategic"
    LONG_TERM = "Long-term"


class DayLog(Base):
    """
    One calendar day's submitted answers plus derived scores.

    The date is unique: saving a day again replaces its answers and
    recomputes every derived column.
    """

    __tablename__ = "day_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    date: Mapped[dt.date] = mapped_column(Date, unique=True, index=True, nullable=False)
    answers: Mapped[Dict[str, Any]] = mapped_column(JSON, default=dict)

    # Derived, never edited directly
    discipline_score: Mapped[int] = mapped_column(Integer, default=0)
    time_integrity_score: Mapped[int] = mapped_column(Integer, default=100)
    creation_ratio: Mapped[float] = mapped_column(Float, default=0.0)
    pressure_level: Mapped[PressureLevel] = mapped_column(
        SQLEnum(PressureLevel), default=PressureLevel.LOW
    )
    shutdown_complete: Mapped[bool] = mapped_column(Boolean, default=False)

    photo_path: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    synced: Mapped[bool] = mapped_column(Boolean, default=False)

    # AI annotations, opaque to the discipline engine
    ai_analysis: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    daily_direction: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    reality_check: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    thinking_quality: Mapped[Optional[ThinkingQuality]] = mapped_column(
        SQLEnum(ThinkingQuality), nullable=True
    )

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime, default=dt.datetime.utcnow, onupdate=dt.datetime.utcnow
    )

    @property
    def photo_present(self) -> bool:
        """True if an identity-proof image is attached to this day."""
        return bool(self.photo_path)

    def __repr__(self) -> str:
        pressure = self.pressure_level.value if self.pressure_level else None
        return (
            f"<DayLog {self.date}: discipline={self.discipline_score} "
            f"pressure={pressure} shutdown={self.shutdown_complete}>"
        )
