"""
Weekly review module.

Generates behavioral summaries for weekly reflection.
"""

import logging
from collections import Counter
from datetime import timedelta
from pathlib import Path
from typing import Iterable, Optional

from lifeos.core.config import Config
from lifeos.core.models import DayLog, PressureLevel
from lifeos.core.utils import as_day, today_in
from lifeos.engine.history import sort_by_date
from lifeos.review.streak import calculate_strict_streak

logger = logging.getLogger(__name__)


def _average(values) -> Optional[float]:
    values = list(values)
    return sum(values) / len(values) if values else None


def get_weekly_stats(
    records: Iterable[DayLog],
    today,
    days: int = 7,
    config: Optional[Config] = None,
) -> dict:
    """
    Summarize the logs dated within the last N days (today included).
    """
    records = list(records)
    today = as_day(today)
    cutoff = today - timedelta(days=days - 1)

    window = [r for r in sort_by_date(records) if cutoff <= as_day(r.date) <= today]

    streak_kwargs = {}
    if config:
        streak_kwargs = {
            "required_namaz": config.required_namaz,
            "max_gap_days": config.streak_max_gap_days,
        }
    streak = calculate_strict_streak(records, today, **streak_kwargs)

    total = len(window)
    if total == 0:
        return {
            "days": days,
            "total_logs": 0,
            "missed_days": days,
            "avg_discipline": None,
            "avg_time_integrity": None,
            "avg_creation_ratio": None,
            "pressure_breakdown": None,
            "shutdown_complete_pct": None,
            "top_excuse": None,
            "streak": streak,
            "logs": [],
        }

    pressure_counter = Counter(r.pressure_level for r in window)
    pressure_breakdown = {level.value: pressure_counter.get(level, 0) for level in PressureLevel}

    shutdown_done = sum(1 for r in window if r.shutdown_complete)

    excuses = Counter(
        (r.answers or {}).get("excuseType")
        for r in window
        if (r.answers or {}).get("excuseType") not in (None, "", "None")
    )
    top_excuse = excuses.most_common(1)[0][0] if excuses else None

    return {
        "days": days,
        "total_logs": total,
        "missed_days": days - total,
        "avg_discipline": _average(r.discipline_score for r in window),
        "avg_time_integrity": _average(r.time_integrity_score for r in window),
        "avg_creation_ratio": _average(r.creation_ratio for r in window),
        "pressure_breakdown": pressure_breakdown,
        "shutdown_complete_pct": shutdown_done / total * 100,
        "top_excuse": top_excuse,
        "streak": streak,
        "logs": window,
    }


def format_weekly_review(stats: dict) -> str:
    """
    Format weekly review as plain text.
    """
    days = stats["days"]

    lines = [
        f"LifeOS - Weekly Truth Report (Last {days} days)",
        "",
    ]

    if stats["total_logs"] == 0:
        lines.extend([
            "No days logged in this period.",
            "",
            "Review focus:",
            "- What replaced the daily log?",
            "- Which day did the chain break, and why?",
        ])
        return "\n".join(lines)

    lines.extend([
        f"Days logged: {stats['total_logs']}",
        f"Days missed: {stats['missed_days']}",
        f"Strict streak: {stats['streak']}",
        "",
        "Scores:",
        f"Discipline: {stats['avg_discipline']:.0f}",
        f"Time integrity: {stats['avg_time_integrity']:.0f}",
        f"Creation ratio: {stats['avg_creation_ratio']:.2f}",
        f"Shutdown completed: {stats['shutdown_complete_pct']:.0f}%",
        "",
    ])

    pressure = stats["pressure_breakdown"]
    lines.extend([
        "Pressure:",
        f"High: {pressure[PressureLevel.HIGH.value]}",
        f"Medium: {pressure[PressureLevel.MEDIUM.value]}",
        f"Low: {pressure[PressureLevel.LOW.value]}",
        "",
    ])

    if stats["top_excuse"]:
        lines.extend([f"Most common excuse: {stats['top_excuse']}", ""])

    # Suggest ONE change
    if stats["missed_days"] > 0:
        lines.append("ONE CHANGE NEXT WEEK:")
        lines.append("-> Log every single day, even the bad ones")
        lines.append("")
    elif stats["shutdown_complete_pct"] < 100:
        lines.append("ONE CHANGE NEXT WEEK:")
        lines.append("-> Finish the shutdown ritual before sleeping")
        lines.append("")
    elif stats["avg_creation_ratio"] < 0.5:
        lines.append("ONE CHANGE NEXT WEEK:")
        lines.append("-> Create before you consume, every morning")
        lines.append("")
    elif pressure[PressureLevel.HIGH.value] > pressure[PressureLevel.LOW.value]:
        lines.append("ONE CHANGE NEXT WEEK:")
        lines.append("-> Pray all five and cap consumption under 3 hours")
        lines.append("")

    return "\n".join(lines)


def build_weekly_review(config: Config, days: Optional[int] = None, today=None) -> str:
    """
    Load logs and format the review for the configured window.
    """
    from lifeos.ingest.daily import load_day_logs

    days = days or config.review_days
    today = today or today_in(config.timezone)
    stats = get_weekly_stats(load_day_logs(config), today, days, config)
    return format_weekly_review(stats)


def export_weekly_review(config: Config, days: Optional[int] = None, filepath: str = None, today=None) -> str:
    """
    Export weekly review to file.

    Returns file path.
    """
    today = as_day(today or today_in(config.timezone))
    if not filepath:
        filepath = f"data/weekly_review_{today.strftime('%Y%m%d')}.txt"

    review = build_weekly_review(config, days, today)
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w") as f:
        f.write(review)

    logger.info(f"Weekly review exported to {filepath}")
    return filepath
