#!/usr/bin/env python3
"""
Log a day.

This is the ONLY way day logs should be entered into the system.
Every question is asked, the shutdown ritual last.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging
import shutil
from datetime import date
from typing import Any, Dict, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Prompt, Confirm, IntPrompt, FloatPrompt

from lifeos.core.config import Config
from lifeos.core.questions import CATEGORY_TITLES, DAILY_QUESTIONS, QuestionDefinition, QuestionType
from lifeos.core.utils import as_day, today_in
from lifeos.guardrails.locks import check_shutdown_gate, print_locks
from lifeos.ingest.daily import attach_analysis, get_or_start_day, load_day_logs, save_day_log

app = typer.Typer(help="Log a day")
console = Console()

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def ask_question(question: QuestionDefinition, current: Any) -> Any:
    """Prompt for one answer, defaulting to what is already stored."""
    if question.type == QuestionType.BOOLEAN:
        default = current if isinstance(current, bool) else False
        return Confirm.ask(question.label, default=default, console=console)

    if question.type == QuestionType.SCALE:
        choices = ["1", "2", "3", "4", "5"]
        default = str(current) if str(current) in choices else "3"
        return int(Prompt.ask(question.label, choices=choices, default=default, console=console))

    if question.type == QuestionType.NUMBER:
        default = current if isinstance(current, (int, float)) and not isinstance(current, bool) else 0
        if isinstance(default, float) and not default.is_integer():
            return FloatPrompt.ask(question.label, default=default, console=console)
        return IntPrompt.ask(question.label, default=int(default), console=console)

    if question.type == QuestionType.SELECT:
        choices = list(question.options or [])
        default = current if current in choices else choices[0]
        return Prompt.ask(question.label, choices=choices, default=default, console=console)

    return Prompt.ask(question.label, default=current or "", console=console)


def store_photo(config: Config, source: Path, day: date) -> str:
    """Copy the identity photo next to the database, one file per day."""
    target_dir = Path(config.photo_dir)
    target_dir.mkdir(parents=True, exist_ok=True)

    target = target_dir / f"{day.isoformat()}{source.suffix.lower() or '.jpg'}"
    shutil.copyfile(source, target)
    return str(target)


@app.command()
def main(
    day: Optional[str] = typer.Option(None, "--date", "-d", help="Day to log (YYYY-MM-DD), default today"),
    photo: Optional[Path] = typer.Option(None, "--photo", "-p", help="Identity proof photo"),
    analyze: bool = typer.Option(False, "--analyze", "-a", help="Ask the AI analyst after saving"),
):
    """
    Log (or correct) one day with every daily question.

    Prompts for all answers, then saves and shows the derived scores.
    Refuses any day but the blocking one while a shutdown is open, and
    refuses days without an identity photo.
    """
    load_dotenv()
    config = Config.from_env()
    today = today_in(config.timezone)

    try:
        target = as_day(day) if day else today
    except ValueError:
        console.print(f"[red]Invalid date: {day}[/red]")
        raise typer.Exit(1)

    if target > today:
        console.print(f"[red]Cannot log a future day ({target}).[/red]")
        raise typer.Exit(1)

    if photo is not None and not photo.exists():
        console.print(f"[red]Photo not found: {photo}[/red]")
        raise typer.Exit(1)

    # Print locks first
    console.print("\n[bold]Checking locks...[/bold]\n")
    logs = load_day_logs(config)
    print_locks(logs, today, config)

    # Only the unfinished day may be logged until its shutdown is done
    shutdown = check_shutdown_gate(logs, today)
    if shutdown and target != shutdown.blocking_date:
        console.print(f"[red]{shutdown.message}[/red]")
        console.print(f"Run: python scripts/log_day.py --date {shutdown.blocking_date.isoformat()}")
        raise typer.Exit(1)

    existing = get_or_start_day(config, target)
    if photo is None and not existing.photo_present:
        console.print("[red]Identity photo required: pass --photo PATH.[/red]")
        raise typer.Exit(1)

    answers: Dict[str, Any] = dict(existing.answers or {})

    console.print(f"\n[bold]Log {target.isoformat()}[/bold]\n")

    category = None
    for question in DAILY_QUESTIONS:
        if question.category != category:
            category = question.category
            console.print(f"\n[yellow]{CATEGORY_TITLES.get(category, category.title())}[/yellow]\n")
        answers[question.id] = ask_question(question, answers.get(question.id))

    photo_path = store_photo(config, photo, target) if photo else None

    log = save_day_log(config, target, answers, photo_path=photo_path)

    console.print(f"\n[green]Day {log.date} saved.[/green]")
    console.print(f"  Discipline: {log.discipline_score}")
    console.print(f"  Time integrity: {log.time_integrity_score}")
    console.print(f"  Creation ratio: {log.creation_ratio:.2f}")
    console.print(f"  Pressure: {log.pressure_level.value}")

    if log.shutdown_complete:
        console.print("  Shutdown: [green]complete[/green]")
    else:
        console.print("  Shutdown: [red]incomplete, tomorrow stays locked[/red]")

    if analyze:
        from lifeos.notify.ai import AIAnalyst

        analyst = AIAnalyst(config)
        if not analyst.is_configured:
            console.print("[yellow]GEMINI_API_KEY not set, skipping analysis.[/yellow]")
        else:
            console.print("\n[bold]Analyzing...[/bold]")
            analysis = analyst.analyze_day(log)
            attach_analysis(config, target, analysis)

            console.print(f"\n[bold]Direction:[/bold] {analysis.daily_direction}")
            console.print(f"[bold]Reality check:[/bold] {analysis.reality_check}")
            console.print(f"[bold]Thinking:[/bold] {analysis.thinking_quality.value}")
            console.print(f"\n{analysis.text}\n")

            console.print("[bold]Photo audit:[/bold]")
            console.print(f"{analyst.analyze_photo(log.photo_path)}\n")


if __name__ == "__main__":
    app()
