#!/usr/bin/env python3
"""
Dashboard.

Streak, today's scores and the last week at a glance.
Refuses to show anything while the inactivity lockout is active.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from lifeos.core.config import Config
from lifeos.core.models import PressureLevel
from lifeos.core.utils import format_day_human, today_in
from lifeos.engine.history import find_by_date, sort_by_date
from lifeos.guardrails.locks import check_inactivity_lockout, check_shutdown_gate
from lifeos.ingest.daily import load_day_logs
from lifeos.review.streak import calculate_strict_streak

app = typer.Typer(help="LifeOS dashboard")
console = Console()


@app.command()
def main():
    """
    Show the dashboard.
    """
    load_dotenv()
    config = Config.from_env()
    today = today_in(config.timezone)
    logs = load_day_logs(config)

    lockout = check_inactivity_lockout(logs, today, config.lockout_max_gap_days)
    if lockout:
        console.print(Panel(
            f"[bold red]SYSTEM LOCKED[/bold red]\n\n{lockout.message}\n\n"
            f"Run: python scripts/log_day.py",
            border_style="red",
        ))
        raise typer.Exit(1)

    shutdown = check_shutdown_gate(logs, today)
    if shutdown:
        console.print(Panel(
            f"[bold]Shutdown Incomplete[/bold]\n\n{shutdown.message}\n\n"
            f"Run: python scripts/log_day.py --date {shutdown.blocking_date.isoformat()}",
            border_style="magenta",
        ))
        raise typer.Exit(1)

    streak = calculate_strict_streak(
        logs,
        today,
        required_namaz=config.required_namaz,
        max_gap_days=config.streak_max_gap_days,
    )
    current = find_by_date(logs, today)

    streak_style = "red" if streak == 0 else "green"
    console.print(f"\n[bold]Strict streak:[/bold] [{streak_style}]{streak}[/{streak_style}] day(s)")

    if current is None:
        console.print("[yellow]Today is not logged yet.[/yellow]\n")
    else:
        pressure_style = "red" if current.pressure_level == PressureLevel.HIGH else "white"
        integrity_style = "red" if current.time_integrity_score < 60 else "white"
        console.print(f"[bold]Pressure:[/bold] [{pressure_style}]{current.pressure_level.value}[/{pressure_style}]")
        console.print(f"[bold]Discipline:[/bold] {current.discipline_score}")
        console.print(
            f"[bold]Time integrity:[/bold] [{integrity_style}]{current.time_integrity_score}[/{integrity_style}]"
        )
        console.print(f"[bold]Creation ratio:[/bold] {current.creation_ratio:.2f}")
        if current.daily_direction:
            console.print(f"\n[bold]Direction:[/bold] {current.daily_direction}")
        if current.reality_check:
            console.print(f"[bold]Reality check:[/bold] {current.reality_check}")
        console.print()

    recent = sort_by_date(logs)[-config.review_days:]
    if not recent:
        return

    table = Table(title=f"Last {len(recent)} logged day(s)")
    table.add_column("Date")
    table.add_column("When")
    table.add_column("Discipline", justify="right")
    table.add_column("Integrity", justify="right")
    table.add_column("Ratio", justify="right")
    table.add_column("Pressure")
    table.add_column("Shutdown")

    for log in recent:
        table.add_row(
            log.date.isoformat(),
            format_day_human(log.date, today),
            str(log.discipline_score),
            str(log.time_integrity_score),
            f"{log.creation_ratio:.2f}",
            log.pressure_level.value,
            "✅" if log.shutdown_complete else "❌",
        )

    console.print(table)


@app.command()
def settings():
    """Show current settings."""
    load_dotenv()
    config = Config.from_env()

    typer.echo(config.get_summary())


if __name__ == "__main__":
    app()
