#!/usr/bin/env python3
"""
Weekly review script.

Shows the last week's numbers and suggests ONE change for next week.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer
from dotenv import load_dotenv
from rich.console import Console

from lifeos.core.config import Config
from lifeos.guardrails.locks import check_inactivity_lockout
from lifeos.ingest.daily import load_day_logs
from lifeos.core.utils import today_in
from lifeos.review.weekly import build_weekly_review, export_weekly_review

app = typer.Typer(help="Weekly review")
console = Console()


@app.command()
def main(
    days: int = typer.Option(7, "--days", "-d", help="Number of days to review"),
    export: bool = typer.Option(False, "--export", "-e", help="Export to file"),
    ai: bool = typer.Option(False, "--ai", help="Append the AI weekly truth report"),
):
    """
    Generate weekly review.

    Shows scores, pressure, shutdown completion, and suggests ONE change.
    """
    load_dotenv()
    config = Config.from_env()
    today = today_in(config.timezone)
    logs = load_day_logs(config)

    lockout = check_inactivity_lockout(logs, today, config.lockout_max_gap_days)
    if lockout:
        console.print(f"[red]{lockout}[/red]")
        raise typer.Exit(1)

    if export:
        filepath = export_weekly_review(config, days, today=today)
        console.print(f"[green]Review exported to {filepath}[/green]")
        return

    print(build_weekly_review(config, days, today))

    if ai:
        from lifeos.notify.ai import AIAnalyst

        analyst = AIAnalyst(config)
        if not analyst.is_configured:
            console.print("[yellow]GEMINI_API_KEY not set, skipping AI report.[/yellow]")
            return

        console.print("\n[bold]Weekly Truth Report[/bold]\n")
        print(analyst.weekly_report(logs, days))


if __name__ == "__main__":
    app()
