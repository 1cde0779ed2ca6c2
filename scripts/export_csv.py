#!/usr/bin/env python3
"""
Export data to CSV.

Exports every day log to CSV format for external analysis.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import csv
import typer
from datetime import datetime
from dotenv import load_dotenv
from rich.console import Console

from lifeos.core.config import Config
from lifeos.ingest.daily import load_day_logs, log_to_dict

app = typer.Typer(help="Export data to CSV")
console = Console()


@app.command()
def main(
    output: str = typer.Option(None, "--output", "-o", help="Output file path"),
):
    """
    Export all day logs to CSV, oldest first.
    """
    load_dotenv()
    config = Config.from_env()

    if not output:
        output = f"data/lifeos_export_{datetime.utcnow().strftime('%Y%m%d_%H%M%S')}.csv"

    logs = load_day_logs(config)
    rows = [log_to_dict(log) for log in logs]

    if not rows:
        console.print("[yellow]No day logs to export.[/yellow]")
        raise typer.Exit(0)

    Path(output).parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)

    console.print(f"[green]Exported {len(rows)} day logs to {output}[/green]")


if __name__ == "__main__":
    app()
