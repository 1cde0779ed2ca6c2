#!/usr/bin/env python3
"""
Assistant script.

Chat with the analyst, or audit a photo.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Prompt

from lifeos.core.config import Config
from lifeos.notify.ai import AIAnalyst, CHAT_FALLBACK

app = typer.Typer(help="AI assistant")
console = Console()

EXIT_WORDS = ("exit", "quit")


def get_analyst() -> AIAnalyst:
    load_dotenv()
    analyst = AIAnalyst(Config.from_env())
    if not analyst.is_configured:
        console.print("[red]GEMINI_API_KEY not set.[/red]")
        raise typer.Exit(1)
    return analyst


@app.command()
def chat(
    deep: bool = typer.Option(False, "--deep", help="Extended thinking for hard questions"),
):
    """
    Chat until 'exit'. History is kept for the session only.
    """
    analyst = get_analyst()
    history = []

    mode = "deep" if deep else "fast"
    console.print(f"[bold]Assistant ({mode}).[/bold] Type 'exit' to leave.\n")

    while True:
        message = Prompt.ask("[cyan]You[/cyan]", console=console).strip()
        if message.lower() in EXIT_WORDS:
            break
        if not message:
            continue

        reply = analyst.chat(history, message, deep=deep)
        console.print(f"[green]AI:[/green] {reply}\n")
        if reply == CHAT_FALLBACK:
            continue

        history.append({"role": "user", "parts": [{"text": message}]})
        history.append({"role": "model", "parts": [{"text": reply}]})


@app.command()
def vision(
    path: Path = typer.Argument(..., help="Photo to analyze"),
    prompt: Optional[str] = typer.Option(None, "--prompt", help="Custom question about the photo"),
):
    """
    Analyze one photo.
    """
    if not path.exists():
        console.print(f"[red]Photo not found: {path}[/red]")
        raise typer.Exit(1)

    analyst = get_analyst()
    console.print(analyst.analyze_photo(str(path), prompt))


if __name__ == "__main__":
    app()
