"""CLI for the webhook agent - chat with an on-chain agent or let it run on its own."""

from __future__ import annotations

import asyncio
import logging
import os

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from webhook_agent.bootstrap import initialize_agent
from webhook_agent.config import load_settings
from webhook_agent.errors import ConfigurationError
from webhook_agent.session.drivers import AutonomousDriver, ChatDriver
from webhook_agent.session.selector import Mode, choose_mode

app = typer.Typer(
    name="webhook-agent",
    help="Conversational on-chain agent that can register blockchain event webhooks.",
    add_completion=False,
)
console = Console()


def _configure_logging() -> None:
    level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def main():
    """Start the agent, then choose chat or autonomous mode."""
    _configure_logging()
    console.print("Starting Agent...")

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    try:
        session = initialize_agent(settings)
    except Exception as exc:
        console.print(f"[red]Failed to initialize agent:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    try:
        mode = choose_mode(console)
    except (EOFError, KeyboardInterrupt):
        raise typer.Exit(1)

    if mode is Mode.CHAT:
        driver = ChatDriver(
            session.runtime,
            console,
            session.thread_id,
            policy=settings.stream_error_policy,
        )
    else:
        driver = AutonomousDriver(
            session.runtime,
            console,
            session.thread_id,
            interval=settings.auto_interval_seconds,
            policy=settings.stream_error_policy,
        )

    try:
        code = asyncio.run(driver.run())
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        code = 130
    raise typer.Exit(code)
