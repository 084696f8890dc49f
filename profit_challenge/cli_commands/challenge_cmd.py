from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from profit_challenge.challenge.models import ChallengeConfig, ChallengeState, Currency, GoalType
from profit_challenge.challenge.store import ImportInvalid, export_state, import_state
from profit_challenge.cli_commands.common import open_store, parse_day_option
from profit_challenge.config import load_settings
from profit_challenge.utils.formatting import fmt_money
from profit_challenge.utils.logging import log_event

logger = logging.getLogger(__name__)


def register(app: typer.Typer) -> None:
    """Register challenge lifecycle commands on the main app."""

    @app.command("start")
    def start(
        capital: float = typer.Option(1000.0, "--capital", "-c", help="Starting capital"),
        goal_type: GoalType = typer.Option(GoalType.PERCENT, "--goal-type", "-g", help="percent (compounded) or fixed amount per day"),
        goal_value: float = typer.Option(1.0, "--goal-value", "-v", help="Daily goal (% or amount)"),
        start_date: str = typer.Option(None, "--start-date", "-s", help="YYYY-MM-DD (default: today)"),
        currency: Currency = typer.Option(None, "--currency", help="EUR, USD or BTC (default: PDC_CURRENCY)"),
    ):
        """
        Start a new challenge. Existing entries are discarded.

        Examples:
            pdc start --capital 1000 --goal-type percent --goal-value 1
            pdc start -c 5000 -g fixed -v 25 --currency USD
        """
        console = Console()
        settings = load_settings()
        cfg = ChallengeConfig(
            start_capital=capital,
            goal_type=goal_type,
            goal_value=goal_value,
            start_date=parse_day_option(start_date, "--start-date"),
        )
        state = ChallengeState(config=cfg, entries=[], currency=currency or settings.currency)
        path = open_store().save(state)

        goal = f"{cfg.goal_value:g}% per day" if cfg.goal_type is GoalType.PERCENT else f"{fmt_money(cfg.goal_value, state.currency)} per day"
        console.print(
            Panel(
                f"Start capital: {fmt_money(cfg.start_capital, state.currency)}\n"
                f"Goal: {goal}\n"
                f"Start date: {cfg.start_date.isoformat()}\n"
                f"[dim]Saved to {path}[/dim]",
                title="Challenge started",
                expand=False,
            )
        )

    @app.command("reset")
    def reset(
        yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    ):
        """Drop the stored challenge and all entries."""
        console = Console()
        if not yes:
            typer.confirm("Delete the current challenge and all entries?", abort=True)
        open_store().clear()
        console.print("[green]Challenge reset.[/green]")

    @app.command("export")
    def export(
        path: Path = typer.Argument(Path("trading_data.json"), help="Output JSON file"),
    ):
        """Export config, entries and currency as JSON."""
        state = open_store().load()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(export_state(state), encoding="utf-8")
        log_event("challenge_exported", {"path": str(path), "entries": len(state.entries)})

    @app.command("import")
    def import_(
        path: Path = typer.Argument(..., help="JSON file produced by `pdc export`"),
    ):
        """Replace the stored challenge with an exported JSON file."""
        console = Console()
        try:
            state = import_state(path.read_text(encoding="utf-8"))
        except (OSError, ImportInvalid) as e:
            logger.warning("Import of %s rejected: %s", path, e)
            console.print("[red]Import failed:[/red] the file could not be loaded.")
            raise typer.Exit(1)

        open_store().save(state)
        log_event("challenge_imported", {"path": str(path), "entries": len(state.entries), "currency": state.currency})
