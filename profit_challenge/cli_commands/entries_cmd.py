from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from profit_challenge.challenge.ledger import delete_snapshot, edit_snapshot, find_snapshot, upsert_snapshot
from profit_challenge.challenge.models import ChallengeState
from profit_challenge.cli_commands.common import enriched_entries, parse_day_option, require_challenge
from profit_challenge.utils.formatting import fmt_money, fmt_short_date, fmt_signed_money


def register(entry_app: typer.Typer) -> None:

    @entry_app.command("add")
    def add(
        value: float = typer.Option(..., "--value", "-v", help="Account value at end of day"),
        day: str = typer.Option(None, "--date", "-d", help="YYYY-MM-DD (default: today)"),
        notes: str = typer.Option("", "--notes", "-n", help="Free-form note"),
    ):
        """
        Record the account value for a day. Re-recording a day overwrites it.

        Examples:
            pdc entry add -v 1012.50
            pdc entry add -d 2024-01-05 -v 980 -n "stopped out"
        """
        console = Console()
        store, state, cfg = require_challenge(console)
        d = parse_day_option(day)
        entries = upsert_snapshot(state.entries, d, value, notes)
        store.save(ChallengeState(config=cfg, entries=entries, currency=state.currency))
        console.print(f"[green]Saved[/green] {d.isoformat()}: {fmt_money(value, state.currency)}")

    @entry_app.command("edit")
    def edit(
        snapshot_id: str = typer.Argument(..., help="Entry id (see `pdc entry list`)"),
        value: float = typer.Option(None, "--value", "-v", help="New account value"),
        day: str = typer.Option(None, "--date", "-d", help="New date YYYY-MM-DD"),
        notes: str = typer.Option(None, "--notes", "-n", help="New note"),
    ):
        """Edit an entry in place (its id is kept)."""
        console = Console()
        store, state, cfg = require_challenge(console)
        current = find_snapshot(state.entries, snapshot_id)
        if current is None:
            console.print(f"[red]No entry with id[/red] {snapshot_id}")
            raise typer.Exit(1)

        entries = edit_snapshot(
            state.entries,
            snapshot_id,
            day=parse_day_option(day) if day else current.date,
            account_value=current.account_value if value is None else value,
            notes=current.notes if notes is None else notes,
        )
        store.save(ChallengeState(config=cfg, entries=entries, currency=state.currency))
        console.print(f"[green]Updated[/green] {snapshot_id}")

    @entry_app.command("delete")
    def delete(
        snapshot_id: str = typer.Argument(..., help="Entry id (see `pdc entry list`)"),
    ):
        """Delete an entry."""
        console = Console()
        store, state, cfg = require_challenge(console)
        if find_snapshot(state.entries, snapshot_id) is None:
            console.print(f"[red]No entry with id[/red] {snapshot_id}")
            raise typer.Exit(1)
        entries = delete_snapshot(state.entries, snapshot_id)
        store.save(ChallengeState(config=cfg, entries=entries, currency=state.currency))
        console.print(f"[green]Deleted[/green] {snapshot_id}")

    @entry_app.command("list")
    def list_(
        limit: int = typer.Option(0, "--limit", "-n", help="Show only the newest N entries (0 = all)"),
    ):
        """Entry log, newest first."""
        console = Console()
        _store, state, _cfg = require_challenge(console)
        rows = list(reversed(enriched_entries(state)))
        if limit > 0:
            rows = rows[:limit]
        if not rows:
            console.print("[dim]No entries yet[/dim]")
            return

        tbl = Table(title="Log")
        tbl.add_column("Date", style="bold")
        tbl.add_column("Balance", justify="right")
        tbl.add_column("Profit", justify="right")
        tbl.add_column("Notes")
        tbl.add_column("Id", style="dim")
        for e in rows:
            style = "green" if e.profit >= 0 else "red"
            tbl.add_row(
                f"{fmt_short_date(e.date)} {e.date.year}",
                fmt_money(e.account_value, state.currency),
                f"[{style}]{fmt_signed_money(e.profit, state.currency)}[/{style}]",
                escape(e.notes),
                e.id,
            )
        console.print(tbl)
