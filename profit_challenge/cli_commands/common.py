from __future__ import annotations

from datetime import date

import typer
from rich.console import Console

from profit_challenge.challenge.models import ChallengeConfig, ChallengeState, EnrichedSnapshot
from profit_challenge.challenge.normalize import normalize
from profit_challenge.challenge.store import ChallengeStore
from profit_challenge.config import load_settings
from profit_challenge.utils.dates import parse_ymd


def open_store() -> ChallengeStore:
    return ChallengeStore(load_settings().store_path)


def require_challenge(console: Console) -> tuple[ChallengeStore, ChallengeState, ChallengeConfig]:
    """Load the stored challenge or exit with a hint when none is set up."""
    store = open_store()
    state = store.load()
    if not state.initialized:
        console.print("[yellow]No active challenge.[/yellow]")
        console.print("[dim]Start one with: pdc start --capital 1000 --goal-type percent --goal-value 1[/dim]")
        raise typer.Exit(1)
    return store, state, state.config


def enriched_entries(state: ChallengeState) -> list[EnrichedSnapshot]:
    if state.config is None:
        return []
    return normalize(state.entries, state.config.start_capital)


def parse_day_option(value: str | None, name: str = "--date") -> date:
    """CLI date option; empty means today."""
    if not value:
        return date.today()
    try:
        return parse_ymd(value)
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}", param_hint=name)
