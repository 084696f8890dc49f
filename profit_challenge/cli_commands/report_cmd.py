from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from profit_challenge.challenge.heatmap import WEEKDAY_LABELS, month_grid, shift_month
from profit_challenge.challenge.projector import project, projection_frame
from profit_challenge.challenge.summary import summarize
from profit_challenge.challenge.weekly import weekly_status
from profit_challenge.cli_commands.common import enriched_entries, parse_day_option, require_challenge
from profit_challenge.config import load_settings
from profit_challenge.utils.dates import parse_year_month
from profit_challenge.utils.formatting import (
    fmt_day_value,
    fmt_money,
    fmt_mood_style,
    fmt_pct,
    fmt_short_date,
    fmt_signed_money,
    fmt_signed_pct,
)
from profit_challenge.utils.logging import log_event


def register(app: typer.Typer) -> None:
    """Register reporting commands directly on the main app."""

    @app.command("status")
    def status(
        today: str = typer.Option(None, "--today", help="Evaluate as of YYYY-MM-DD (default: now)"),
    ):
        """
        Balance, total growth and weekly goal progress.

        Examples:
            pdc status
            pdc status --today 2024-03-15
        """
        console = Console()
        _store, state, cfg = require_challenge(console)
        cur = state.currency
        now = datetime.combine(parse_day_option(today, "--today"), datetime.now().time()) if today else datetime.now()
        enriched = enriched_entries(state)

        s = summarize(cfg, enriched, now.date())
        growth_style = "green" if s.total_growth >= 0 else "red"
        target = "—" if s.target_today is None else fmt_money(s.target_today, cur)
        console.print(
            Panel(
                f"Balance: {fmt_money(s.balance, cur)}  |  "
                f"Total profit: [{growth_style}]{fmt_signed_money(s.total_growth, cur)}[/{growth_style}]  |  "
                f"Growth: [{growth_style}]{fmt_signed_pct(s.growth_percent)}[/{growth_style}]\n"
                f"Entries: {s.entries}  |  Goal curve today: {target}",
                title="Challenge",
                expand=False,
            )
        )

        w = weekly_status(cfg, enriched, now)
        bar_width = 30
        filled = int(round(min(max(w.percent, 0.0), 100.0) / 100.0 * bar_width))
        bar = "█" * filled + "░" * (bar_width - filled)
        pct_style = "green" if w.percent >= 100 else ("yellow" if w.percent >= 0 else "red")
        console.print(
            Panel(
                f"[{pct_style}]{bar} {fmt_pct(w.percent)}[/{pct_style}]\n"
                f"Gain: {fmt_signed_money(w.current_gain, cur)} of {fmt_money(w.target_gain, cur)}\n"
                f"Week start: {fmt_money(w.baseline, cur)}  |  "
                f"Current: {fmt_money(w.current_account, cur)}  |  "
                f"Week goal: {fmt_money(w.target_account, cur)}",
                title="Weekly progress",
                expand=False,
            )
        )

    @app.command("projection")
    def projection(
        days: int = typer.Option(30, "--days", "-n", help="Rows to show, starting at the challenge start"),
        since: str = typer.Option(None, "--from", help="First row date YYYY-MM-DD (default: start date)"),
        csv: Path = typer.Option(None, "--csv", help="Write the full projection to CSV"),
        today: str = typer.Option(None, "--today", help="Reference date when there are no entries"),
    ):
        """
        Goal curve vs actual account value, one row per day.

        Examples:
            pdc projection
            pdc projection --from 2024-02-01 -n 14
            pdc projection --csv data/projection.csv
        """
        console = Console()
        settings = load_settings()
        _store, state, cfg = require_challenge(console)
        cur = state.currency
        ref = parse_day_option(today, "--today") if today else date.today()

        points = project(cfg, enriched_entries(state), today=ref, horizon_days=settings.horizon_days)
        if not points:
            console.print("[yellow]Projection is empty (start date lies after the projection horizon).[/yellow]")
            return

        if csv is not None:
            csv.parent.mkdir(parents=True, exist_ok=True)
            projection_frame(points).to_csv(csv)
            log_event("projection_exported", {"path": str(csv), "rows": len(points)})

        first = parse_day_option(since, "--from") if since else cfg.start_date
        rows = [p for p in points if p.date >= first][: max(days, 0)]

        tbl = Table(title=f"Projection ({points[0].date.isoformat()} → {points[-1].date.isoformat()})")
        tbl.add_column("Date", style="bold")
        tbl.add_column("Projected", justify="right")
        tbl.add_column("Actual", justify="right")
        tbl.add_column("Gap", justify="right")
        for p in rows:
            if p.actual is None:
                actual_s, gap_s = "—", ""
            else:
                gap = p.actual - p.projected
                style = "green" if gap >= 0 else "red"
                actual_s = fmt_money(p.actual, cur)
                gap_s = f"[{style}]{fmt_signed_money(gap, cur)}[/{style}]"
            tbl.add_row(fmt_short_date(p.date), fmt_money(p.projected, cur), actual_s, gap_s)
        console.print(tbl)

    @app.command("calendar")
    def calendar_(
        month: str = typer.Option(None, "--month", "-m", help="YYYY-MM (default: current month)"),
        offset: int = typer.Option(0, "--offset", "-o", help="Page months back (-1) or forward (+1) from --month"),
        view: str = typer.Option("currency", "--view", help="currency or percent"),
    ):
        """
        Monthly profit/loss heatmap.

        Examples:
            pdc calendar
            pdc calendar -m 2024-02 --view percent
            pdc calendar -o -1
        """
        console = Console()
        _store, state, _cfg = require_challenge(console)

        if month:
            try:
                year, mon = parse_year_month(month)
            except ValueError as e:
                raise typer.BadParameter(str(e), param_hint="--month")
        else:
            t = date.today()
            year, mon = t.year, t.month
        year, mon = shift_month(year, mon, offset)

        v = view.strip().lower()
        if v not in {"currency", "percent"}:
            raise typer.BadParameter("expected currency or percent", param_hint="--view")

        grid = month_grid(year, mon, enriched_entries(state))
        tbl = Table(title=date(year, mon, 1).strftime("%B %Y"), show_lines=True)
        for label in WEEKDAY_LABELS:
            tbl.add_column(label, justify="center", min_width=8)

        for week in grid:
            cells = []
            for cell in week:
                if cell is None:
                    cells.append("")
                    continue
                text = fmt_day_value(cell.entry, cell.classification, state.currency, v)
                style = fmt_mood_style(cell.classification.mood)
                note = " *" if cell.entry is not None and cell.entry.notes else ""
                cells.append(f"[bold]{cell.day.day}[/bold]{note}\n[{style}]{text}[/{style}]")
            tbl.add_row(*cells)
        console.print(tbl)
