"""
Daily Profit Challenge CLI

Primary commands:
- pdc start / reset
- pdc entry add/edit/delete/list
- pdc status / projection / calendar
- pdc export / import
"""
from __future__ import annotations

import typer

app = typer.Typer(
    add_completion=False,
    help="""Daily Profit Challenge — track account value against a daily goal curve

\b
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
SETUP
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  pdc start -c 1000 -g percent -v 1   New challenge
  pdc reset                           Drop the challenge

\b
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
JOURNAL
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  pdc entry add -v 1012.50            Record today's balance
  pdc entry list                      Entry log

\b
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
REPORTING
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  pdc status                          Balance + weekly progress
  pdc projection                      Goal curve vs actual
  pdc calendar                        Monthly P&L heatmap
  pdc export / import                 JSON backup

\b
Run 'pdc <command> --help' for details.
""",
)

entry_app = typer.Typer(add_completion=False, help="Record, edit and list daily account values")
app.add_typer(entry_app, name="entry")

_COMMANDS_REGISTERED = False


def _register_commands() -> None:
    global _COMMANDS_REGISTERED
    if _COMMANDS_REGISTERED:
        return
    from profit_challenge.cli_commands.challenge_cmd import register as register_challenge
    from profit_challenge.cli_commands.entries_cmd import register as register_entries
    from profit_challenge.cli_commands.report_cmd import register as register_reports

    register_challenge(app)
    register_entries(entry_app)
    register_reports(app)
    _COMMANDS_REGISTERED = True


def main():
    _register_commands()
    app()

# Register commands when imported as a console-script entrypoint.
_register_commands()


if __name__ == "__main__":
    main()
