"""
CLI smoke tests - verify commands are wired up and drive the store end to end.

Every test points PDC_STORE_PATH at a temp file (see the `store_path` fixture).
"""
from __future__ import annotations

import json

from typer.testing import CliRunner

from profit_challenge.challenge.store import STORAGE_KEY, ChallengeStore

runner = CliRunner()


def _start(app, *extra: str):
    return runner.invoke(
        app,
        ["start", "--capital", "1000", "--goal-type", "fixed", "--goal-value", "10", "--start-date", "2024-01-01", *extra],
    )


class TestCLIStructure:
    """Test that CLI commands are properly registered and accessible."""

    def test_main_help(self):
        from profit_challenge.cli import app
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Daily Profit Challenge" in result.output

    def test_entry_help(self):
        from profit_challenge.cli import app
        result = runner.invoke(app, ["entry", "--help"])
        assert result.exit_code == 0
        assert "add" in result.output


class TestCLIFlow:

    def test_commands_need_a_challenge(self, store_path):
        from profit_challenge.cli import app
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 1
        assert "No active challenge" in result.output

    def test_start_add_and_status(self, store_path):
        from profit_challenge.cli import app
        result = _start(app, "--currency", "USD")
        assert result.exit_code == 0, result.output
        assert "Challenge started" in result.output

        assert runner.invoke(app, ["entry", "add", "-d", "2024-01-01", "-v", "1005"]).exit_code == 0
        assert runner.invoke(app, ["entry", "add", "-d", "2024-01-02", "-v", "1040", "-n", "breakout"]).exit_code == 0
        # Same date again overwrites.
        assert runner.invoke(app, ["entry", "add", "-d", "2024-01-02", "-v", "1030"]).exit_code == 0

        state = ChallengeStore(store_path).load()
        assert sorted(s.account_value for s in state.entries) == [1005.0, 1030.0]

        result = runner.invoke(app, ["status", "--today", "2024-01-03"])
        assert result.exit_code == 0, result.output
        assert "Weekly progress" in result.output
        assert "$1,070.00" in result.output

    def test_edit_and_delete(self, store_path):
        from profit_challenge.cli import app
        _start(app)
        runner.invoke(app, ["entry", "add", "-d", "2024-01-01", "-v", "1005"])
        snap = ChallengeStore(store_path).load().entries[0]

        result = runner.invoke(app, ["entry", "edit", snap.id, "-v", "990"])
        assert result.exit_code == 0, result.output
        assert ChallengeStore(store_path).load().entries[0].account_value == 990.0

        assert runner.invoke(app, ["entry", "edit", "missing", "-v", "1"]).exit_code == 1
        assert runner.invoke(app, ["entry", "delete", snap.id]).exit_code == 0
        assert ChallengeStore(store_path).load().entries == []

    def test_reports_render(self, store_path, tmp_path):
        from profit_challenge.cli import app
        _start(app)
        runner.invoke(app, ["entry", "add", "-d", "2024-01-02", "-v", "1025"])

        assert runner.invoke(app, ["entry", "list"]).exit_code == 0

        csv = tmp_path / "projection.csv"
        result = runner.invoke(app, ["projection", "-n", "5", "--csv", str(csv)])
        assert result.exit_code == 0, result.output
        assert csv.exists()

        result = runner.invoke(app, ["calendar", "-m", "2024-01", "--view", "percent"])
        assert result.exit_code == 0, result.output
        assert "Ma" in result.output

        assert runner.invoke(app, ["calendar", "-m", "2024-13"]).exit_code != 0

    def test_calendar_offset_pages_months(self, store_path):
        from profit_challenge.cli import app
        _start(app)
        result = runner.invoke(app, ["calendar", "-m", "2024-02", "-o", "-1"])
        assert result.exit_code == 0, result.output
        assert "January 2024" in result.output

        result = runner.invoke(app, ["calendar", "-m", "2024-12", "--offset", "1"])
        assert result.exit_code == 0, result.output
        assert "January 2025" in result.output

    def test_export_import_roundtrip(self, store_path, tmp_path):
        from profit_challenge.cli import app
        _start(app)
        runner.invoke(app, ["entry", "add", "-d", "2024-01-02", "-v", "1025"])
        out = tmp_path / "backup.json"
        assert runner.invoke(app, ["export", str(out)]).exit_code == 0

        assert runner.invoke(app, ["reset", "--yes"]).exit_code == 0
        assert ChallengeStore(store_path).load().config is None

        result = runner.invoke(app, ["import", str(out)])
        assert result.exit_code == 0, result.output
        state = ChallengeStore(store_path).load()
        assert [s.account_value for s in state.entries] == [1025.0]

    def test_invalid_import_leaves_state_untouched(self, store_path, tmp_path):
        from profit_challenge.cli import app
        _start(app)
        before = json.loads(store_path.read_text())[STORAGE_KEY]

        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"entries": []}))
        result = runner.invoke(app, ["import", str(bad)])
        assert result.exit_code == 1
        assert "Import failed" in result.output
        assert json.loads(store_path.read_text())[STORAGE_KEY] == before
