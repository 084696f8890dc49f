"""
Pytest configuration and shared fixtures for profit_challenge tests.

Usage:
    @pytest.fixture functions are automatically available to all tests.
    Import helpers from conftest when needed.
"""
import sys
from datetime import date
from pathlib import Path

import pytest


def pytest_configure():
    """
    Ensure the repo root is on sys.path for the flat-layout package import
    (`profit_challenge`). This keeps tests runnable without an editable install.
    """
    root = Path(__file__).resolve().parents[1]
    if (root / "profit_challenge").exists():
        sys.path.insert(0, str(root))


# =============================================================================
# Test Data Helpers
# =============================================================================

def make_config(
    start_capital: float = 1000.0,
    goal_type: str = "percent",
    goal_value: float = 1.0,
    start_date: date = date(2024, 1, 1),
):
    """
    Create a ChallengeConfig for testing.

    Usage:
        cfg = make_config(goal_type="fixed", goal_value=10.0)
    """
    from profit_challenge.challenge.models import ChallengeConfig, GoalType

    return ChallengeConfig(
        start_capital=start_capital,
        goal_type=GoalType(goal_type),
        goal_value=goal_value,
        start_date=start_date,
    )


def make_snapshots(*rows: tuple[str, float]):
    """
    Create snapshots from (YYYY-MM-DD, account_value) pairs; ids are s0, s1, ...

    Usage:
        snaps = make_snapshots(("2024-01-01", 1000.0), ("2024-01-02", 1050.0))
    """
    from profit_challenge.challenge.models import Snapshot

    return [
        Snapshot(id=f"s{i}", date=date.fromisoformat(d), account_value=v)
        for i, (d, v) in enumerate(rows)
    ]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def percent_config():
    """1000 start capital, 1%/day compounding, starting 2024-01-01 (a Monday)."""
    return make_config()


@pytest.fixture
def fixed_config():
    """1000 start capital, +10/day, starting 2024-01-01 (a Monday)."""
    return make_config(goal_type="fixed", goal_value=10.0)


@pytest.fixture
def store_path(tmp_path: Path, monkeypatch) -> Path:
    """Point PDC_STORE_PATH at a temp file for CLI/store tests."""
    path = tmp_path / "challenge.json"
    monkeypatch.setenv("PDC_STORE_PATH", str(path))
    return path
