"""
Calendar-day parsing helpers for CLI and blob input.
"""
from __future__ import annotations

from datetime import date


def parse_iso_date(s: str | None) -> date | None:
    """Parse ISO date string (YYYY-MM-DD, trailing time ignored) to date."""
    if not s:
        return None
    try:
        return date.fromisoformat(s.strip()[:10])
    except (ValueError, TypeError):
        return None


def parse_ymd(s: str) -> date:
    """Parse YYYY-MM-DD string to date. Raises ValueError on failure."""
    return date.fromisoformat(s.strip())


def parse_year_month(s: str) -> tuple[int, int]:
    """Parse YYYY-MM to (year, month). Raises ValueError on failure."""
    parts = s.strip().split("-")
    if len(parts) != 2:
        raise ValueError(f"expected YYYY-MM, got {s!r}")
    year, month = int(parts[0]), int(parts[1])
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    return year, month

