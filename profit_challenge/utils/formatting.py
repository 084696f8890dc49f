"""
Display formatting utilities for CLI output.

Provides consistent formatting for:
- Currency values (EUR / USD / BTC)
- Percentages
- Calendar cells and short dates
"""
from __future__ import annotations

import math
from datetime import date
from typing import Optional

from profit_challenge.challenge.models import Currency, DayClassification, EnrichedSnapshot, Mood
from profit_challenge.challenge.normalize import coerce_float

_NL_MONTHS = ("jan", "feb", "mrt", "apr", "mei", "jun", "jul", "aug", "sep", "okt", "nov", "dec")

CURRENCY_SYMBOLS = {
    Currency.EUR: "€",
    Currency.USD: "$",
    Currency.BTC: "₿",
}


# ============================================================================
# Number Formatting
# ============================================================================

def fmt_pct(x: Optional[float], decimals: int = 1, multiply: bool = False) -> str:
    """
    Format as percentage.

    Args:
        x: Value to format
        decimals: Decimal places to show
        multiply: If True, multiply by 100 (i.e., 0.05 -> 5.0%)
    """
    if x is None or not isinstance(x, (int, float)):
        return "n/a"
    value = float(x) * 100.0 if multiply else float(x)
    return f"{value:.{decimals}f}%"


def fmt_signed_pct(x: Optional[float], decimals: int = 2, multiply: bool = False) -> str:
    """Format as signed percentage with + prefix for positives."""
    if x is None or not isinstance(x, (int, float)):
        return "n/a"
    value = float(x) * 100.0 if multiply else float(x)
    return f"{value:+.{decimals}f}%"


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return int(math.floor(x + 0.5))


# ============================================================================
# Currency Formatting
# ============================================================================

def _grouped(value: float, decimals: int) -> str:
    return f"{abs(value):,.{decimals}f}"


def fmt_money(x, currency: Currency = Currency.EUR) -> str:
    """
    Format an amount in the challenge currency.

    EUR uses Dutch grouping ("€ 1.234,56"), USD uses US grouping ("$1,234.56"),
    BTC always shows 8 decimals ("₿ 0.01000000"). Non-numeric input shows as 0.
    """
    v = coerce_float(x)
    if currency is Currency.BTC:
        return f"₿ {v:.8f}"
    if currency is Currency.EUR:
        body = _grouped(v, 2).replace(",", "_").replace(".", ",").replace("_", ".")
        return f"€ -{body}" if v < 0 else f"€ {body}"
    if currency is Currency.USD:
        body = _grouped(v, 2)
        return f"-${body}" if v < 0 else f"${body}"
    raise ValueError(f"Unknown currency: {currency!r}")


def fmt_signed_money(x, currency: Currency = Currency.EUR) -> str:
    """Money with an explicit + for gains."""
    v = coerce_float(x)
    out = fmt_money(v, currency)
    return f"+{out}" if v > 0 else out


# ============================================================================
# Calendar Formatting
# ============================================================================

def fmt_short_date(d: date | None) -> str:
    """Dutch short date, e.g. '5 jan'."""
    if d is None:
        return ""
    return f"{d.day} {_NL_MONTHS[d.month - 1]}"


def fmt_day_value(
    entry: EnrichedSnapshot | None,
    classification: DayClassification,
    currency: Currency,
    view: str = "currency",
) -> str:
    """
    Heatmap cell text.

    currency view: whole-unit profit ("€12", "$-3") or "₿0.0012" for BTC.
    percent view: one-decimal percent change ("1.5%").
    """
    if entry is None or classification.mood is Mood.NEUTRAL:
        return ""
    if view == "percent":
        return f"{classification.percent:.1f}%"

    profit = coerce_float(entry.profit)
    if currency is Currency.BTC:
        return f"₿{profit:.4f}"
    return f"{CURRENCY_SYMBOLS[currency]}{round_half_up(profit)}"


MOOD_STYLES = {
    Mood.NEUTRAL: "dim",
    Mood.PROFIT: "green",
    Mood.LOSS: "red",
    Mood.FLAT: "yellow",
}


def fmt_mood_style(mood: Mood) -> str:
    """Rich color for a heatmap mood."""
    return MOOD_STYLES.get(mood, "white")
