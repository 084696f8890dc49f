from __future__ import annotations

from datetime import date

from profit_challenge.challenge.heatmap import classify_day
from profit_challenge.challenge.models import Currency, EnrichedSnapshot
from profit_challenge.utils.formatting import (
    fmt_day_value,
    fmt_money,
    fmt_short_date,
    fmt_signed_money,
    round_half_up,
)


def _entry(value: float, profit: float) -> EnrichedSnapshot:
    return EnrichedSnapshot(id="x", date=date(2024, 1, 2), account_value=value, profit=profit)


def test_fmt_money_per_currency():
    assert fmt_money(1234.5, Currency.EUR) == "€ 1.234,50"
    assert fmt_money(-1234.5, Currency.EUR) == "€ -1.234,50"
    assert fmt_money(1234.5, Currency.USD) == "$1,234.50"
    assert fmt_money(-2, Currency.USD) == "-$2.00"
    assert fmt_money(0.01, Currency.BTC) == "₿ 0.01000000"
    assert fmt_money("garbage", Currency.USD) == "$0.00"


def test_fmt_signed_money():
    assert fmt_signed_money(5, Currency.USD) == "+$5.00"
    assert fmt_signed_money(-5, Currency.USD) == "-$5.00"


def test_day_value_currency_view():
    e = _entry(1012.5, 12.5)
    c = classify_day(e)
    assert fmt_day_value(e, c, Currency.EUR) == "€13"
    assert fmt_day_value(e, c, Currency.USD) == "$13"
    assert fmt_day_value(e, c, Currency.BTC) == "₿12.5000"


def test_day_value_percent_view_and_neutral():
    e = _entry(1100.0, 100.0)
    assert fmt_day_value(e, classify_day(e), Currency.EUR, "percent") == "10.0%"
    assert fmt_day_value(None, classify_day(None), Currency.EUR) == ""


def test_round_half_up_matches_display_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3


def test_fmt_short_date_dutch_months():
    assert fmt_short_date(date(2024, 3, 5)) == "5 mrt"
    assert fmt_short_date(None) == ""
