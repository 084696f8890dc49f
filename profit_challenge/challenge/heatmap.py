from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Sequence

from profit_challenge.challenge.models import DayClassification, EnrichedSnapshot, Mood
from profit_challenge.challenge.normalize import coerce_float

WEEKDAY_LABELS = ("Ma", "Di", "Wo", "Do", "Vr", "Za", "Zo")


@dataclass(frozen=True)
class DayCell:
    day: date
    entry: EnrichedSnapshot | None
    classification: DayClassification


def classify_day(entry: EnrichedSnapshot | None) -> DayClassification:
    """
    Mood + percent change for one calendar day.

    percent = profit / previous_value * 100, rounded to one decimal with halves
    away from zero (1.25 -> 1.3, -0.25 -> -0.3); 0.0 when that base is zero.
    Days without a snapshot are neutral.
    """
    if entry is None:
        return DayClassification(mood=Mood.NEUTRAL, percent=0.0)

    profit = coerce_float(entry.profit)
    if profit > 0:
        mood = Mood.PROFIT
    elif profit < 0:
        mood = Mood.LOSS
    else:
        mood = Mood.FLAT

    base = coerce_float(entry.previous_value)
    pct = round_pct((profit / base) * 100.0) if base != 0 else 0.0
    return DayClassification(mood=mood, percent=pct)


def round_pct(x: float) -> float:
    """One-decimal rounding, halves away from zero, on the exact binary value."""
    if not math.isfinite(x):
        return 0.0
    with localcontext() as ctx:
        # Wide enough for any finite float.
        ctx.prec = 400
        return float(Decimal(x).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def month_grid(year: int, month: int, enriched: Sequence[EnrichedSnapshot]) -> list[list[DayCell | None]]:
    """
    Monday-first calendar weeks for one month.

    Slots before the 1st and after the last day are None (ghost cells), so
    every row has exactly seven slots.
    """
    by_date = {e.date: e for e in enriched}
    offset, days_in_month = calendar.monthrange(year, month)

    slots: list[DayCell | None] = [None] * offset
    for d in range(1, days_in_month + 1):
        day = date(year, month, d)
        entry = by_date.get(day)
        slots.append(DayCell(day=day, entry=entry, classification=classify_day(entry)))
    while len(slots) % 7:
        slots.append(None)

    return [slots[i : i + 7] for i in range(0, len(slots), 7)]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by `delta` months."""
    idx = year * 12 + (month - 1) + delta
    return idx // 12, idx % 12 + 1
