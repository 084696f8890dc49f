from __future__ import annotations

import math
from typing import Any, Iterable

from profit_challenge.challenge.models import EnrichedSnapshot, Snapshot


def coerce_float(value: Any) -> float:
    """
    Best-effort numeric coercion for values crossing into the engine.

    None, booleans, unparsable strings and NaN/inf all become 0.0 so that
    downstream arithmetic never produces non-finite display values.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        out = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(out):
        return 0.0
    return out


def normalize(snapshots: Iterable[Snapshot], start_capital: float) -> list[EnrichedSnapshot]:
    """
    Sort snapshots by date and derive realized profit per entry.

    profit = account_value - previous, where previous is start_capital for the
    first snapshot and the prior snapshot's account value afterwards. The sort
    is stable, so same-date duplicates keep their input order.

    This is the single source of truth for profit: re-run it over the whole
    list after any insert/edit/delete. Any `profit` already present on the
    input (e.g. EnrichedSnapshot) is ignored.
    """
    ordered = sorted(snapshots, key=lambda s: s.date)
    prev = coerce_float(start_capital)

    out: list[EnrichedSnapshot] = []
    for s in ordered:
        value = coerce_float(s.account_value)
        out.append(
            EnrichedSnapshot(
                id=s.id,
                date=s.date,
                account_value=value,
                profit=value - prev,
                notes=s.notes or "",
            )
        )
        prev = value
    return out
