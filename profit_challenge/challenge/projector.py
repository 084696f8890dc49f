from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

import pandas as pd

from profit_challenge.challenge.models import ChallengeConfig, EnrichedSnapshot, ProjectionPoint
from profit_challenge.challenge.normalize import coerce_float

DEFAULT_HORIZON_DAYS = 365


def project(
    config: ChallengeConfig,
    enriched: Sequence[EnrichedSnapshot],
    today: date | None = None,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
) -> list[ProjectionPoint]:
    """
    Day-by-day projected-vs-actual series.

    Runs from config.start_date through (last snapshot date + horizon_days)
    inclusive, or (today + horizon_days) when there are no snapshots. The
    projected balance is stepped *before* each point is recorded, so the
    start date already carries one day of goal growth.

    Returns an empty list when the start date lies after the end date.
    """
    actual_by_date = {e.date: coerce_float(e.account_value) for e in enriched}

    if enriched:
        last = max(e.date for e in enriched)
    else:
        last = today or date.today()
    end = last + timedelta(days=horizon_days)

    balance = coerce_float(config.start_capital)
    points: list[ProjectionPoint] = []
    day = config.start_date
    while day <= end:
        balance = config.step(balance)
        points.append(ProjectionPoint(date=day, actual=actual_by_date.get(day), projected=balance))
        day += timedelta(days=1)
    return points


def projection_frame(points: Sequence[ProjectionPoint]) -> pd.DataFrame:
    """
    Projection as a DataFrame indexed by date.

    Columns:
    - actual: account value where a snapshot exists (NaN otherwise)
    - projected: goal-curve balance
    - gap: actual - projected (NaN where there is no snapshot)
    """
    if not points:
        return pd.DataFrame(columns=["actual", "projected", "gap"], index=pd.DatetimeIndex([], name="date"))

    df = pd.DataFrame(
        {
            "date": pd.to_datetime([p.date for p in points]),
            "actual": [p.actual for p in points],
            "projected": [p.projected for p in points],
        }
    ).set_index("date")
    df["actual"] = pd.to_numeric(df["actual"], errors="coerce")
    df["gap"] = df["actual"] - df["projected"]
    return df
