"""
Weekly goal attainment.

Weeks start on Monday; Sunday is the last day of its week. The weekly target
is always a full seven days of goal growth on top of the week's baseline,
whatever weekday it currently is.
"""
from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Sequence

from profit_challenge.challenge.models import ChallengeConfig, EnrichedSnapshot, WeeklyStatus
from profit_challenge.challenge.normalize import coerce_float

WEEK_DAYS = 7


def week_start(day: date) -> date:
    """Monday on or before `day`."""
    return day - timedelta(days=day.weekday())


def _as_day(now: datetime | date) -> date:
    if isinstance(now, datetime):
        return now.date()
    return now


def weekly_status(
    config: ChallengeConfig,
    enriched: Sequence[EnrichedSnapshot],
    now: datetime | date,
) -> WeeklyStatus:
    """
    Progress toward this week's goal as of `now` (local calendar day).

    - baseline: last account value strictly before the active week start
      (max of challenge start and Monday), else start capital
    - current_account: last account value on or before today, else baseline
    - target_account: baseline after seven days of goal growth
    - percent: current_gain / target_gain * 100, or 0 when undefined
    """
    start_capital = coerce_float(config.start_capital)
    today = _as_day(now)
    active_start = max(config.start_date, week_start(today))

    if active_start > today:
        # Challenge begins later this week.
        return WeeklyStatus.flat(start_capital)

    ordered = sorted(enriched, key=lambda e: e.date)

    baseline = start_capital
    for e in reversed(ordered):
        if e.date < active_start:
            baseline = coerce_float(e.account_value)
            break

    current = baseline
    for e in reversed(ordered):
        if e.date <= today:
            current = coerce_float(e.account_value)
            break

    current_gain = current - baseline
    target = config.target_after(baseline, WEEK_DAYS)
    target_gain = target - baseline

    pct = 0.0
    if target_gain != 0:
        pct = (current_gain / target_gain) * 100.0
    if not math.isfinite(pct):
        pct = 0.0

    return WeeklyStatus(
        percent=pct,
        baseline=baseline,
        current_account=current,
        target_account=target,
        current_gain=current_gain,
        target_gain=target_gain,
    )
