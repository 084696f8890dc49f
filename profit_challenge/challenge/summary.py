from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from profit_challenge.challenge.models import ChallengeConfig, EnrichedSnapshot
from profit_challenge.challenge.normalize import coerce_float


@dataclass(frozen=True)
class ChallengeSummary:
    balance: float
    total_growth: float
    growth_percent: float
    entries: int
    target_today: float | None


def current_balance(config: ChallengeConfig, enriched: Sequence[EnrichedSnapshot]) -> float:
    """Latest account value, or start capital before the first snapshot."""
    if not enriched:
        return coerce_float(config.start_capital)
    latest = max(enriched, key=lambda e: e.date)
    return coerce_float(latest.account_value)


def growth_percent(start_capital: float, balance: float) -> float:
    start = coerce_float(start_capital)
    if start == 0:
        return 0.0
    return (balance - start) / start * 100.0


def summarize(config: ChallengeConfig, enriched: Sequence[EnrichedSnapshot], today: date) -> ChallengeSummary:
    balance = current_balance(config, enriched)
    target = None
    if today >= config.start_date:
        # The goal curve is stepped once on the start date itself.
        target = config.target_after(coerce_float(config.start_capital), (today - config.start_date).days + 1)
    return ChallengeSummary(
        balance=balance,
        total_growth=balance - coerce_float(config.start_capital),
        growth_percent=growth_percent(config.start_capital, balance),
        entries=len(enriched),
        target_today=target,
    )
