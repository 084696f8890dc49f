from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class GoalType(str, Enum):
    PERCENT = "percent"  # goal_value is % per day, compounded
    FIXED = "fixed"  # goal_value is an amount added per day


class Currency(str, Enum):
    EUR = "EUR"
    USD = "USD"
    BTC = "BTC"


class Mood(str, Enum):
    NEUTRAL = "neutral"  # no snapshot that day
    PROFIT = "profit"
    LOSS = "loss"
    FLAT = "flat"


@dataclass(frozen=True)
class ChallengeConfig:
    start_capital: float
    goal_type: GoalType
    goal_value: float
    start_date: date

    @property
    def daily_rate(self) -> float:
        """Per-day growth factor minus one (percent goals only)."""
        return self.goal_value / 100.0

    def step(self, balance: float) -> float:
        """Apply one day of the goal function to a balance."""
        if self.goal_type is GoalType.PERCENT:
            return balance * (1.0 + self.daily_rate)
        if self.goal_type is GoalType.FIXED:
            return balance + self.goal_value
        raise ValueError(f"Unknown goal type: {self.goal_type!r}")

    def target_after(self, balance: float, days: int) -> float:
        """Balance after `days` applications of the goal function."""
        if self.goal_type is GoalType.PERCENT:
            try:
                growth = (1.0 + self.daily_rate) ** days
            except OverflowError:
                growth = float("inf")
            return balance * growth
        if self.goal_type is GoalType.FIXED:
            return balance + self.goal_value * days
        raise ValueError(f"Unknown goal type: {self.goal_type!r}")


@dataclass(frozen=True)
class Snapshot:
    id: str
    date: date
    account_value: float
    notes: str = ""


@dataclass(frozen=True)
class EnrichedSnapshot:
    id: str
    date: date
    account_value: float
    profit: float
    notes: str = ""

    @property
    def previous_value(self) -> float:
        # Account value the profit was measured against.
        return self.account_value - self.profit

    def to_snapshot(self) -> Snapshot:
        return Snapshot(id=self.id, date=self.date, account_value=self.account_value, notes=self.notes)


@dataclass(frozen=True)
class ProjectionPoint:
    date: date
    actual: float | None
    projected: float


@dataclass(frozen=True)
class WeeklyStatus:
    percent: float
    baseline: float
    current_account: float
    target_account: float
    current_gain: float
    target_gain: float

    @classmethod
    def flat(cls, value: float) -> "WeeklyStatus":
        """Zeroed status where every balance sits at `value`."""
        return cls(
            percent=0.0,
            baseline=value,
            current_account=value,
            target_account=value,
            current_gain=0.0,
            target_gain=0.0,
        )


@dataclass(frozen=True)
class DayClassification:
    mood: Mood
    percent: float


@dataclass
class ChallengeState:
    """Everything the store persists: config, raw entries and display currency."""

    config: ChallengeConfig | None = None
    entries: list[Snapshot] = field(default_factory=list)
    currency: Currency = Currency.EUR

    @property
    def initialized(self) -> bool:
        return self.config is not None
