"""Inputs, per-cycle records and aggregate results of covered-call backtests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any

from covered_calls.contracts import PriceBar


@dataclass(frozen=True)
class BacktestParams:
    """Strategy parameters for one covered-call backtest.

    `volatility` and `risk_free_rate` are annualized decimals.
    """

    shares: float
    moneyness_percent: float
    cycle_days: int
    volatility: float = 0.30
    risk_free_rate: float = 0.05

    def __post_init__(self) -> None:
        if self.cycle_days < 1:
            raise ValueError("cycle_days must be >= 1")


@dataclass(frozen=True, slots=True)
class Cycle:
    """One write-to-expiry period of a short call."""

    entry_date: date
    entry_price: float
    strike: float
    premium_per_share: float
    expiry_date: date
    expiry_price: float
    assigned: bool


@dataclass(frozen=True, slots=True)
class PremiumEvent:
    """Running premium total recorded when a cycle settles."""

    date: date
    cumulative_premium: float
    event: str
    cycle_premium: float = 0.0


@dataclass(frozen=True)
class BacktestResult:
    """Aggregate statistics over all simulated cycles."""

    start_date: date | None
    end_date: date | None
    total_premium_collected: float = 0.0
    total_cycles: int = 0
    assignment_count: int = 0
    average_premium_per_cycle: float = 0.0
    annualized_yield: float = 0.0
    premium_history: tuple[PremiumEvent, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls, prices: Sequence[PriceBar]) -> BacktestResult:
        """Zeroed result spanning whatever dates the input carries."""
        return cls(
            start_date=prices[0].date if prices else None,
            end_date=prices[-1].date if prices else None,
        )

    @property
    def assignment_rate(self) -> float:
        """Fraction of cycles that ended assigned (0 when no cycles ran)."""
        if self.total_cycles == 0:
            return 0.0
        return self.assignment_count / self.total_cycles

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
