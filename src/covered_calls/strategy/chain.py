"""Expiration and contract selection over a caller-supplied call chain."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class CycleConfig:
    """Days-to-expiration preference for one writing cadence."""

    target: int
    min: int
    max: int


CYCLE_CONFIGS: dict[str, CycleConfig] = {
    "weekly": CycleConfig(target=7, min=4, max=14),
    "monthly": CycleConfig(target=30, min=20, max=45),
    "45dte": CycleConfig(target=45, min=35, max=60),
}

MIN_DAYS_TO_EXPIRATION = 2


def cycle_config(name: str) -> CycleConfig:
    """Look up a cadence preset by name."""
    try:
        return CYCLE_CONFIGS[name]
    except KeyError as e:
        raise ValueError(
            f"Unknown expiration cycle {name!r}; expected one of {sorted(CYCLE_CONFIGS)}"
        ) from e


@dataclass(frozen=True, slots=True)
class OptionContractQuote:
    """Market snapshot for one listed call."""

    strike: float
    bid: float
    ask: float
    last_price: float = 0.0
    volume: int = 0
    open_interest: int = 0
    implied_volatility: float | None = None


@dataclass(frozen=True, slots=True)
class OptionExpiration:
    expiration_date: date
    days_to_expiration: int
    calls: tuple[OptionContractQuote, ...]


@dataclass(frozen=True, slots=True)
class LiquidityThresholds:
    min_bid: float = 0.05
    max_spread_percent: float = 30.0


class LiquidityScore(StrEnum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


_SCORE_RANK = {LiquidityScore.GOOD: 0, LiquidityScore.FAIR: 1, LiquidityScore.POOR: 2}


@dataclass(frozen=True, slots=True)
class LiquidityInfo:
    bid: float
    ask: float
    spread: float
    spread_percent: float
    volume: int
    open_interest: int
    is_liquid: bool
    score: LiquidityScore


def _mid_price(quote: OptionContractQuote) -> float:
    if quote.bid > 0 and quote.ask > 0:
        return 0.5 * (quote.bid + quote.ask)
    return quote.ask or quote.bid or quote.last_price


def assess_liquidity(
    quote: OptionContractQuote,
    thresholds: LiquidityThresholds = LiquidityThresholds(),
) -> LiquidityInfo:
    """Spread/size diagnostics for one contract.

    Only a quoted bid and a tight enough spread are required for `is_liquid`;
    volume and open interest feed the coarse `score`.
    """
    mid = _mid_price(quote)
    spread = quote.ask - quote.bid
    spread_percent = spread / mid * 100.0 if mid > 0 else 100.0

    has_bid = quote.bid >= thresholds.min_bid
    spread_ok = spread_percent <= thresholds.max_spread_percent

    if has_bid and spread_percent <= 10.0 and quote.open_interest >= 100:
        score = LiquidityScore.GOOD
    elif has_bid and spread_percent <= 25.0 and quote.open_interest >= 20:
        score = LiquidityScore.FAIR
    else:
        score = LiquidityScore.POOR

    return LiquidityInfo(
        bid=quote.bid,
        ask=quote.ask,
        spread=spread,
        spread_percent=spread_percent,
        volume=quote.volume,
        open_interest=quote.open_interest,
        is_liquid=has_bid and spread_ok,
        score=score,
    )


def find_best_liquid_call(
    calls: Sequence[OptionContractQuote],
    target_strike: float,
    min_strike: float,
) -> tuple[OptionContractQuote, LiquidityInfo] | None:
    """Pick the call to write near `target_strike`.

    Liquid contracts closest to the target win. Without any liquid contract
    the best-scored one is returned (ties broken by distance), so callers
    should inspect `LiquidityInfo.is_liquid`.
    """
    candidates = [
        (call, assess_liquidity(call), abs(call.strike - target_strike))
        for call in calls
        if call.strike >= min_strike
    ]
    if not candidates:
        return None

    liquid = [c for c in candidates if c[1].is_liquid]
    if liquid:
        call, info, _ = min(liquid, key=lambda c: c[2])
        return call, info

    call, info, _ = min(candidates, key=lambda c: (_SCORE_RANK[c[1].score], c[2]))
    return call, info


def premium_from_quote(
    quote: OptionContractQuote,
    liquidity: LiquidityInfo,
    *,
    last_price_haircut: float = 0.8,
) -> float | None:
    """Premium a writer can expect to receive, or `None` without usable prices."""
    if liquidity.is_liquid and quote.bid > 0 and quote.ask > 0:
        return 0.5 * (quote.bid + quote.ask)
    if quote.bid > 0:
        return quote.bid
    if quote.last_price > 0:
        return quote.last_price * last_price_haircut
    return None


def select_expiration(
    expirations: Sequence[OptionExpiration],
    cycle: str | CycleConfig,
) -> OptionExpiration | None:
    """Expiration closest to the cadence target, preferring the preset window."""
    cfg = cycle_config(cycle) if isinstance(cycle, str) else cycle
    valid = [
        e for e in expirations if e.days_to_expiration >= MIN_DAYS_TO_EXPIRATION
    ]
    if not valid:
        return None

    def distance(e: OptionExpiration) -> int:
        return abs(e.days_to_expiration - cfg.target)

    in_window = [e for e in valid if cfg.min <= e.days_to_expiration <= cfg.max]
    return min(in_window or valid, key=distance)
