"""Close-to-close historical volatility estimators."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

import numpy as np
import pandas as pd

from covered_calls.contracts import PriceBar

logger = logging.getLogger(__name__)

TRADING_DAYS_PER_YEAR = 252


@dataclass(frozen=True, slots=True)
class VolatilityPoint:
    """Annualized volatility as of `date`."""

    date: date
    annualized_volatility: float


def _log_returns(prices: Sequence[PriceBar]) -> tuple[list[date], np.ndarray]:
    """Return consecutive log returns dated at their ending bar.

    Pairs touching a non-positive close are skipped.
    """
    dates: list[date] = []
    returns: list[float] = []
    for prev, curr in zip(prices[:-1], prices[1:]):
        if prev.close > 0 and curr.close > 0:
            dates.append(curr.date)
            returns.append(math.log(curr.close / prev.close))
    return dates, np.asarray(returns, dtype=float)


def historical_volatility(
    prices: Sequence[PriceBar],
    window: int = 20,
    *,
    ann: int = TRADING_DAYS_PER_YEAR,
) -> list[VolatilityPoint]:
    """Rolling annualized volatility of daily log returns.

    For each return position `i >= window` the Bessel-corrected standard
    deviation of returns `[i - window, i)` is annualized by `sqrt(ann)` and
    dated at return `i`. Yields `len(prices) - window - 1` points for a clean
    series and an empty list when the history is shorter than `window + 1`.
    A one-return window has no sample deviation, so `window=1` yields points
    whose `annualized_volatility` is NaN.
    """
    if window < 1:
        raise ValueError("window must be >= 1")
    if len(prices) < window + 1:
        return []

    dates, returns = _log_returns(prices)
    if len(returns) <= window:
        return []

    windows = np.lib.stride_tricks.sliding_window_view(returns[:-1], window)
    if window == 1:
        vols = np.full(len(windows), np.nan)
    else:
        vols = windows.std(axis=1, ddof=1) * math.sqrt(ann)
    return [
        VolatilityPoint(date=d, annualized_volatility=float(v))
        for d, v in zip(dates[window:], vols)
    ]


def historical_volatility_series(
    close: pd.Series,
    window: int = 20,
    *,
    ann: int = TRADING_DAYS_PER_YEAR,
) -> pd.Series:
    """Vectorized `historical_volatility` for a date-indexed close series."""
    if window < 1:
        raise ValueError("window must be >= 1")

    close = close.astype(float)
    prev = close.shift(1)
    returns = np.log(close.where(close > 0) / prev.where(prev > 0)).dropna()

    hv = returns.rolling(window, min_periods=window).std(ddof=1).shift(1)
    # First `window` rows are warm-up; window=1 leaves NaN values.
    hv = (hv * np.sqrt(ann)).iloc[window:]
    hv.name = "hv"
    return hv


def estimate_implied_volatility(
    prices: Sequence[PriceBar],
    window: int = 20,
    *,
    markup: float = 1.2,
    default: float = 0.30,
) -> float:
    """Proxy an implied volatility as the latest historical volatility x markup.

    Falls back to `default` when the history is too short for one window or
    the latest estimate is undefined.
    """
    series = historical_volatility(prices, window)
    if not series or math.isnan(series[-1].annualized_volatility):
        logger.debug(
            "History too short for %d-day volatility (%d bars); using default %.4f",
            window,
            len(prices),
            default,
        )
        return default
    return series[-1].annualized_volatility * markup
