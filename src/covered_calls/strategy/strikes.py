"""Strike selection on listed-option strike grids."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Literal

# (exclusive upper price bound, strike increment), scanned in order.
STRIKE_INCREMENT_TIERS: tuple[tuple[float, float], ...] = (
    (5.0, 0.5),
    (25.0, 1.0),
    (200.0, 2.5),
    (float("inf"), 5.0),
)

TieBreak = Literal["lower", "first"]


def strike_increment(
    price: float,
    tiers: tuple[tuple[float, float], ...] = STRIKE_INCREMENT_TIERS,
) -> float:
    """Return the listed strike spacing for an underlying at `price`."""
    for upper, increment in tiers:
        if price < upper:
            return increment
    return tiers[-1][1]


def target_strike(
    current_price: float,
    moneyness_percent: float,
    increment: float = 1.0,
) -> float:
    """Round `current_price * (1 + moneyness%)` to the nearest strike.

    Positive moneyness places a call out of the money. Halves round up, so a
    target midway between two strikes picks the higher one.
    """
    raw = current_price * (1.0 + moneyness_percent / 100.0)
    return math.floor(raw / increment + 0.5) * increment


def closest_available_strike(
    target: float,
    available_strikes: Iterable[float],
    *,
    tie_break: TieBreak = "lower",
) -> float:
    """Return the available strike nearest to `target`.

    Equidistant candidates resolve to the lower strike by default. With
    `tie_break="first"` the earliest candidate in iteration order wins, so
    callers must pass an ordered sequence for reproducible results. An empty
    input returns `target` unchanged.
    """
    best: float | None = None
    best_diff = float("inf")
    for strike in available_strikes:
        diff = abs(strike - target)
        if diff < best_diff:
            best, best_diff = strike, diff
        elif diff == best_diff and tie_break == "lower" and best is not None:
            best = min(best, strike)

    return target if best is None else best
