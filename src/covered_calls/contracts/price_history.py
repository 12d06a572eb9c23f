"""Canonical daily price-history contract shared by datasets and backtesting.

Long-format files carry one row per (ticker, date). Only the close is used by
the covered-call engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

# ---------------------------------------------------------------------------
# Canonical long-format columns
# ---------------------------------------------------------------------------

DATE = "date"
TICKER = "ticker"
CLOSE = "close"

CANONICAL_REQUIRED_COLUMNS: tuple[str, ...] = (DATE, CLOSE)


@dataclass(frozen=True, slots=True)
class PriceBar:
    """One daily close. Sequences of bars are ordered ascending by date."""

    date: date
    close: float
