"""Data contracts shared across the covered-call engine."""

from .price_history import CANONICAL_REQUIRED_COLUMNS, CLOSE, DATE, TICKER, PriceBar

__all__ = [
    "CANONICAL_REQUIRED_COLUMNS",
    "CLOSE",
    "DATE",
    "TICKER",
    "PriceBar",
]
