"""Price-history dataset adapters."""

from .prices import bars_from_frame, bars_from_series, read_price_history

__all__ = [
    "bars_from_frame",
    "bars_from_series",
    "read_price_history",
]
