"""Historical volatility estimation."""

from .estimators import (
    TRADING_DAYS_PER_YEAR,
    VolatilityPoint,
    estimate_implied_volatility,
    historical_volatility,
    historical_volatility_series,
)

__all__ = [
    "TRADING_DAYS_PER_YEAR",
    "VolatilityPoint",
    "estimate_implied_volatility",
    "historical_volatility",
    "historical_volatility_series",
]
