"""Pricing engines used by calculators and backtests."""

from .base import PriceModel, QuoteModel
from .bs_pricer import BlackScholesPricer

__all__ = [
    "PriceModel",
    "QuoteModel",
    "BlackScholesPricer",
]
