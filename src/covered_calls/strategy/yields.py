"""Covered-call yield and payoff formulas.

Yields are percentages (12.5 means 12.5%) compounded to a 365-day year.
Undefined yields (non-positive price or horizon) are reported as 0.
"""

from __future__ import annotations

SHARES_PER_CONTRACT = 100
DAYS_PER_YEAR = 365.0


def contract_count(shares: float) -> int:
    """Full 100-share lots that can be covered; odd lots are ignored."""
    return int(shares // SHARES_PER_CONTRACT)


def _compound_annualize(period_return: float, days: float) -> float:
    return ((1.0 + period_return) ** (DAYS_PER_YEAR / days) - 1.0) * 100.0


def annualized_yield(
    premium: float,
    stock_price: float,
    days_to_expiration: float,
) -> float:
    """Annualized premium yield on the capital at risk (the share price)."""
    if stock_price <= 0 or days_to_expiration <= 0:
        return 0.0
    return _compound_annualize(premium / stock_price, days_to_expiration)


def yield_if_called(
    premium: float,
    strike: float,
    current_price: float,
    days_to_expiration: float,
) -> float:
    """Annualized return if the shares are called away at `strike`."""
    if current_price <= 0 or days_to_expiration <= 0:
        return 0.0
    capital_gain = max(0.0, strike - current_price)
    return _compound_annualize(
        (premium + capital_gain) / current_price, days_to_expiration
    )


def breakeven(current_price: float, premium: float) -> float:
    """Share price at which the covered position neither gains nor loses."""
    return current_price - premium


def max_profit(
    shares: float,
    current_price: float,
    strike: float,
    premium: float,
) -> float:
    """Best-case dollar profit: premium plus upside to strike, per full lot."""
    contracts = contract_count(shares)
    capital_gain = max(0.0, strike - current_price)
    return (capital_gain + premium) * contracts * SHARES_PER_CONTRACT
