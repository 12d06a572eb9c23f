"""Point-in-time covered-call views for a single position."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from covered_calls.options.engines import BlackScholesPricer, QuoteModel
from covered_calls.options.types import PricingInputs

from .chain import (
    CycleConfig,
    LiquidityInfo,
    OptionExpiration,
    find_best_liquid_call,
    premium_from_quote,
    select_expiration,
)
from .strikes import strike_increment, target_strike
from .yields import (
    SHARES_PER_CONTRACT,
    annualized_yield,
    breakeven,
    contract_count,
    max_profit,
    yield_if_called,
)

logger = logging.getLogger(__name__)

DEFAULT_VOLATILITY = 0.30
DEFAULT_RISK_FREE_RATE = 0.05
# Strikes below this fraction of spot are never written.
MIN_STRIKE_FRACTION = 0.9


@dataclass(frozen=True)
class CoveredCallSimulation:
    """Economics of writing one round of calls against a position."""

    symbol: str
    shares: float
    contracts: int
    underlying_price: float
    strike: float
    premium: float
    total_premium: float
    days_to_expiration: int
    annualized_yield: float
    yield_if_called: float
    assignment_probability: float
    delta: float
    breakeven: float
    max_profit: float
    expiration_date: date | None = None
    liquidity: LiquidityInfo | None = None


def _build_simulation(
    *,
    symbol: str,
    shares: float,
    underlying_price: float,
    strike: float,
    premium: float,
    days_to_expiration: int,
    volatility: float,
    risk_free_rate: float,
    pricer: QuoteModel,
    expiration_date: date | None = None,
    liquidity: LiquidityInfo | None = None,
) -> CoveredCallSimulation:
    contracts = contract_count(shares)
    estimate = pricer.quote_call(
        PricingInputs.from_days(
            underlying_price,
            strike,
            days_to_expiration,
            risk_free_rate=risk_free_rate,
            volatility=volatility,
        )
    )
    return CoveredCallSimulation(
        symbol=symbol,
        shares=shares,
        contracts=contracts,
        underlying_price=underlying_price,
        strike=strike,
        premium=premium,
        total_premium=premium * contracts * SHARES_PER_CONTRACT,
        days_to_expiration=days_to_expiration,
        annualized_yield=annualized_yield(premium, underlying_price, days_to_expiration),
        yield_if_called=yield_if_called(
            premium, strike, underlying_price, days_to_expiration
        ),
        assignment_probability=estimate.assignment_probability,
        delta=estimate.delta,
        breakeven=breakeven(underlying_price, premium),
        max_profit=max_profit(shares, underlying_price, strike, premium),
        expiration_date=expiration_date,
        liquidity=liquidity,
    )


def simulate_covered_call(
    symbol: str,
    shares: float,
    underlying_price: float,
    expirations: Sequence[OptionExpiration],
    moneyness_percent: float,
    cycle: str | CycleConfig = "monthly",
    *,
    default_volatility: float = DEFAULT_VOLATILITY,
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
    pricer: QuoteModel | None = None,
) -> CoveredCallSimulation | None:
    """Evaluate the best tradeable call near the target moneyness.

    Returns `None` when no expiration, strike or usable price is available.
    """
    expiration = select_expiration(expirations, cycle)
    if expiration is None:
        logger.debug("%s: no expiration with enough days left", symbol)
        return None

    target = target_strike(
        underlying_price, moneyness_percent, strike_increment(underlying_price)
    )
    min_strike = underlying_price * MIN_STRIKE_FRACTION
    best = find_best_liquid_call(expiration.calls, target, min_strike)
    if best is None:
        logger.debug("%s: no call at or above %.2f", symbol, min_strike)
        return None

    call, liquidity = best
    premium = premium_from_quote(call, liquidity)
    if premium is None:
        logger.debug("%s: no usable price for strike %.2f", symbol, call.strike)
        return None

    return _build_simulation(
        symbol=symbol,
        shares=shares,
        underlying_price=underlying_price,
        strike=call.strike,
        premium=premium,
        days_to_expiration=expiration.days_to_expiration,
        volatility=call.implied_volatility or default_volatility,
        risk_free_rate=risk_free_rate,
        pricer=pricer or BlackScholesPricer(),
        expiration_date=expiration.expiration_date,
        liquidity=liquidity,
    )


def estimate_covered_call(
    symbol: str,
    shares: float,
    underlying_price: float,
    moneyness_percent: float,
    days_to_expiration: int,
    *,
    volatility: float = DEFAULT_VOLATILITY,
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
    pricer: QuoteModel | None = None,
) -> CoveredCallSimulation:
    """Model-only view: price the target strike with Black-Scholes."""
    pricer = pricer or BlackScholesPricer()
    strike = target_strike(
        underlying_price, moneyness_percent, strike_increment(underlying_price)
    )
    premium = pricer.quote_call(
        PricingInputs.from_days(
            underlying_price,
            strike,
            days_to_expiration,
            risk_free_rate=risk_free_rate,
            volatility=volatility,
        )
    ).price
    return _build_simulation(
        symbol=symbol,
        shares=shares,
        underlying_price=underlying_price,
        strike=strike,
        premium=premium,
        days_to_expiration=days_to_expiration,
        volatility=volatility,
        risk_free_rate=risk_free_rate,
        pricer=pricer,
    )
