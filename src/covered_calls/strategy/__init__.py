"""Strike selection, yield formulas and point-in-time covered-call views."""

from .calculator import (
    CoveredCallSimulation,
    estimate_covered_call,
    simulate_covered_call,
)
from .chain import (
    CYCLE_CONFIGS,
    CycleConfig,
    LiquidityInfo,
    LiquidityScore,
    LiquidityThresholds,
    OptionContractQuote,
    OptionExpiration,
    assess_liquidity,
    cycle_config,
    find_best_liquid_call,
    premium_from_quote,
    select_expiration,
)
from .strikes import (
    STRIKE_INCREMENT_TIERS,
    closest_available_strike,
    strike_increment,
    target_strike,
)
from .yields import (
    SHARES_PER_CONTRACT,
    annualized_yield,
    breakeven,
    contract_count,
    max_profit,
    yield_if_called,
)

__all__ = [
    "CYCLE_CONFIGS",
    "STRIKE_INCREMENT_TIERS",
    "SHARES_PER_CONTRACT",
    "CoveredCallSimulation",
    "CycleConfig",
    "LiquidityInfo",
    "LiquidityScore",
    "LiquidityThresholds",
    "OptionContractQuote",
    "OptionExpiration",
    "annualized_yield",
    "assess_liquidity",
    "breakeven",
    "closest_available_strike",
    "contract_count",
    "cycle_config",
    "estimate_covered_call",
    "find_best_liquid_call",
    "max_profit",
    "premium_from_quote",
    "select_expiration",
    "simulate_covered_call",
    "strike_increment",
    "target_strike",
    "yield_if_called",
]
