"""Black-Scholes pricing for European options without dividends.

Every function degrades instead of raising when `S`, `K`, `T` or `sigma` is
not positive: prices collapse to intrinsic value and probabilities to 0/1.
"""

from __future__ import annotations

import math

from covered_calls.options.normal import norm_cdf
from covered_calls.options.types import OptionType, OptionTypeInput


def normalize_option_type(option_type: OptionTypeInput) -> OptionType:
    """Normalize option type labels to `OptionType`."""
    if option_type in ("call", "C"):
        return OptionType.CALL
    if option_type in ("put", "P"):
        return OptionType.PUT
    raise ValueError("option_type must be one of {'call', 'put', 'C', 'P'}")


def _is_degenerate(S: float, K: float, T: float, sigma: float) -> bool:
    return S <= 0 or K <= 0 or T <= 0 or sigma <= 0


def bs_d1_d2(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> tuple[float, float]:
    """Compute d1 and d2. Requires positive `S`, `K`, `T` and `sigma`."""
    if _is_degenerate(S, K, T, sigma):
        raise ValueError("S, K, T and sigma must be positive")
    vol_sqrt_t = sigma * math.sqrt(T)
    d1 = (math.log(S / K) + (r + 0.5 * sigma**2) * T) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return d1, d2


def bs_call_price(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Black-Scholes call price; intrinsic value on degenerate inputs."""
    if _is_degenerate(S, K, T, sigma):
        return max(0.0, S - K)
    d1, d2 = bs_d1_d2(S, K, T, sigma, r)
    return S * norm_cdf(d1) - K * math.exp(-r * T) * norm_cdf(d2)


def bs_put_price(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Black-Scholes put price; intrinsic value on degenerate inputs."""
    if _is_degenerate(S, K, T, sigma):
        return max(0.0, K - S)
    d1, d2 = bs_d1_d2(S, K, T, sigma, r)
    return K * math.exp(-r * T) * norm_cdf(-d2) - S * norm_cdf(-d1)


def bs_price(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionTypeInput = OptionType.CALL,
) -> float:
    """Dispatch to the call or put formula."""
    if normalize_option_type(option_type) is OptionType.CALL:
        return bs_call_price(S, K, T, r, sigma)
    return bs_put_price(S, K, T, r, sigma)


def bs_call_delta(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.05,
) -> float:
    """Call delta `N(d1)`; 1 or 0 by moneyness on degenerate inputs."""
    if _is_degenerate(S, K, T, sigma):
        return 1.0 if S >= K else 0.0
    d1, _ = bs_d1_d2(S, K, T, sigma, r)
    return norm_cdf(d1)


def bs_assignment_probability(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.05,
) -> float:
    """Risk-neutral probability (percent) of a call finishing in the money.

    Uses `N(d2)`; `bs_call_delta` is `N(d1)`. The two differ whenever
    `sigma * sqrt(T) > 0`.
    """
    if _is_degenerate(S, K, T, sigma):
        return 100.0 if S >= K else 0.0
    _, d2 = bs_d1_d2(S, K, T, sigma, r)
    return norm_cdf(d2) * 100.0
