"""Analytical option-pricing models."""

from .black_scholes import (
    bs_assignment_probability,
    bs_call_delta,
    bs_call_price,
    bs_d1_d2,
    bs_price,
    bs_put_price,
    normalize_option_type,
)

__all__ = [
    "bs_d1_d2",
    "bs_call_price",
    "bs_put_price",
    "bs_price",
    "bs_call_delta",
    "bs_assignment_probability",
    "normalize_option_type",
]
