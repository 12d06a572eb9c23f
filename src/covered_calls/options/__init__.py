"""Option pricing models, engines, and shared types."""

from .engines import BlackScholesPricer, PriceModel, QuoteModel
from .models.black_scholes import (
    bs_assignment_probability,
    bs_call_delta,
    bs_call_price,
    bs_d1_d2,
    bs_price,
    bs_put_price,
)
from .normal import norm_cdf, norm_cdf_exact
from .types import OptionQuoteEstimate, OptionType, OptionTypeInput, PricingInputs

__all__ = [
    "OptionType",
    "OptionTypeInput",
    "PricingInputs",
    "OptionQuoteEstimate",
    "PriceModel",
    "QuoteModel",
    "BlackScholesPricer",
    "norm_cdf",
    "norm_cdf_exact",
    "bs_d1_d2",
    "bs_call_price",
    "bs_put_price",
    "bs_price",
    "bs_call_delta",
    "bs_assignment_probability",
]
