"""Black-Scholes pricing engine."""

from __future__ import annotations

from covered_calls.options.models.black_scholes import (
    bs_assignment_probability,
    bs_call_delta,
    bs_call_price,
    bs_put_price,
)
from covered_calls.options.types import OptionQuoteEstimate, PricingInputs


class BlackScholesPricer:
    """Closed-form Black-Scholes pricer backed by the analytical formulas."""

    def call_price(self, inputs: PricingInputs) -> float:
        return bs_call_price(
            S=inputs.spot,
            K=inputs.strike,
            T=inputs.time_to_expiry,
            r=inputs.risk_free_rate,
            sigma=inputs.volatility,
        )

    def put_price(self, inputs: PricingInputs) -> float:
        return bs_put_price(
            S=inputs.spot,
            K=inputs.strike,
            T=inputs.time_to_expiry,
            r=inputs.risk_free_rate,
            sigma=inputs.volatility,
        )

    def quote_call(self, inputs: PricingInputs) -> OptionQuoteEstimate:
        shared = {
            "S": inputs.spot,
            "K": inputs.strike,
            "T": inputs.time_to_expiry,
            "sigma": inputs.volatility,
            "r": inputs.risk_free_rate,
        }
        return OptionQuoteEstimate(
            price=self.call_price(inputs),
            delta=bs_call_delta(**shared),
            assignment_probability=bs_assignment_probability(**shared),
        )
