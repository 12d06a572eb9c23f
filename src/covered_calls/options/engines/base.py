"""Interface for option-pricing engines."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from covered_calls.options.types import OptionQuoteEstimate, PricingInputs


@runtime_checkable
class PriceModel(Protocol):
    """Minimum pricing capability required by the covered-call simulator."""

    def call_price(self, inputs: PricingInputs) -> float:
        """Return the per-share value of one call."""


@runtime_checkable
class QuoteModel(Protocol):
    """Extension for engines that also estimate delta and assignment odds."""

    def quote_call(self, inputs: PricingInputs) -> OptionQuoteEstimate:
        """Return price, delta and assignment probability for one call."""
