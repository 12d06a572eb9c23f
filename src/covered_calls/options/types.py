"""Shared option-pricing dataclasses and aliases."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal, TypeAlias


class OptionType(StrEnum):
    """Canonical option side labels used across pricing code."""

    CALL = "call"
    PUT = "put"


# Tolerant input type accepted at system boundaries (vendor data/tests).
OptionTypeInput: TypeAlias = OptionType | Literal["call", "put", "C", "P"]


@dataclass(frozen=True, slots=True)
class PricingInputs:
    """Inputs for one closed-form valuation.

    Units:
    - `time_to_expiry`: years (calendar days / 365)
    - `risk_free_rate`, `volatility`: annualized decimals (0.05 = 5%)
    """

    spot: float
    strike: float
    time_to_expiry: float
    risk_free_rate: float = 0.05
    volatility: float = 0.30

    @classmethod
    def from_days(
        cls,
        spot: float,
        strike: float,
        days_to_expiration: float,
        *,
        risk_free_rate: float = 0.05,
        volatility: float = 0.30,
    ) -> PricingInputs:
        """Build inputs from a calendar-day horizon."""
        return cls(
            spot=spot,
            strike=strike,
            time_to_expiry=days_to_expiration / 365.0,
            risk_free_rate=risk_free_rate,
            volatility=volatility,
        )


@dataclass(frozen=True, slots=True)
class OptionQuoteEstimate:
    """Model-derived view of one short call.

    `assignment_probability` is a percentage in [0, 100]; `delta` is in [0, 1].
    """

    price: float
    delta: float
    assignment_probability: float
