"""Covered-call backtest replaying a close series through write/settle cycles.

The simulation is an explicit state machine:

    AWAITING_CYCLE_START -> CYCLE_OPEN -> CYCLE_SETTLED -> (AWAITING_CYCLE_START | FINISHED)

Each transition takes the previous immutable `SimulatorState` and returns a new
one. A cycle opens at the cursor bar, settles `cycle_days` bars later (clipped
to the last bar) and the next cycle opens on the settlement bar, so cycle
boundaries follow the bars present in the input rather than calendar days.

Degenerate inputs never raise: fewer than 100 shares or a history shorter than
one cycle produce `BacktestResult.empty(...)`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import StrEnum

from covered_calls.contracts import PriceBar
from covered_calls.options.engines import BlackScholesPricer, PriceModel
from covered_calls.options.types import PricingInputs
from covered_calls.strategy.strikes import strike_increment, target_strike
from covered_calls.strategy.yields import SHARES_PER_CONTRACT, contract_count

from .types import BacktestParams, BacktestResult, Cycle, PremiumEvent

logger = logging.getLogger(__name__)


class SimulatorPhase(StrEnum):
    AWAITING_CYCLE_START = "awaiting_cycle_start"
    CYCLE_OPEN = "cycle_open"
    CYCLE_SETTLED = "cycle_settled"
    FINISHED = "finished"


@dataclass(frozen=True)
class SimulatorState:
    """Accumulator threaded through the transitions.

    `cursor` is the bar index of the next (or current) cycle entry;
    `expiry_index` is only meaningful while a cycle is open.
    """

    phase: SimulatorPhase = SimulatorPhase.AWAITING_CYCLE_START
    cursor: int = 0
    expiry_index: int = 0
    open_cycle: Cycle | None = None
    total_premium: float = 0.0
    cycles: int = 0
    assignments: int = 0
    history: tuple[PremiumEvent, ...] = ()


def open_cycle(
    state: SimulatorState,
    prices: Sequence[PriceBar],
    params: BacktestParams,
    pricer: PriceModel,
) -> SimulatorState:
    """Write a call at the cursor bar and price it."""
    entry = prices[state.cursor]
    expiry_index = min(state.cursor + params.cycle_days, len(prices) - 1)
    expiry = prices[expiry_index]

    strike = target_strike(
        entry.close,
        params.moneyness_percent,
        strike_increment(entry.close),
    )
    premium = pricer.call_price(
        PricingInputs(
            spot=entry.close,
            strike=strike,
            time_to_expiry=params.cycle_days / 365.0,
            risk_free_rate=params.risk_free_rate,
            volatility=params.volatility,
        )
    )

    cycle = Cycle(
        entry_date=entry.date,
        entry_price=entry.close,
        strike=strike,
        premium_per_share=premium,
        expiry_date=expiry.date,
        expiry_price=expiry.close,
        assigned=expiry.close >= strike,
    )
    return replace(
        state,
        phase=SimulatorPhase.CYCLE_OPEN,
        expiry_index=expiry_index,
        open_cycle=cycle,
    )


def settle_cycle(state: SimulatorState, contracts: int) -> SimulatorState:
    """Book the open cycle's premium and assignment outcome."""
    cycle = state.open_cycle
    if cycle is None:
        raise RuntimeError("settle_cycle called without an open cycle")

    cycle_premium = cycle.premium_per_share * contracts * SHARES_PER_CONTRACT
    total = state.total_premium + cycle_premium
    label = f"Assigned at ${cycle.strike:.2f}" if cycle.assigned else "Expired OTM"

    logger.debug(
        "Cycle %s -> %s: strike=%.2f premium=%.4f expiry_close=%.2f %s",
        cycle.entry_date,
        cycle.expiry_date,
        cycle.strike,
        cycle.premium_per_share,
        cycle.expiry_price,
        label,
    )

    event = PremiumEvent(
        date=cycle.expiry_date,
        cumulative_premium=total,
        event=label,
        cycle_premium=cycle_premium,
    )
    return replace(
        state,
        phase=SimulatorPhase.CYCLE_SETTLED,
        cursor=state.expiry_index,
        open_cycle=None,
        total_premium=total,
        cycles=state.cycles + 1,
        assignments=state.assignments + int(cycle.assigned),
        history=state.history + (event,),
    )


def advance(state: SimulatorState, n_bars: int, cycle_days: int) -> SimulatorState:
    """Decide whether another full cycle fits after the cursor."""
    if state.cursor < n_bars - cycle_days:
        return replace(state, phase=SimulatorPhase.AWAITING_CYCLE_START)
    return replace(state, phase=SimulatorPhase.FINISHED)


def _annualized_yield(
    total_premium: float,
    prices: Sequence[PriceBar],
    shares: float,
) -> float:
    """Simple (non-compounded) yield on initial stock value, in percent."""
    start_value = prices[0].close * shares
    elapsed_days = (prices[-1].date - prices[0].date).days if len(prices) > 1 else 1
    if elapsed_days <= 0 or start_value <= 0:
        return 0.0
    return (total_premium / start_value) * (365.0 / elapsed_days) * 100.0


def run_simulation(
    prices: Sequence[PriceBar],
    params: BacktestParams,
    *,
    pricer: PriceModel | None = None,
) -> BacktestResult:
    """Drive the state machine to completion for one price history."""
    contracts = contract_count(params.shares)
    if contracts == 0 or len(prices) < params.cycle_days:
        logger.debug(
            "Empty backtest: contracts=%d bars=%d cycle_days=%d",
            contracts,
            len(prices),
            params.cycle_days,
        )
        return BacktestResult.empty(prices)

    pricer = pricer or BlackScholesPricer()
    n_bars = len(prices)
    state = advance(SimulatorState(), n_bars, params.cycle_days)

    while state.phase is not SimulatorPhase.FINISHED:
        if state.phase is SimulatorPhase.AWAITING_CYCLE_START:
            state = open_cycle(state, prices, params, pricer)
        elif state.phase is SimulatorPhase.CYCLE_OPEN:
            state = settle_cycle(state, contracts)
        else:
            state = advance(state, n_bars, params.cycle_days)

    average = state.total_premium / state.cycles if state.cycles else 0.0
    result = BacktestResult(
        start_date=prices[0].date,
        end_date=prices[-1].date,
        total_premium_collected=state.total_premium,
        total_cycles=state.cycles,
        assignment_count=state.assignments,
        average_premium_per_cycle=average,
        annualized_yield=_annualized_yield(state.total_premium, prices, params.shares),
        premium_history=state.history,
    )
    logger.debug(
        "Backtest %s -> %s: cycles=%d assigned=%d premium=%.2f yield=%.2f%%",
        result.start_date,
        result.end_date,
        result.total_cycles,
        result.assignment_count,
        result.total_premium_collected,
        result.annualized_yield,
    )
    return result


def backtest_covered_call(
    prices: Sequence[PriceBar],
    shares: float,
    moneyness_percent: float,
    cycle_days: int,
    volatility_estimate: float = 0.30,
    risk_free_rate: float = 0.05,
    *,
    pricer: PriceModel | None = None,
) -> BacktestResult:
    """Simulate writing covered calls back to back over `prices`.

    Each cycle writes `floor(shares / 100)` calls struck at the listed strike
    nearest `moneyness_percent` above the entry close, priced with
    Black-Scholes at `volatility_estimate`. Expiry closes at or above the
    strike count as assigned.
    """
    params = BacktestParams(
        shares=shares,
        moneyness_percent=moneyness_percent,
        cycle_days=cycle_days,
        volatility=volatility_estimate,
        risk_free_rate=risk_free_rate,
    )
    return run_simulation(prices, params, pricer=pricer)
