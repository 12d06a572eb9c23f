"""Run independent covered-call backtests across many symbols."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Literal

from covered_calls.contracts import PriceBar

from .simulator import run_simulation
from .types import BacktestParams, BacktestResult

logger = logging.getLogger(__name__)

ExecutorKind = Literal["thread", "process"]

_EXECUTORS: dict[str, type[Executor]] = {
    "thread": ThreadPoolExecutor,
    "process": ProcessPoolExecutor,
}


def _run_one(
    symbol: str,
    prices: Sequence[PriceBar],
    params: BacktestParams,
) -> BacktestResult:
    result = run_simulation(prices, params)
    logger.info(
        "%s: %d cycles, %d assigned, premium=%.2f, yield=%.2f%%",
        symbol,
        result.total_cycles,
        result.assignment_count,
        result.total_premium_collected,
        result.annualized_yield,
    )
    return result


def run_backtests(
    price_histories: Mapping[str, Sequence[PriceBar]],
    params: BacktestParams | Mapping[str, BacktestParams],
    *,
    max_workers: int | None = None,
    executor: ExecutorKind = "thread",
) -> dict[str, BacktestResult]:
    """Backtest every symbol, optionally in parallel.

    `params` is either shared by all symbols or looked up per symbol. Results
    preserve the iteration order of `price_histories`. `max_workers=1` runs
    sequentially in the calling thread.

    The simulation is pure Python and holds the GIL, so `executor="thread"`
    only overlaps symbols without a speedup; `executor="process"` spreads
    symbols across worker processes.
    """
    try:
        executor_cls = _EXECUTORS[executor]
    except KeyError as e:
        raise ValueError(
            f"Unknown executor {executor!r}; expected one of {sorted(_EXECUTORS)}"
        ) from e

    jobs: list[tuple[str, Sequence[PriceBar], BacktestParams]] = []
    for symbol, prices in price_histories.items():
        symbol_params = params[symbol] if isinstance(params, Mapping) else params
        jobs.append((symbol, prices, symbol_params))

    results: dict[str, BacktestResult] = {}

    # Serial path
    if max_workers == 1 or len(jobs) <= 1:
        for symbol, prices, symbol_params in jobs:
            results[symbol] = _run_one(symbol, prices, symbol_params)
        return results

    # Pooled path
    with executor_cls(max_workers=max_workers) as pool:
        futures = [
            (symbol, pool.submit(_run_one, symbol, prices, symbol_params))
            for symbol, prices, symbol_params in jobs
        ]
        for symbol, fut in futures:
            results[symbol] = fut.result()

    return results
