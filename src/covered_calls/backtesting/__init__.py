"""Covered-call backtesting engine."""

from .batch import run_backtests
from .reporting import (
    format_backtest_report,
    premium_history_frame,
    summarize_results,
)
from .simulator import (
    SimulatorPhase,
    SimulatorState,
    backtest_covered_call,
    run_simulation,
)
from .types import BacktestParams, BacktestResult, Cycle, PremiumEvent

__all__ = [
    "BacktestParams",
    "BacktestResult",
    "Cycle",
    "PremiumEvent",
    "SimulatorPhase",
    "SimulatorState",
    "backtest_covered_call",
    "format_backtest_report",
    "premium_history_frame",
    "run_backtests",
    "run_simulation",
    "summarize_results",
]
