"""Tabular and console views of covered-call backtest results."""

from __future__ import annotations

from collections.abc import Mapping

import pandas as pd

from .types import BacktestResult

SUMMARY_COLUMNS: tuple[str, ...] = (
    "start_date",
    "end_date",
    "total_cycles",
    "assignment_count",
    "assignment_rate",
    "total_premium_collected",
    "average_premium_per_cycle",
    "annualized_yield",
)


def _fmt_pct(value: float | None) -> str:
    return f"{value:.2f}%" if value is not None else "n/a"


def _fmt_usd(value: float | None) -> str:
    return f"${value:,.2f}" if value is not None else "n/a"


def premium_history_frame(result: BacktestResult) -> pd.DataFrame:
    """One row per settled cycle, indexed by settlement date."""
    rows = [
        {
            "date": pd.Timestamp(event.date),
            "cycle_premium": event.cycle_premium,
            "cumulative_premium": event.cumulative_premium,
            "event": event.event,
        }
        for event in result.premium_history
    ]
    frame = pd.DataFrame(
        rows, columns=["date", "cycle_premium", "cumulative_premium", "event"]
    )
    return frame.set_index("date")


def summarize_results(results: Mapping[str, BacktestResult]) -> pd.DataFrame:
    """One summary row per symbol."""
    rows = []
    for symbol, result in results.items():
        rows.append(
            {
                "symbol": symbol,
                "start_date": result.start_date,
                "end_date": result.end_date,
                "total_cycles": result.total_cycles,
                "assignment_count": result.assignment_count,
                "assignment_rate": result.assignment_rate,
                "total_premium_collected": result.total_premium_collected,
                "average_premium_per_cycle": result.average_premium_per_cycle,
                "annualized_yield": result.annualized_yield,
            }
        )
    frame = pd.DataFrame(rows, columns=["symbol", *SUMMARY_COLUMNS])
    return frame.set_index("symbol")


def format_backtest_report(
    symbol: str,
    result: BacktestResult,
    *,
    last_events: int = 10,
) -> str:
    """Format a readable console report for one backtest."""
    lines = [
        "=" * 40,
        f"Covered Call Backtest: {symbol}",
        "=" * 40,
        f"Period                 : {result.start_date} -> {result.end_date}",
        f"Total Premium          : {_fmt_usd(result.total_premium_collected)}",
        f"Annualized Yield       : {_fmt_pct(result.annualized_yield)}",
        f"Cycles                 : {result.total_cycles}",
        (
            "Assignments            : "
            f"{result.assignment_count} ({result.assignment_rate:.0%})"
        ),
        f"Avg Premium / Cycle    : {_fmt_usd(result.average_premium_per_cycle)}",
        "",
    ]

    if result.premium_history and last_events > 0:
        lines.append("Recent cycles (newest first):")
        for event in reversed(result.premium_history[-last_events:]):
            lines.append(
                f"  {event.date}  {_fmt_usd(event.cumulative_premium):>14}  "
                f"{event.event}"
            )
        lines.append("")

    return "\n".join(lines)
