from datetime import date

import pandas as pd
import pytest

from covered_calls.backtesting import (
    BacktestResult,
    PremiumEvent,
    format_backtest_report,
    premium_history_frame,
    summarize_results,
)
from covered_calls.backtesting.reporting import SUMMARY_COLUMNS


@pytest.fixture
def result() -> BacktestResult:
    history = (
        PremiumEvent(date(2024, 1, 31), 250.0, "Expired OTM", 250.0),
        PremiumEvent(date(2024, 3, 1), 480.0, "Assigned at $105.00", 230.0),
        PremiumEvent(date(2024, 3, 31), 700.0, "Expired OTM", 220.0),
    )
    return BacktestResult(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 4, 1),
        total_premium_collected=700.0,
        total_cycles=3,
        assignment_count=1,
        average_premium_per_cycle=700.0 / 3,
        annualized_yield=14.0,
        premium_history=history,
    )


def test_premium_history_frame(result):
    frame = premium_history_frame(result)

    assert list(frame.columns) == ["cycle_premium", "cumulative_premium", "event"]
    assert frame.index.name == "date"
    assert frame.index[0] == pd.Timestamp("2024-01-31")
    assert frame["cycle_premium"].sum() == pytest.approx(700.0)
    assert frame["event"].iloc[1] == "Assigned at $105.00"


def test_premium_history_frame_empty():
    frame = premium_history_frame(BacktestResult.empty([]))
    assert frame.empty
    assert list(frame.columns) == ["cycle_premium", "cumulative_premium", "event"]


def test_summarize_results(result):
    summary = summarize_results({"SPY": result, "IWM": BacktestResult.empty([])})

    assert list(summary.index) == ["SPY", "IWM"]
    assert tuple(summary.columns) == SUMMARY_COLUMNS
    assert summary.loc["SPY", "assignment_rate"] == pytest.approx(1 / 3)
    assert summary.loc["IWM", "total_cycles"] == 0


def test_format_backtest_report(result):
    text = format_backtest_report("SPY", result, last_events=2)

    assert "Covered Call Backtest: SPY" in text
    assert "$700.00" in text
    assert "14.00%" in text
    assert "Recent cycles (newest first):" in text
    assert "2024-01-31" not in text
    assert text.index("2024-03-31") < text.index("2024-03-01")


def test_format_backtest_report_without_history():
    text = format_backtest_report("IWM", BacktestResult.empty([]))
    assert "Cycles                 : 0" in text
    assert "Recent cycles" not in text
