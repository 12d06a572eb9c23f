from datetime import date
from pathlib import Path

import pandas as pd
import pytest

from covered_calls.contracts import PriceBar
from covered_calls.datasets import (
    bars_from_frame,
    bars_from_series,
    read_price_history,
)


def test_bars_from_frame_sorts_dedupes_and_drops_missing():
    df = pd.DataFrame(
        {
            "date": ["2024-01-03", "2024-01-02", "2024-01-03", "2024-01-04"],
            "close": [101.0, 100.0, 102.0, None],
        }
    )
    bars = bars_from_frame(df)

    assert bars == (
        PriceBar(date(2024, 1, 2), 100.0),
        PriceBar(date(2024, 1, 3), 102.0),
    )


def test_bars_from_frame_missing_columns_raises():
    with pytest.raises(ValueError, match="missing required columns"):
        bars_from_frame(pd.DataFrame({"date": ["2024-01-02"]}))


def test_bars_from_series():
    close = pd.Series(
        [10.0, 11.0],
        index=pd.to_datetime(["2024-02-01", "2024-02-02"]),
    )
    bars = bars_from_series(close)
    assert [b.date for b in bars] == [date(2024, 2, 1), date(2024, 2, 2)]
    assert [b.close for b in bars] == [10.0, 11.0]


@pytest.fixture
def long_csv(tmp_path: Path) -> Path:
    path = tmp_path / "closes.csv"
    pd.DataFrame(
        {
            "date": ["2024-01-02", "2024-01-03"] * 2,
            "ticker": ["spy", "spy", "qqq", "qqq"],
            "close": [470.0, 468.5, 405.0, 401.2],
        }
    ).to_csv(path, index=False)
    return path


def test_read_price_history_long_format(long_csv):
    histories = read_price_history(long_csv)
    assert list(histories) == ["SPY", "QQQ"]
    assert histories["QQQ"][-1] == PriceBar(date(2024, 1, 3), 401.2)


def test_read_price_history_filters_tickers_in_requested_order(long_csv):
    histories = read_price_history(long_csv, tickers=["qqq", "SPY", "DIA"])
    assert list(histories) == ["QQQ", "SPY"]


def test_read_price_history_single_series_uses_stem(tmp_path: Path):
    path = tmp_path / "aapl.csv"
    pd.DataFrame({"date": ["2024-01-02"], "close": [185.6]}).to_csv(
        path, index=False
    )

    assert list(read_price_history(path)) == ["AAPL"]
    assert list(read_price_history(path, default_ticker="X")) == ["X"]


def test_read_price_history_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_price_history(tmp_path / "nope.csv")


def test_read_price_history_unsupported_suffix(tmp_path: Path):
    path = tmp_path / "closes.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported"):
        read_price_history(path)
