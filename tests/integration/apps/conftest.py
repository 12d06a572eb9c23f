from __future__ import annotations

import json
from typing import Any

import pytest


@pytest.fixture
def parse_printed_config():
    def _parse(text: str) -> dict[str, Any]:
        return json.loads(text)

    return _parse


@pytest.fixture
def run_help(capsys):
    def _run(mod, expected: str) -> None:
        with pytest.raises(SystemExit) as exc:
            mod.main(["--help"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert expected in out

    return _run


@pytest.fixture
def run_print_config(capsys, parse_printed_config):
    def _run(mod, config_path: str) -> dict[str, Any]:
        mod.main(
            [
                "--config",
                config_path,
                "--print-config",
            ]
        )
        return parse_printed_config(capsys.readouterr().out)

    return _run


@pytest.fixture
def assert_paths_exist():
    def _assert(cfg: dict[str, Any], paths: list[tuple[str, ...]]) -> None:
        for keys in paths:
            cur: Any = cfg
            for key in keys:
                assert key in cur
                cur = cur[key]

    return _assert


@pytest.fixture
def write_prices_csv(tmp_path):
    """Long-format daily closes for a few tickers, `n_bars` calendar days each."""

    def _write(
        tickers: tuple[str, ...] = ("SPY", "QQQ"),
        n_bars: int = 90,
    ):
        import numpy as np
        import pandas as pd

        rng = np.random.default_rng(7)
        dates = pd.date_range("2024-01-02", periods=n_bars, freq="D")
        frames = []
        for i, ticker in enumerate(tickers):
            steps = rng.normal(0.0005, 0.012, size=n_bars)
            close = (100.0 + 50.0 * i) * np.exp(np.cumsum(steps))
            frames.append(
                pd.DataFrame({"date": dates, "ticker": ticker, "close": close})
            )

        path = tmp_path / "daily_closes.csv"
        pd.concat(frames, ignore_index=True).to_csv(path, index=False)
        return path

    return _write
