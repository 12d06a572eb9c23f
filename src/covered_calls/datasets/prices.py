"""Adapters from tabular daily closes to `PriceBar` sequences."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from covered_calls.contracts import CLOSE, DATE, TICKER, PriceBar


def bars_from_frame(
    df: pd.DataFrame,
    *,
    date_col: str = DATE,
    close_col: str = CLOSE,
) -> tuple[PriceBar, ...]:
    """Convert a frame of closes into date-sorted bars.

    Rows with a missing date or close are dropped; duplicate dates keep the
    last row.
    """
    missing = [c for c in (date_col, close_col) if c not in df.columns]
    if missing:
        raise ValueError(f"price frame is missing required columns: {missing}")

    frame = df[[date_col, close_col]].dropna()
    frame = frame.assign(**{date_col: pd.to_datetime(frame[date_col]).dt.date})
    frame = frame.drop_duplicates(subset=date_col, keep="last").sort_values(date_col)

    return tuple(
        PriceBar(date=d, close=float(c))
        for d, c in zip(frame[date_col], frame[close_col])
    )


def bars_from_series(close: pd.Series) -> tuple[PriceBar, ...]:
    """Convert a date-indexed close series into bars."""
    frame = close.rename(CLOSE).rename_axis(DATE).reset_index()
    return bars_from_frame(frame)


def _read_table(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".parquet":
        return pd.read_parquet(path)
    if suffix in (".csv", ".txt"):
        return pd.read_csv(path)
    raise ValueError(f"Unsupported price file format: {path.suffix!r}")


def read_price_history(
    path: Path | str,
    *,
    tickers: Sequence[str] | None = None,
    default_ticker: str | None = None,
) -> dict[str, tuple[PriceBar, ...]]:
    """Read a long-format close file into `{ticker: bars}`.

    Files without a `ticker` column are treated as a single series keyed by
    `default_ticker` (or the file stem).
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Price history not found: {p}")

    df = _read_table(p)
    if TICKER not in df.columns:
        return {default_ticker or p.stem.upper(): bars_from_frame(df)}

    df = df.assign(**{TICKER: df[TICKER].astype(str).str.strip().str.upper()})
    if tickers is not None:
        wanted = [str(t).strip().upper() for t in tickers if str(t).strip()]
        if not wanted:
            raise ValueError("tickers must contain at least one non-empty symbol")
        df = df[df[TICKER].isin(wanted)]
        order = [t for t in wanted if t in set(df[TICKER])]
    else:
        order = list(dict.fromkeys(df[TICKER]))

    return {ticker: bars_from_frame(df[df[TICKER] == ticker]) for ticker in order}
