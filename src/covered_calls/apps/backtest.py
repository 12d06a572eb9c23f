#!/usr/bin/env python
"""Backtest back-to-back covered calls over stored daily closes."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Mapping, Sequence
from dataclasses import asdict
from typing import Any

from covered_calls.apps._cli import (
    add_dry_run_arg,
    add_print_config_arg,
    ensure_list,
    log_dry_run,
    print_config,
)
from covered_calls.backtesting import (
    BacktestParams,
    format_backtest_report,
    run_backtests,
    summarize_results,
)
from covered_calls.cli import (
    DEFAULT_LOGGING,
    add_config_arg,
    add_logging_args,
    build_config,
    collect_logging_overrides,
    resolve_path,
    setup_logging_from_config,
)
from covered_calls.contracts import PriceBar
from covered_calls.datasets import read_price_history
from covered_calls.strategy import cycle_config
from covered_calls.volatility import estimate_implied_volatility

AUTO_VOLATILITY = "auto"

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": DEFAULT_LOGGING,
    "dry_run": False,
    "paths": {
        "prices": None,
    },
    "tickers": None,
    "shares": 100,
    "moneyness_percent": 5.0,
    "cycle": "monthly",
    "cycle_days": None,
    "volatility": 0.30,
    "volatility_window": 20,
    "volatility_markup": 1.2,
    "risk_free_rate": 0.05,
    "max_workers": None,
    "executor": "thread",
    "report": {
        "last_events": 10,
    },
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Backtest covered-call writing on daily close histories."
    )
    add_config_arg(parser)
    add_logging_args(parser)
    add_print_config_arg(parser)
    add_dry_run_arg(parser)

    parser.add_argument("--prices", type=str, default=None)
    parser.add_argument("--tickers", nargs="+", default=None)
    parser.add_argument("--shares", type=float, default=None)
    parser.add_argument("--moneyness", type=float, default=None)
    parser.add_argument(
        "--cycle",
        type=str,
        default=None,
        help="Cadence preset: weekly, monthly or 45dte.",
    )
    parser.add_argument(
        "--cycle-days",
        type=int,
        default=None,
        help="Bars per cycle; overrides the cadence preset target.",
    )
    parser.add_argument(
        "--volatility",
        type=str,
        default=None,
        help="Annualized volatility (e.g. 0.3) or 'auto' for HV x markup.",
    )
    parser.add_argument("--risk-free-rate", type=float, default=None)
    parser.add_argument("--max-workers", type=int, default=None)
    parser.add_argument(
        "--executor",
        choices=["thread", "process"],
        default=None,
        help="Worker pool used when max_workers > 1.",
    )
    return parser.parse_args(argv)


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    if args.prices:
        overrides["paths"] = {"prices": args.prices}
    if args.tickers is not None:
        overrides["tickers"] = args.tickers
    if args.shares is not None:
        overrides["shares"] = args.shares
    if args.moneyness is not None:
        overrides["moneyness_percent"] = args.moneyness
    if args.cycle is not None:
        overrides["cycle"] = args.cycle
    if args.cycle_days is not None:
        overrides["cycle_days"] = args.cycle_days
    if args.volatility is not None:
        overrides["volatility"] = args.volatility
    if args.risk_free_rate is not None:
        overrides["risk_free_rate"] = args.risk_free_rate
    if args.max_workers is not None:
        overrides["max_workers"] = args.max_workers
    if args.executor is not None:
        overrides["executor"] = args.executor
    if args.dry_run:
        overrides["dry_run"] = True

    logging_overrides = collect_logging_overrides(args)
    if logging_overrides:
        overrides["logging"] = logging_overrides

    return overrides


def resolve_volatility(
    setting: Any,
    prices: Sequence[PriceBar],
    *,
    window: int,
    markup: float,
) -> float:
    """Turn the configured volatility (number or 'auto') into a decimal."""
    if isinstance(setting, str) and setting.strip().lower() == AUTO_VOLATILITY:
        return estimate_implied_volatility(prices, window, markup=markup)
    try:
        return float(setting)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"volatility must be a number or {AUTO_VOLATILITY!r}, got {setting!r}"
        ) from e


def build_params(
    config: Mapping[str, Any],
    histories: Mapping[str, Sequence[PriceBar]],
) -> dict[str, BacktestParams]:
    """Per-symbol backtest parameters from the merged config."""
    cycle_days = config.get("cycle_days") or cycle_config(config["cycle"]).target
    params: dict[str, BacktestParams] = {}
    for symbol, prices in histories.items():
        volatility = resolve_volatility(
            config["volatility"],
            prices,
            window=int(config["volatility_window"]),
            markup=float(config["volatility_markup"]),
        )
        params[symbol] = BacktestParams(
            shares=float(config["shares"]),
            moneyness_percent=float(config["moneyness_percent"]),
            cycle_days=int(cycle_days),
            volatility=volatility,
            risk_free_rate=float(config["risk_free_rate"]),
        )
    return params


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    config = build_config(DEFAULT_CONFIG, args.config, _build_overrides(args))
    if args.print_config:
        print_config(config)
        return

    setup_logging_from_config(config.get("logging"))
    logger = logging.getLogger(__name__)

    prices_path = resolve_path(config["paths"]["prices"])
    if prices_path is None:
        raise ValueError("paths.prices must be set.")

    tickers = ensure_list(config.get("tickers"))
    histories = read_price_history(prices_path, tickers=tickers)
    if not histories:
        raise ValueError(f"No price history for tickers {tickers} in {prices_path}")

    params = build_params(config, histories)
    dry_run = bool(config.get("dry_run", False))

    logger.info("Prices:      %s", prices_path)
    logger.info("Tickers:     %s", list(histories))
    logger.info("Shares:      %s", config["shares"])
    logger.info("Moneyness:   %s%%", config["moneyness_percent"])
    logger.info("Cycle:       %s", config["cycle"])

    if dry_run:
        log_dry_run(
            logger,
            {
                "action": "covered_call_backtest",
                "prices": prices_path,
                "bars": {symbol: len(bars) for symbol, bars in histories.items()},
                "params": {symbol: asdict(p) for symbol, p in params.items()},
            },
        )
        return

    results = run_backtests(
        histories,
        params,
        max_workers=config.get("max_workers"),
        executor=config.get("executor", "thread"),
    )

    last_events = int(config.get("report", {}).get("last_events", 10))
    for symbol, result in results.items():
        print(format_backtest_report(symbol, result, last_events=last_events))
    print(summarize_results(results).to_string())


if __name__ == "__main__":
    main()
