#!/usr/bin/env python
"""Model-based covered-call calculator for a single position."""

from __future__ import annotations

import argparse
import logging
from typing import Any

from covered_calls.apps._cli import add_print_config_arg, print_config
from covered_calls.cli import (
    DEFAULT_LOGGING,
    add_config_arg,
    add_logging_args,
    build_config,
    collect_logging_overrides,
    setup_logging_from_config,
)
from covered_calls.strategy import (
    CoveredCallSimulation,
    cycle_config,
    estimate_covered_call,
)

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": DEFAULT_LOGGING,
    "symbol": "",
    "spot": None,
    "shares": 100,
    "moneyness_percent": 5.0,
    "cycle": "monthly",
    "days_to_expiration": None,
    "volatility": 0.30,
    "risk_free_rate": 0.05,
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Estimate covered-call premium, yield and assignment odds."
    )
    add_config_arg(parser)
    add_logging_args(parser)
    add_print_config_arg(parser)

    parser.add_argument("--symbol", type=str, default=None)
    parser.add_argument("--spot", type=float, default=None)
    parser.add_argument("--shares", type=float, default=None)
    parser.add_argument("--moneyness", type=float, default=None)
    parser.add_argument("--cycle", type=str, default=None)
    parser.add_argument(
        "--dte",
        type=int,
        default=None,
        help="Days to expiration; overrides the cadence preset target.",
    )
    parser.add_argument("--volatility", type=float, default=None)
    parser.add_argument("--risk-free-rate", type=float, default=None)
    return parser.parse_args(argv)


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    mapping = {
        "symbol": args.symbol,
        "spot": args.spot,
        "shares": args.shares,
        "moneyness_percent": args.moneyness,
        "cycle": args.cycle,
        "days_to_expiration": args.dte,
        "volatility": args.volatility,
        "risk_free_rate": args.risk_free_rate,
    }
    overrides: dict[str, Any] = {k: v for k, v in mapping.items() if v is not None}

    logging_overrides = collect_logging_overrides(args)
    if logging_overrides:
        overrides["logging"] = logging_overrides
    return overrides


def format_simulation(sim: CoveredCallSimulation) -> str:
    label = sim.symbol or "position"
    return "\n".join(
        [
            "=" * 40,
            f"Covered Call Estimate: {label}",
            "=" * 40,
            f"Spot / Strike          : {sim.underlying_price:.2f} / {sim.strike:.2f}",
            f"Days to Expiration     : {sim.days_to_expiration}",
            f"Contracts              : {sim.contracts}",
            f"Premium / Share        : ${sim.premium:,.4f}",
            f"Total Premium          : ${sim.total_premium:,.2f}",
            f"Annualized Yield       : {sim.annualized_yield:.2f}%",
            f"Yield if Called        : {sim.yield_if_called:.2f}%",
            f"Delta                  : {sim.delta:.4f}",
            f"Assignment Probability : {sim.assignment_probability:.1f}%",
            f"Breakeven              : {sim.breakeven:.2f}",
            f"Max Profit             : ${sim.max_profit:,.2f}",
            "",
        ]
    )


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    config = build_config(DEFAULT_CONFIG, args.config, _build_overrides(args))
    if args.print_config:
        print_config(config)
        return

    setup_logging_from_config(config.get("logging"))
    logger = logging.getLogger(__name__)

    if config.get("spot") is None:
        raise ValueError("spot must be set.")

    dte = config.get("days_to_expiration") or cycle_config(config["cycle"]).target
    logger.debug("Pricing %s with dte=%s", config.get("symbol") or "position", dte)

    sim = estimate_covered_call(
        symbol=str(config.get("symbol") or ""),
        shares=float(config["shares"]),
        underlying_price=float(config["spot"]),
        moneyness_percent=float(config["moneyness_percent"]),
        days_to_expiration=int(dte),
        volatility=float(config["volatility"]),
        risk_free_rate=float(config["risk_free_rate"]),
    )
    print(format_simulation(sim))


if __name__ == "__main__":
    main()
