from __future__ import annotations

import importlib
from pathlib import Path

import pytest


def test_load_yaml_config_none_returns_empty() -> None:
    mod = importlib.import_module("covered_calls.cli.config")
    assert mod.load_yaml_config(None) == {}


def test_load_yaml_config_missing_file_raises(tmp_path: Path) -> None:
    mod = importlib.import_module("covered_calls.cli.config")
    missing = tmp_path / "missing.yml"
    with pytest.raises(FileNotFoundError):
        mod.load_yaml_config(missing)


def test_load_yaml_config_non_mapping_raises(write_yaml) -> None:
    mod = importlib.import_module("covered_calls.cli.config")
    path = write_yaml("bad.yml", ["SPY", "QQQ"])
    with pytest.raises(ValueError, match="YAML mapping"):
        mod.load_yaml_config(path)


def test_load_yaml_config_empty_file_returns_empty(tmp_path: Path) -> None:
    mod = importlib.import_module("covered_calls.cli.config")
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert mod.load_yaml_config(path) == {}


def test_load_yaml_config_reads_mapping(write_yaml) -> None:
    mod = importlib.import_module("covered_calls.cli.config")
    path = write_yaml("ok.yml", {"shares": 200, "report": {"last_events": 5}})
    assert mod.load_yaml_config(path) == {"shares": 200, "report": {"last_events": 5}}


def test_deep_merge_merges_nested_and_overrides() -> None:
    mod = importlib.import_module("covered_calls.cli.config")
    base = {"shares": 100, "logging": {"level": "INFO", "color": True}, "tickers": ["SPY"]}
    updates = {"logging": {"level": "DEBUG"}, "tickers": ["QQQ"], "cycle": "weekly"}
    merged = mod.deep_merge(base, updates)
    assert merged == {
        "shares": 100,
        "logging": {"level": "DEBUG", "color": True},
        "tickers": ["QQQ"],
        "cycle": "weekly",
    }


def test_deep_merge_does_not_mutate_inputs() -> None:
    mod = importlib.import_module("covered_calls.cli.config")
    base = {"logging": {"level": "INFO"}}
    mod.deep_merge(base, {"logging": {"level": "DEBUG"}})
    assert base == {"logging": {"level": "INFO"}}


def test_build_config_precedence_defaults_yaml_overrides(write_yaml) -> None:
    mod = importlib.import_module("covered_calls.cli.config")
    defaults = {"shares": 100, "report": {"last_events": 10, "x": 1}, "tickers": ["SPY"]}
    yaml_path = write_yaml(
        "cfg.yml", {"shares": 200, "report": {"last_events": 5}, "tickers": ["QQQ"]}
    )
    overrides = {"report": {"x": 9}, "tickers": ["IWM"], "cycle_days": 7}
    config = mod.build_config(defaults, yaml_path, overrides)
    assert config == {
        "shares": 200,
        "report": {"last_events": 5, "x": 9},
        "tickers": ["IWM"],
        "cycle_days": 7,
    }


def test_resolve_path_expands_home_and_env(monkeypatch, tmp_path: Path) -> None:
    mod = importlib.import_module("covered_calls.cli.config")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("COVERED_CALLS_DATA", str(tmp_path / "data"))

    p1 = mod.resolve_path("~/closes.csv")
    p2 = mod.resolve_path("$COVERED_CALLS_DATA/closes.parquet")

    assert p1 == tmp_path / "closes.csv"
    assert p2 == tmp_path / "data" / "closes.parquet"


def test_resolve_path_passthrough_and_none(tmp_path: Path) -> None:
    mod = importlib.import_module("covered_calls.cli.config")
    assert mod.resolve_path(None) is None
    assert mod.resolve_path(tmp_path) == tmp_path
