import pytest

from covered_calls.strategy import (
    annualized_yield,
    breakeven,
    contract_count,
    max_profit,
    yield_if_called,
)


@pytest.mark.parametrize(
    ("shares", "expected"),
    [(0, 0), (50, 0), (99, 0), (100, 1), (199, 1), (250, 2), (1000, 10)],
)
def test_contract_count_ignores_odd_lots(shares: int, expected: int):
    assert contract_count(shares) == expected


def test_annualized_yield_compounds_cycle_yield():
    expected = ((1.0 + 1.0 / 100.0) ** (365.0 / 30.0) - 1.0) * 100.0
    assert annualized_yield(1.0, 100.0, 30) == pytest.approx(expected)
    assert annualized_yield(1.0, 100.0, 365) == pytest.approx(1.0)


@pytest.mark.parametrize(("price", "dte"), [(0.0, 30), (-5.0, 30), (100.0, 0), (100.0, -1)])
def test_annualized_yield_undefined_cases_are_zero(price: float, dte: int):
    assert annualized_yield(1.0, price, dte) == 0.0
    assert yield_if_called(1.0, 105.0, price, dte) == 0.0


def test_yield_if_called_includes_upside_to_strike():
    expected = ((1.0 + 6.0 / 100.0) ** (365.0 / 30.0) - 1.0) * 100.0
    assert yield_if_called(1.0, 105.0, 100.0, 30) == pytest.approx(expected)


def test_yield_if_called_ignores_in_the_money_strikes():
    assert yield_if_called(3.0, 95.0, 100.0, 30) == pytest.approx(
        annualized_yield(3.0, 100.0, 30)
    )


def test_breakeven():
    assert breakeven(100.0, 2.5) == pytest.approx(97.5)


def test_max_profit_counts_full_lots_only():
    assert max_profit(250, 100.0, 105.0, 2.0) == pytest.approx(1400.0)
    assert max_profit(199, 100.0, 105.0, 2.0) == pytest.approx(700.0)
    assert max_profit(99, 100.0, 105.0, 2.0) == 0.0


def test_max_profit_in_the_money_strike_keeps_premium_only():
    assert max_profit(100, 100.0, 95.0, 6.0) == pytest.approx(600.0)
