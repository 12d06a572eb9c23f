import pytest

from covered_calls.strategy import (
    STRIKE_INCREMENT_TIERS,
    closest_available_strike,
    strike_increment,
    target_strike,
)


@pytest.mark.parametrize(
    ("price", "expected"),
    [
        (1.0, 0.5),
        (4.99, 0.5),
        (5.0, 1.0),
        (24.99, 1.0),
        (25.0, 2.5),
        (199.99, 2.5),
        (200.0, 5.0),
        (1500.0, 5.0),
    ],
)
def test_strike_increment_tiers(price: float, expected: float):
    assert strike_increment(price) == expected


def test_strike_increment_accepts_custom_table():
    tiers = ((50.0, 1.0), (float("inf"), 10.0))
    assert strike_increment(49.0, tiers) == 1.0
    assert strike_increment(51.0, tiers) == 10.0
    assert STRIKE_INCREMENT_TIERS[-1][1] == 5.0


@pytest.mark.parametrize(
    ("price", "moneyness", "increment", "expected"),
    [
        (100.0, 5.0, 2.5, 105.0),
        (100.0, 0.0, 2.5, 100.0),
        (100.0, -5.0, 2.5, 95.0),
        (47.3, 10.0, 2.5, 52.5),
        (18.4, 5.0, 1.0, 19.0),
        (3.1, 10.0, 0.5, 3.5),
        (412.0, 2.0, 5.0, 420.0),
    ],
)
def test_target_strike_rounds_to_increment(
    price: float, moneyness: float, increment: float, expected: float
):
    assert target_strike(price, moneyness, increment) == pytest.approx(expected)


def test_target_strike_rounds_halves_up():
    assert target_strike(102.5, 0.0, 5.0) == pytest.approx(105.0)
    assert target_strike(97.5, 0.0, 5.0) == pytest.approx(100.0)


def test_closest_available_strike_picks_nearest():
    assert closest_available_strike(101.0, [95.0, 100.0, 105.0]) == 100.0
    assert closest_available_strike(104.0, {95.0, 100.0, 105.0}) == 105.0


def test_closest_available_strike_ties_prefer_lower_by_default():
    assert closest_available_strike(102.5, [100.0, 105.0]) == 100.0
    assert closest_available_strike(102.5, [105.0, 100.0]) == 100.0


def test_closest_available_strike_first_seen_tie_break():
    assert closest_available_strike(102.5, [105.0, 100.0], tie_break="first") == 105.0
    assert closest_available_strike(102.5, [100.0, 105.0], tie_break="first") == 100.0


def test_closest_available_strike_empty_returns_target():
    assert closest_available_strike(101.3, []) == 101.3
