import numpy as np
import pytest

from covered_calls.options import norm_cdf, norm_cdf_exact


@pytest.mark.parametrize("x", [0.0, 0.1, 0.5, 1.0, 1.96, 2.5, 4.0, 7.0])
def test_norm_cdf_is_symmetric(x: float):
    assert norm_cdf(-x) == pytest.approx(1.0 - norm_cdf(x), abs=1e-12)


def test_norm_cdf_within_approximation_error_of_exact_cdf():
    grid = np.linspace(-8.0, 8.0, 1601)
    errors = [abs(norm_cdf(float(x)) - norm_cdf_exact(float(x))) for x in grid]
    assert max(errors) <= 1e-7


def test_norm_cdf_center_and_saturation():
    assert norm_cdf(0.0) == 0.5
    assert norm_cdf(-0.0) == 0.5
    assert norm_cdf(float("inf")) == 1.0
    assert norm_cdf(float("-inf")) == 0.0
    assert norm_cdf(40.0) == pytest.approx(1.0)
    assert norm_cdf(-40.0) == pytest.approx(0.0)


def test_norm_cdf_stays_in_unit_interval():
    for x in np.linspace(-6.0, 6.0, 121):
        assert 0.0 < norm_cdf(float(x)) < 1.0


@pytest.mark.parametrize("x", [1e-12, 1e-6, 0.3, 3.0])
def test_norm_cdf_tails_mirror_each_other(x: float):
    assert norm_cdf(-x) + norm_cdf(x) == pytest.approx(1.0, abs=1e-15)
