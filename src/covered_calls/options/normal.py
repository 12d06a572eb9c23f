"""Standard normal CDF used by the pricing formulas.

`norm_cdf` is the Abramowitz-Stegun 7.1.26 rational approximation of the
error function (absolute error <= 7.5e-8 on the CDF). Pricing code only ever
calls `norm_cdf`, so swapping in `norm_cdf_exact` is a one-line change.
"""

from __future__ import annotations

import math

from scipy.special import ndtr

_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911


def norm_cdf(x: float) -> float:
    """Polynomial approximation of the standard normal CDF.

    The upper tail `q` is computed for `|x|` and mirrored by sign, so
    `norm_cdf(-x) == 1 - norm_cdf(x)` and `norm_cdf(0) == 0.5` exactly.
    """
    if x == 0:
        return 0.5

    z = abs(x) / math.sqrt(2.0)
    t = 1.0 / (1.0 + _P * z)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    q = 0.5 * poly * math.exp(-z * z)

    return q if x < 0 else 1.0 - q


def norm_cdf_exact(x: float) -> float:
    """Reference CDF backed by `scipy.special.ndtr`."""
    return float(ndtr(x))
