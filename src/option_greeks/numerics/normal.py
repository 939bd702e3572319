"""Standard normal density and distribution function.

Both wrap :mod:`scipy.stats`. ``norm.cdf`` is evaluated through the
complementary error function, so it stays accurate to machine precision in
the tails where polynomial approximations lose digits. Every closed-form
price and Greek inherits this accuracy.
"""

from __future__ import annotations

from scipy.stats import norm


def normal_pdf(x: float) -> float:
    """exp(-x^2/2) / sqrt(2 pi)."""
    return float(norm.pdf(x))


def normal_cdf(x: float) -> float:
    """P(Z <= x) for a standard normal Z."""
    return float(norm.cdf(x))
