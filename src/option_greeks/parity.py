from __future__ import annotations

import math

from .types import OptionContract


def forward_discounted(c: OptionContract) -> float:
    """S*e^{-q tau} - K*e^{-r tau} (the RHS of put-call parity)."""
    return c.S * math.exp(-c.q * c.tau) - c.K * math.exp(-c.r * c.tau)


def put_call_parity_residual(*, call: float, put: float, c: OptionContract) -> float:
    """
    Residual = (C - P) - (S e^{-q tau} - K e^{-r tau}).
    Should be ~0 for European options under consistent inputs.
    """
    return (call - put) - forward_discounted(c)
