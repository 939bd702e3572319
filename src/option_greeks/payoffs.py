from __future__ import annotations

from typing import overload

import numpy as np

from .types import OptionType
from .typing import FloatArray


@overload
def call_payoff(ST: float, K: float) -> float: ...
@overload
def call_payoff(ST: FloatArray, K: float) -> FloatArray: ...
def call_payoff(ST: float | FloatArray, K: float) -> float | FloatArray:
    return np.maximum(ST - K, 0.0)


@overload
def put_payoff(ST: float, K: float) -> float: ...
@overload
def put_payoff(ST: FloatArray, K: float) -> FloatArray: ...
def put_payoff(ST: float | FloatArray, K: float) -> float | FloatArray:
    return np.maximum(K - ST, 0.0)


@overload
def intrinsic_value(spot: float, strike: float, kind: OptionType) -> float: ...
@overload
def intrinsic_value(
    spot: FloatArray, strike: float, kind: OptionType
) -> FloatArray: ...
def intrinsic_value(
    spot: float | FloatArray, strike: float, kind: OptionType
) -> float | FloatArray:
    """Value of immediate exercise, ``max(0, S-K)`` or ``max(0, K-S)``."""
    if kind == OptionType.CALL:
        out = call_payoff(spot, K=strike)
    elif kind == OptionType.PUT:
        out = put_payoff(spot, K=strike)
    else:
        raise ValueError(f"Unsupported option kind: {kind}")

    # scalar in, Python float out
    if np.ndim(out) == 0:
        return float(out)
    return out
