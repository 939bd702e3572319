from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

import numpy as np

from ...pricers.black_scholes import bs_price
from ...pricers.tree import crr_price
from ...types import ExerciseStyle, OptionContract
from ...validation import validate_contract


def _step_grid(n_steps: int | Sequence[int]) -> np.ndarray:
    # Allow convenience: pass an int to mean "max steps".
    # For modest max_n (<=500) we compute all steps 1..max_n.
    # For larger, we sample a dense-but-manageable grid.
    if isinstance(n_steps, (int, np.integer)):
        max_n = int(n_steps)
        if max_n <= 0:
            raise ValueError("n_steps must be a positive integer")
        if max_n <= 500:
            return np.arange(1, max_n + 1, dtype=int)
        # ~80 points, denser at small N
        vals = np.unique(np.round(np.geomspace(1, max_n, num=80)).astype(int))
        if vals[-1] != max_n:
            vals = np.append(vals, max_n)
        return vals

    vals = np.asarray(list(n_steps), dtype=int)
    if vals.size == 0:
        raise ValueError("n_steps must be non-empty")
    if np.any(vals <= 0):
        raise ValueError("n_steps must be positive integers")
    return np.unique(vals)


def binom_convergence_series(
    c: OptionContract,
    n_steps: int | Sequence[int],
) -> dict[str, np.ndarray]:
    """European lattice price against the closed-form benchmark across n_steps.

    The contract is priced with European exercise whatever its own style, since
    only the European price has a closed-form reference.
    """
    validate_contract(c)
    euro = replace(c, exercise=ExerciseStyle.EUROPEAN)
    n_vals = _step_grid(n_steps)

    lattice = np.array([crr_price(euro, int(n)) for n in n_vals], dtype=float)
    closed_form = float(bs_price(euro))

    return {
        "n_steps": n_vals,
        "lattice": lattice,
        "closed_form": np.asarray([closed_form], dtype=float),
        "abs_error": np.abs(closed_form - lattice),
    }


def early_exercise_premium(c: OptionContract, n_steps: int) -> float:
    """American minus European lattice price on the same tree (always >= 0)."""
    validate_contract(c)
    american = crr_price(replace(c, exercise=ExerciseStyle.AMERICAN), n_steps)
    european = crr_price(replace(c, exercise=ExerciseStyle.EUROPEAN), n_steps)
    return american - european
