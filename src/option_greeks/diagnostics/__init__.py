"""Numerical diagnostics: lattice convergence and Greek sweeps.

These return plain numpy arrays; plotting or tabulating them is left to the
caller.
"""

from .binom.compute import binom_convergence_series, early_exercise_premium
from .greeks.sweep import SweepResult, sweep_spot

__all__ = [
    "binom_convergence_series",
    "early_exercise_premium",
    "SweepResult",
    "sweep_spot",
]
