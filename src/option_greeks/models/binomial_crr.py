from __future__ import annotations

import math
from dataclasses import dataclass, field
from math import exp, sqrt

import numpy as np

from ..exceptions import NumericalError
from ..typing import FloatArray, FloatDType


@dataclass(frozen=True, slots=True)
class BinomialModel:
    S0: float  # initial stock price
    u: float  # up factor
    d: float  # down factor
    r: float  # risk-free rate (cc, per unit time)
    q: float  # dividend yield (cc)
    dt: float  # time step
    n_steps: int

    def __post_init__(self) -> None:
        if self.n_steps <= 0:
            raise ValueError("n_steps must be positive")
        if self.dt <= 0.0:
            raise ValueError("dt must be positive")
        if not (0.0 < self.d < self.u):
            raise NumericalError(
                f"Degenerate lattice: need 0 < d < u, got d={self.d!r}, u={self.u!r}. "
                "Volatility is too small for this step size.",
                stage="lattice construction",
            )

        p = self.p_star
        if math.isnan(p) or not (0.0 <= p <= 1.0):
            raise NumericalError(
                f"Risk-neutral probability out of bounds: p*={p:.6g}. "
                "Try increasing n_steps or check r/q/sigma.",
                stage="lattice construction",
            )

    @classmethod
    def from_crr(
        cls, *, S0: float, r: float, q: float, sigma: float, T: float, n_steps: int
    ) -> BinomialModel:
        if n_steps <= 0:
            raise ValueError("n_steps must be positive")

        dt = T / n_steps
        u = exp(sigma * sqrt(dt))
        d = 1.0 / u
        return cls(S0=S0, u=u, d=d, r=r, q=q, dt=dt, n_steps=n_steps)

    @property
    def p_star(self) -> float:
        # Under continuous dividend yield q: E[S_{t+dt}/S_t] = exp((r-q)dt)
        growth = exp((self.r - self.q) * self.dt)
        return (growth - self.d) / (self.u - self.d)

    @property
    def disc_step(self) -> float:
        return exp(-self.r * self.dt)

    def spots(self, depth: int) -> FloatArray:
        """Underlying prices at ``depth``; node i is ``S0 * u^(depth-i) * d^i``."""
        i = np.arange(depth + 1, dtype=FloatDType)
        return self.S0 * (self.u ** (depth - i)) * (self.d**i)


@dataclass(slots=True)
class LatticeBuffer:
    """Scratch storage for one layer of option values.

    Holds ``n_steps + 1`` values. A pricer fully overwrites the range it uses
    before reading it, so a buffer can be reused across calls without any
    leakage between them. Give each concurrent pricing call its own buffer.
    """

    n_steps: int
    dtype: type[np.floating] = FloatDType
    values: FloatArray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.n_steps < 1:
            raise ValueError("n_steps must be >= 1")
        self.values = np.empty(self.n_steps + 1, dtype=self.dtype)

    def ensure(self, n_steps: int) -> FloatArray:
        """Return storage for ``n_steps`` steps, growing the buffer if needed."""
        if n_steps + 1 > self.values.size:
            self.n_steps = n_steps
            self.values = np.empty(n_steps + 1, dtype=self.dtype)
        return self.values[: n_steps + 1]
