from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

import numpy as np

from ...config import FiniteDiffConfig
from ...exceptions import Constraint, ValidationError
from ...pricers.black_scholes import bs_greeks, bs_price
from ...pricers.finite_diff import finite_diff_greeks
from ...pricers.tree import LatticeModel
from ...types import ExerciseStyle, Greeks, OptionContract
from ...validation import validate_contract

Method = Literal["analytic", "fd", "lattice"]


@dataclass(frozen=True)
class SweepResult:
    x: np.ndarray
    price: np.ndarray
    delta: np.ndarray
    gamma: np.ndarray
    theta: np.ndarray
    vega: np.ndarray
    rho: np.ndarray

    def as_dict(self) -> dict[str, np.ndarray]:
        return {
            "x": self.x,
            "price": self.price,
            "delta": self.delta,
            "gamma": self.gamma,
            "theta": self.theta,
            "vega": self.vega,
            "rho": self.rho,
        }


def sweep_spot(
    base: OptionContract,
    *,
    x_min: float | None = None,
    x_max: float | None = None,
    n: int = 100,
    method: Method = "analytic",
    grid: np.ndarray | None = None,
    n_steps: int = 200,
    fd_config: FiniteDiffConfig | None = None,
) -> SweepResult:
    """
    Sweep the underlying spot and compute price + Greeks at each point.

    - method="analytic": closed-form BSM Greeks (European contracts only)
    - method="fd": finite-difference Greeks of the closed-form price (European only)
    - method="lattice": CRR lattice price with finite-difference Greeks
      (honours the contract's exercise style; ``n_steps`` sets the depth)
    """
    validate_contract(base)
    if grid is None:
        if n < 2:
            raise ValueError("n must be >= 2")

        K = float(base.strike)
        if x_min is None:
            x_min = 0.5 * K
        if x_max is None:
            x_max = 1.5 * K
        if x_min >= x_max:
            raise ValueError("x_min must be < x_max")
        if x_min <= 0.0:
            raise ValueError("x_min must be > 0")
        x = np.linspace(x_min, x_max, n)
    else:
        x = np.asarray(grid, dtype=float)
        if x.ndim != 1 or x.size == 0:
            raise ValueError("grid must be a non-empty 1D array")
        if np.any(x <= 0.0):
            raise ValueError("grid values must be > 0")

    if method not in ("analytic", "fd", "lattice"):
        raise ValueError(f"Unknown method: {method!r}")
    lattice = None
    if method == "lattice":
        lattice = LatticeModel(n_steps, fd_config=fd_config)
    elif base.exercise != ExerciseStyle.EUROPEAN:
        # closed-form prices are European only
        raise ValidationError(
            "exercise",
            Constraint.SUPPORTED,
            base.exercise,
            message=(
                f"exercise style {base.exercise.value!r} "
                f"{Constraint.SUPPORTED.value} by method={method!r}; "
                "use method='lattice'"
            ),
        )

    prices = np.empty_like(x)
    rows: list[Greeks] = []
    for i, s in enumerate(x):
        c = replace(base, spot=float(s))
        if lattice is not None:
            res = lattice.calculate(c)
            prices[i] = res.price
            rows.append(res.greeks)
            continue

        prices[i] = bs_price(c)
        if method == "analytic":
            rows.append(bs_greeks(c))
        else:
            rows.append(
                finite_diff_greeks(c, bs_price, config=fd_config, base_price=prices[i])
            )

    return SweepResult(
        x=x,
        price=prices,
        delta=np.array([g.delta for g in rows]),
        gamma=np.array([g.gamma for g in rows]),
        theta=np.array([g.theta for g in rows]),
        vega=np.array([g.vega for g in rows]),
        rho=np.array([g.rho for g in rows]),
    )
