"""Cox-Ross-Rubinstein lattice pricer (European and American exercise)."""

from __future__ import annotations

import logging

import numpy as np

from ..config import FiniteDiffConfig
from ..models.binomial_crr import BinomialModel, LatticeBuffer
from ..payoffs import intrinsic_value
from ..types import ExerciseStyle, OptionContract, OptionType, PricingResult
from ..validation import validate_contract
from .finite_diff import finite_diff_greeks

logger = logging.getLogger(__name__)


def _early_exercise_possible(c: OptionContract) -> bool:
    # An American call on a non-dividend-paying stock is never exercised early.
    if c.exercise != ExerciseStyle.AMERICAN:
        return False
    return not (c.kind == OptionType.CALL and c.q == 0.0)


def crr_price(
    c: OptionContract,
    n_steps: int,
    *,
    buffer: LatticeBuffer | None = None,
) -> float:
    """
    Price a validated contract by backward induction on a CRR lattice.

    Parameters
    ----------
    c : OptionContract
        Contract to price. Must already have passed
        :func:`~option_greeks.validation.validate_contract`.
    n_steps : int
        Number of time steps ``n``; the lattice has ``n + 1`` terminal nodes.
    buffer : LatticeBuffer, optional
        Scratch storage for the node values. A fresh one is allocated when
        omitted. Its previous contents are never read.

    Returns
    -------
    float
        Option value at depth 0.

    Raises
    ------
    NumericalError
        If the risk-neutral probability falls outside ``[0, 1]``.
    """
    model = BinomialModel.from_crr(
        S0=c.S, r=c.r, q=c.q, sigma=c.sigma, T=c.tau, n_steps=n_steps
    )
    p = model.p_star
    disc = model.disc_step
    american = _early_exercise_possible(c)
    logger.debug(
        "CRR lattice: n_steps=%d dt=%.6g u=%.8g p=%.8g american=%s",
        n_steps,
        model.dt,
        model.u,
        p,
        american,
    )

    if buffer is None:
        buffer = LatticeBuffer(n_steps)
    values = buffer.ensure(n_steps)

    values[:] = intrinsic_value(model.spots(n_steps), c.K, c.kind)

    for depth in range(n_steps - 1, -1, -1):
        # node i continues into i (up) and i + 1 (down) one layer deeper
        cont = disc * (p * values[: depth + 1] + (1.0 - p) * values[1 : depth + 2])
        if american:
            ex = intrinsic_value(model.spots(depth), c.K, c.kind)
            np.maximum(cont, ex, out=cont)
        values[: depth + 1] = cont

    return float(values[0])


class LatticeModel:
    """CRR binomial model with a reusable lattice buffer.

    Greeks have no closed form on the discretized price, so :meth:`calculate`
    always takes them from the finite-difference engine, which calls
    :meth:`price` on bumped contracts.

    Parameters
    ----------
    n_steps : int, default 500
        Lattice depth, fixed for the lifetime of the model.
    fd_config : FiniteDiffConfig, optional
        Bump sizes for the Greeks.
    """

    __slots__ = ("_n_steps", "_buffer", "fd_config")

    def __init__(
        self, n_steps: int = 500, *, fd_config: FiniteDiffConfig | None = None
    ) -> None:
        if n_steps < 1:
            raise ValueError("n_steps must be >= 1")
        self._n_steps = int(n_steps)
        self._buffer = LatticeBuffer(self._n_steps)
        self.fd_config = fd_config or FiniteDiffConfig()

    def __repr__(self) -> str:
        return f"LatticeModel(n_steps={self._n_steps})"

    @property
    def n_steps(self) -> int:
        return self._n_steps

    def supports(self, exercise: ExerciseStyle) -> bool:
        return exercise in (ExerciseStyle.EUROPEAN, ExerciseStyle.AMERICAN)

    def price(
        self, c: OptionContract, *, buffer: LatticeBuffer | None = None
    ) -> float:
        """Lattice value of a validated contract.

        Uses the model's own buffer unless ``buffer`` is given; pass a separate
        buffer when pricing from several threads.
        """
        if buffer is None:
            buffer = self._buffer
        return crr_price(c, self._n_steps, buffer=buffer)

    def calculate(self, c: OptionContract) -> PricingResult:
        validate_contract(c)
        value = self.price(c)
        greeks = finite_diff_greeks(
            c, self.price, config=self.fd_config, base_price=value
        )
        return PricingResult(price=value, greeks=greeks)
