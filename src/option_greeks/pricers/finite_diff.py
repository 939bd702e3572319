from __future__ import annotations

from dataclasses import replace

from ..config import FiniteDiffConfig
from ..exceptions import NumericalError
from ..numerics.fd.stencils import (
    apply_stencil,
    backward_first_coeffs,
    central_first_coeffs,
    central_second_coeffs,
    forward_first_coeffs,
)
from ..types import Greeks, OptionContract
from ..typing import PriceFn

_STAGE = "greek computation"


def _reprice(price_fn: PriceFn, c: OptionContract, bumped: str) -> float:
    try:
        return float(price_fn(c))
    except Exception as exc:
        raise NumericalError(
            f"Greek computation failed while re-pricing with {bumped} bumped: {exc}",
            stage=_STAGE,
            cause=exc,
        ) from exc


def finite_diff_greeks(
    c: OptionContract,
    price_fn: PriceFn,
    *,
    config: FiniteDiffConfig | None = None,
    base_price: float | None = None,
) -> Greeks:
    """
    Bump-and-reprice Greeks for any pricer ``OptionContract -> price``.

    Parameters
    ----------
    c : OptionContract
        Validated base contract. It is never mutated; every bump works on a
        copy made with :func:`dataclasses.replace`.
    price_fn : callable
        Pricing function to differentiate.
    config : FiniteDiffConfig, optional
        Bump sizes. Defaults: spot ``S*1e-4``, one day in expiry, ``1e-4`` in
        volatility and one basis point in rate.
    base_price : float, optional
        ``price_fn(c)`` if the caller already has it; saves one re-price.

    Returns
    -------
    Greeks
        delta and gamma from central differences in spot, vega and rho from
        forward differences, theta ``= -(f(tau - dt) - f(tau)) / dt``. Theta is
        ``0.0`` when ``tau - dt <= 0``; it is never extrapolated past expiry.

    Raises
    ------
    NumericalError
        If ``price_fn`` raises on any call. The original exception is kept on
        ``err.cause`` and chained as ``__cause__``.
    """
    cfg = config or FiniteDiffConfig()

    h = c.S * cfg.spot_rel_step
    dt = cfg.time_step
    dvol = cfg.vol_step
    dr = cfg.rate_step

    # --- base price
    V = _reprice(price_fn, c, "no input") if base_price is None else float(base_price)

    # --- delta, gamma (bump spot)
    V_up_x = _reprice(price_fn, replace(c, spot=c.S + h), "spot")
    V_down_x = _reprice(price_fn, replace(c, spot=c.S - h), "spot")
    delta = apply_stencil(central_first_coeffs(h), V_down_x, V, V_up_x)
    gamma = apply_stencil(central_second_coeffs(h), V_down_x, V, V_up_x)

    # --- theta (shorten expiry by one step)
    theta = 0.0
    if c.tau - dt > 0.0:
        V_down_t = _reprice(price_fn, replace(c, expiry=c.tau - dt), "expiry")
        # dV/dtau from the backward difference; -dV/dt == dV/dtau
        theta = apply_stencil(backward_first_coeffs(dt), V_down_t, V, None)

    # --- vega (bump sigma)
    V_up_sigma = _reprice(price_fn, replace(c, volatility=c.sigma + dvol), "volatility")
    vega = apply_stencil(forward_first_coeffs(dvol), None, V, V_up_sigma)

    # --- rho (bump rate)
    V_up_r = _reprice(price_fn, replace(c, rate=c.r + dr), "rate")
    rho = apply_stencil(forward_first_coeffs(dr), None, V, V_up_r)

    return Greeks(delta=delta, gamma=gamma, theta=theta, vega=vega, rho=rho)
