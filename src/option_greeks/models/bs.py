from __future__ import annotations

import math

from ..numerics.normal import normal_cdf, normal_pdf


def discount_factor(rate: float, tau: float) -> float:
    return math.exp(-rate * tau)


def d1_d2(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> tuple[float, float]:
    vol_sqrt_t = sigma * math.sqrt(tau)
    num = math.log(spot / strike) + (r - q + 0.5 * sigma * sigma) * tau
    d1 = num / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return float(d1), float(d2)


def call_price(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> float:
    """
    Black–Scholes–Merton European call with continuous dividend yield q.
    """
    d1, d2 = d1_d2(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    df_r = discount_factor(r, tau)
    df_q = discount_factor(q, tau)
    return spot * df_q * normal_cdf(d1) - strike * df_r * normal_cdf(d2)


def put_price(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> float:
    """
    Black–Scholes–Merton European put with continuous dividend yield q.
    """
    d1, d2 = d1_d2(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    df_r = discount_factor(r, tau)
    df_q = discount_factor(q, tau)
    # 1 - N(d) written as N(-d) to keep precision in the tails
    return strike * df_r * normal_cdf(-d2) - spot * df_q * normal_cdf(-d1)


def call_greeks(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> dict[str, float]:
    """
    Analytic Greeks for a BSM European call (with dividend yield q).

    theta is returned as -dV/dt per year, i.e. positive when value erodes.
    """
    d1, d2 = d1_d2(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    sqrt_tau = math.sqrt(tau)
    df_r = discount_factor(r, tau)
    df_q = discount_factor(q, tau)

    Nd1 = normal_cdf(d1)
    Nd2 = normal_cdf(d2)
    phi_d1 = normal_pdf(d1)

    delta = df_q * Nd1
    gamma = df_q * phi_d1 / (spot * sigma * sqrt_tau)
    vega = spot * df_q * phi_d1 * sqrt_tau
    # dV/dt, calendar time with expiry held fixed
    theta_t = (
        -(spot * df_q * phi_d1 * sigma) / (2.0 * sqrt_tau)
        - r * strike * df_r * Nd2
        + q * spot * df_q * Nd1
    )
    rho = strike * tau * df_r * Nd2

    return {
        "delta": delta,
        "gamma": gamma,
        "theta": -theta_t,
        "vega": vega,
        "rho": rho,
    }


def put_greeks(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> dict[str, float]:
    """
    Analytic Greeks for a BSM European put (with dividend yield q).

    theta is returned as -dV/dt per year, i.e. positive when value erodes.
    """
    d1, d2 = d1_d2(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    sqrt_tau = math.sqrt(tau)
    df_r = discount_factor(r, tau)
    df_q = discount_factor(q, tau)

    Nmd1 = normal_cdf(-d1)
    Nmd2 = normal_cdf(-d2)
    phi_d1 = normal_pdf(d1)

    delta = -df_q * Nmd1
    gamma = df_q * phi_d1 / (spot * sigma * sqrt_tau)
    vega = spot * df_q * phi_d1 * sqrt_tau
    theta_t = (
        -(spot * df_q * phi_d1 * sigma) / (2.0 * sqrt_tau)
        + r * strike * df_r * Nmd2
        - q * spot * df_q * Nmd1
    )
    rho = -strike * tau * df_r * Nmd2

    return {
        "delta": delta,
        "gamma": gamma,
        "theta": -theta_t,
        "vega": vega,
        "rho": rho,
    }
