from __future__ import annotations

from dataclasses import dataclass

from ..models import bs as bs_model
from ..types import ExerciseStyle, Greeks, OptionContract, OptionType, PricingResult
from ..validation import validate_contract


# -------------------------
# BSM wrappers (scalar)
# -------------------------
def bs_price_call(c: OptionContract) -> float:
    return bs_model.call_price(
        spot=c.S,
        strike=c.K,
        r=c.r,
        q=c.q,
        sigma=c.sigma,
        tau=c.tau,
    )


def bs_price_put(c: OptionContract) -> float:
    return bs_model.put_price(
        spot=c.S,
        strike=c.K,
        r=c.r,
        q=c.q,
        sigma=c.sigma,
        tau=c.tau,
    )


def bs_price(c: OptionContract) -> float:
    """European BSM price. The exercise style of ``c`` is not consulted."""
    if c.kind == OptionType.CALL:
        return bs_price_call(c)
    if c.kind == OptionType.PUT:
        return bs_price_put(c)
    raise ValueError(f"Unsupported option kind: {c.kind}")


def bs_greeks(c: OptionContract) -> Greeks:
    kwargs = dict(spot=c.S, strike=c.K, r=c.r, q=c.q, sigma=c.sigma, tau=c.tau)
    if c.kind == OptionType.CALL:
        return Greeks(**bs_model.call_greeks(**kwargs))
    if c.kind == OptionType.PUT:
        return Greeks(**bs_model.put_greeks(**kwargs))
    raise ValueError(f"Unsupported option kind: {c.kind}")


@dataclass(frozen=True, slots=True)
class ClosedFormModel:
    """Black-Scholes-Merton model for European options, Greeks in closed form."""

    def supports(self, exercise: ExerciseStyle) -> bool:
        return exercise == ExerciseStyle.EUROPEAN

    def price(self, c: OptionContract) -> float:
        return bs_price(c)

    def calculate(self, c: OptionContract) -> PricingResult:
        validate_contract(c)
        return PricingResult(price=bs_price(c), greeks=bs_greeks(c))
