from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OptionType(str, Enum):
    """Option payoff kind.

    Attributes
    ----------
    CALL : str
        Call option ("call").
    PUT : str
        Put option ("put").
    """

    CALL = "call"
    PUT = "put"


class ExerciseStyle(str, Enum):
    """Exercise style for vanilla options."""

    EUROPEAN = "european"
    AMERICAN = "american"


@dataclass(frozen=True, slots=True)
class OptionContract:
    """A vanilla equity option together with the market inputs used to value it.

    Parameters
    ----------
    spot : float
        Current price of the underlying, :math:`S`.
    strike : float
        Strike price, :math:`K`.
    rate : float
        Continuously-compounded risk-free rate, :math:`r` (annualized).
    dividend_yield : float
        Continuously-compounded dividend yield, :math:`q` (annualized).
    volatility : float
        Annualized volatility of the underlying, :math:`\\sigma`.
    expiry : float
        Time to expiry in years, :math:`\\tau`.
    exercise : ExerciseStyle, default EUROPEAN
        When the holder may exercise.
    kind : OptionType, default CALL
        Call or put payoff.

    Notes
    -----
    Construction does not validate anything. Use
    :func:`option_greeks.validation.validate_contract` (the pricing entry point
    does so for you) before handing a contract to a model.
    """

    spot: float
    strike: float
    rate: float
    dividend_yield: float
    volatility: float
    expiry: float
    exercise: ExerciseStyle = ExerciseStyle.EUROPEAN
    kind: OptionType = OptionType.CALL

    @property
    def S(self) -> float:
        return self.spot

    @property
    def K(self) -> float:
        return self.strike

    @property
    def r(self) -> float:
        return self.rate

    @property
    def q(self) -> float:
        return self.dividend_yield

    @property
    def sigma(self) -> float:
        return self.volatility

    @property
    def tau(self) -> float:
        return self.expiry


@dataclass(frozen=True, slots=True)
class Greeks:
    """Price sensitivities of one option.

    ``theta`` is ``-dV/dt`` (equal to ``dV/dtau``): a positive value is the value
    lost per year held.
    ``vega`` and ``rho`` are per unit (1.0) change of volatility and rate.
    """

    delta: float
    gamma: float
    theta: float
    vega: float
    rho: float

    def as_dict(self) -> dict[str, float]:
        return {
            "delta": self.delta,
            "gamma": self.gamma,
            "theta": self.theta,
            "vega": self.vega,
            "rho": self.rho,
        }


@dataclass(frozen=True, slots=True)
class PricingResult:
    """Option value and its Greeks, as returned by a pricing model."""

    price: float
    greeks: Greeks

    @property
    def delta(self) -> float:
        return self.greeks.delta

    @property
    def gamma(self) -> float:
        return self.greeks.gamma

    @property
    def theta(self) -> float:
        return self.greeks.theta

    @property
    def vega(self) -> float:
        return self.greeks.vega

    @property
    def rho(self) -> float:
        return self.greeks.rho
