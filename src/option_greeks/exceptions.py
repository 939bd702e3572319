from __future__ import annotations

from enum import Enum
from typing import Any


class Constraint(str, Enum):
    """Which rule a contract field broke."""

    FINITE = "must be finite"
    POSITIVE = "must be positive"
    NON_NEGATIVE = "cannot be negative"
    SUPPORTED = "is not supported"


class OptionPricingError(Exception):
    """Base class for every error raised by option_greeks."""


class ValidationError(OptionPricingError, ValueError):
    """Raised when a contract field is outside its valid domain.

    Parameters
    ----------
    field : str
        Name of the offending :class:`~option_greeks.types.OptionContract`
        attribute (e.g. ``"volatility"``).
    constraint : Constraint
        The rule that failed.
    value : Any
        The rejected value.
    message : str, optional
        Human readable description. Built from ``field`` and ``constraint``
        when omitted.

    Notes
    -----
    Tests and callers should branch on ``field`` and ``constraint``; the message
    is for people.
    """

    def __init__(
        self,
        field: str,
        constraint: Constraint,
        value: Any = None,
        message: str | None = None,
    ) -> None:
        self.field = field
        self.constraint = constraint
        self.value = value
        if message is None:
            message = f"{field} {constraint.value} (got {value!r})"
        super().__init__(message)


class NumericalError(OptionPricingError, ArithmeticError):
    """Raised when a derived quantity leaves its valid mathematical domain.

    Examples are a CRR risk-neutral probability outside ``[0, 1]`` or a failed
    re-price inside the finite-difference Greek engine. ``cause`` holds the
    original exception when this error wraps one; it is also chained as
    ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        stage: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(message)


class ModelNotInitializedError(OptionPricingError, RuntimeError):
    """Raised when a pricing engine has no model to price with."""
