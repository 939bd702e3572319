"""Domain checks run on every contract before a model sees it."""

from __future__ import annotations

import math

from .exceptions import Constraint, ValidationError
from .types import ExerciseStyle, OptionContract, OptionType

# field -> (label used in messages, constraint on the value)
_NUMERIC_FIELDS: dict[str, tuple[str, Constraint]] = {
    "spot": ("spot price", Constraint.POSITIVE),
    "strike": ("strike price", Constraint.POSITIVE),
    "rate": ("risk-free rate", Constraint.NON_NEGATIVE),
    "dividend_yield": ("dividend yield", Constraint.NON_NEGATIVE),
    "volatility": ("volatility", Constraint.POSITIVE),
    "expiry": ("time to expiry", Constraint.POSITIVE),
}


def _fail(field: str, label: str, constraint: Constraint, value: object) -> None:
    raise ValidationError(
        field, constraint, value, message=f"{label} {constraint.value} (got {value!r})"
    )


def validate_contract(contract: OptionContract) -> None:
    """Check that ``contract`` lies in the domain of both pricing models.

    Parameters
    ----------
    contract : OptionContract
        Contract to check.

    Raises
    ------
    ValidationError
        On the first failing field. ``err.field`` names the contract attribute
        and ``err.constraint`` the rule: ``FINITE`` for NaN or infinite values,
        ``POSITIVE`` / ``NON_NEGATIVE`` for range failures and ``SUPPORTED`` for
        an unknown option kind or exercise style.

    Notes
    -----
    Finiteness is checked on all numeric fields before any range check, so a
    NaN is always reported as non-finite rather than as out of range.
    """
    for name, (label, _) in _NUMERIC_FIELDS.items():
        value = getattr(contract, name)
        try:
            finite = math.isfinite(value)
        except TypeError:
            finite = False
        if not finite:
            _fail(name, label, Constraint.FINITE, value)

    for name, (label, constraint) in _NUMERIC_FIELDS.items():
        value = getattr(contract, name)
        if constraint is Constraint.POSITIVE and value <= 0.0:
            _fail(name, label, constraint, value)
        if constraint is Constraint.NON_NEGATIVE and value < 0.0:
            _fail(name, label, constraint, value)

    if not isinstance(contract.kind, OptionType):
        _fail("kind", "option kind", Constraint.SUPPORTED, contract.kind)
    if not isinstance(contract.exercise, ExerciseStyle):
        _fail("exercise", "exercise style", Constraint.SUPPORTED, contract.exercise)
