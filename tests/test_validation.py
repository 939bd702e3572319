from __future__ import annotations

import math
from dataclasses import replace

import pytest

from option_greeks.exceptions import Constraint, OptionPricingError, ValidationError
from option_greeks.validation import validate_contract

NUMERIC_FIELDS = ["spot", "strike", "rate", "dividend_yield", "volatility", "expiry"]


def test_valid_contract_passes(make_contract):
    assert validate_contract(make_contract()) is None


def test_zero_rate_and_dividend_are_valid(make_contract):
    validate_contract(make_contract(r=0.0, q=0.0))


@pytest.mark.parametrize(
    "field, value, constraint",
    [
        ("spot", 0.0, Constraint.POSITIVE),
        ("strike", -5.0, Constraint.POSITIVE),
        ("volatility", 0.0, Constraint.POSITIVE),
        ("expiry", -1.0, Constraint.POSITIVE),
        ("rate", -0.01, Constraint.NON_NEGATIVE),
        ("dividend_yield", -0.02, Constraint.NON_NEGATIVE),
    ],
    ids=lambda v: str(v),
)
def test_out_of_range_field_is_named(make_contract, field, value, constraint):
    c = replace(make_contract(), **{field: value})
    with pytest.raises(ValidationError) as excinfo:
        validate_contract(c)

    err = excinfo.value
    assert err.field == field
    assert err.constraint is constraint
    assert err.value == value


@pytest.mark.parametrize("field", NUMERIC_FIELDS)
@pytest.mark.parametrize(
    "bad", [math.nan, math.inf, -math.inf], ids=["nan", "inf", "-inf"]
)
def test_non_finite_field_is_named(make_contract, field, bad):
    c = replace(make_contract(), **{field: bad})
    with pytest.raises(ValidationError) as excinfo:
        validate_contract(c)

    assert excinfo.value.field == field
    assert excinfo.value.constraint is Constraint.FINITE


def test_non_finite_reported_before_range(make_contract):
    """A NaN volatility next to a negative spot is still reported as non-finite."""
    c = make_contract(S=-1.0, sigma=math.nan)
    with pytest.raises(ValidationError) as excinfo:
        validate_contract(c)
    assert excinfo.value.field == "volatility"
    assert excinfo.value.constraint is Constraint.FINITE


def test_messages_are_readable(make_contract):
    with pytest.raises(ValidationError, match="volatility must be positive"):
        validate_contract(make_contract(sigma=0.0))
    with pytest.raises(ValidationError, match="risk-free rate cannot be negative"):
        validate_contract(make_contract(r=-0.01))


def test_unknown_kind_and_exercise_rejected(make_contract):
    with pytest.raises(ValidationError) as excinfo:
        validate_contract(replace(make_contract(), kind="straddle"))
    assert excinfo.value.field == "kind"
    assert excinfo.value.constraint is Constraint.SUPPORTED

    with pytest.raises(ValidationError) as excinfo:
        validate_contract(replace(make_contract(), exercise="bermudan"))
    assert excinfo.value.field == "exercise"


def test_validation_error_hierarchy(make_contract):
    with pytest.raises(OptionPricingError):
        validate_contract(make_contract(S=0.0))
    with pytest.raises(ValueError):
        validate_contract(make_contract(S=0.0))
