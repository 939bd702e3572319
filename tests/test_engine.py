from __future__ import annotations

import logging
import math

import pytest

import option_greeks as og
from option_greeks.config import LatticeConfig, PricingConfig
from option_greeks.engine import PricingEngine, create_pricing_model, price
from option_greeks.exceptions import (
    Constraint,
    ModelNotInitializedError,
    NumericalError,
    ValidationError,
)
from option_greeks.pricers.black_scholes import ClosedFormModel, bs_greeks, bs_price
from option_greeks.pricers.tree import LatticeModel, crr_price
from option_greeks.types import ExerciseStyle, Greeks, OptionType, PricingResult

AMERICAN = ExerciseStyle.AMERICAN
SMALL_LATTICE = PricingConfig(lattice=LatticeConfig(n_steps=200))


class _FixedPriceModel:
    """Stand-in model that returns a canned price."""

    def __init__(self, value: float) -> None:
        self.value = value

    def supports(self, exercise: ExerciseStyle) -> bool:
        return True

    def calculate(self, c) -> PricingResult:
        return PricingResult(
            price=self.value,
            greeks=Greeks(delta=0.0, gamma=0.0, theta=0.0, vega=0.0, rho=0.0),
        )


def test_european_goes_to_closed_form(make_contract):
    c = make_contract()
    res = price(c)

    assert res.price == pytest.approx(10.450583572185565, abs=1e-9)
    assert res.greeks == bs_greeks(c)


def test_package_level_entry_point(make_contract):
    res = og.price(make_contract(kind=OptionType.PUT))
    assert res.price == pytest.approx(bs_price(make_contract(kind=OptionType.PUT)))


def test_american_goes_to_lattice(make_contract):
    c = make_contract(K=110.0, exercise=AMERICAN, kind=OptionType.PUT)
    res = price(c, config=SMALL_LATTICE)

    assert res.price == crr_price(c, 200)
    assert res.price >= 10.0
    assert -1.0 <= res.delta <= 0.0
    assert res.vega >= 0.0
    assert res.rho <= 0.0


def test_default_lattice_depth(make_contract):
    c = make_contract(exercise=AMERICAN, kind=OptionType.PUT)
    assert price(c).price == crr_price(c, 500)


def test_american_call_without_dividends_matches_closed_form(make_contract):
    c = make_contract(exercise=AMERICAN)
    res = price(c, config=SMALL_LATTICE)
    assert res.price == pytest.approx(bs_price(c), abs=2e-2)


def test_create_pricing_model_dispatch():
    assert isinstance(create_pricing_model(ExerciseStyle.EUROPEAN), ClosedFormModel)

    lattice = create_pricing_model(AMERICAN, config=SMALL_LATTICE)
    assert isinstance(lattice, LatticeModel)
    assert lattice.n_steps == 200
    assert lattice.fd_config is SMALL_LATTICE.finite_diff

    with pytest.raises(ValidationError) as excinfo:
        create_pricing_model("bermudan")
    assert excinfo.value.field == "exercise"
    assert excinfo.value.constraint is Constraint.SUPPORTED


def test_uninitialized_engine_raises(make_contract):
    with pytest.raises(ModelNotInitializedError, match="not initialized"):
        PricingEngine(None).price(make_contract())


def test_closed_form_refuses_american(make_contract):
    engine = PricingEngine(ClosedFormModel())
    with pytest.raises(ValidationError) as excinfo:
        engine.price(make_contract(exercise=AMERICAN))
    assert excinfo.value.field == "exercise"
    assert "american" in str(excinfo.value)


def test_invalid_contract_raises_before_pricing(make_contract):
    with pytest.raises(ValidationError) as excinfo:
        price(make_contract(sigma=math.nan, exercise=AMERICAN))
    assert excinfo.value.field == "volatility"
    assert excinfo.value.constraint is Constraint.FINITE


def test_degenerate_lattice_surfaces_numerical_error(make_contract):
    c = make_contract(r=0.5, sigma=0.01, exercise=AMERICAN, kind=OptionType.PUT)
    cfg = PricingConfig(lattice=LatticeConfig(n_steps=10))
    with pytest.raises(NumericalError):
        price(c, config=cfg)


def test_rounding_negative_price_is_clamped(make_contract, caplog):
    engine = PricingEngine(_FixedPriceModel(-1e-12))
    with caplog.at_level(logging.WARNING, logger="option_greeks.engine"):
        res = engine.price(make_contract())
    assert res.price == 0.0
    assert "Clamping" in caplog.text


def test_materially_negative_price_raises(make_contract):
    engine = PricingEngine(_FixedPriceModel(-1e-3))
    with pytest.raises(NumericalError, match="negative price"):
        engine.price(make_contract())


def test_negative_price_tolerance_is_configurable(make_contract):
    engine = PricingEngine(
        _FixedPriceModel(-1e-6), config=PricingConfig(negative_price_tol=1e-5)
    )
    assert engine.price(make_contract()).price == 0.0


def test_engine_is_reusable(make_contract):
    engine = PricingEngine(LatticeModel(150))
    first = engine.price(make_contract(exercise=AMERICAN, kind=OptionType.PUT))
    engine.price(make_contract(S=80.0, q=0.03, exercise=AMERICAN))
    again = engine.price(make_contract(exercise=AMERICAN, kind=OptionType.PUT))
    assert again == first


@pytest.mark.parametrize("exercise", list(ExerciseStyle))
@pytest.mark.parametrize("kind", list(OptionType))
@pytest.mark.parametrize("S", [80.0, 100.0, 120.0])
def test_greek_signs_through_facade(make_contract, exercise, kind, S):
    res = price(
        make_contract(S=S, q=0.01, exercise=exercise, kind=kind),
        config=PricingConfig(lattice=LatticeConfig(n_steps=100)),
    )

    assert res.price >= 0.0
    if kind == OptionType.CALL:
        assert -1e-9 <= res.delta <= 1.0 + 1e-9
        assert res.rho >= -1e-9
    else:
        assert -1.0 - 1e-9 <= res.delta <= 1e-9
        assert res.rho <= 1e-9
    assert res.vega >= -1e-9


def test_engine_validates_before_checking_exercise(make_contract):
    engine = PricingEngine(ClosedFormModel())
    with pytest.raises(ValidationError) as excinfo:
        engine.price(make_contract(S=math.nan, exercise=AMERICAN))
    assert excinfo.value.field == "spot"
    assert excinfo.value.constraint is Constraint.FINITE


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_price_raises(make_contract, bad):
    engine = PricingEngine(_FixedPriceModel(bad))
    with pytest.raises(NumericalError, match="non-finite price") as excinfo:
        engine.price(make_contract())
    assert excinfo.value.stage == "pricing"
