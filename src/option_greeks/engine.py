"""Pricing facade: validate, pick a model by exercise style, price."""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from .config import PricingConfig
from .exceptions import (
    Constraint,
    ModelNotInitializedError,
    NumericalError,
    ValidationError,
)
from .pricers.black_scholes import ClosedFormModel
from .pricers.tree import LatticeModel
from .types import ExerciseStyle, OptionContract, PricingResult
from .validation import validate_contract

logger = logging.getLogger(__name__)

type PricingModel = ClosedFormModel | LatticeModel


def create_pricing_model(
    exercise: ExerciseStyle, *, config: PricingConfig | None = None
) -> PricingModel:
    """Closed form for European exercise, a CRR lattice for American exercise."""
    cfg = config or PricingConfig()
    if exercise == ExerciseStyle.EUROPEAN:
        return ClosedFormModel()
    if exercise == ExerciseStyle.AMERICAN:
        return LatticeModel(cfg.lattice.n_steps, fd_config=cfg.finite_diff)
    raise ValidationError(
        "exercise",
        Constraint.SUPPORTED,
        exercise,
        message=f"exercise style {Constraint.SUPPORTED.value}: {exercise!r}",
    )


class PricingEngine:
    """Prices contracts through one model.

    Parameters
    ----------
    model : ClosedFormModel | LatticeModel | None
        Model used for every call to :meth:`price`. ``None`` is accepted so that
        a half-configured engine fails loudly on first use rather than at
        construction.
    config : PricingConfig, optional
        Only ``negative_price_tol`` is read here.
    """

    def __init__(
        self, model: PricingModel | None, *, config: PricingConfig | None = None
    ) -> None:
        self.model = model
        self.config = config or PricingConfig()

    def price(self, contract: OptionContract) -> PricingResult:
        if self.model is None:
            raise ModelNotInitializedError("Pricing model not initialized")
        validate_contract(contract)
        if not self.model.supports(contract.exercise):
            style = getattr(contract.exercise, "value", contract.exercise)
            raise ValidationError(
                "exercise",
                Constraint.SUPPORTED,
                contract.exercise,
                message=(
                    f"exercise style {style!r} "
                    f"{Constraint.SUPPORTED.value} "
                    f"by {type(self.model).__name__}"
                ),
            )

        result = self.model.calculate(contract)
        return self._check_price(result)

    def _check_price(self, result: PricingResult) -> PricingResult:
        if not math.isfinite(result.price):
            raise NumericalError(
                f"Model returned a non-finite price: {result.price!r}",
                stage="pricing",
            )
        if result.price >= 0.0:
            return result
        if result.price < -self.config.negative_price_tol:
            raise NumericalError(
                f"Model returned a negative price: {result.price!r}",
                stage="pricing",
            )
        logger.warning("Clamping rounding-level negative price %r to 0.0", result.price)
        return replace(result, price=0.0)


def price(
    contract: OptionContract, *, config: PricingConfig | None = None
) -> PricingResult:
    """Price ``contract`` and attach its Greeks.

    European contracts go to the closed-form BSM model, American contracts to
    the CRR lattice with finite-difference Greeks.

    Raises
    ------
    ValidationError
        If any contract field is invalid, NaN or infinite.
    NumericalError
        If the lattice is arbitrage-inconsistent for the chosen step count, or a
        re-price inside the Greek computation fails.
    """
    validate_contract(contract)
    model = create_pricing_model(contract.exercise, config=config)
    logger.debug(
        "Pricing %s %s with %r", contract.exercise.value, contract.kind.value, model
    )
    return PricingEngine(model, config=config).price(contract)
