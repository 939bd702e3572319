"""
option_greeks

Vanilla equity option pricing and Greeks.

This package exposes the main user-facing names at the top level, so you
can write, for example:

    from option_greeks import OptionContract, price
"""

# Re-export pricing entrypoints (nice public names)
from .config import FiniteDiffConfig, LatticeConfig, PricingConfig
from .engine import PricingEngine, create_pricing_model, price
from .exceptions import (
    Constraint,
    ModelNotInitializedError,
    NumericalError,
    OptionPricingError,
    ValidationError,
)
from .models.binomial_crr import LatticeBuffer
from .pricers.black_scholes import ClosedFormModel, bs_greeks, bs_price
from .pricers.finite_diff import finite_diff_greeks
from .pricers.tree import LatticeModel, crr_price
from .types import ExerciseStyle, Greeks, OptionContract, OptionType, PricingResult
from .validation import validate_contract

__all__ = [
    # Types
    "OptionType",
    "ExerciseStyle",
    "OptionContract",
    "Greeks",
    "PricingResult",
    # Config
    "FiniteDiffConfig",
    "LatticeConfig",
    "PricingConfig",
    # Errors
    "OptionPricingError",
    "ValidationError",
    "NumericalError",
    "ModelNotInitializedError",
    "Constraint",
    # Validation
    "validate_contract",
    # Models / pricers
    "ClosedFormModel",
    "LatticeModel",
    "LatticeBuffer",
    "bs_price",
    "bs_greeks",
    "crr_price",
    "finite_diff_greeks",
    # Facade
    "PricingEngine",
    "create_pricing_model",
    "price",
]

__version__ = "0.1.0"
