"""option_greeks.pricers

Pricing algorithms that take an :class:`~option_greeks.types.OptionContract`:

- closed-form Black-Scholes-Merton (European only)
- Cox-Ross-Rubinstein lattice (European and American)
- finite-difference Greeks for any pricing function
"""

from .black_scholes import ClosedFormModel, bs_greeks, bs_price
from .finite_diff import finite_diff_greeks
from .tree import LatticeModel, crr_price

__all__ = [
    "ClosedFormModel",
    "LatticeModel",
    "bs_price",
    "bs_greeks",
    "crr_price",
    "finite_diff_greeks",
]
