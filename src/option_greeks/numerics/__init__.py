# src/option_greeks/numerics/__init__.py
"""
Numerical building blocks.

Top-level package `option_greeks` exposes the everyday pricing API.
This subpackage exposes the normal distribution helpers used by the
closed-form model and the stencils used by the finite-difference Greeks.
"""

from .fd.stencils import (
    apply_stencil,
    backward_first_coeffs,
    central_first_coeffs,
    central_second_coeffs,
    forward_first_coeffs,
)
from .normal import normal_cdf, normal_pdf

__all__ = [
    # Normal distribution
    "normal_pdf",
    "normal_cdf",
    # Finite-difference stencils
    "central_first_coeffs",
    "central_second_coeffs",
    "forward_first_coeffs",
    "backward_first_coeffs",
    "apply_stencil",
]
