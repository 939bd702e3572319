"""
numerics/fd/stencils.py (pure coefficients/weights)
Responsibility: return 3-point stencil coefficients on a uniform step; the
caller supplies the function samples.

Every function returns ``(c_minus, c_mid, c_plus)`` such that

    derivative ≈ c_minus*f(x-h) + c_mid*f(x) + c_plus*f(x+h)

Unused samples get a zero coefficient, so a caller never has to evaluate them
(see :func:`apply_stencil`).
"""

from __future__ import annotations


def _check_step(h: float) -> None:
    if not h > 0.0:
        raise ValueError(f"step must be > 0, got {h!r}")


def central_first_coeffs(h: float) -> tuple[float, float, float]:
    """Central first derivative, (f(x+h) - f(x-h)) / 2h. Second-order accurate."""
    _check_step(h)
    return -0.5 / h, 0.0, 0.5 / h


def central_second_coeffs(h: float) -> tuple[float, float, float]:
    """Central second derivative, (f(x+h) - 2f(x) + f(x-h)) / h^2."""
    _check_step(h)
    inv_h2 = 1.0 / (h * h)
    return inv_h2, -2.0 * inv_h2, inv_h2


def forward_first_coeffs(h: float) -> tuple[float, float, float]:
    """One-sided forward first derivative, (f(x+h) - f(x)) / h."""
    _check_step(h)
    return 0.0, -1.0 / h, 1.0 / h


def backward_first_coeffs(h: float) -> tuple[float, float, float]:
    """One-sided backward first derivative, (f(x) - f(x-h)) / h."""
    _check_step(h)
    return -1.0 / h, 1.0 / h, 0.0


def apply_stencil(
    coeffs: tuple[float, float, float],
    f_minus: float | None,
    f_mid: float | None,
    f_plus: float | None,
) -> float:
    """Combine samples with stencil coefficients.

    A sample may be ``None`` only where its coefficient is zero.
    """
    total = 0.0
    for c, f in zip(coeffs, (f_minus, f_mid, f_plus), strict=True):
        if c == 0.0:
            continue
        if f is None:
            raise ValueError("missing sample for a non-zero stencil coefficient")
        total += c * f
    return total
