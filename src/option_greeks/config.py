from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class FiniteDiffConfig:
    """Bump sizes used by the finite-difference Greek engine.

    The defaults are empirically stable choices, not fundamental constants.

    Parameters
    ----------
    spot_rel_step : float, default 1e-4
        Spot bump as a fraction of spot (``h = S * spot_rel_step``).
    time_step : float, default 1/365
        Expiry bump in years (one calendar day).
    vol_step : float, default 1e-4
        Absolute volatility bump.
    rate_step : float, default 1e-4
        Absolute rate bump (one basis point).
    """

    spot_rel_step: float = 1e-4
    time_step: float = 1.0 / 365.0
    vol_step: float = 1e-4
    rate_step: float = 1e-4

    def __post_init__(self) -> None:
        if self.spot_rel_step <= 0 or self.spot_rel_step >= 1:
            raise ValueError("spot_rel_step must be in (0, 1)")
        if self.time_step <= 0:
            raise ValueError("time_step must be > 0")
        if self.vol_step <= 0:
            raise ValueError("vol_step must be > 0")
        if self.rate_step <= 0:
            raise ValueError("rate_step must be > 0")


@dataclass(frozen=True, slots=True)
class LatticeConfig:
    n_steps: int = 500

    def __post_init__(self) -> None:
        if self.n_steps < 1:
            raise ValueError("n_steps must be >= 1")


@dataclass(frozen=True, slots=True)
class PricingConfig:
    lattice: LatticeConfig = field(default_factory=LatticeConfig)
    finite_diff: FiniteDiffConfig = field(default_factory=FiniteDiffConfig)
    negative_price_tol: float = 1e-10  # below -tol a price is an error

    def __post_init__(self) -> None:
        if self.negative_price_tol < 0:
            raise ValueError("negative_price_tol must be >= 0")
