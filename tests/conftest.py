"""Pytest helpers for the option_greeks library."""

from __future__ import annotations

import pytest

from option_greeks.types import ExerciseStyle, OptionContract, OptionType


@pytest.fixture
def base_params() -> dict:
    """A small set of canonical parameters used across tests."""
    return {
        "S": 100.0,
        "K": 100.0,
        "r": 0.05,
        "q": 0.0,
        "sigma": 0.2,
        "tau": 1.0,
    }


@pytest.fixture
def make_contract():
    """Factory fixture for constructing the library's OptionContract."""

    def _make(
        *,
        S: float = 100.0,
        K: float = 100.0,
        r: float = 0.05,
        q: float = 0.0,
        sigma: float = 0.2,
        tau: float = 1.0,
        exercise: ExerciseStyle = ExerciseStyle.EUROPEAN,
        kind: OptionType = OptionType.CALL,
    ) -> OptionContract:
        return OptionContract(
            spot=S,
            strike=K,
            rate=r,
            dividend_yield=q,
            volatility=sigma,
            expiry=tau,
            exercise=exercise,
            kind=kind,
        )

    return _make
