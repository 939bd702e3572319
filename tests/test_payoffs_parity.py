import math

import numpy as np
import pytest

from option_greeks.parity import forward_discounted, put_call_parity_residual
from option_greeks.payoffs import call_payoff, intrinsic_value, put_payoff
from option_greeks.types import OptionType


def test_payoffs_vectorized():
    ST = np.array([80.0, 100.0, 120.0])
    np.testing.assert_array_equal(call_payoff(ST, 100.0), [0.0, 0.0, 20.0])
    np.testing.assert_array_equal(put_payoff(ST, 100.0), [20.0, 0.0, 0.0])


def test_intrinsic_value_scalar_is_python_float():
    v = intrinsic_value(90.0, 100.0, OptionType.PUT)
    assert type(v) is float
    assert v == 10.0
    assert intrinsic_value(90.0, 100.0, OptionType.CALL) == 0.0


def test_intrinsic_value_rejects_unknown_kind():
    with pytest.raises(ValueError):
        intrinsic_value(90.0, 100.0, "straddle")


def test_forward_discounted(make_contract):
    c = make_contract(S=100.0, K=95.0, r=0.05, q=0.01, tau=2.0)
    expected = 100.0 * math.exp(-0.02) - 95.0 * math.exp(-0.1)
    assert forward_discounted(c) == pytest.approx(expected)


def test_parity_residual_sign(make_contract):
    c = make_contract()
    rhs = forward_discounted(c)
    assert put_call_parity_residual(call=rhs + 1.0, put=0.0, c=c) == pytest.approx(1.0)
