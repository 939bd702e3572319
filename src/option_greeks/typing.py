from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from .types import OptionContract

# typing only
type FloatArray = NDArray[np.floating]
type PriceFn = Callable[[OptionContract], float]

# Runtime types
FloatDType = np.float64  # runtime dtype only
