"""
Common fixtures and utilities for built-in distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from collections.abc import Callable, Iterable
from typing import Any

import numpy as np


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    # Probabilities used for quantile checks
    QUANTILE_LEVELS = (0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999)

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))

    @staticmethod
    def evaluate(func: Callable[[Any], Any], points: Iterable[Any]) -> np.ndarray[Any, Any]:
        """Evaluate a scalar characteristic point by point."""
        return np.array([func(x) for x in points], dtype=float)

    @staticmethod
    def assert_non_decreasing(values: np.ndarray[Any, Any]) -> None:
        assert np.all(np.diff(values) >= 0.0)
