"""
Core Type Definitions
=====================

Fundamental types shared by the distribution machinery and the families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Distribution with a countable support, described by a ``pmf``.
    CONTINUOUS : str
        Distribution described by a ``pdf``.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Base class for distribution type descriptors.

    The characteristic registry keys its conversion graphs by these objects.
    """

    __slots__ = ()

    @property
    def registry_features(self) -> Mapping[str, Any]:
        """Public dataclass fields of the descriptor."""
        fields = getattr(self, "__dataclass_fields__", None) or {}
        return {name: getattr(self, name) for name in fields}


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for distributions on a Euclidean space.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Dimension of the space, 1 for univariate distributions.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint.
    right : float, default=inf
        Right endpoint.
    left_closed : bool, default=True
        Whether the left endpoint belongs to the interval (forced to ``False``
        for an infinite endpoint).
    right_closed : bool, default=True
        Same for the right endpoint.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left == -inf:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Element-wise membership test."""
        arr = np.asarray(x)

        above = (arr > self.left) | (self.left_closed & (arr >= self.left))
        below = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = above & below

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        """Check if the interval contains no points."""
        if self.left > self.right:
            return True
        return self.left == self.right and not (self.left_closed and self.right_closed)


type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pmf', 'cdf')."""

type ParametrizationName = str
"""Type alias for parametrization names."""

ScalarFunc = Callable[..., float]
"""Type alias for scalar characteristic callables (float -> float)."""


class CharacteristicName(StrEnum):
    """
    Standard names of distribution characteristics.

    Families may register further characteristics under their own names.
    """

    PDF = "pdf"
    PMF = "pmf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    BERNOULLI = "Bernoulli"
    POISSON = "Poisson"
    GEOMETRIC = "Geometric"
    LAPLACE = "Laplace"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "ScalarFunc",
    "Interval1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
