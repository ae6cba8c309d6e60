"""
Computation Primitives
======================

Building blocks used to compute distribution characteristics:

- :class:`AnalyticalComputation`: a closed-form callable provided by a
  distribution directly.
- :class:`FittedComputationMethod`: a conversion (e.g. ``pmf -> cdf``)
  prepared for one distribution and ready to be called.
- :class:`ComputationMethod`: a factory that *fits* a conversion for a given
  distribution.

Notes
-----
- All callables are **scalar** in the univariate case.
- ``**options`` are free-form and carry numeric tuning such as iteration
  bounds.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mypy_extensions import KwArg

from probkit.types import GenericCharacteristicName

if TYPE_CHECKING:
    from probkit.distributions.distribution import Distribution


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pmf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out]:
    """Fitted conversion method.

    Parameters
    ----------
    target : str
        Destination characteristic name.
    sources : Sequence[str]
        Source characteristic names (length 1 for graph edges).
    func : Callable[[In, KwArg(Any)], Out]
        Callable implementing the conversion.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class ComputationMethod[In, Out]:
    """Conversion method factory, the label of a characteristic graph edge.

    Parameters
    ----------
    target : str
        Destination characteristic name.
    sources : Sequence[str]
        Source characteristic names.
    fitter : Callable[[Distribution, KwArg(Any)], FittedComputationMethod]
        Prepares the conversion for a concrete distribution.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    fitter: Callable[["Distribution", KwArg(Any)], FittedComputationMethod[In, Out]]

    def fit(self, distribution: "Distribution", **options: Any) -> FittedComputationMethod[In, Out]:
        """Fit and return a :class:`FittedComputationMethod`."""
        return self.fitter(distribution, **options)


type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]
"""Anything a computation strategy may resolve a characteristic to."""
