"""
Computation and Sampling Strategies
===================================

Pluggable strategy interfaces and their default implementations:

- :class:`ComputationStrategy`: resolves characteristic methods.
- :class:`DefaultComputationStrategy`: returns analytical characteristics
  and fits the remaining ones along the characteristic graph.
- :class:`SamplingStrategy`: draws samples from a distribution.
- :class:`InversionSamplingStrategy`: inverse transform sampling: maps
  uniforms from the distribution's own random source through its ``ppf``.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from probkit.distributions.computation import FittedComputationMethod, Method
from probkit.types import (
    CharacteristicName,
    EuclideanDistributionType,
    GenericCharacteristicName,
    Kind,
)

from .registry import distribution_type_register
from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from probkit.distributions.random_source import UniformSource
    from probkit.types import Number

    from .distribution import Distribution

logger = logging.getLogger(__name__)


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. If the distribution provides an analytical implementation, return it.
    2. Otherwise look up the graph of the distribution type, find a path from
       one of the analytical characteristics to the target and fit the edges
       along it. Fitters resolve their own sources through this strategy.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical base, no conversion path exists
        or a cycle is detected during resolution.
    """

    def __init__(self) -> None:
        self._resolving: dict[int, set[GenericCharacteristicName]] = {}

    def _push_guard(self, distr: "Distribution", state: GenericCharacteristicName) -> None:
        seen = self._resolving.setdefault(id(distr), set())
        if state in seen:
            raise RuntimeError(
                f"Cycle detected while resolving '{state}'. "
                "Provide at least one analytical base characteristic in the distribution."
            )
        seen.add(state)

    def _pop_guard(self, distr: "Distribution", state: GenericCharacteristicName) -> None:
        seen = self._resolving.get(id(distr))
        if seen is not None:
            seen.discard(state)
            if not seen:
                self._resolving.pop(id(distr), None)

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve an analytical or fitted method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name.
        distr : Distribution
            The distribution providing the analytical base and type.
        **options
            Passed to the fitters when conversions are required.
        """
        if state in distr.analytical_computations:
            return distr.analytical_computations[state]

        if not distr.analytical_computations:
            raise RuntimeError(
                "Distribution provides no analytical computations to ground conversions."
            )

        reg = distribution_type_register().get(distr.distribution_type)

        self._push_guard(distr, state)
        try:
            for src in distr.analytical_computations:
                path = reg.find_path(src, state)
                if not path:
                    continue

                fitted: FittedComputationMethod[In, Out] | None = None
                for edge in path:
                    fitted = edge.fit(distr, **options)
                if fitted is None:
                    raise RuntimeError(f"Empty path when resolving '{state}' from '{src}'.")
                logger.debug("Resolved '%s' from '%s' via %d conversion(s)", state, src, len(path))
                return fitted

            raise RuntimeError(
                f"No conversion path from any analytical characteristic to '{state}'."
            )
        finally:
            self._pop_guard(distr, state)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies."""

    def draw(self, distr: "Distribution", **options: Any) -> "Number": ...

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


def inversion_draw(
    ppf: Method[float, Any], source: "UniformSource", n: int, *, discrete: bool
) -> np.ndarray[Any, Any]:
    """
    Draw ``n`` values by mapping uniforms on ``[0, 1)`` through ``ppf``.

    Parameters
    ----------
    ppf : Method
        Quantile function of the target distribution.
    source : UniformSource
        Source of uniform variates.
    n : int
        Number of draws.
    discrete : bool
        Produce ``int64`` values instead of ``float64``.
    """
    dtype = np.int64 if discrete else np.float64
    return np.array([ppf(float(u)) for u in source.uniforms(n)], dtype=dtype)


class InversionSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to
    i.i.d. uniforms drawn from the distribution's random source. Discrete
    distributions yield integers, continuous ones floats.
    """

    @staticmethod
    def _is_discrete(distr: "Distribution") -> bool:
        distribution_type = distr.distribution_type
        return (
            isinstance(distribution_type, EuclideanDistributionType)
            and distribution_type.kind == Kind.DISCRETE
        )

    def draw(self, distr: "Distribution", **options: Any) -> "Number":
        """Draw a single value."""
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        value = ppf(distr.random_source.uniform())
        return int(value) if self._is_discrete(distr) else float(value)

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        """
        Draw ``n`` values.

        Returns
        -------
        ArraySample
            A 2D sample of shape ``(n, 1)``.

        Raises
        ------
        ValueError
            If ``n`` is not a non-negative integer.
        """
        if isinstance(n, bool) or not isinstance(n, int | np.integer) or n < 0:
            raise ValueError(f"Sample size must be a non-negative integer, got {n!r}")
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        values = inversion_draw(ppf, distr.random_source, int(n), discrete=self._is_discrete(distr))
        return ArraySample(values.reshape(int(n), 1))
