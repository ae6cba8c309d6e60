"""
Concrete distribution instances with specific parameter values.

A :class:`ParametricFamilyDistribution` binds a family's characteristics to
validated parameters and owns the uniform random source used for sampling.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from typing import TYPE_CHECKING, Self

from probkit.distributions.distribution import Distribution
from probkit.distributions.random_source import UniformSource
from probkit.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    import numpy as np
    import numpy.typing as npt

    from probkit.distributions.computation import AnalyticalComputation
    from probkit.distributions.sampling import Sample
    from probkit.distributions.strategies import ComputationStrategy, SamplingStrategy
    from probkit.distributions.support import Support
    from probkit.families.parametric_family import ParametricFamily
    from probkit.families.parametrizations import Parametrization
    from probkit.types import DistributionType, GenericCharacteristicName, Number


class ParametricFamilyDistribution(Distribution):
    """
    A distribution from a parametric family with fixed parameter values.

    Parameters
    ----------
    family : ParametricFamily
        Family the distribution belongs to.
    parameters : Parametrization
        Validated parameter values.
    seed : int, optional
        Seed of the random source. When omitted the source is seeded from OS
        entropy and the instance is not reproducible until :meth:`seed` is
        called.

    Notes
    -----
    Parameters are immutable; the random source is the only mutable state and
    is not shared with other instances.
    """

    def __init__(
        self, family: ParametricFamily, parameters: Parametrization, *, seed: int | None = None
    ) -> None:
        self._family = family
        self._parameters = parameters
        self._distribution_type = family.distribution_type_for(parameters)
        self._support = family.support_for(parameters)
        self._analytical = family.build_analytical_computations(parameters)
        self._random_source = UniformSource(seed)

    @classmethod
    def with_seed(cls, seed: int, /, *args: Any, **kwargs: Any) -> Self:
        """Construct an instance whose random source starts from ``seed``."""
        return cls(*args, seed=seed, **kwargs)

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._parameters.parameters.items())
        return f"{self.family_name}({args})"

    @property
    def family(self) -> ParametricFamily:
        return self._family

    @property
    def family_name(self) -> str:
        return self._family.name

    @property
    def parameters(self) -> Parametrization:
        return self._parameters

    @property
    def parametrization_name(self) -> str:
        return self._parameters.name

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self._family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self._family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    @property
    def random_source(self) -> UniformSource:
        return self._random_source

    # -- characteristics ---------------------------------------------------

    def pmf(self, k: Number) -> float:
        """Probability mass at ``k``."""
        return self.calculate_characteristic(CharacteristicName.PMF, k)

    def pdf(self, x: Number) -> float:
        """Probability density at ``x``."""
        return self.calculate_characteristic(CharacteristicName.PDF, x)

    def cdf(self, x: Number) -> float:
        """Probability that the variable is ``<= x``."""
        return self.calculate_characteristic(CharacteristicName.CDF, x)

    def ppf(self, q: float, **options: Any) -> Number:
        """
        Quantile function (inverse ``cdf``).

        Raises
        ------
        ProbabilityOutOfRangeError
            If ``q`` is outside ``[0, 1]``.
        """
        return self.calculate_characteristic(CharacteristicName.PPF, q, **options)

    quantile = ppf

    def mean(self) -> float:
        return self.calculate_characteristic(CharacteristicName.MEAN, None)

    def var(self) -> float:
        return self.calculate_characteristic(CharacteristicName.VAR, None)

    # -- sampling ----------------------------------------------------------

    def seed(self, s: int) -> None:
        """Reseed the random source; subsequent draws are reproducible."""
        self._random_source.seed(s)

    def random(
        self, n: int | None = None, **options: Any
    ) -> Number | npt.NDArray[np.integer[Any] | np.floating[Any]]:
        """
        Draw by inversion sampling.

        Parameters
        ----------
        n : int, optional
            Number of draws. If omitted a single value is returned.

        Returns
        -------
        Number or numpy.ndarray
            One value, or a 1D array of ``n`` values (integers for discrete
            distributions).
        """
        if n is None:
            return self.sampling_strategy.draw(self, **options)
        return self.sample(n, **options).array.reshape(-1)

    def sample(self, n: int, **options: Any) -> Sample:
        """Draw ``n`` values as a ``(n, 1)`` sample."""
        return self.sampling_strategy.sample(n, distr=self, **options)
