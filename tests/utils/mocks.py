from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np

from probkit.distributions import (
    AnalyticalComputation,
    ArraySample,
    ComputationStrategy,
    DefaultComputationStrategy,
    Distribution,
    InversionSamplingStrategy,
    Sample,
    SamplingStrategy,
    Support,
    UniformSource,
)
from probkit.types import EuclideanDistributionType, GenericCharacteristicName, Kind, Number


class MockSamplingStrategy(SamplingStrategy):
    def draw(self, distr: Distribution, **options: Any) -> Number:
        return distr.random_source.uniform()

    def sample(self, n: int, distr: Distribution, **options: Any) -> Sample:
        return ArraySample(np.random.random((n, 1)))


class StandaloneEuclideanUnivariateDistribution(Distribution):
    """
    Minimal standalone univariate Euclidean distribution.

    Notes
    -----
    - Dimension is fixed to 1.
    - Default strategies are attached: computation and inversion sampling.
    """

    def __init__(
        self,
        kind: Kind,
        analytical_computations: (
            Iterable[AnalyticalComputation[Any, Any]]
            | Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
        ) = (),
        support: Support | None = None,
        seed: int | None = None,
    ) -> None:
        self._distribution_type = EuclideanDistributionType(kind, 1)
        if isinstance(analytical_computations, Mapping):
            self._analytical = dict(analytical_computations)
        else:
            self._analytical = {ac.target: ac for ac in analytical_computations}
        self._support = support
        self._random_source = UniformSource(seed)
        self._computation_strategy = DefaultComputationStrategy[Any, Any]()

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Distribution type descriptor (kind and dimension)."""
        return self._distribution_type

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Mapping from characteristic name to analytical callable."""
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Sampling strategy instance."""
        return InversionSamplingStrategy()

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Computation strategy instance."""
        return self._computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    @property
    def random_source(self) -> UniformSource:
        return self._random_source
