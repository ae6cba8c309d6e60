"""
Distribution Interface
======================

The :class:`Distribution` protocol is the interface strategies and fitters
work against. Concrete distributions live in :mod:`probkit.families`.

Notes
-----
- Characteristics are resolved by the distribution's computation strategy:
  analytical implementations first, then fitted conversions.
- Sampling is delegated to the sampling strategy, which draws uniforms from
  the distribution's own :class:`~probkit.distributions.random_source.UniformSource`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from probkit.distributions.computation import AnalyticalComputation, Method
    from probkit.distributions.random_source import UniformSource
    from probkit.distributions.sampling import Sample
    from probkit.distributions.strategies import ComputationStrategy, SamplingStrategy
    from probkit.distributions.support import Support
    from probkit.types import DistributionType, GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and fitters."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    @property
    def random_source(self) -> UniformSource: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name, **options)(value)

    def sample(self, n: int, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, **options)
