"""
Parametric family definitions.

A :class:`ParametricFamily` bundles the closed-form characteristics of a
distribution family, its parametrizations, its support and the strategies
its instances use, and acts as a factory for
:class:`~probkit.families.distribution.ParametricFamilyDistribution`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from probkit.distributions.computation import AnalyticalComputation
from probkit.distributions.strategies import (
    DefaultComputationStrategy,
    InversionSamplingStrategy,
)
from probkit.families.distribution import ParametricFamilyDistribution
from probkit.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from probkit.distributions.strategies import ComputationStrategy, SamplingStrategy
    from probkit.distributions.support import Support
    from probkit.families.parametrizations import Parametrization
    from probkit.types import GenericCharacteristicName, ParametrizationName

    type ParametrizedFunction = Callable[[Parametrization, Any], Any]
    type SupportResolver = Callable[[Parametrization], Support | None]


class ParametricFamily:
    """
    A family of distributions with one or more parametrizations.

    Parameters
    ----------
    name : str
        Name of the family.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Distribution type, or a function inferring it from base parameters.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base parametrization.
    distr_characteristics : dict
        Mapping from characteristic names to ``f(parameters, x)`` callables,
        or to a ``{parametrization_name: callable}`` mapping. A bare callable
        is defined for the base parametrization.
    sampling_strategy : SamplingStrategy, optional
        Defaults to :class:`InversionSamplingStrategy`.
    computation_strategy : ComputationStrategy, optional
        Defaults to :class:`DefaultComputationStrategy`.
    support_by_parametrization : Callable or None, optional
        Returns the support for given (base) parameters.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
        support_by_parametrization: SupportResolver | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError("A family needs at least one parametrization name.")

        self._name = name
        self._distr_type: Callable[[Parametrization], DistributionType] = (
            (lambda params: distr_type) if isinstance(distr_type, DistributionType) else distr_type
        )
        self._support_resolver: SupportResolver = (
            support_by_parametrization
            if support_by_parametrization is not None
            else (lambda _params: None)
        )

        self.sampling_strategy = (
            InversionSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )
        self.computation_strategy = (
            DefaultComputationStrategy() if computation_strategy is None else computation_strategy
        )

        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = distr_parametrizations[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {
            key: val if isinstance(val, dict) else {self.base_parametrization_name: val}
            for key, val in distr_characteristics.items()
        }

        # For each parametrization: which parametrization provides each characteristic
        base_name = self.base_parametrization_name
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {}
        for pname in self.parametrization_names:
            plan: dict[GenericCharacteristicName, ParametrizationName] = {}
            for characteristic, forms in self.distr_characteristics.items():
                if pname in forms:
                    plan[characteristic] = pname
                elif base_name in forms:
                    plan[characteristic] = base_name
            self._analytical_plan[pname] = plan

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        The base parametrization class.

        Raises
        ------
        ValueError
            If the base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If the name is unknown to the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """Fetch a parametrization class by name (``KeyError`` if unknown)."""
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def make_parameters(
        self, parametrization_name: ParametrizationName | None = None, **parameters_values: Any
    ) -> Parametrization:
        """
        Build and validate a parametrization instance.

        Raises
        ------
        KeyError
            If the parametrization name is not registered.
        ParameterConstraintError
            If a constraint does not hold.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return parameters

    def distribution_type_for(self, parameters: Parametrization) -> DistributionType:
        return self._distr_type(self.to_base(parameters))

    def support_for(self, parameters: Parametrization) -> Support | None:
        return self._support_resolver(self.to_base(parameters))

    def build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind every analytical characteristic to ``parameters``."""
        plan = self._analytical_plan.get(parameters.name, {})
        result: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        base_params: Parametrization | None = None

        for characteristic, provider_name in plan.items():
            if provider_name == parameters.name:
                params_obj = parameters
            else:
                if base_params is None:
                    base_params = self.to_base(parameters)
                params_obj = base_params

            func = self.distr_characteristics[characteristic][provider_name]
            result[characteristic] = AnalyticalComputation(
                target=characteristic,
                func=partial(func, params_obj),
            )

        return result

    def distribution(
        self,
        parametrization_name: str | None = None,
        *,
        seed: int | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization to use (defaults to base).
        seed : int, optional
            Seed of the instance's random source; OS entropy if omitted.
        **parameters_values
            Parameter values.
        """
        parameters = self.make_parameters(parametrization_name, **parameters_values)
        return ParametricFamilyDistribution(self, parameters, seed=seed)

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Class decorator registering a parametrization with this family."""
        from probkit.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
