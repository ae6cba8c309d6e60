"""
Poisson distribution family implementation.

Only the ``pmf`` is closed-form; ``cdf`` and ``ppf`` are derived from it by
the discrete conversions of the characteristic graph (prefix summation and a
bounded cumulative search).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from scipy.special import gammaln

from probkit.distributions.support import IntegerLatticeDiscreteSupport
from probkit.errors import DomainError
from probkit.families.distribution import ParametricFamilyDistribution
from probkit.families.parametric_family import ParametricFamily
from probkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from probkit.families.registry import ParametricFamilyRegister
from probkit.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from probkit.types import Number


def configure_poisson_family() -> ParametricFamily:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return ParametricFamilyRegister.get(FamilyName.POISSON)

    POISSON_DOC = """
    Poisson distribution.

    Number of events in a fixed interval when events occur independently at
    a constant average rate λ.

    Probability mass function:
        P(X = k) = λ^k e^(-λ) / Γ(k + 1),  k = 0, 1, 2, ...
    """

    def pmf(parameters: Parametrization, k: Number) -> float:
        """
        Probability mass function, evaluated in log space through ``gammaln``.

        Raises
        ------
        DomainError
            If ``k`` is not a non-negative integer.
        """
        parameters = cast(_Rate, parameters)
        if not (math.isfinite(k) and float(k).is_integer() and k >= 0):
            raise DomainError(f"Poisson pmf is defined on non-negative integers, got {k!r}")

        lambda_ = parameters.lambda_
        return math.exp(k * math.log(lambda_) - lambda_ - float(gammaln(k + 1)))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return float(cast(_Rate, parameters).lambda_)

    def var_func(parameters: Parametrization, _: Any) -> float:
        return float(cast(_Rate, parameters).lambda_)

    family = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["rate"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=lambda _: IntegerLatticeDiscreteSupport(
            residue=0, modulus=1, min_k=0
        ),
    )
    family.__doc__ = POISSON_DOC

    @parametrization(family=family, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization.

        Parameters
        ----------
        lambda_ : float
            Expected number of events (λ).
        """

        lambda_: float

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            return self.lambda_ > 0

        @constraint(description="lambda_ is finite")
        def check_lambda_finite(self) -> bool:
            return math.isfinite(self.lambda_)

    ParametricFamilyRegister.register(family)
    return family


class Poisson(ParametricFamilyDistribution):
    """
    Poisson distribution with rate ``mean`` (λ).

    The quantile search accepts a ``max_iterations`` option, e.g.
    ``Poisson(3.0).quantile(0.5, max_iterations=1000)``.
    """

    def __init__(self, mean: float, *, seed: int | None = None) -> None:
        family = configure_poisson_family()
        super().__init__(family, family.make_parameters(lambda_=mean), seed=seed)

    @property
    def rate(self) -> float:
        return cast(float, self.parameters.parameters["lambda_"])
