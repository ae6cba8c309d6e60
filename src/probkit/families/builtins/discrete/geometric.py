"""
Geometric distribution family implementation.

Counts the trials up to and including the first success, so the support
starts at 1.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from probkit.distributions.support import IntegerLatticeDiscreteSupport
from probkit.errors import DomainError, ProbabilityOutOfRangeError
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


def configure_geometric_family() -> ParametricFamily:
    """
    Configure and register the Geometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return ParametricFamilyRegister.get(FamilyName.GEOMETRIC)

    GEOMETRIC_DOC = """
    Geometric distribution.

    Number of Bernoulli(p) trials needed to get the first success.

    Probability mass function:
        P(X = k) = (1 - p)^(k - 1) p,  k = 1, 2, 3, ...

    Cumulative distribution function:
        F(k) = 1 - (1 - p)^floor(k)  for k >= 1
    """

    def pmf(parameters: Parametrization, k: Number) -> float:
        """
        Probability mass function.

        Raises
        ------
        DomainError
            If ``k`` is not an integer ``>= 1``.
        """
        parameters = cast(_Probability, parameters)
        if not (math.isfinite(k) and float(k).is_integer() and k >= 1):
            raise DomainError(f"Geometric pmf is defined on integers >= 1, got {k!r}")

        p = parameters.p
        return float((1.0 - p) ** (k - 1) * p)

    def cdf(parameters: Parametrization, k: Number) -> float:
        parameters = cast(_Probability, parameters)
        if math.isnan(k):
            return math.nan
        if k < 1:
            return 0.0
        if math.isinf(k):
            return 1.0
        # Same log1p form as the quantile guess, so tiny p does not round to 0.
        return -math.expm1(math.floor(k) * math.log1p(-parameters.p))

    def ppf(parameters: Parametrization, q: float) -> Number:
        """
        Quantile function: the smallest ``k >= 1`` with ``cdf(k) >= q``.

        Starts from the closed-form inverse and corrects it by at most one
        step in either direction to absorb rounding in the logarithms.
        """
        if not 0.0 <= q <= 1.0:
            raise ProbabilityOutOfRangeError(q)
        if q == 1.0:
            return math.inf

        p = cast(_Probability, parameters).p
        if q == 0.0 or p == 1.0:
            return 1

        k = max(1, math.ceil(math.log1p(-q) / math.log1p(-p)))
        if k > 1 and cdf(parameters, k - 1) >= q:
            k -= 1
        elif cdf(parameters, k) < q:
            k += 1
        return k

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 / cast(_Probability, parameters).p

    def var_func(parameters: Parametrization, _: Any) -> float:
        p = cast(_Probability, parameters).p
        return (1.0 - p) / (p * p)

    family = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["probability"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=lambda _: IntegerLatticeDiscreteSupport(
            residue=0, modulus=1, min_k=1
        ),
    )
    family.__doc__ = GEOMETRIC_DOC

    @parametrization(family=family, name="probability")
    class _Probability(Parametrization):
        """
        Success-probability parametrization.

        Parameters
        ----------
        p : float
            Probability of success on each trial.
        """

        p: float

        @constraint(description="0 < p <= 1")
        def check_p_range(self) -> bool:
            return 0.0 < self.p <= 1.0

    ParametricFamilyRegister.register(family)
    return family


class Geometric(ParametricFamilyDistribution):
    """Geometric distribution on ``{1, 2, ...}`` with success probability ``p``."""

    def __init__(self, p: float, *, seed: int | None = None) -> None:
        family = configure_geometric_family()
        super().__init__(family, family.make_parameters(p=p), seed=seed)

    @property
    def p(self) -> float:
        return cast(float, self.parameters.parameters["p"])
