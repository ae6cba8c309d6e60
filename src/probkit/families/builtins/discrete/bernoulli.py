"""
Bernoulli distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from probkit.distributions.support import ExplicitTableDiscreteSupport
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


def configure_bernoulli_family() -> ParametricFamily:
    """
    Configure and register the Bernoulli distribution family.

    Returns the registered family; calling it again is a no-op.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return ParametricFamilyRegister.get(FamilyName.BERNOULLI)

    BERNOULLI_DOC = """
    Bernoulli distribution.

    A single trial that succeeds (1) with probability p and fails (0) with
    probability 1 - p.

    Probability mass function:
        P(X = 1) = p,  P(X = 0) = 1 - p
    """

    def pmf(parameters: Parametrization, k: Number) -> float:
        """
        Probability mass function.

        Raises
        ------
        DomainError
            If ``k`` is neither 0 nor 1.
        """
        parameters = cast(_Probability, parameters)
        if k == 1:
            return float(parameters.p)
        if k == 0:
            return 1.0 - parameters.p
        raise DomainError(f"Bernoulli pmf is defined on {{0, 1}}, got {k!r}")

    def cdf(parameters: Parametrization, k: Number) -> float:
        parameters = cast(_Probability, parameters)
        if math.isnan(k):
            return math.nan
        if k < 0:
            return 0.0
        if k < 1:
            return 1.0 - parameters.p
        return 1.0

    def ppf(parameters: Parametrization, q: float) -> int:
        """
        Quantile function.

        ``q < 1 - p`` maps to 0 and everything from ``1 - p`` up to 1
        (inclusive) maps to 1.
        """
        if not 0.0 <= q <= 1.0:
            raise ProbabilityOutOfRangeError(q)
        parameters = cast(_Probability, parameters)
        return 0 if q < 1.0 - parameters.p else 1

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return float(cast(_Probability, parameters).p)

    def var_func(parameters: Parametrization, _: Any) -> float:
        p = cast(_Probability, parameters).p
        return p * (1.0 - p)

    family = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["probability"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=lambda _: ExplicitTableDiscreteSupport([0, 1]),
    )
    family.__doc__ = BERNOULLI_DOC

    @parametrization(family=family, name="probability")
    class _Probability(Parametrization):
        """
        Success-probability parametrization.

        Parameters
        ----------
        p : float
            Probability of success.
        """

        p: float

        @constraint(description="0 <= p <= 1")
        def check_p_in_unit_interval(self) -> bool:
            return 0.0 <= self.p <= 1.0

    ParametricFamilyRegister.register(family)
    return family


class Bernoulli(ParametricFamilyDistribution):
    """
    Bernoulli distribution with success probability ``p``.

    Examples
    --------
    >>> b = Bernoulli(0.5, seed=0)
    >>> b.pmf(1), b.cdf(0), b.quantile(1.0)
    (0.5, 0.5, 1)
    """

    def __init__(self, p: float, *, seed: int | None = None) -> None:
        family = configure_bernoulli_family()
        super().__init__(family, family.make_parameters(p=p), seed=seed)

    @property
    def p(self) -> float:
        return cast(float, self.parameters.parameters["p"])
