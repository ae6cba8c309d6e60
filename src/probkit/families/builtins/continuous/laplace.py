"""
Laplace distribution family implementation.

Contains the Laplace (double exponential) family with location-scale and
mean-standard deviation parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from probkit.distributions.support import ContinuousSupport
from probkit.errors import ProbabilityOutOfRangeError
from probkit.families.distribution import ParametricFamilyDistribution
from probkit.families.parametric_family import ParametricFamily
from probkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from probkit.families.registry import ParametricFamilyRegister
from probkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


def configure_laplace_family() -> ParametricFamily:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return ParametricFamilyRegister.get(FamilyName.LAPLACE)

    LAPLACE_DOC = """
    Laplace (double exponential) distribution.

    Two exponential tails glued back to back at the location μ, each decaying
    with scale b.

    Probability density function:
        f(x) = exp(-|x - μ| / b) / (2b)

    Cumulative distribution function:
        F(x) = exp((x - μ) / b) / 2      for x < μ
        F(x) = 1 - exp((μ - x) / b) / 2  for x >= μ
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for Laplace distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
                - mu: float (location)
                - b: float (scale)
        x : float
            Point at which to evaluate the density.

        Returns
        -------
        float
            Probability density at ``x``.

        Notes
        -----
        The density carries the ``1 / (2b)`` normalisation, not ``1/2``.
        Only with that factor is it the derivative of the cdf below; the
        two forms coincide at ``b = 1``.
        """
        parameters = cast(_LocScale, parameters)
        mu, b = parameters.mu, parameters.b
        return math.exp(-abs(x - mu) / b) / (2.0 * b)

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_LocScale, parameters)
        mu, b = parameters.mu, parameters.b
        if x < mu:
            return 0.5 * math.exp((x - mu) / b)
        return 1.0 - 0.5 * math.exp((mu - x) / b)

    def ppf(parameters: Parametrization, q: float) -> float:
        """
        Quantile function for Laplace distribution.

        Returns ``-inf`` at ``q = 0`` and ``inf`` at ``q = 1``.

        Raises
        ------
        ProbabilityOutOfRangeError
            If ``q`` is outside ``[0, 1]``.
        """
        if not 0.0 <= q <= 1.0:
            raise ProbabilityOutOfRangeError(q)
        if q == 0.0:
            return -math.inf
        if q == 1.0:
            return math.inf

        parameters = cast(_LocScale, parameters)
        mu, b = parameters.mu, parameters.b
        if q <= 0.5:
            return mu + b * math.log(2.0 * q)
        return mu - b * math.log(2.0 * (1.0 - q))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return float(cast(_LocScale, parameters).mu)

    def var_func(parameters: Parametrization, _: Any) -> float:
        b = cast(_LocScale, parameters).b
        return 2.0 * b * b

    family = ParametricFamily(
        name=FamilyName.LAPLACE,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locScale", "meanStd"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=lambda _: ContinuousSupport(),
    )
    family.__doc__ = LAPLACE_DOC

    @parametrization(family=family, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Laplace distribution.

        Parameters
        ----------
        mu : float
            Location, also the mean and the median.
        b : float
            Scale (diversity).
        """

        mu: float
        b: float

        @constraint(description="b > 0")
        def check_b_positive(self) -> bool:
            return self.b > 0

    @parametrization(family=family, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Mean-standard deviation parametrization of Laplace distribution.

        Parameters
        ----------
        mu : float
            Mean.
        sigma : float
            Standard deviation, ``sigma = b * sqrt(2)``.
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _LocScale(mu=self.mu, b=self.sigma / math.sqrt(2.0))

    ParametricFamilyRegister.register(family)
    return family


class Laplace(ParametricFamilyDistribution):
    """
    Laplace distribution with location ``mean`` and scale ``scale``.

    Examples
    --------
    >>> d = Laplace(0.0, 1.0, seed=7)
    >>> round(d.cdf(1.0), 6)
    0.81606
    """

    def __init__(self, mean: float = 0.0, scale: float = 1.0, *, seed: int | None = None) -> None:
        family = configure_laplace_family()
        super().__init__(family, family.make_parameters(mu=mean, b=scale), seed=seed)

    @property
    def location(self) -> float:
        return cast(float, self.parameters.parameters["mu"])

    @property
    def scale(self) -> float:
        return cast(float, self.parameters.parameters["b"])
