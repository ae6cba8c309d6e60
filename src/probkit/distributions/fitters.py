"""
Discrete Conversions
====================

Fitters turning a resolvable ``pmf`` into ``cdf`` and ``ppf`` on an ordered
discrete support. They back families that only provide a closed-form ``pmf``
(e.g. Poisson).

Both conversions walk the support from its first point, so the support must
be left-bounded.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from math import inf, isfinite, isnan
from typing import TYPE_CHECKING, Any, cast

from probkit.distributions.computation import FittedComputationMethod
from probkit.distributions.support import DiscreteSupport, IntegerLatticeDiscreteSupport
from probkit.errors import ProbabilityOutOfRangeError, QuantileSearchError
from probkit.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable

    from mypy_extensions import KwArg

    from probkit.distributions.distribution import Distribution
    from probkit.types import GenericCharacteristicName, ScalarFunc

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 100_000
"""Default bound on the number of support points a quantile search may visit."""


def _resolve(distribution: Distribution, name: GenericCharacteristicName) -> ScalarFunc:
    """
    Resolve a scalar characteristic through the distribution's strategy.

    Raises
    ------
    RuntimeError
        If the distribution does not provide a computation strategy.
    """
    try:
        fn = distribution.query_method(name)
    except AttributeError as e:
        raise RuntimeError(
            "Distribution must provide computation_strategy.query_method(name, distribution)."
        ) from e

    def _wrap(x: float, **kwargs: Any) -> float:
        return float(fn(x, **kwargs))

    return _wrap


def _discrete_support(distribution: Distribution, conversion: str) -> DiscreteSupport:
    support = distribution.support
    if support is None or not isinstance(support, DiscreteSupport):
        raise RuntimeError(f"Discrete support is required for {conversion}.")
    return support


def fit_pmf_to_cdf_1D(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[float, float]:
    """
    Build ``cdf`` from ``pmf`` by prefix summation over support points ``<= x``.

    Every call sums from the first support point, so evaluating ``cdf(k)``
    costs ``O(k)`` ``pmf`` evaluations.

    Returns
    -------
    FittedComputationMethod[float, float]
        Fitted ``pmf -> cdf`` conversion.
    """
    support = _discrete_support(distribution, "pmf->cdf")
    pmf_func = _resolve(distribution, CharacteristicName.PMF)

    def _cdf(x: float, **kwargs: Any) -> float:
        x = float(x)
        if isnan(x):
            return float("nan")
        if not isfinite(x):
            return 0.0 if x < 0 else 1.0

        total = 0.0
        for k in support.iter_leq(x):
            total += pmf_func(k, **kwargs)
        return min(max(total, 0.0), 1.0)

    return FittedComputationMethod[float, float](
        target=CharacteristicName.CDF,
        sources=[CharacteristicName.PMF],
        func=cast("Callable[[float, KwArg(Any)], float]", _cdf),
    )


def fit_pmf_to_ppf_1D(
    distribution: Distribution, /, **options: Any
) -> FittedComputationMethod[float, float]:
    """
    Build a step quantile from ``pmf`` by accumulating mass along the support.

    For ``q ∈ [0, 1]`` the result is the first support point at which the
    running ``pmf`` total reaches ``q``.

    Parameters
    ----------
    distribution : Distribution
        Distribution with a left-bounded discrete support.
    **options
        - max_iterations : int, default 100000
            Number of support points the search may visit.

    Returns
    -------
    FittedComputationMethod[float, float]
        Fitted ``pmf -> ppf`` conversion.

    Notes
    -----
    ``q = 1`` maps to ``inf`` on a right-unbounded lattice. The search raises
    :class:`~probkit.errors.QuantileSearchError` when it visits
    ``max_iterations`` points, or when adding further mass no longer changes
    the floating-point total while it is still below ``q``.
    """
    support = _discrete_support(distribution, "pmf->ppf")
    pmf_func = _resolve(distribution, CharacteristicName.PMF)
    max_iterations = int(options.get("max_iterations", DEFAULT_MAX_ITERATIONS))
    if max_iterations <= 0:
        raise ValueError("max_iterations must be positive")

    unbounded_right = (
        isinstance(support, IntegerLatticeDiscreteSupport) and not support.is_right_bounded
    )

    def _ppf(q: float, **kwargs: Any) -> float:
        q = float(q)
        if not 0.0 <= q <= 1.0:
            raise ProbabilityOutOfRangeError(q)
        if q == 1.0 and unbounded_right:
            return inf

        total = 0.0
        last = None
        for visited, k in enumerate(support.iter_points()):
            if visited >= max_iterations:
                raise QuantileSearchError(
                    f"Quantile search for q={q!r} visited {max_iterations} support points "
                    f"(running total {total!r})."
                )
            new_total = total + pmf_func(k, **kwargs)
            if new_total >= q:
                logger.debug(
                    "Quantile search for q=%r ended at k=%s after %d points", q, k, visited + 1
                )
                return k
            if total > 0.0 and new_total == total:
                raise QuantileSearchError(
                    f"Quantile search for q={q!r} stagnated at k={k} "
                    f"(running total {total!r})."
                )
            total = new_total
            last = k

        if last is None:
            raise RuntimeError("Discrete support is empty.")
        # Rounding left the total of a finite support just below q.
        logger.debug("Quantile search for q=%r exhausted the support at k=%s", q, last)
        return last

    return FittedComputationMethod[float, float](
        target=CharacteristicName.PPF,
        sources=[CharacteristicName.PMF],
        func=cast("Callable[[float, KwArg(Any)], float]", _ppf),
    )
