"""
Distribution Families Configuration
====================================

This module configures the built-in parametric distribution families:

- :class:`Bernoulli Family`: single success/failure trial.
- :class:`Poisson Family`: event counts with a constant rate.
- :class:`Geometric Family`: trials until the first success.
- :class:`Laplace Family`: double exponential distribution.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Characteristics without a closed form are resolved through the
  characteristic graph of the distribution type.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from probkit.families.builtins import (
    configure_bernoulli_family,
    configure_geometric_family,
    configure_laplace_family,
    configure_poisson_family,
)
from probkit.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all built-in families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_bernoulli_family()
    configure_poisson_family()
    configure_geometric_family()
    configure_laplace_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
