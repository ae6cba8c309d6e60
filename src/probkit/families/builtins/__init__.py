"""
Built-in distribution families for probkit.

This package contains implementations of the distribution families that are
available by default, together with a named class per family.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from probkit.families.builtins.continuous import Laplace, configure_laplace_family
from probkit.families.builtins.discrete import (
    Bernoulli,
    Geometric,
    Poisson,
    configure_bernoulli_family,
    configure_geometric_family,
    configure_poisson_family,
)

__all__ = [
    "Bernoulli",
    "Geometric",
    "Laplace",
    "Poisson",
    "configure_bernoulli_family",
    "configure_geometric_family",
    "configure_laplace_family",
    "configure_poisson_family",
]
