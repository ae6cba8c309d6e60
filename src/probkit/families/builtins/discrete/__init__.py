"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from probkit.families.builtins.discrete.bernoulli import Bernoulli, configure_bernoulli_family
from probkit.families.builtins.discrete.geometric import Geometric, configure_geometric_family
from probkit.families.builtins.discrete.poisson import Poisson, configure_poisson_family

__all__ = [
    "Bernoulli",
    "Geometric",
    "Poisson",
    "configure_bernoulli_family",
    "configure_geometric_family",
    "configure_poisson_family",
]
