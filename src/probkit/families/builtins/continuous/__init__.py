"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from probkit.families.builtins.continuous.laplace import Laplace, configure_laplace_family

__all__ = [
    "Laplace",
    "configure_laplace_family",
]
