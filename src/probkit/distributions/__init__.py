"""
Distributions subpackage

Interfaces and default implementations shared by all distribution families:

- distribution protocol (:mod:`.distribution`);
- discrete ``pmf`` conversions (:mod:`.fitters`);
- characteristic graph registry (:mod:`.registry`);
- per-instance uniform random source (:mod:`.random_source`);
- sample containers (:mod:`.sampling`);
- pluggable computation and sampling strategies (:mod:`.strategies`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from .distribution import Distribution
from .random_source import UniformSource
from .registry import GraphInvariantError, distribution_type_register
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    InversionSamplingStrategy,
    SamplingStrategy,
)
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    ExplicitTableDiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    # distribution
    "Distribution",
    # randomness and sampling
    "UniformSource",
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "InversionSamplingStrategy",
    # registry
    "GraphInvariantError",
    "distribution_type_register",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
