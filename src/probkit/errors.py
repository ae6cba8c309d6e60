"""
Error Kinds
===========

Exceptions raised by characteristics and parametrizations.

The domain-related errors subclass :class:`ValueError` and the search error
subclasses :class:`RuntimeError`, so callers catching the builtin types keep
working.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DomainError(ValueError):
    """Argument lies outside the domain of a characteristic (e.g. ``pmf(2)`` of Bernoulli)."""


class ProbabilityOutOfRangeError(ValueError):
    """Probability passed to a quantile function lies outside ``[0, 1]``."""

    def __init__(self, q: float) -> None:
        super().__init__(f"Probability must be in [0, 1], got {q!r}")
        self.q = q


class ParameterConstraintError(ValueError):
    """A parametrization constraint does not hold."""

    def __init__(self, description: str) -> None:
        super().__init__(f'Constraint "{description}" does not hold')
        self.description = description


class QuantileSearchError(RuntimeError):
    """A bounded quantile search stopped before reaching the requested probability."""


__all__ = [
    "DomainError",
    "ProbabilityOutOfRangeError",
    "ParameterConstraintError",
    "QuantileSearchError",
]
