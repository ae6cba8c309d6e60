"""
Supports
========

Support objects describe where a distribution puts its mass. Discrete supports
additionally provide the ordered traversal that the ``pmf``-based fitters
need.

Classes
-------
ContinuousSupport
    Interval on the real line.
ExplicitTableDiscreteSupport
    Finite, explicitly provided set of points.
IntegerLatticeDiscreteSupport
    Lattice ``{ residue + n * modulus }`` optionally bounded by ``min_k`` and
    ``max_k``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import floor
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from probkit.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Number]: ...

    def iter_leq(self, x: Number) -> Iterator[Number]: ...

    def first(self) -> Number | None: ...


class ExplicitTableDiscreteSupport(DiscreteSupport):
    """
    Finite discrete support given by an explicit list of points.

    Parameters
    ----------
    points : Iterable[Number]
        Support points; sorted and de-duplicated on construction.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Number]) -> None:
        arr = np.unique(np.asarray(list(points)))
        if arr.size == 0:
            raise ValueError("Points must be non-empty")
        self._points = arr

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        result = np.isin(np.asarray(x), self._points)
        if np.ndim(x) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def iter_points(self) -> Iterator[Number]:
        return iter(self._points.tolist())

    def iter_leq(self, x: Number) -> Iterator[Number]:
        stop = int(np.searchsorted(self._points, x, side="right"))
        return iter(self._points[:stop].tolist())

    def first(self) -> Number:
        return cast(Number, self._points[0].item())

    @property
    def points(self) -> NumericArray:
        return cast(NumericArray, self._points.copy())

    __iter__ = iter_points


@dataclass(slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Integer lattice ``{ residue + n * modulus | n ∈ Z }`` clipped to
    ``[min_k, max_k]`` (either bound may be ``None``).

    Parameters
    ----------
    residue : int
        Lattice origin.
    modulus : int
        Positive lattice step.
    min_k, max_k : int or None
        Inclusive bounds.
    """

    residue: int
    modulus: int
    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError("modulus must be a positive integer.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        v = np.where(finite, np.floor(np.where(finite, xf, 0.0)), 0.0).astype(np.int64)

        mask = finite & (xf == v)
        if self.min_k is not None:
            mask &= v >= self.min_k
        if self.max_k is not None:
            mask &= v <= self.max_k
        mask &= ((v - self.residue) % self.modulus) == 0

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def first(self) -> int | None:
        """Smallest lattice point, ``None`` for a left-unbounded or empty lattice."""
        if self.min_k is None:
            return None
        first = self.min_k + (self.residue - self.min_k) % self.modulus
        if self.max_k is not None and first > self.max_k:
            return None
        return first

    def iter_points(self) -> Iterator[int]:
        """
        Iterate over lattice points in ascending order.

        Raises
        ------
        RuntimeError
            If the lattice is unbounded on the left.
        """
        first = self.first()
        if self.min_k is None:
            raise RuntimeError(
                "Cannot iterate a left-unbounded IntegerLatticeDiscreteSupport. "
                "Provide min_k to enable enumeration."
            )

        def _gen() -> Iterator[int]:
            current = first
            while current is not None and (self.max_k is None or current <= self.max_k):
                yield current
                current += self.modulus

        return _gen()

    def iter_leq(self, x: Number) -> Iterator[int]:
        """Iterate over lattice points ``<= x``."""
        upper = float(x)
        if self.max_k is not None:
            upper = min(upper, self.max_k)
        if upper == float("inf"):
            raise RuntimeError("iter_leq(inf) does not terminate on a right-unbounded lattice.")
        threshold = floor(upper) if upper > float("-inf") else None

        def _gen() -> Iterator[int]:
            if threshold is None:
                return
            for point in self.iter_points():
                if point > threshold:
                    break
                yield point

        return _gen()

    @property
    def is_left_bounded(self) -> bool:
        return self.min_k is not None

    @property
    def is_right_bounded(self) -> bool:
        return self.max_k is not None

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
