"""
Sample Containers
=================

Sampling strategies return draws wrapped in a :class:`Sample`. The only
implementation is :class:`ArraySample`, a column of draws with one row per
draw.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from typing import Any

    import numpy as np
    import numpy.typing as npt

    type SampleArray = npt.NDArray[np.integer[Any] | np.floating[Any]]


class Sample(Protocol):
    """Draws produced by a sampling strategy, exposed as an ``(n, d)`` array."""

    def __len__(self) -> int: ...
    @property
    def array(self) -> SampleArray: ...
    @property
    def shape(self) -> tuple[int, int]: ...


class ArraySample:
    """
    Sample backed by a 2D array of shape ``(n_draws, dimension)``.

    Discrete distributions fill it with ``int64`` values, continuous ones
    with ``float64``.

    Raises
    ------
    ValueError
        If ``data`` is not two-dimensional.
    """

    __slots__ = ("_data",)

    def __init__(self, data: SampleArray) -> None:
        if data.ndim != 2:
            raise ValueError(f"ArraySample expects a 2D array, got {data.ndim}D.")
        self._data = data

    def __len__(self) -> int:
        return int(self._data.shape[0])

    @property
    def array(self) -> SampleArray:
        return self._data

    @property
    def shape(self) -> tuple[int, int]:
        rows, cols = self._data.shape
        return int(rows), int(cols)

    def flatten(self) -> SampleArray:
        """
        Return the draws of a univariate sample as a 1D array.

        Raises
        ------
        ValueError
            If the sample has more than one column.
        """
        if self._data.shape[1] != 1:
            raise ValueError("Only univariate samples can be flattened.")
        return self._data.reshape(-1)
