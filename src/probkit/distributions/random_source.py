"""
Uniform Random Source
=====================

Per-instance source of uniform variates on ``[0, 1)`` backing inversion
sampling.

Each distribution owns exactly one :class:`UniformSource`. A source is seeded
once at construction, either from an explicit integer or from OS entropy, and
may be reseeded deterministically with :meth:`UniformSource.seed`.

Notes
-----
The source is not synchronized. Concurrent draws from one source must be
serialized by the caller.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt

logger = logging.getLogger(__name__)


class UniformSource:
    """
    Seedable generator of uniform variates on ``[0, 1)``.

    Parameters
    ----------
    seed : int or None, default None
        Initial seed. ``None`` draws fresh entropy from the operating system,
        so default sources are not reproducible.

    Attributes
    ----------
    seed_value : int
        The seed (or entropy) the generator was last initialized with.
        Passing it to :meth:`seed` reproduces the stream.
    """

    __slots__ = ("_generator", "seed_value")

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int(np.random.SeedSequence().entropy)  # type: ignore[arg-type]
            logger.debug("Seeding uniform source from OS entropy: %d", seed)
        self.seed(seed)

    def seed(self, s: int) -> None:
        """
        Reset the generator deterministically.

        Parameters
        ----------
        s : int
            Non-negative integer seed.

        Raises
        ------
        ValueError
            If ``s`` is negative or not an integer.
        """
        if isinstance(s, bool) or not isinstance(s, int | np.integer):
            raise ValueError(f"Seed must be an integer, got {type(s).__name__}")
        if s < 0:
            raise ValueError(f"Seed must be non-negative, got {s}")
        self.seed_value = int(s)
        self._generator = np.random.default_rng(self.seed_value)

    def uniform(self) -> float:
        """Draw one variate from ``[0, 1)``."""
        return float(self._generator.random())

    def uniforms(self, n: int) -> npt.NDArray[np.floating[Any]]:
        """Draw ``n`` i.i.d. variates from ``[0, 1)``."""
        return self._generator.random(n)
