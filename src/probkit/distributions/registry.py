"""
Characteristic Graph Registry
=============================

A directed graph over characteristic names for a fixed
:class:`~probkit.types.DistributionType`.

- Nodes: characteristic names (``pmf``, ``cdf``, ...).
- Edges: unary :class:`~probkit.distributions.computation.ComputationMethod`
  (``1 source -> 1 target``).

A node is *definitive* if a distribution may provide it as its analytical
base. The registry keeps two invariants:

1. There is at least one definitive node.
2. Every indefinitive node is reachable from a definitive node, and no
   indefinitive node leads back to a definitive one.

The default configuration covers the univariate cases used by the built-in
families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections import deque
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Any, ClassVar, Self

from probkit.distributions.computation import ComputationMethod
from probkit.distributions.fitters import fit_pmf_to_cdf_1D, fit_pmf_to_ppf_1D
from probkit.types import (
    CharacteristicName,
    DistributionType,
    GenericCharacteristicName,
    UnivariateContinuous,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from collections.abc import Iterable


class GraphInvariantError(RuntimeError):
    """Raised when the characteristic graph invariants are violated."""


@dataclass(slots=True)
class GenericCharacteristicRegister:
    """
    Directed characteristic graph for a fixed :class:`DistributionType`.

    Attributes
    ----------
    distribution_type : DistributionType
        Distribution type the graph is built for.
    """

    distribution_type: DistributionType
    _adjacency: dict[
        GenericCharacteristicName, dict[GenericCharacteristicName, ComputationMethod[Any, Any]]
    ] = field(default_factory=dict, repr=False)
    _definitive: set[GenericCharacteristicName] = field(default_factory=set, repr=False)

    def register_definitive(self, *names: GenericCharacteristicName) -> None:
        """Mark nodes as definitive."""
        for name in names:
            self._definitive.add(name)
            self._adjacency.setdefault(name, {})
        self._validate_invariants()

    def add_conversion(self, method: ComputationMethod[Any, Any]) -> None:
        """
        Add a unary conversion edge ``source -> target``.

        Raises
        ------
        GraphInvariantError
            If the method is not unary, or the edge breaks the invariants.
        """
        if len(method.sources) != 1:
            raise GraphInvariantError(
                "Only unary methods are supported for edges (1 source -> 1 target)."
            )
        source = method.sources[0]
        self._adjacency.setdefault(source, {})[method.target] = method
        self._adjacency.setdefault(method.target, {})
        self._validate_invariants()

    def is_definitive(self, name: GenericCharacteristicName) -> bool:
        return name in self._definitive

    def all_nodes(self) -> frozenset[GenericCharacteristicName]:
        return frozenset(self._adjacency)

    def find_path(
        self,
        src: GenericCharacteristicName,
        dst: GenericCharacteristicName,
    ) -> list[ComputationMethod[Any, Any]] | None:
        """
        Find a conversion chain ``src -> ... -> dst`` using BFS.

        Returns
        -------
        list[ComputationMethod] or None
            Conversions in application order, ``[]`` if ``src == dst`` and
            ``None`` if ``dst`` is unreachable.
        """
        if src == dst:
            return []

        parent: dict[
            GenericCharacteristicName, tuple[GenericCharacteristicName, ComputationMethod[Any, Any]]
        ] = {}
        visited = {src}
        queue: deque[GenericCharacteristicName] = deque([src])

        while queue:
            node = queue.popleft()
            for nxt, method in self._adjacency.get(node, {}).items():
                if nxt in visited:
                    continue
                visited.add(nxt)
                parent[nxt] = (node, method)
                if nxt == dst:
                    path: list[ComputationMethod[Any, Any]] = []
                    cur = dst
                    while cur != src:
                        prev, m = parent[cur]
                        path.append(m)
                        cur = prev
                    path.reverse()
                    return path
                queue.append(nxt)
        return None

    def _reachable_from(
        self, starts: Iterable[GenericCharacteristicName]
    ) -> set[GenericCharacteristicName]:
        seen = set(starts)
        queue = deque(seen)
        while queue:
            for nxt in self._adjacency.get(queue.popleft(), {}):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    def _validate_invariants(self) -> None:
        if not self._definitive:
            raise GraphInvariantError("There must be at least one definitive characteristic.")

        indefinitive = self.all_nodes() - self._definitive
        if not indefinitive <= self._reachable_from(self._definitive):
            raise GraphInvariantError(
                "Every indefinitive node must be reachable from some definitive node."
            )
        if self._reachable_from(indefinitive) & self._definitive:
            raise GraphInvariantError(
                "No path from any indefinitive node back to a definitive node is allowed."
            )


class DistributionTypeRegister:
    """Singleton-like registry that maps :class:`DistributionType` to its graph."""

    _instance: ClassVar[Self | None] = None
    _register_kinds: dict[DistributionType, GenericCharacteristicRegister]

    def __new__(cls) -> Self:
        if cls._instance is None:
            self = super().__new__(cls)
            self._register_kinds = {}
            cls._instance = self
        return cls._instance

    def get(self, distribution_type: DistributionType) -> GenericCharacteristicRegister:
        """Get (or create) the graph for a distribution type."""
        reg = self._register_kinds.get(distribution_type)
        if reg is None:
            reg = GenericCharacteristicRegister(distribution_type=distribution_type)
            self._register_kinds[distribution_type] = reg
        return reg

    __call__ = get


def _configure(reg: DistributionTypeRegister) -> None:
    """
    Default configuration.

    Univariate discrete: ``pmf`` is definitive, ``cdf`` and ``ppf`` are
    derived from it. Univariate continuous: ``pdf``, ``cdf`` and ``ppf`` are
    all definitive and must be provided analytically.
    """
    reg1D = reg.get(UnivariateDiscrete)
    reg1D.register_definitive(CharacteristicName.PMF)
    reg1D.add_conversion(
        ComputationMethod[float, float](
            target=CharacteristicName.CDF,
            sources=[CharacteristicName.PMF],
            fitter=fit_pmf_to_cdf_1D,
        )
    )
    reg1D.add_conversion(
        ComputationMethod[float, float](
            target=CharacteristicName.PPF,
            sources=[CharacteristicName.PMF],
            fitter=fit_pmf_to_ppf_1D,
        )
    )

    reg1C = reg.get(UnivariateContinuous)
    reg1C.register_definitive(
        CharacteristicName.PDF, CharacteristicName.CDF, CharacteristicName.PPF
    )


@lru_cache(maxsize=1)
def distribution_type_register() -> DistributionTypeRegister:
    """Return the configured :class:`DistributionTypeRegister`."""
    reg = DistributionTypeRegister()
    _configure(reg)
    return reg


def reset_distribution_type_register() -> None:
    """Drop the configured register (test helper)."""
    distribution_type_register.cache_clear()
    DistributionTypeRegister._instance = None
