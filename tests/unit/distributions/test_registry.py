from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import pytest

from probkit.distributions.registry import (
    DistributionTypeRegister,
    GenericCharacteristicRegister,
    GraphInvariantError,
    distribution_type_register,
    reset_distribution_type_register,
)
from probkit.types import (
    CharacteristicName,
    EuclideanDistributionType,
    Kind,
    UnivariateContinuous,
    UnivariateDiscrete,
)
from tests.unit.distributions.test_basic import DistributionTestBase


class TestDefaultConfiguration(DistributionTestBase):
    def test_discrete_graph_has_pmf_as_only_definitive_node(self) -> None:
        reg = distribution_type_register().get(UnivariateDiscrete)

        assert reg.is_definitive(CharacteristicName.PMF)
        assert not reg.is_definitive(CharacteristicName.CDF)
        assert not reg.is_definitive(CharacteristicName.PPF)
        assert reg.all_nodes() == {
            CharacteristicName.PMF,
            CharacteristicName.CDF,
            CharacteristicName.PPF,
        }

    def test_discrete_paths_lead_away_from_pmf_only(self) -> None:
        reg = distribution_type_register().get(UnivariateDiscrete)

        path_cdf = reg.find_path(CharacteristicName.PMF, CharacteristicName.CDF)
        assert path_cdf is not None
        assert [m.target for m in path_cdf] == [CharacteristicName.CDF]

        path_ppf = reg.find_path(CharacteristicName.PMF, CharacteristicName.PPF)
        assert path_ppf is not None
        assert [m.target for m in path_ppf] == [CharacteristicName.PPF]

        assert reg.find_path(CharacteristicName.CDF, CharacteristicName.PMF) is None
        assert reg.find_path(CharacteristicName.PMF, CharacteristicName.PDF) is None

    def test_continuous_graph_is_all_definitive_without_edges(self) -> None:
        reg = distribution_type_register().get(UnivariateContinuous)

        for name in (CharacteristicName.PDF, CharacteristicName.CDF, CharacteristicName.PPF):
            assert reg.is_definitive(name)

        assert reg.find_path(CharacteristicName.PDF, CharacteristicName.CDF) is None
        assert reg.find_path(CharacteristicName.CDF, CharacteristicName.CDF) == []

    def test_types_compare_by_value(self) -> None:
        register = distribution_type_register()
        dt = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)

        assert register.get(dt) is register.get(UnivariateDiscrete)

    def test_register_is_cached_and_resettable(self) -> None:
        first = distribution_type_register()
        assert distribution_type_register() is first
        assert DistributionTypeRegister() is first

        reset_distribution_type_register()
        second = distribution_type_register()
        assert second is not first


class TestGenericCharacteristicRegister(DistributionTestBase):
    def make_register(self) -> GenericCharacteristicRegister:
        return GenericCharacteristicRegister(
            distribution_type=EuclideanDistributionType(kind=Kind.DISCRETE, dimension=2)
        )

    def test_edges_without_definitive_node_are_rejected(self) -> None:
        reg = self.make_register()

        with pytest.raises(GraphInvariantError):
            reg.add_conversion(self.make_fictitious_computation_method(target="b", sources=["a"]))

    def test_non_unary_method_is_rejected(self) -> None:
        reg = self.make_register()
        reg.register_definitive("a", "b")

        with pytest.raises(GraphInvariantError):
            reg.add_conversion(
                self.make_fictitious_computation_method(target="c", sources=["a", "b"])
            )

    def test_edge_back_to_definitive_node_is_rejected(self) -> None:
        reg = self.make_register()
        reg.register_definitive("a")
        reg.add_conversion(self.make_fictitious_computation_method(target="b", sources=["a"]))

        with pytest.raises(GraphInvariantError):
            reg.add_conversion(self.make_fictitious_computation_method(target="a", sources=["b"]))

    def test_unreachable_indefinitive_node_is_rejected(self) -> None:
        reg = self.make_register()
        reg.register_definitive("a")

        with pytest.raises(GraphInvariantError):
            reg.add_conversion(self.make_fictitious_computation_method(target="c", sources=["b"]))

    def test_find_path_is_shortest_chain(self) -> None:
        reg = self.make_register()
        reg.register_definitive("a")
        reg.add_conversion(self.make_fictitious_computation_method(target="b", sources=["a"]))
        reg.add_conversion(self.make_fictitious_computation_method(target="c", sources=["b"]))
        reg.add_conversion(self.make_fictitious_computation_method(target="d", sources=["c"]))
        reg.add_conversion(self.make_fictitious_computation_method(target="d", sources=["a"]))

        path = reg.find_path("a", "d")
        assert path is not None
        assert [(m.sources[0], m.target) for m in path] == [("a", "d")]

        path = reg.find_path("a", "c")
        assert path is not None
        assert [(m.sources[0], m.target) for m in path] == [("a", "b"), ("b", "c")]

        assert reg.find_path("d", "a") is None
        assert reg.find_path("a", "missing") is None
