from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import numpy as np
import pytest

from probkit.distributions.random_source import UniformSource
from probkit.distributions.sampling import ArraySample
from probkit.distributions.strategies import InversionSamplingStrategy
from tests.unit.distributions.test_basic import DistributionTestBase


class TestSampling(DistributionTestBase):
    def test_sample_uniform_ppf_only_shape_bounds_and_mean(self) -> None:
        distr = self.make_uniform_ppf_distribution(seed=11)

        n = 1000
        sample = distr.sample(n)

        assert sample.shape == (n, 1)
        arr = sample.array
        assert arr.dtype == np.float64
        assert np.isfinite(arr).all()
        assert ((arr >= 0.0) & (arr < 1.0)).all()

        mean = float(arr.mean())
        assert mean == pytest.approx(0.5, abs=0.1)

    def test_discrete_sample_is_integer_valued_and_in_support(self) -> None:
        distr = self.make_discrete_point_pmf_distribution(seed=5)

        sample = distr.sample(2000)

        assert sample.array.dtype == np.int64
        assert set(np.unique(sample.array).tolist()) <= {0, 1, 2}
        assert float(sample.array.mean()) == pytest.approx(1.1, abs=0.1)

    def test_draw_returns_python_scalar(self) -> None:
        strategy = InversionSamplingStrategy()

        value = strategy.draw(self.make_discrete_point_pmf_distribution(seed=3))
        assert type(value) is int

        value = strategy.draw(self.make_uniform_ppf_distribution(seed=3))
        assert type(value) is float

    def test_zero_size_sample_is_empty(self) -> None:
        sample = self.make_uniform_ppf_distribution(seed=1).sample(0)

        assert len(sample) == 0
        assert sample.shape == (0, 1)

    @pytest.mark.parametrize("n", [-1, 2.5, "3", True])
    def test_invalid_sample_size_raises(self, n: object) -> None:
        distr = self.make_uniform_ppf_distribution(seed=1)

        with pytest.raises(ValueError):
            distr.sample(n)  # type: ignore[arg-type]

    def test_sampling_follows_random_source(self) -> None:
        a = self.make_uniform_ppf_distribution(seed=42)
        b = self.make_uniform_ppf_distribution(seed=42)

        np.testing.assert_array_equal(a.sample(10).array, b.sample(10).array)

        a.random_source.seed(7)
        b.random_source.seed(7)
        np.testing.assert_array_equal(a.sample(5).array, b.sample(5).array)


class TestUniformSource:
    def test_same_seed_same_stream(self) -> None:
        first = UniformSource(123)
        second = UniformSource(123)

        assert [first.uniform() for _ in range(5)] == [second.uniform() for _ in range(5)]
        np.testing.assert_array_equal(first.uniforms(4), second.uniforms(4))

    def test_reseeding_restarts_the_stream(self) -> None:
        source = UniformSource(9)
        head = [source.uniform() for _ in range(3)]

        source.seed(9)
        assert [source.uniform() for _ in range(3)] == head
        assert source.seed_value == 9

    def test_values_lie_in_half_open_unit_interval(self) -> None:
        values = UniformSource(0).uniforms(10_000)

        assert values.shape == (10_000,)
        assert ((values >= 0.0) & (values < 1.0)).all()

    def test_entropy_seed_can_reproduce_stream(self) -> None:
        source = UniformSource()
        replay = UniformSource(source.seed_value)

        assert source.uniform() == replay.uniform()

    @pytest.mark.parametrize("bad_seed", [-1, 1.5, "1", None, True])
    def test_invalid_seed_raises(self, bad_seed: object) -> None:
        with pytest.raises(ValueError):
            UniformSource(0).seed(bad_seed)  # type: ignore[arg-type]


class TestArraySample:
    def test_requires_two_dimensions(self) -> None:
        with pytest.raises(ValueError):
            ArraySample(np.zeros(3))

    def test_flatten_keeps_draw_order(self) -> None:
        sample = ArraySample(np.arange(4).reshape(4, 1))

        assert len(sample) == 4
        assert sample.shape == (4, 1)
        assert sample.flatten().tolist() == [0, 1, 2, 3]

    def test_flatten_requires_univariate_sample(self) -> None:
        with pytest.raises(ValueError):
            ArraySample(np.zeros((2, 2))).flatten()


def test_entropy_seeding_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="probkit.distributions.random_source"):
        UniformSource()
        UniformSource(5)

    records = [r for r in caplog.records if r.name == "probkit.distributions.random_source"]
    assert len(records) == 1
    assert "OS entropy" in records[0].getMessage()
