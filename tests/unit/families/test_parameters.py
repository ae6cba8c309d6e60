from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import FrozenInstanceError
from typing import Any

import pytest

from probkit.errors import ParameterConstraintError
from probkit.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from probkit.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily
from tests.utils.mocks import MockSamplingStrategy


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:  # noqa: ANN001 (test signature)
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", None) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_free_function_parametrization_decorator(self) -> None:
        family = ParametricFamily(
            name="FreeDecoratorFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base", "kind"],
            distr_characteristics={},
            sampling_strategy=MockSamplingStrategy(),
        )

        @parametrization(family=family, name="kind")
        class Kind(Parametrization):
            value: float

        obj = Kind(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "kind"
        assert obj.parameters == {"value": 1.25}
        assert getattr(Kind, "__family__", None) is family
        assert getattr(Kind, "__param_name__", None) == "kind"
        assert hasattr(Kind, "__dataclass_fields__")
        assert family.get_parametrization("kind") is Kind

    def test_parametrizations_are_frozen(self) -> None:
        family = self.make_default_family()
        params = family.make_parameters(value=1.0)

        with pytest.raises(FrozenInstanceError):
            params.value = 2.0  # type: ignore[attr-defined, misc]

    def test_constraints_are_collected_and_validated(self) -> None:
        family = self.make_default_family()
        base_cls = family.parametrizations["base"]

        ok = base_cls(value=1.0)  # type: ignore[call-arg]
        assert [c.description for c in ok.constraints] == ["value >= 0"]
        ok.validate()

        with pytest.raises(ParameterConstraintError) as excinfo:
            base_cls(value=-0.5).validate()  # type: ignore[call-arg]
        assert excinfo.value.description == "value >= 0"
        assert isinstance(excinfo.value, ValueError)

    def test_static_constraint_is_rejected(self) -> None:
        family = ParametricFamily(
            name="StaticConstraintFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )

        with pytest.raises(TypeError):

            @parametrization(family=family, name="base")
            class Broken(Parametrization):
                value: float

                @staticmethod
                @constraint("never")
                def check() -> bool:
                    return False

    # ---------- Family-level conversion to base ----------

    def test_get_base_parameters_uses_family_logic(self) -> None:
        family = self.make_default_family()

        BaseCls = family.parametrizations["base"]
        AltCls = family.parametrizations["alt"]

        base_params = BaseCls(value=5.0)  # type: ignore[call-arg]
        assert family.to_base(base_params) is base_params

        alt_params = AltCls(value=3.0)  # type: ignore[call-arg]
        base_from_alt = family.to_base(alt_params)
        assert isinstance(base_from_alt, BaseCls)
        assert base_from_alt.value == 6.0  # type: ignore[attr-defined]

    def test_base_property_and_missing_base(self) -> None:
        family = self.make_default_family()
        assert family.base is family.parametrizations["base"]
        assert family.base_parametrization_name == "base"

        empty = ParametricFamily(
            name="Empty",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )
        with pytest.raises(ValueError):
            _ = empty.base

    def test_family_needs_a_parametrization(self) -> None:
        with pytest.raises(ValueError):
            ParametricFamily(
                name="NoParams",
                distr_type=UnivariateContinuous,
                distr_parametrizations=[],
                distr_characteristics={},
            )
