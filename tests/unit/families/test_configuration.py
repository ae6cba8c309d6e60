"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from probkit.families import Bernoulli
from probkit.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from probkit.families.registry import ParametricFamilyRegister
from probkit.types import FamilyName


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        """Test that configure_families_register returns a ParametricFamilyRegister."""
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_singleton(self):
        """Test that configure_families_register returns the same instance."""
        registry2 = configure_families_register()
        assert self.registry is registry2

    def test_families_registered(self):
        """Test that all built-in families are registered."""
        expected_families = {
            FamilyName.BERNOULLI,
            FamilyName.POISSON,
            FamilyName.GEOMETRIC,
            FamilyName.LAPLACE,
        }

        assert set(ParametricFamilyRegister.names()) == expected_families

    def test_reset_families_register(self):
        """Test that reset_families_register clears the cache."""
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        # They should be different instances after reset
        assert registry1 is not registry2
        assert ParametricFamilyRegister.contains(FamilyName.POISSON)

    def test_registry_singleton_pattern(self):
        """Test that ParametricFamilyRegister itself follows singleton pattern."""
        registry1 = ParametricFamilyRegister()
        registry2 = ParametricFamilyRegister()
        assert registry1 is registry2

    def test_registry_get_family_method(self):
        """Test the get method of ParametricFamilyRegister."""
        poisson_family = self.registry.get(FamilyName.POISSON)
        assert poisson_family is not None
        assert poisson_family.name == FamilyName.POISSON

        with pytest.raises(ValueError):
            self.registry.get("NonExistentFamily")

    def test_named_classes_share_registered_family(self):
        """Test that named distribution classes reuse the registered family."""
        family = self.registry.get(FamilyName.BERNOULLI)

        assert Bernoulli(0.3).family is family
        assert Bernoulli(0.7).family is family

    def test_named_class_configures_its_family_lazily(self):
        """Test that constructing a named class registers its family on demand."""
        reset_families_register()
        assert not ParametricFamilyRegister.contains(FamilyName.BERNOULLI)

        Bernoulli(0.5)
        assert ParametricFamilyRegister.contains(FamilyName.BERNOULLI)
        assert not ParametricFamilyRegister.contains(FamilyName.LAPLACE)
