"""Tests for the template family registry."""

import pytest

from daogen.codegen.generator import PackageLayout, TemplateFamily
from daogen.codegen.registry import DEFAULT_FAMILY, TemplateRegistry, default_registry
from daogen.codegen.spring import ModelGenerator, SpringJdbcFamily
from daogen.core.errors import ConfigurationError


class ModelsOnlyFamily(TemplateFamily):
    """A family emitting only value classes."""

    name = "models-only"

    def generators(self):
        return [ModelGenerator(self.layout)]


class TestTemplateRegistry:
    """Tests for TemplateRegistry."""

    def test_register_and_get(self):
        registry = TemplateRegistry()
        registry.register(ModelsOnlyFamily)

        assert registry.get("models-only") is ModelsOnlyFamily
        assert "models-only" in registry
        assert len(registry) == 1

    def test_unregister(self):
        registry = TemplateRegistry()
        registry.register(ModelsOnlyFamily)

        registry.unregister("models-only")
        registry.unregister("never-registered")

        assert registry.get("models-only") is None
        assert len(registry) == 0

    def test_list(self):
        registry = default_registry()
        registry.register(ModelsOnlyFamily)

        assert registry.list() == [DEFAULT_FAMILY, "models-only"]

    def test_create(self, layout: PackageLayout):
        family = default_registry().create(DEFAULT_FAMILY, layout)

        assert isinstance(family, SpringJdbcFamily)
        assert family.layout is layout

    def test_create_unknown(self, layout: PackageLayout):
        with pytest.raises(ConfigurationError) as exc_info:
            default_registry().create("hibernate", layout)

        error = exc_info.value
        assert error.details["key"] == "generator.template"
        assert "spring-jdbc" in error.hints[0]
