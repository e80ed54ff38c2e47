"""
Registry of template families.
"""

from __future__ import annotations

from daogen.codegen.generator import PackageLayout, TemplateFamily
from daogen.core.errors import ConfigurationError

DEFAULT_FAMILY = "spring-jdbc"


class TemplateRegistry:
    """
    Registry for template families, keyed by family name.

    A run uses exactly one family, looked up by the ``generator.template``
    setting.
    """

    def __init__(self) -> None:
        self._families: dict[str, type[TemplateFamily]] = {}

    def register(self, family: type[TemplateFamily]) -> None:
        """Register a family class."""
        self._families[family.name] = family

    def unregister(self, name: str) -> None:
        """Unregister a family by name."""
        self._families.pop(name, None)

    def get(self, name: str) -> type[TemplateFamily] | None:
        """Get a family class by name."""
        return self._families.get(name)

    def list(self) -> list[str]:
        """List all registered family names."""
        return list(self._families.keys())

    def create(self, name: str, layout: PackageLayout) -> TemplateFamily:
        """
        Instantiate a family for an output layout.

        Raises:
            ConfigurationError: If no family is registered under the name
        """
        family = self.get(name)
        if family is None:
            raise ConfigurationError(
                f"Unknown template family '{name}'",
                key="generator.template",
                hints=[f"Available families: {', '.join(self.list())}"],
            )
        return family(layout)

    def __len__(self) -> int:
        return len(self._families)

    def __contains__(self, name: str) -> bool:
        return name in self._families


def default_registry() -> TemplateRegistry:
    """Registry with the built-in families."""
    from daogen.codegen.spring import SpringJdbcFamily

    registry = TemplateRegistry()
    registry.register(SpringJdbcFamily)
    return registry
