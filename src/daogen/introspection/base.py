"""
Schema provider interface.

A schema provider exposes table and column metadata in discovery order.
The introspector only depends on this interface, so any metadata source
(a live database, a fixture, a dump) can drive generation.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from pydantic import BaseModel


class RawColumn(BaseModel):
    """Column metadata as reported by a schema provider."""

    name: str
    sql_type_name: str
    sql_type_code: int = 0
    is_auto_increment: bool = False

    model_config = {"frozen": True}


class SchemaProvider(ABC):
    """
    Abstract source of table and column metadata.

    Both methods must return results in a stable order; generated output is
    only reproducible if the provider is.
    """

    @abstractmethod
    def list_tables(self) -> list[str]:
        """Return the names of all tables, in discovery order."""
        ...

    @abstractmethod
    def list_columns(self, table: str) -> list[RawColumn]:
        """Return the columns of a table, in discovery order."""
        ...


class StaticSchemaProvider(SchemaProvider):
    """
    In-memory schema provider.

    Example:
        provider = StaticSchemaProvider({
            "user": [
                RawColumn(name="id", sql_type_name="INT", is_auto_increment=True),
                RawColumn(name="user_name", sql_type_name="VARCHAR"),
            ],
        })
    """

    def __init__(self, tables: Mapping[str, Iterable[RawColumn]]) -> None:
        # Mapping iteration order is insertion order
        self._tables: dict[str, list[RawColumn]] = {
            name: list(columns) for name, columns in tables.items()
        }

    def list_tables(self) -> list[str]:
        return list(self._tables)

    def list_columns(self, table: str) -> list[RawColumn]:
        return list(self._tables.get(table, []))
