"""
Shared type definitions for daogen.

The descriptor model is built once by the introspector and is read-only
for the rest of a generation run.
"""

from enum import Enum

from pydantic import BaseModel

from daogen.core.errors import AmbiguousPrimaryKeyError


class SemanticType(str, Enum):
    """Generator-internal column type, independent of any target language."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DOUBLE = "double"
    LONG_INTEGER = "long-integer"
    FLOAT = "float"
    TIMESTAMP = "timestamp"


class ColumnDescriptor(BaseModel):
    """A database column and its generated-code identity."""

    database_column_name: str
    property_name: str
    capitalized_property_name: str
    semantic_type: SemanticType
    sql_type_code: int
    is_auto_increment: bool = False

    model_config = {"frozen": True}


class NoPrimaryKey(BaseModel):
    """The table has no autoincrement column."""

    model_config = {"frozen": True}


class SinglePrimaryKey(BaseModel):
    """The table has exactly one autoincrement column."""

    column: ColumnDescriptor

    model_config = {"frozen": True}


PrimaryKey = NoPrimaryKey | SinglePrimaryKey


class TableDescriptor(BaseModel):
    """A database table, its generated class name and its ordered columns."""

    database_table_name: str
    generated_class_name: str
    columns: tuple[ColumnDescriptor, ...] = ()

    model_config = {"frozen": True}

    @property
    def primary_key(self) -> PrimaryKey:
        """
        Resolve the table's primary key variant.

        Raises:
            AmbiguousPrimaryKeyError: If more than one column is autoincrement
        """
        auto = [c for c in self.columns if c.is_auto_increment]
        if len(auto) > 1:
            raise AmbiguousPrimaryKeyError(
                self.database_table_name,
                [c.database_column_name for c in auto],
            )
        if auto:
            return SinglePrimaryKey(column=auto[0])
        return NoPrimaryKey()

    @property
    def key_column(self) -> ColumnDescriptor | None:
        """The autoincrement column, or None when the table has none."""
        pk = self.primary_key
        return pk.column if isinstance(pk, SinglePrimaryKey) else None

    @property
    def value_columns(self) -> tuple[ColumnDescriptor, ...]:
        """Every non-autoincrement column, in column order."""
        return tuple(c for c in self.columns if not c.is_auto_increment)


class SchemaModel(BaseModel):
    """All tables for one generation run, in provider discovery order."""

    tables: tuple[TableDescriptor, ...] = ()
    warnings: tuple[str, ...] = ()

    model_config = {"frozen": True}

    def get_table(self, name: str) -> TableDescriptor | None:
        """Get a table by its database name."""
        for table in self.tables:
            if table.database_table_name == name:
                return table
        return None

    def list_tables(self) -> list[str]:
        """List all database table names."""
        return [t.database_table_name for t in self.tables]
