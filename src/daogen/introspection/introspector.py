"""
Schema introspection.

Builds the descriptor model from a schema provider.
"""

import re

from daogen.core.errors import PropertyNameConflictError, UnsupportedColumnTypeError
from daogen.core.naming import capitalize, class_name, normalize
from daogen.core.types import ColumnDescriptor, SchemaModel, SemanticType, TableDescriptor
from daogen.introspection.base import RawColumn, SchemaProvider
from daogen.logging import get_logger

logger = get_logger("daogen.introspection")

DEFAULT_SEMANTIC_TYPE = SemanticType.STRING

# SQL type name -> semantic type
TYPE_TABLE: dict[str, SemanticType] = {
    "VARCHAR": SemanticType.STRING,
    "TEXT": SemanticType.STRING,
    "INT": SemanticType.INTEGER,
    "TINYINT": SemanticType.BOOLEAN,
    "DOUBLE": SemanticType.DOUBLE,
    "DECIMAL": SemanticType.LONG_INTEGER,
    "FLOAT": SemanticType.FLOAT,
    "DATETIME": SemanticType.TIMESTAMP,
    # Names reported for the same storage classes by other dialects
    "CHAR": SemanticType.STRING,
    "INTEGER": SemanticType.INTEGER,
    "BOOLEAN": SemanticType.BOOLEAN,
    "BIGINT": SemanticType.LONG_INTEGER,
    "REAL": SemanticType.FLOAT,
    "TIMESTAMP": SemanticType.TIMESTAMP,
}

_TYPE_ARGS = re.compile(r"\(.*?\)")


def base_type_name(sql_type_name: str) -> str:
    """
    Reduce a reported type name to its lookup key.

    Drops length/precision arguments and modifiers such as ``UNSIGNED``:
    ``"varchar(255)"`` -> ``"VARCHAR"``, ``"INT(11) UNSIGNED"`` -> ``"INT"``.
    """
    stripped = _TYPE_ARGS.sub("", sql_type_name).strip().upper()
    return stripped.split()[0] if stripped else ""


def lookup_semantic_type(sql_type_name: str) -> SemanticType | None:
    """Look up a type name; None when the name has no table entry."""
    return TYPE_TABLE.get(base_type_name(sql_type_name))


def check_property_names(table: TableDescriptor) -> None:
    """
    Verify every column of a table has its own non-empty property name.

    Raises:
        PropertyNameConflictError: For the first empty or shared name, in
            column order
    """
    by_property: dict[str, list[str]] = {}
    for column in table.columns:
        by_property.setdefault(column.property_name, []).append(column.database_column_name)

    for property_name, columns in by_property.items():
        if not property_name or len(columns) > 1:
            raise PropertyNameConflictError(table.database_table_name, property_name, columns)


class SchemaIntrospector:
    """
    Turns provider metadata into a SchemaModel.

    Tables and columns keep the provider's order. Unrecognized column types
    are not fatal: they are logged, recorded in ``SchemaModel.warnings`` and
    mapped to the default semantic type.
    """

    def __init__(self, provider: SchemaProvider) -> None:
        self.provider = provider
        self._warnings: list[str] = []

    def introspect(self) -> SchemaModel:
        """
        Introspect every table the provider lists.

        Raises:
            AmbiguousPrimaryKeyError: If a table has several autoincrement columns
            PropertyNameConflictError: If column names collide after normalization
        """
        self._warnings = []
        tables = []

        for table_name in self.provider.list_tables():
            table = self._introspect_table(table_name)
            # Both raise before any file is written
            _ = table.primary_key
            check_property_names(table)
            tables.append(table)

        logger.info("Introspected schema", tables=len(tables), warnings=len(self._warnings))
        return SchemaModel(tables=tuple(tables), warnings=tuple(self._warnings))

    def _introspect_table(self, table_name: str) -> TableDescriptor:
        columns = tuple(
            self._introspect_column(table_name, raw)
            for raw in self.provider.list_columns(table_name)
        )
        logger.info("Discovered table", table=table_name, columns=len(columns))

        return TableDescriptor(
            database_table_name=table_name,
            generated_class_name=class_name(table_name),
            columns=columns,
        )

    def _introspect_column(self, table_name: str, raw: RawColumn) -> ColumnDescriptor:
        semantic_type = lookup_semantic_type(raw.sql_type_name)
        if semantic_type is None:
            semantic_type = DEFAULT_SEMANTIC_TYPE
            diagnostic = UnsupportedColumnTypeError(
                table_name, raw.name, raw.sql_type_name, DEFAULT_SEMANTIC_TYPE.value
            )
            logger.warning(diagnostic.message, table=table_name, column=raw.name)
            self._warnings.append(diagnostic.message)

        property_name = normalize(raw.name)
        logger.debug(
            "Mapped column",
            table=table_name,
            column=raw.name,
            sql_type_name=raw.sql_type_name,
            semantic_type=semantic_type.value,
        )

        return ColumnDescriptor(
            database_column_name=raw.name,
            property_name=property_name,
            capitalized_property_name=capitalize(property_name),
            semantic_type=semantic_type,
            sql_type_code=raw.sql_type_code,
            is_auto_increment=raw.is_auto_increment,
        )


def introspect(provider: SchemaProvider) -> SchemaModel:
    """Build the SchemaModel for every table of a provider."""
    return SchemaIntrospector(provider).introspect()
