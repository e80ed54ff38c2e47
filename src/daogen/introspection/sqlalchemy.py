"""
SQLAlchemy schema provider.

Reflects table and column metadata from a live database through
``sqlalchemy.inspect``.
"""

from typing import Any

from sqlalchemy import Engine, inspect
from sqlalchemy.engine.reflection import Inspector
from sqlalchemy.exc import CompileError, SQLAlchemyError

from daogen.core.errors import ConnectionFailureError
from daogen.introspection.base import RawColumn, SchemaProvider
from daogen.introspection.introspector import base_type_name

# java.sql.Types codes, keyed by base type name
SQL_TYPE_CODES: dict[str, int] = {
    "BIT": -7,
    "TINYINT": -6,
    "BIGINT": -5,
    "TEXT": -1,
    "CHAR": 1,
    "NUMERIC": 2,
    "DECIMAL": 3,
    "INT": 4,
    "INTEGER": 4,
    "SMALLINT": 5,
    "FLOAT": 6,
    "REAL": 7,
    "DOUBLE": 8,
    "VARCHAR": 12,
    "BOOLEAN": 16,
    "DATE": 91,
    "TIME": 92,
    "DATETIME": 93,
    "TIMESTAMP": 93,
}
OTHER_TYPE_CODE = 1111


class SQLAlchemySchemaProvider(SchemaProvider):
    """
    Schema provider backed by SQLAlchemy reflection.

    Table order is the order the dialect reports; column order is the
    table's declared column order.
    """

    def __init__(self, engine: Engine, schema: str | None = None) -> None:
        """
        Initialize with an engine.

        Args:
            engine: SQLAlchemy engine for the database to reflect
            schema: Optional schema name; the default schema when None
        """
        self.engine = engine
        self.schema = schema
        self._inspector: Inspector | None = None

    @property
    def inspector(self) -> Inspector:
        if self._inspector is None:
            try:
                self._inspector = inspect(self.engine)
            except SQLAlchemyError as e:
                raise self._connection_failure(e) from e
        return self._inspector

    def list_tables(self) -> list[str]:
        try:
            return list(self.inspector.get_table_names(schema=self.schema))
        except SQLAlchemyError as e:
            raise self._connection_failure(e) from e

    def list_columns(self, table: str) -> list[RawColumn]:
        try:
            columns = self.inspector.get_columns(table, schema=self.schema)
            pk = self.inspector.get_pk_constraint(table, schema=self.schema)
        except SQLAlchemyError as e:
            raise self._connection_failure(e) from e

        pk_columns = list(pk.get("constrained_columns") or [])
        return [self._raw_column(column, pk_columns) for column in columns]

    def _raw_column(self, column: dict[str, Any], pk_columns: list[str]) -> RawColumn:
        type_name = self._type_name(column["type"])
        return RawColumn(
            name=column["name"],
            sql_type_name=type_name,
            sql_type_code=SQL_TYPE_CODES.get(base_type_name(type_name), OTHER_TYPE_CODE),
            is_auto_increment=self._is_auto_increment(column, type_name, pk_columns),
        )

    def _type_name(self, sa_type: Any) -> str:
        """Render a reflected type the way the database spells it."""
        try:
            return sa_type.compile(dialect=self.engine.dialect)
        except CompileError:
            return type(sa_type).__name__.upper()

    def _is_auto_increment(
        self,
        column: dict[str, Any],
        type_name: str,
        pk_columns: list[str],
    ) -> bool:
        if column.get("autoincrement") is True:
            return True
        # SQLite does not report autoincrement; a lone INTEGER primary key
        # is an alias for the rowid and is assigned on insert
        return (
            self.engine.dialect.name == "sqlite"
            and pk_columns == [column["name"]]
            and base_type_name(type_name) == "INTEGER"
        )

    def _connection_failure(self, error: SQLAlchemyError) -> ConnectionFailureError:
        target = self.engine.url.render_as_string(hide_password=True)
        return ConnectionFailureError(target, str(error.__cause__ or error))
