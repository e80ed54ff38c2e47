"""
Parameterized insert and update statements.

The SQL text and the parameter bind order come out of the same plan, so
generated statement-population code binds columns in exactly the order
the placeholders appear in the SQL.
"""

from pydantic import BaseModel

from daogen.core.types import ColumnDescriptor, SemanticType, TableDescriptor

PLACEHOLDER = "?"
TIMESTAMP_DEFAULT = "now()"


class BoundParameter(BaseModel):
    """A placeholder position and the column whose property fills it."""

    index: int
    column: ColumnDescriptor

    model_config = {"frozen": True}


class StatementPlan(BaseModel):
    """
    A statement's SQL text and its bindings.

    ``columns`` lists the columns in the order they appear in the SQL;
    ``parameters`` lists the bound placeholders, 1-based, in SQL order.
    """

    sql: str
    columns: tuple[ColumnDescriptor, ...]
    parameters: tuple[BoundParameter, ...]

    model_config = {"frozen": True}

    @property
    def bound_columns(self) -> list[str]:
        """Database column names in bind order."""
        return [p.column.database_column_name for p in self.parameters]


def _bind(columns: list[ColumnDescriptor]) -> tuple[BoundParameter, ...]:
    return tuple(
        BoundParameter(index=i, column=column) for i, column in enumerate(columns, start=1)
    )


def is_server_default(column: ColumnDescriptor) -> bool:
    """Timestamp columns are filled by the database on insert, not bound."""
    return column.semantic_type == SemanticType.TIMESTAMP


def plan_insert(
    table: TableDescriptor,
    timestamp_default: str = TIMESTAMP_DEFAULT,
) -> StatementPlan:
    """
    Plan the insert statement for a table.

    Every non-autoincrement column is listed in column order. Timestamp
    columns get ``timestamp_default`` instead of a placeholder and are left
    out of the bindings.
    """
    columns = list(table.value_columns)
    values = [timestamp_default if is_server_default(c) else PLACEHOLDER for c in columns]

    sql = (
        f"INSERT INTO {table.database_table_name} "
        f"({', '.join(c.database_column_name for c in columns)}) "
        f"VALUES ({', '.join(values)})"
    )
    return StatementPlan(
        sql=sql,
        columns=tuple(columns),
        parameters=_bind([c for c in columns if not is_server_default(c)]),
    )


def plan_update(table: TableDescriptor) -> StatementPlan | None:
    """
    Plan the update statement for a table.

    The SET clause covers every non-autoincrement column in column order;
    the WHERE clause matches the autoincrement column, which is bound last.
    Returns None when the table has no autoincrement column or nothing to
    set.
    """
    key = table.key_column
    columns = list(table.value_columns)
    if key is None or not columns:
        return None

    assignments = ", ".join(f"{c.database_column_name}={PLACEHOLDER}" for c in columns)
    sql = (
        f"UPDATE {table.database_table_name} SET {assignments} "
        f"WHERE {key.database_column_name}={PLACEHOLDER}"
    )
    return StatementPlan(
        sql=sql,
        columns=(*columns, key),
        parameters=_bind([*columns, key]),
    )


def plan_select_all(table: TableDescriptor) -> str:
    """SQL selecting every row of a table."""
    return f"SELECT * FROM {table.database_table_name}"


def plan_select_by_key(table: TableDescriptor, parameter_name: str) -> str | None:
    """SQL selecting one row by autoincrement key with a named parameter."""
    key = table.key_column
    if key is None:
        return None
    return (
        f"SELECT * FROM {table.database_table_name} "
        f"WHERE {key.database_column_name}=:{parameter_name}"
    )
