"""
Error taxonomy for daogen.

All daogen errors inherit from DaoGenError and include:
- A unique error code for programmatic handling
- A human-readable message
- Optional hints describing how to fix the problem
"""

from typing import Any


class DaoGenError(Exception):
    """
    Base class for all daogen errors.

    Attributes:
        code: Unique error code for programmatic handling
        message: Human-readable error message
        hints: Suggestions for how to fix the error
        details: Additional error context
    """

    code: str = "DAOGEN_ERROR"

    def __init__(
        self,
        message: str,
        *,
        hints: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.hints = hints or []
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "hints": self.hints,
            "details": self.details,
        }


class ConnectionFailureError(DaoGenError):
    """The schema provider is unreachable or rejected the credentials."""

    code = "CONNECTION_FAILURE"

    def __init__(
        self,
        target: str,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        message = f"Could not connect to database '{target}'"
        if reason:
            message += f": {reason}"
        super().__init__(
            message,
            hints=[
                "Check database.server, database.port and database.name",
                "Check database.user and database.password",
            ],
            details={"target": target, "reason": reason},
            **kwargs,
        )


class UnsupportedColumnTypeError(DaoGenError):
    """
    A column's SQL type has no entry in the type table.

    This error is recoverable: the introspector records it as a diagnostic
    and maps the column to the default semantic type instead of raising.
    """

    code = "UNSUPPORTED_COLUMN_TYPE"

    def __init__(
        self,
        table: str,
        column: str,
        sql_type_name: str,
        fallback: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Unrecognized type '{sql_type_name}' for column '{table}.{column}', "
            f"using '{fallback}'",
            details={
                "table": table,
                "column": column,
                "sql_type_name": sql_type_name,
                "fallback": fallback,
            },
            **kwargs,
        )


class FilesystemFailureError(DaoGenError):
    """An output directory or file could not be created or written."""

    code = "FILESYSTEM_FAILURE"

    def __init__(
        self,
        path: str,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        message = f"Cannot write output file '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(
            message,
            hints=["Check that the output directory is writable"],
            details={"path": path, "reason": reason},
            **kwargs,
        )


class AmbiguousPrimaryKeyError(DaoGenError):
    """A table has more than one autoincrement column."""

    code = "AMBIGUOUS_PRIMARY_KEY"

    def __init__(
        self,
        table: str,
        columns: list[str],
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Table '{table}' has more than one autoincrement column: "
            f"{', '.join(columns)}",
            hints=["Generated update and get-by-id code needs a single key column"],
            details={"table": table, "columns": columns},
            **kwargs,
        )


class PropertyNameConflictError(DaoGenError):
    """
    Column names of a table do not map to distinct property names.

    Raised when several columns normalize to the same property name
    (``user_id`` and ``userId``), or when a column normalizes to an empty
    one (``_``).
    """

    code = "PROPERTY_NAME_CONFLICT"

    def __init__(
        self,
        table: str,
        property_name: str,
        columns: list[str],
        **kwargs: Any,
    ) -> None:
        if property_name:
            message = (
                f"Columns {', '.join(columns)} of table '{table}' all map to "
                f"property '{property_name}'"
            )
        else:
            message = (
                f"Columns {', '.join(columns)} of table '{table}' map to an "
                "empty property name"
            )
        super().__init__(
            message,
            hints=["Rename the columns so their camelCase forms differ"],
            details={"table": table, "property": property_name, "columns": columns},
            **kwargs,
        )


class ConfigurationError(DaoGenError):
    """A configuration value is missing or invalid."""

    code = "CONFIGURATION_ERROR"

    def __init__(
        self,
        message: str,
        key: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            details={"key": key} if key else {},
            **kwargs,
        )
