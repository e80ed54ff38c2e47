"""
daogen - database-first source generator.

daogen reflects a relational schema and generates, per table, a value
class, a data-access interface and implementation, and a REST controller.
The target framework is a pluggable template family; Spring JDBC ships
built in.
"""

__version__ = "0.1.0"

from daogen.core.errors import (
    AmbiguousPrimaryKeyError,
    ConfigurationError,
    ConnectionFailureError,
    DaoGenError,
    FilesystemFailureError,
    PropertyNameConflictError,
    UnsupportedColumnTypeError,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "DaoGenError",
    "ConnectionFailureError",
    "UnsupportedColumnTypeError",
    "FilesystemFailureError",
    "AmbiguousPrimaryKeyError",
    "PropertyNameConflictError",
    "ConfigurationError",
]
