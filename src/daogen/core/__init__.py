"""
daogen core: descriptor model, naming, emitter and error taxonomy.
"""

from daogen.core.emitter import Emitter
from daogen.core.errors import (
    AmbiguousPrimaryKeyError,
    ConfigurationError,
    ConnectionFailureError,
    DaoGenError,
    FilesystemFailureError,
    PropertyNameConflictError,
    UnsupportedColumnTypeError,
)
from daogen.core.naming import capitalize, class_name, endpoint_path, normalize, pluralize
from daogen.core.types import (
    ColumnDescriptor,
    NoPrimaryKey,
    PrimaryKey,
    SchemaModel,
    SemanticType,
    SinglePrimaryKey,
    TableDescriptor,
)

__all__ = [
    # Types
    "SemanticType",
    "ColumnDescriptor",
    "TableDescriptor",
    "SchemaModel",
    "PrimaryKey",
    "NoPrimaryKey",
    "SinglePrimaryKey",
    # Naming
    "normalize",
    "capitalize",
    "class_name",
    "pluralize",
    "endpoint_path",
    # Emitter
    "Emitter",
    # Errors
    "DaoGenError",
    "ConnectionFailureError",
    "UnsupportedColumnTypeError",
    "FilesystemFailureError",
    "AmbiguousPrimaryKeyError",
    "PropertyNameConflictError",
    "ConfigurationError",
]
