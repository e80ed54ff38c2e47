"""
Schema introspection: providers and the descriptor-model builder.
"""

from daogen.introspection.base import RawColumn, SchemaProvider, StaticSchemaProvider
from daogen.introspection.introspector import (
    DEFAULT_SEMANTIC_TYPE,
    TYPE_TABLE,
    SchemaIntrospector,
    introspect,
    lookup_semantic_type,
)

__all__ = [
    "RawColumn",
    "SchemaProvider",
    "StaticSchemaProvider",
    "SchemaIntrospector",
    "introspect",
    "lookup_semantic_type",
    "TYPE_TABLE",
    "DEFAULT_SEMANTIC_TYPE",
]


# Lazy import so the core does not require a database driver stack
def get_sqlalchemy_provider():
    """Get the SQLAlchemy schema provider class."""
    from daogen.introspection.sqlalchemy import SQLAlchemySchemaProvider
    return SQLAlchemySchemaProvider
