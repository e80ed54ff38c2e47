"""
Java names for the Spring JDBC template family.
"""

from daogen.core.naming import pluralize
from daogen.core.types import ColumnDescriptor, SemanticType, TableDescriptor

FILE_EXTENSION = ".java"

# Semantic type -> Java field type
JAVA_TYPES: dict[SemanticType, str] = {
    SemanticType.STRING: "String",
    SemanticType.INTEGER: "int",
    SemanticType.BOOLEAN: "boolean",
    SemanticType.DOUBLE: "double",
    SemanticType.LONG_INTEGER: "long",
    SemanticType.FLOAT: "float",
    SemanticType.TIMESTAMP: "Date",
}

# Semantic type -> ResultSet getter / PreparedStatement setter suffix
JDBC_ACCESSORS: dict[SemanticType, str] = {
    SemanticType.STRING: "String",
    SemanticType.INTEGER: "Int",
    SemanticType.BOOLEAN: "Boolean",
    SemanticType.DOUBLE: "Double",
    SemanticType.LONG_INTEGER: "Long",
    SemanticType.FLOAT: "Float",
    SemanticType.TIMESTAMP: "Timestamp",
}

# Semantic type -> conversion of the Number returned by KeyHolder.getKey().
# Key types missing here get no generated-key write-back.
KEY_CONVERSIONS: dict[SemanticType, str] = {
    SemanticType.INTEGER: "intValue()",
    SemanticType.LONG_INTEGER: "longValue()",
    SemanticType.DOUBLE: "doubleValue()",
    SemanticType.FLOAT: "floatValue()",
    SemanticType.STRING: "toString()",
}


def java_type(column: ColumnDescriptor) -> str:
    return JAVA_TYPES[column.semantic_type]


def jdbc_accessor(column: ColumnDescriptor) -> str:
    return JDBC_ACCESSORS[column.semantic_type]


def key_conversion(column: ColumnDescriptor) -> str | None:
    return KEY_CONVERSIONS.get(column.semantic_type)


def writes_back_key(table: TableDescriptor) -> bool:
    """Whether create() copies the generated key back into the instance."""
    key = table.key_column
    return key is not None and key_conversion(key) is not None


def getter(column: ColumnDescriptor) -> str:
    return f"get{column.capitalized_property_name}"


def setter(column: ColumnDescriptor) -> str:
    return f"set{column.capitalized_property_name}"


def instance_name(table: TableDescriptor) -> str:
    """Parameter name for a value instance, e.g. ``OrderItem`` -> ``orderitem``."""
    return table.generated_class_name.lower()


def list_method(table: TableDescriptor) -> str:
    return f"get{pluralize(table.generated_class_name)}"


def create_method(table: TableDescriptor) -> str:
    return f"create{table.generated_class_name}"


def update_method(table: TableDescriptor) -> str:
    return f"update{table.generated_class_name}"


def get_by_id_method(table: TableDescriptor) -> str:
    return f"get{table.generated_class_name}ById"


def bind_value(column: ColumnDescriptor, instance: str) -> str:
    """Expression passed to a PreparedStatement setter for a column."""
    value = f"{instance}.{getter(column)}()"
    if column.semantic_type == SemanticType.TIMESTAMP:
        return f"new java.sql.Timestamp({value}.getTime())"
    return value
