"""
Identifier normalization.

Converts SQL identifiers (snake_case) into the camelCase property names and
capitalized class names used in generated code.
"""

SEPARATOR = "_"


def capitalize(s: str) -> str:
    """Uppercase the first character only; the rest is left unchanged."""
    return s[:1].upper() + s[1:]


def normalize(sql_name: str) -> str:
    """
    Convert a snake_case SQL name to a camelCase property name.

    The name is split at the first separator; the tail is normalized
    recursively and capitalized before being appended to the head. Empty
    segments (leading, doubled or trailing separators) are dropped.

    Examples:
        >>> normalize("user_id")
        'userId'
        >>> normalize("one_two_three")
        'oneTwoThree'
        >>> normalize("userid")
        'userid'
    """
    if SEPARATOR not in sql_name:
        return sql_name

    head, tail = sql_name.split(SEPARATOR, 1)
    rest = normalize(tail)
    if not head:
        return rest
    return head + capitalize(rest)


def class_name(sql_name: str) -> str:
    """Generated class name for a table: normalized and capitalized."""
    return capitalize(normalize(sql_name))


def pluralize(name: str) -> str:
    """Append ``s`` unless the name already ends in one."""
    return name if name.endswith("s") else name + "s"


def endpoint_path(generated_class_name: str) -> str:
    """HTTP path segment for a table's entry point, e.g. ``User`` -> ``users``."""
    return pluralize(generated_class_name).lower()
