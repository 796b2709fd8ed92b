"""
Starlark formatter.

Renders rule declarations the way buildifier lays them out: one attribute per
line, string lists broken one entry per line with a trailing comma.
"""

from typing import List, Sequence, Tuple, Union

INDENT = "    "

AttributeValue = Union[str, Sequence[str]]


def format_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_list(values: Sequence[str], indent_level: int) -> str:
    """
    Format a list of strings as a Starlark list literal.

    Args:
        values: The strings to format.
        indent_level: The indentation level of the line holding the literal.

    Returns:
        "[]" for an empty list, otherwise one quoted entry per line.
    """
    if not values:
        return "[]"
    indent = INDENT * indent_level
    inner_indent = INDENT * (indent_level + 1)
    result = "[\n"
    for item in values:
        result += f"{inner_indent}{format_string(item)},\n"
    result += f"{indent}]"
    return result


def format_value(value: AttributeValue, indent_level: int) -> str:
    if isinstance(value, str):
        return format_string(value)
    elif isinstance(value, (list, tuple)):
        return format_list(value, indent_level)
    else:
        raise TypeError(f"Unsupported type: {type(value).__name__} for value: {value}")


def format_rule(kind: str, attributes: List[Tuple[str, AttributeValue]]) -> str:
    result = f"{kind}(\n"
    for key, value in attributes:
        result += f"{INDENT}{key} = {format_value(value, 1)},\n"
    result += ")"
    return result


def format_load(bzl: str, symbols: Sequence[str]) -> str:
    args = ", ".join(format_string(s) for s in [bzl, *symbols])
    return f"load({args})"
