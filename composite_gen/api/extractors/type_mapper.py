"""Type mapping from catalog semantic types to Python/Pydantic annotations."""

from __future__ import annotations

import re

BUILTIN_TYPES = {"str", "int", "float", "bool", "bytes", "Any"}

_GENERIC = re.compile(r"^(list|dict)\[(.+)\]$")


def split_type_args(args: str) -> list[str]:
    """Split 'str, list[Foo]' at top-level commas."""
    parts, depth, current = [], 0, ""
    for ch in args:
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append(current.strip())
            current = ""
            continue
        current += ch
    if current.strip():
        parts.append(current.strip())
    return parts


def referenced_types(type_expr: str) -> list[str]:
    """
    Return every non-builtin type name used in a semantic type.

    Examples:
    - "str" -> []
    - "list[Backend]" -> ["Backend"]
    - "dict[str, list[NetworkEndpoint]]" -> ["NetworkEndpoint"]
    """
    type_expr = type_expr.strip()
    match = _GENERIC.match(type_expr)
    if match:
        names = []
        for arg in split_type_args(match.group(2)):
            names.extend(referenced_types(arg))
        return names
    if type_expr in BUILTIN_TYPES:
        return []
    return [type_expr]


def is_valid_type_expr(type_expr: str) -> bool:
    type_expr = type_expr.strip()
    match = _GENERIC.match(type_expr)
    if match:
        args = split_type_args(match.group(2))
        if match.group(1) == "list" and len(args) != 1:
            return False
        if match.group(1) == "dict" and (len(args) != 2 or args[0] != "str"):
            return False
        return all(is_valid_type_expr(a) for a in args)
    return type_expr.isidentifier()


def map_to_python_type(field, module_prefix: str = "") -> str:
    """
    Render the annotation for a composite field.

    Every field is optional (omitted on the wire when empty). String-encoded
    fields carry the STRING_ENCODED marker so the transcoder stringifies them.
    Catalog type names can be qualified with ``module_prefix`` (e.g. "computealpha.").
    """
    inner = qualify(field.type, module_prefix)
    annotation = f"{inner} | None"
    if field.string_encoded:
        return f"Annotated[{annotation}, STRING_ENCODED]"
    return annotation


def qualify(type_expr: str, module_prefix: str) -> str:
    type_expr = type_expr.strip()
    match = _GENERIC.match(type_expr)
    if match:
        args = ", ".join(qualify(a, module_prefix) for a in split_type_args(match.group(2)))
        return f"{match.group(1)}[{args}]"
    if type_expr in BUILTIN_TYPES:
        return type_expr
    return f"{module_prefix}{type_expr}"
