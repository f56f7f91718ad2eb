"""Catalog extraction utilities."""

from .type_mapper import (
    BUILTIN_TYPES,
    is_valid_type_expr,
    map_to_python_type,
    qualify,
    referenced_types,
    split_type_args,
)

__all__ = [
    "BUILTIN_TYPES",
    "is_valid_type_expr",
    "map_to_python_type",
    "qualify",
    "referenced_types",
    "split_type_args",
]
