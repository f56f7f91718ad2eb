"""
Field-set comparison between composite and revision-specific models.

Types are compared structurally by name: a composite ``BackendServiceCdnPolicy``
matches the revision's ``BackendServiceCdnPolicy`` even though they are
different classes.
"""

from __future__ import annotations

import types
import typing
from typing import Any

from pydantic import BaseModel
from pydantic.fields import FieldInfo


class FieldMismatchError(AssertionError):
    pass


def model_fields(model: type[BaseModel]) -> dict[str, FieldInfo]:
    """Declared fields of ``model`` in declaration order."""
    return dict(model.model_fields)


def type_signature(annotation: Any) -> str:
    """Render an annotation as a name-based signature, e.g. ``Union[list[Backend], None]``."""
    origin = typing.get_origin(annotation)
    if origin is typing.Annotated:
        return type_signature(typing.get_args(annotation)[0])
    if origin in (typing.Union, types.UnionType):
        args = ", ".join(type_signature(a) for a in typing.get_args(annotation))
        return f"Union[{args}]"
    if origin is not None:
        args = ", ".join(type_signature(a) for a in typing.get_args(annotation))
        return f"{getattr(origin, '__name__', repr(origin))}[{args}]"
    if annotation is type(None):
        return "None"
    if isinstance(annotation, typing.ForwardRef):
        return annotation.__forward_arg__
    return getattr(annotation, "__name__", repr(annotation))


def compare_fields(name: str, a: FieldInfo, b: FieldInfo) -> None:
    """Raise FieldMismatchError unless both fields have the same wire name and type signature."""
    a_wire, b_wire = a.alias or name, b.alias or name
    if a_wire != b_wire:
        raise FieldMismatchError(f"Field {name}: wire name {a_wire!r} != {b_wire!r}")
    a_sig, b_sig = type_signature(a.annotation), type_signature(b.annotation)
    if a_sig != b_sig:
        raise FieldMismatchError(f"Field {name}: type {a_sig} != {b_sig}")


def check_field_superset(
    superset: type[BaseModel], subset: type[BaseModel], compare_types: bool = False
) -> None:
    """Every field of ``subset`` must be present (by name) in ``superset``."""
    super_fields = model_fields(superset)
    for name, info in model_fields(subset).items():
        lookup = super_fields.get(name)
        if lookup is None:
            raise FieldMismatchError(
                f"Field {name} of {subset.__name__} not present in {superset.__name__}"
            )
        if compare_types:
            compare_fields(name, lookup, info)
