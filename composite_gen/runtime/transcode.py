"""
Structural transcoding between composite and revision-specific models.

Values move between shapes by their wire (alias) names through a JSON round
trip, the same way the vendor transport would serialize them:

- a field the destination does not declare is dropped,
- a field the source does not carry keeps the destination default,
- empty values are omitted unless listed in ``force_send_fields``,
- attributes listed in ``null_fields`` are sent as explicit nulls,
- fields declared with ``exclude=True`` (bookkeeping) never travel.
- bytes travel as base64 strings; models holding bytes fields must validate
  JSON bytes as base64 (``val_json_bytes="base64"``), as CompositeModel does.
"""

from __future__ import annotations

import base64
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.fields import FieldInfo

from .errors import ConversionError

M = TypeVar("M", bound=BaseModel)


class StringEncoded:
    """Annotated marker: the field travels as a JSON string (e.g. 64-bit ids)."""

    def __repr__(self) -> str:
        return "StringEncoded"


STRING_ENCODED = StringEncoded()


class CompositeModel(BaseModel):
    """Base class of every generated composite type."""

    model_config = ConfigDict(populate_by_name=True, ser_json_bytes="base64", val_json_bytes="base64")


def is_string_encoded(info: FieldInfo) -> bool:
    return any(isinstance(m, StringEncoded) for m in info.metadata)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, Enum):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    return False


def _hints(model: BaseModel, attr: str) -> set[str]:
    return set(getattr(model, attr, None) or ())


def _model_to_wire(model: BaseModel) -> dict[str, Any]:
    force = _hints(model, "force_send_fields")
    null = _hints(model, "null_fields")
    out: dict[str, Any] = {}
    for name, info in type(model).model_fields.items():
        if info.exclude:
            continue
        wire_name = info.alias or name
        if name in null:
            out[wire_name] = None
            continue
        value = getattr(model, name)
        if _is_empty(value) and name not in force:
            continue
        if value is not None and is_string_encoded(info):
            value = str(value)
        out[wire_name] = to_wire(value)
    return out


def to_wire(value: Any) -> Any:
    """Encode ``value`` into plain JSON-compatible data keyed by wire names."""
    if isinstance(value, BaseModel):
        return _model_to_wire(value)
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {k: to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


def _forward_hints(source: Any, dest: BaseModel) -> None:
    if not isinstance(source, BaseModel):
        return
    dest_fields = type(dest).model_fields
    for attr in ("force_send_fields", "null_fields"):
        if attr not in dest_fields:
            continue
        hints = [h for h in getattr(source, attr, None) or () if h in dest_fields]
        if hints:
            setattr(dest, attr, hints)


def copy_via_json(dest: type[M], obj: Any) -> M:
    """Transcode ``obj`` into a new ``dest`` instance."""
    try:
        result = dest.model_validate_json(json.dumps(to_wire(obj)))
    except (TypeError, ValueError) as exc:
        raise ConversionError(obj, dest.__name__, exc) from exc
    _forward_hints(obj, result)
    return result


def copy_list_via_json(dest: type[M], objs: Iterable[Any] | None) -> list[M]:
    """Transcode every element of ``objs``; ``None`` is an empty list."""
    if objs is None:
        return []
    if isinstance(objs, (Mapping, BaseModel, str, bytes)):
        raise ConversionError(objs, f"list[{dest.__name__}]", TypeError("expected a sequence"))
    result = []
    for obj in objs:
        try:
            result.append(copy_via_json(dest, obj))
        except ConversionError as exc:
            raise ConversionError(objs, f"list[{dest.__name__}]", exc.cause) from exc
    return result


def force_send_fields_of(obj: Any) -> list[str]:
    """The transmission hints already set on ``obj`` (empty when ``obj`` is None)."""
    if obj is None:
        return []
    return list(getattr(obj, "force_send_fields", None) or ())
