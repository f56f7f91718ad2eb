"""Resource metadata consumed by every emitter."""

from .catalog import PACKAGED_CATALOG, load_catalog, parse_catalog
from .models import (
    ApiService,
    Catalog,
    FieldDescriptor,
    ForceSendPatch,
    GroupResourceInfo,
    Revision,
    ScopeClass,
    lower_camel,
    snake_case,
)

__all__ = [
    "PACKAGED_CATALOG",
    "load_catalog",
    "parse_catalog",
    "ApiService",
    "Catalog",
    "FieldDescriptor",
    "ForceSendPatch",
    "GroupResourceInfo",
    "Revision",
    "ScopeClass",
    "lower_camel",
    "snake_case",
]
