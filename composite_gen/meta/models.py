"""
Resource descriptors for the composite generator.

The catalog is pure data: an ordered revision table and an ordered list of
ApiService descriptors. It is built once per run and never mutated.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from composite_gen.runtime.meta import KeyType, Version


def lower_camel(name: str) -> str:
    """self_link -> selfLink"""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


_SNAKE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def snake_case(name: str) -> str:
    """NetworkEndpointGroup -> network_endpoint_group, BackendServiceIAP -> backend_service_iap"""
    return _SNAKE_BOUNDARY.sub("_", name).lower()


class ScopeClass(str, Enum):
    """Which zonal/regional/global form of the vendor API a resource's operations use."""

    ZONAL_ONLY = "ZonalOnly"
    DEFAULT_ZONAL = "DefaultZonalWithFallback"
    DEFAULT_REGIONAL = "DefaultRegionalWithFallback"
    GENERIC = "GenericKeyDispatch"

    @property
    def validates_zonal_key(self) -> bool:
        return self is ScopeClass.ZONAL_ONLY

    @property
    def dispatches_on_key(self) -> bool:
        return self in (ScopeClass.DEFAULT_REGIONAL, ScopeClass.GENERIC)

    @property
    def regional_filler(self) -> str:
        return "Region" if self is ScopeClass.GENERIC else ""

    @property
    def global_filler(self) -> str:
        return "Global" if self is ScopeClass.DEFAULT_REGIONAL else ""

    @property
    def legal_key_types(self) -> tuple[KeyType, ...]:
        """Key types an operation accepts; ZonalOnly rejects the rest before any call."""
        if self is ScopeClass.ZONAL_ONLY:
            return (KeyType.ZONAL,)
        return (KeyType.ZONAL, KeyType.REGIONAL, KeyType.GLOBAL)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class FieldDescriptor(_Frozen):
    name: str
    type: str
    wire_name: Optional[str] = None
    is_identifier: bool = False
    forces_string_encoding: bool = False
    description: Optional[str] = None

    @property
    def wire(self) -> str:
        return self.wire_name or lower_camel(self.name)

    @property
    def string_encoded(self) -> bool:
        return self.is_identifier or self.forces_string_encoding


class GroupResourceInfo(_Frozen):
    attach_func_name: str
    attach_req_name: str
    detach_func_name: str
    detach_req_name: str
    list_func_name: str
    list_req_name: str
    list_resp_name: str
    agg_list_func_name: str = "AggregatedList"
    agg_list_resp_name: str


class ForceSendPatch(_Frozen):
    """
    Fields to mark "send even if zero" on a nested object after converting a
    composite into a revision type.

    ``path`` is a dotted attribute path below the revision object. With
    ``append`` the composite's own hints at that path are kept in front.
    With ``when`` the patch only applies if that attribute of the nested
    object is truthy.
    """

    path: str
    fields: tuple[str, ...]
    append: bool = False
    when: Optional[str] = None

    @property
    def attrs(self) -> list[str]:
        return self.path.split(".")


class ApiService(_Frozen):
    name: str
    var_name: str
    fields: tuple[FieldDescriptor, ...] = ()
    is_main_service: bool = False
    has_crud: bool = False
    has_update: bool = False
    scope_class: ScopeClass = ScopeClass.GENERIC
    cloud_provider_name: Optional[str] = None
    group_resource_info: Optional[GroupResourceInfo] = None
    force_send_patches: tuple[ForceSendPatch, ...] = ()
    description: Optional[str] = None

    @property
    def is_group_resource_service(self) -> bool:
        return self.group_resource_info is not None

    @property
    def provider_name(self) -> str:
        return self.cloud_provider_name or f"{self.name}s"

    @property
    def snake_name(self) -> str:
        return snake_case(self.name)

    def field(self, name: str) -> Optional[FieldDescriptor]:
        for f in self.fields:
            if f.name == name:
                return f
        return None


class Revision(_Frozen):
    label: str
    suffix: str
    version: Version

    @property
    def module(self) -> str:
        return f"compute{self.suffix}"

    @property
    def lower(self) -> str:
        return self.label.lower()


class Catalog(_Frozen):
    revisions: tuple[Revision, ...] = Field(min_length=1)
    services: tuple[ApiService, ...] = ()

    @property
    def main_services(self) -> list[ApiService]:
        return [s for s in self.services if s.is_main_service]

    @property
    def crud_services(self) -> list[ApiService]:
        return [s for s in self.services if s.is_main_service and s.has_crud]

    @property
    def revision_labels(self) -> str:
        """'Alpha, Beta, and GA'"""
        labels = [r.label for r in self.revisions]
        if len(labels) == 1:
            return labels[0]
        return ", ".join(labels[:-1]) + f", and {labels[-1]}"

    @property
    def names(self) -> list[str]:
        return [s.name for s in self.services]

    def get(self, name: str) -> Optional[ApiService]:
        for s in self.services:
            if s.name == name:
                return s
        return None
