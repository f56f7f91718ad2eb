"""
Runtime support imported by the generated composite wrapper and test modules.
"""

from .cloud import Cloud
from .context import CallContext, RuntimeSettings, call_context, get_runtime_settings
from .errors import (
    CompositeError,
    ConversionError,
    DeadlineExceeded,
    ResourceURLError,
    ScopeValidationError,
)
from .meta import Key, KeyType, Version, global_key, regional_key, zonal_key
from .metrics import MetricContext, MetricsRecorder, get_recorder, set_recorder
from .log import KeyValueAdapter, with_values
from .resource_url import ResourceID, parse_resource_url
from .transcode import (
    STRING_ENCODED,
    CompositeModel,
    StringEncoded,
    copy_list_via_json,
    copy_via_json,
    force_send_fields_of,
    to_wire,
)
from .transport import ServerResponse

__all__ = [
    "Cloud",
    "CallContext",
    "RuntimeSettings",
    "call_context",
    "get_runtime_settings",
    "CompositeError",
    "ConversionError",
    "DeadlineExceeded",
    "ResourceURLError",
    "ScopeValidationError",
    "Key",
    "KeyType",
    "Version",
    "global_key",
    "regional_key",
    "zonal_key",
    "MetricContext",
    "MetricsRecorder",
    "get_recorder",
    "set_recorder",
    "KeyValueAdapter",
    "with_values",
    "ResourceID",
    "parse_resource_url",
    "STRING_ENCODED",
    "CompositeModel",
    "StringEncoded",
    "copy_list_via_json",
    "copy_via_json",
    "force_send_fields_of",
    "to_wire",
    "ServerResponse",
]
