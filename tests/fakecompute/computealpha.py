"""Alpha revision of the fake compute API types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from composite_gen.runtime import ServerResponse


class VendorModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, val_json_bytes="base64")


class Backend(VendorModel):
    balancing_mode: str | None = Field(default=None, alias="balancingMode")
    capacity_scaler: float | None = Field(default=None, alias="capacityScaler")
    group: str | None = Field(default=None, alias="group")
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class CacheKeyPolicy(VendorModel):
    include_host: bool | None = Field(default=None, alias="includeHost")
    include_protocol: bool | None = Field(default=None, alias="includeProtocol")
    include_query_string: bool | None = Field(default=None, alias="includeQueryString")
    query_string_blacklist: list[str] | None = Field(default=None, alias="queryStringBlacklist")
    query_string_whitelist: list[str] | None = Field(default=None, alias="queryStringWhitelist")
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class BackendServiceCdnPolicy(VendorModel):
    cache_key_policy: CacheKeyPolicy | None = Field(default=None, alias="cacheKeyPolicy")
    negative_caching: bool | None = Field(default=None, alias="negativeCaching")
    request_coalescing: bool | None = Field(default=None, alias="requestCoalescing")
    serve_while_stale: int | None = Field(default=None, alias="serveWhileStale")
    signed_url_cache_max_age_sec: int | None = Field(default=None, alias="signedUrlCacheMaxAgeSec")
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class BackendServiceIAP(VendorModel):
    enabled: bool | None = Field(default=None, alias="enabled")
    oauth2_client_id: str | None = Field(default=None, alias="oauth2ClientId")
    oauth2_client_secret: str | None = Field(default=None, alias="oauth2ClientSecret")
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class BackendServiceLogConfig(VendorModel):
    enable: bool | None = Field(default=None, alias="enable")
    sample_rate: float | None = Field(default=None, alias="sampleRate")
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class BackendService(VendorModel):
    affinity_cookie_ttl_sec: int | None = Field(default=None, alias="affinityCookieTtlSec")
    backends: list[Backend] | None = Field(default=None, alias="backends")
    cdn_policy: BackendServiceCdnPolicy | None = Field(default=None, alias="cdnPolicy")
    description: str | None = Field(default=None, alias="description")
    enable_cdn: bool | None = Field(default=None, alias="enableCDN")
    iap: BackendServiceIAP | None = Field(default=None, alias="iap")
    id: int | None = Field(default=None, alias="id")
    log_config: BackendServiceLogConfig | None = Field(default=None, alias="logConfig")
    name: str | None = Field(default=None, alias="name")
    region: str | None = Field(default=None, alias="region")
    self_link: str | None = Field(default=None, alias="selfLink")
    server_response: ServerResponse | None = Field(default=None, exclude=True)
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class ForwardingRule(VendorModel):
    ip_address: str | None = Field(default=None, alias="IPAddress")
    description: str | None = Field(default=None, alias="description")
    id: int | None = Field(default=None, alias="id")
    labels: dict[str, str] | None = Field(default=None, alias="labels")
    name: str | None = Field(default=None, alias="name")
    region: str | None = Field(default=None, alias="region")
    self_link: str | None = Field(default=None, alias="selfLink")
    target: str | None = Field(default=None, alias="target")
    server_response: ServerResponse | None = Field(default=None, exclude=True)
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class NetworkEndpointGroup(VendorModel):
    default_port: int | None = Field(default=None, alias="defaultPort")
    description: str | None = Field(default=None, alias="description")
    id: int | None = Field(default=None, alias="id")
    name: str | None = Field(default=None, alias="name")
    network_endpoint_type: str | None = Field(default=None, alias="networkEndpointType")
    self_link: str | None = Field(default=None, alias="selfLink")
    size: int | None = Field(default=None, alias="size")
    zone: str | None = Field(default=None, alias="zone")
    server_response: ServerResponse | None = Field(default=None, exclude=True)
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class NetworkEndpoint(VendorModel):
    instance: str | None = Field(default=None, alias="instance")
    ip_address: str | None = Field(default=None, alias="ipAddress")
    port: int | None = Field(default=None, alias="port")
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class NetworkEndpointGroupsAttachEndpointsRequest(VendorModel):
    network_endpoints: list[NetworkEndpoint] | None = Field(default=None, alias="networkEndpoints")
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class NetworkEndpointGroupsDetachEndpointsRequest(VendorModel):
    network_endpoints: list[NetworkEndpoint] | None = Field(default=None, alias="networkEndpoints")
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class NetworkEndpointGroupsListEndpointsRequest(VendorModel):
    health_status: str | None = Field(default=None, alias="healthStatus")
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class NetworkEndpointWithHealthStatus(VendorModel):
    network_endpoint: NetworkEndpoint | None = Field(default=None, alias="networkEndpoint")
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)


class InstanceGroup(VendorModel):
    description: str | None = Field(default=None, alias="description")
    id: int | None = Field(default=None, alias="id")
    name: str | None = Field(default=None, alias="name")
    self_link: str | None = Field(default=None, alias="selfLink")
    size: int | None = Field(default=None, alias="size")
    zone: str | None = Field(default=None, alias="zone")
    server_response: ServerResponse | None = Field(default=None, exclude=True)
    force_send_fields: list[str] = Field(default_factory=list, exclude=True)
    null_fields: list[str] = Field(default_factory=list, exclude=True)
