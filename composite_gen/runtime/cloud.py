"""
Shape of the vendor cloud client the generated wrappers call into.

The client is not implemented here. ``cloud.compute()`` returns an object
exposing one accessor per revision/scope/resource combination, named
``<revision>_<scope filler>_<resources>`` in snake_case, for example
``alpha_region_backend_services()`` or ``network_endpoint_groups()``. Each
accessor returns a service object with ``insert``, ``update``, ``delete``,
``get``, ``list`` and the resource's group methods, all taking the call
context first.
"""

from typing import Any, Callable, Protocol


class ResourceService(Protocol):
    def insert(self, ctx, key, obj) -> None: ...

    def update(self, ctx, key, obj) -> None: ...

    def delete(self, ctx, key) -> None: ...

    def get(self, ctx, key) -> Any: ...

    def list(self, ctx, *args) -> list: ...


class ComputeServices(Protocol):
    def __getattr__(self, accessor: str) -> Callable[[], ResourceService]: ...


class Cloud(Protocol):
    def compute(self) -> ComputeServices: ...
