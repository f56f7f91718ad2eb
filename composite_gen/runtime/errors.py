"""Errors raised by the generated composite wrappers."""

from typing import Any


class CompositeError(Exception):
    """Base class for errors raised by composite operations."""


class ScopeValidationError(CompositeError, ValueError):
    """The key addresses a scope the resource does not support. No call was made."""

    def __init__(self, key, resource: str):
        self.key = key
        self.resource = resource
        super().__init__(f"Key {key} not valid for zonal resource {resource} {key.name}")


class ConversionError(CompositeError):
    """A value could not be transcoded into the destination shape."""

    def __init__(self, value: Any, destination: str, cause: BaseException):
        self.value = value
        self.destination = destination
        self.cause = cause
        super().__init__(f"could not copy object {value!r} to {destination} via JSON: {cause}")


class DeadlineExceeded(CompositeError, TimeoutError):
    """The bounded call scope expired before the call completed."""


class ResourceURLError(CompositeError, ValueError):
    """A self link could not be parsed into a resource ID."""
