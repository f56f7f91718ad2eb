"""Bounded call scope passed to every vendor call."""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import DeadlineExceeded


class RuntimeSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="COMPOSITE_", env_file=".env", extra="ignore")

    # Seconds. Matches the default call timeout of the cloud provider client.
    call_timeout: float = Field(default=3600.0, gt=0)


@lru_cache
def get_runtime_settings() -> RuntimeSettings:
    """Settings read once per process; call ``cache_clear()`` to re-read the environment."""
    return RuntimeSettings()


class CallContext:
    """
    Deadline plus cancellation flag for one logical operation.

    Vendor clients are expected to bound their own I/O by ``remaining()`` and to
    call ``check()`` before and after blocking work.
    """

    def __init__(self, timeout: float):
        self.timeout = timeout
        self.deadline = time.monotonic() + timeout
        self._cancelled = threading.Event()

    def remaining(self) -> float:
        return max(0.0, self.deadline - time.monotonic())

    def expired(self) -> bool:
        return time.monotonic() >= self.deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def check(self) -> None:
        if self.cancelled:
            raise DeadlineExceeded("context canceled")
        if self.expired():
            raise DeadlineExceeded(f"context deadline exceeded after {self.timeout}s")


@contextmanager
def call_context(timeout: float | None = None) -> Iterator[CallContext]:
    """Open a call scope with the configured timeout; it is cancelled on exit."""
    if timeout is None:
        timeout = get_runtime_settings().call_timeout
    ctx = CallContext(timeout)
    try:
        yield ctx
    finally:
        ctx.cancel()
