"""
Latency and error accounting for composite API calls.

Every generated operation opens a MetricContext and runs its single vendor
call inside ``observe()``. The outcome is recorded and any error is re-raised
unchanged.
"""

from __future__ import annotations

import logging
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

logger = logging.getLogger("composite.metrics")


@dataclass(frozen=True)
class Observation:
    service: str
    operation: str
    region: str
    zone: str
    version: str
    error: Optional[str]
    latency: float


@dataclass
class _Aggregate:
    count: int = 0
    errors: int = 0
    latency_sum: float = 0.0


class MetricsRecorder:
    """Thread-safe sink for observations, aggregated by (service, operation, version)."""

    def __init__(self):
        self._lock = threading.Lock()
        self._aggregates: dict[tuple[str, str, str], _Aggregate] = {}

    def record(self, observation: Observation) -> None:
        key = (observation.service, observation.operation, observation.version)
        with self._lock:
            agg = self._aggregates.setdefault(key, _Aggregate())
            agg.count += 1
            agg.latency_sum += observation.latency
            if observation.error is not None:
                agg.errors += 1

    def count(self, service: str, operation: str, version: str) -> int:
        with self._lock:
            agg = self._aggregates.get((service, operation, version))
            return agg.count if agg else 0

    def errors(self, service: str, operation: str, version: str) -> int:
        with self._lock:
            agg = self._aggregates.get((service, operation, version))
            return agg.errors if agg else 0

    def snapshot(self) -> dict[tuple[str, str, str], tuple[int, int, float]]:
        with self._lock:
            return {k: (a.count, a.errors, a.latency_sum) for k, a in self._aggregates.items()}

    def reset(self) -> None:
        with self._lock:
            self._aggregates.clear()


_recorder = MetricsRecorder()


def get_recorder() -> MetricsRecorder:
    return _recorder


def set_recorder(recorder: MetricsRecorder) -> MetricsRecorder:
    """Replace the process-wide recorder and return the previous one."""
    global _recorder
    previous, _recorder = _recorder, recorder
    return previous


class MetricContext:
    def __init__(self, service: str, operation: str, region: str, zone: str, version) -> None:
        self.service = service
        self.operation = operation
        self.region = region or ""
        self.zone = zone or ""
        self.version = str(version) if version else ""
        self.start = time.perf_counter()

    @contextmanager
    def observe(self) -> Iterator[None]:
        """Record the outcome of the enclosed call. Errors propagate as raised."""
        error: Optional[BaseException] = None
        try:
            yield
        except BaseException as exc:
            error = exc
            raise
        finally:
            self._record(error)

    def _record(self, error: Optional[BaseException]) -> None:
        latency = time.perf_counter() - self.start
        observation = Observation(
            service=self.service,
            operation=self.operation,
            region=self.region,
            zone=self.zone,
            version=self.version,
            error=type(error).__name__ if error is not None else None,
            latency=latency,
        )
        _recorder.record(observation)
        logger.debug(
            "%s %s version=%s region=%s zone=%s error=%s %.1fms",
            self.service, self.operation, self.version, self.region, self.zone,
            observation.error, latency * 1000,
        )
