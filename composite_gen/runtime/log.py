"""Structured key=value logging for the generated wrappers."""

import logging
from typing import Optional, Union

log = logging.getLogger("composite")

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


class KeyValueAdapter(logging.LoggerAdapter):
    """LoggerAdapter that appends its bound values to every message as key=value pairs."""

    def process(self, msg, kwargs):
        if self.extra:
            pairs = " ".join(f"{k}={v!r}" for k, v in self.extra.items())
            msg = f"{msg} {pairs}"
        kwargs.setdefault("extra", {}).update({"composite": dict(self.extra)})
        return msg, kwargs


def with_values(logger: Optional[LoggerLike] = None, **values) -> KeyValueAdapter:
    """Return an adapter over ``logger`` that carries ``values`` (merged with any already bound)."""
    if logger is None:
        logger = log
    if isinstance(logger, KeyValueAdapter):
        merged = {**logger.extra, **values}
        return KeyValueAdapter(logger.logger, merged)
    return KeyValueAdapter(logger, values)
