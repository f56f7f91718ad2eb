"""
Logging for composite-gen.

Two logger trees share the ``composite`` root:

* ``composite.gen.*``: generator progress (``[CATALOG]``, ``[PHASE n]``,
  ``[GENERATED]``), obtained with ``get_logger(__name__)``;
* ``composite`` and ``composite.metrics``: the call log of the emitted
  wrappers (see composite_gen.runtime.log).

``configure_logging`` installs one stderr handler on the root of both, so a
CLI run and a wrapper embedded in the same process log through one place.
"""

import logging
import sys
from typing import Optional, TextIO

from composite_gen.runtime.log import log as runtime_log

GEN_LOGGER = "composite.gen"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger for a generator module: ``composite_gen.api.generators.type_generator``
    becomes ``composite.gen.type_generator``.
    """
    if name is None or name == GEN_LOGGER:
        return logging.getLogger(GEN_LOGGER)
    return logging.getLogger(f"{GEN_LOGGER}.{name.rsplit('.', 1)[-1]}")


def log_level(verbose: bool = False, quiet: bool = False) -> int:
    """-v shows per-resource detail and metrics, -q keeps warnings and errors only."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


class CompositeFormatter(logging.Formatter):
    """Generator records print bare; wrapper records carry their level and logger."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.name == GEN_LOGGER or record.name.startswith(f"{GEN_LOGGER}."):
            return message
        return f"{record.levelname} {record.name}: {message}"


class _CliHandler(logging.StreamHandler):
    pass


def configure_logging(verbose: bool = False, quiet: bool = False, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Set the level of the ``composite`` tree and (re)install its stderr handler.

    Calling it again replaces the handler installed by the previous call.
    """
    level = log_level(verbose, quiet)
    for handler in [h for h in runtime_log.handlers if isinstance(h, _CliHandler)]:
        runtime_log.removeHandler(handler)

    handler = _CliHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(CompositeFormatter())
    handler.setLevel(level)
    runtime_log.addHandler(handler)
    runtime_log.setLevel(level)
    return handler
