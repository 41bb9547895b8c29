"""
structlog setup shared by the library, the LRU layer and the CLI.

- configure_logging(): one-time processor chain setup, returns a run id
  bound into contextvars so every following log line carries it.
- get_logger(): named bound logger (lazy, safe to call at import time).

Events end up on the stdlib "colx" logger, which only has a NullHandler
until configure_logging() attaches a stream handler.
"""

from __future__ import annotations

import logging
import sys
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, merge_contextvars
from structlog.typing import FilteringBoundLogger, Processor


ROOT_LOGGER = "colx"

_root = logging.getLogger(ROOT_LOGGER)
_root.addHandler(logging.NullHandler())
_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO", json_output: bool = False) -> str:
    """Configure structlog and return the run id bound to the log context."""
    global _handler

    log_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    processors: list[Processor] = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        # module-level loggers must keep following reconfiguration (tests capture logs)
        cache_logger_on_first_use=False,
    )

    # replace the handler from a previous call instead of stacking them
    if _handler is not None:
        _root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    _root.addHandler(_handler)
    _root.setLevel(log_level)
    _root.propagate = False

    run_id = uuid4().hex
    bind_contextvars(run_id=run_id)
    return run_id


def get_logger(name: str) -> FilteringBoundLogger:
    return structlog.wrap_logger(logging.getLogger(name), logger_name=name)


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
