from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.contextvars import clear_contextvars

import colx.logger
from colx.logger import ROOT_LOGGER


# ---- Logging cleanup: CLI and logging tests reconfigure structlog globally ----
@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    clear_contextvars()

    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if not isinstance(handler, logging.NullHandler):
            root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True
    colx.logger._handler = None
