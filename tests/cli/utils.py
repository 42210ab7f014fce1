"""Shared helpers for CLI tests."""

from __future__ import annotations

import sys
from contextlib import contextmanager

from loguru import logger


@contextmanager
def logger_to_stderr(level: str = "INFO"):
    """Temporarily route Loguru output to stderr for assertion."""

    handler_id = logger.add(sys.stderr, level=level)
    try:
        yield
    finally:
        logger.remove(handler_id)
