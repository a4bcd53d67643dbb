"""Centralized logging helpers.

All modules log through ``logging.getLogger(__name__)``; this module owns the
root handler setup plus the small helpers used to emit structured DEBUG
events without paying for them when DEBUG is off.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional

from constants import Constants

_HANDLER_NAME = "gradlejava-console"


def configure_logging(level: Optional[str] = None) -> None:
    """Install the console handler on the root logger.

    The level comes from ``level`` when given, otherwise from the
    ``GRADLEJAVA_LOG_LEVEL`` environment variable, defaulting to INFO.
    Calling this more than once only updates the level.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    root = logging.getLogger()
    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level_value)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when ``logger`` would emit DEBUG records."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured log events.

    Fields set to None are dropped so records only carry what is known.
    """
    return {key: value for key, value in fields.items() if value is not None}


class Timer:
    """Context manager measuring elapsed wall time in milliseconds."""

    def __init__(self) -> None:
        self._start: Optional[float] = None
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        """Elapsed milliseconds so far, or total once the block has exited."""
        if self._start is None:
            return 0
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
