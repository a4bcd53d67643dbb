"""Unit tests for logging helpers."""

import logging

from common.logging_utils import Timer, configure_logging, extra_context, is_debug_enabled
from constants import Constants


def test_extra_context_drops_none():
    assert extra_context(event="decision", outcome=None, count=0) == {"event": "decision", "count": 0}


def test_configure_logging_is_idempotent(monkeypatch):
    monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "warning")
    configure_logging()
    configure_logging()
    root = logging.getLogger()
    names = [h.get_name() for h in root.handlers]
    assert names.count("gradlejava-console") == 1
    assert root.level == logging.WARNING


def test_explicit_level_wins_over_env(monkeypatch):
    monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "error")
    configure_logging("debug")
    assert is_debug_enabled(logging.getLogger("gradle_wrapper.utils"))


def test_timer_measures():
    with Timer() as t:
        pass
    assert t.duration_ms() >= 0
