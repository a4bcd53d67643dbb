"""Shared fixtures for the gradlejava test suite."""

import logging
import os
import textwrap
from pathlib import Path

import pytest

from common.local_fs import set_local_dir
from constants import Constants


@pytest.fixture(autouse=True)
def _isolated_local_dir(monkeypatch):
    """Keep the local directory and env overrides from leaking between tests."""
    monkeypatch.delenv(Constants.ENV_LOCAL_DIR, raising=False)
    monkeypatch.delenv(Constants.ENV_LOG_LEVEL, raising=False)
    set_local_dir(None)
    yield
    set_local_dir(None)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == "gradlejava-console":
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def gradle_project(tmp_path):
    """Factory fixture writing project files under tmp_path and selecting it as local dir."""
    set_local_dir(str(tmp_path))

    def _write(files: dict, executable: bool = True) -> Path:
        for rel_path, content in files.items():
            path = tmp_path / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content), encoding="utf-8")
            if os.path.basename(rel_path) == "gradlew":
                path.chmod(0o755 if executable else 0o644)
        return tmp_path
    return _write
