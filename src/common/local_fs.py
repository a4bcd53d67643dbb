"""Access to files of the locally checked-out project.

Every path handed to these helpers is relative to the configured local
directory. Blocking filesystem calls run on a worker thread so callers can
await them. "Not found" is reported as ``None``/``False``; any other
``OSError`` propagates to the caller.
"""
from __future__ import annotations

import asyncio
import logging
import os
from typing import Optional

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, Timer

logger = logging.getLogger(__name__)

_local_dir: Optional[str] = None


class LocalPathError(ValueError):
    """Raised when a path resolves outside of the local directory."""


def set_local_dir(path: Optional[str]) -> None:
    """Set the directory relative paths are resolved against (None resets)."""
    global _local_dir  # pylint: disable=global-statement
    _local_dir = os.path.abspath(path) if path else None


def get_local_dir() -> str:
    """Return the active local directory.

    Falls back to ``GRADLEJAVA_LOCAL_DIR`` and then the working directory.
    """
    if _local_dir:
        return _local_dir
    env_dir = os.environ.get(Constants.ENV_LOCAL_DIR)
    if env_dir and env_dir.strip():
        return os.path.abspath(env_dir.strip())
    return os.getcwd()


def ensure_local_path(path: str) -> str:
    """Resolve ``path`` inside the local directory or raise LocalPathError."""
    base = get_local_dir()
    full = os.path.normpath(os.path.join(base, path))
    if full != base and not full.startswith(base.rstrip(os.sep) + os.sep):
        raise LocalPathError(f"Path '{path}' is outside of the local directory")
    return full


def _read(full_path: str, encoding: str) -> Optional[str]:
    try:
        with open(full_path, "r", encoding=encoding, errors="replace") as fh:
            return fh.read()
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        return None


def _stat(full_path: str) -> Optional[os.stat_result]:
    try:
        return os.stat(full_path)
    except (FileNotFoundError, NotADirectoryError):
        return None


async def read_local_file(path: str, encoding: str = Constants.FILE_ENCODING) -> Optional[str]:
    """Read a local file as text; None when it does not exist."""
    full_path = ensure_local_path(path)
    with Timer() as t:
        content = await asyncio.to_thread(_read, full_path, encoding)
    if is_debug_enabled(logger):
        logger.debug(
            "Local file read",
            extra=extra_context(
                event="file_read",
                component="local_fs",
                action="read",
                outcome="missing" if content is None else "success",
                target=path,
                duration_ms=t.duration_ms(),
            ),
        )
    return content


async def local_path_exists(path: str) -> bool:
    """Return True if the local path exists (file or directory)."""
    full_path = ensure_local_path(path)
    return await asyncio.to_thread(os.path.exists, full_path)


async def stat_local_file(path: str) -> Optional[os.stat_result]:
    """Return ``os.stat`` for a local path, or None when it is missing."""
    full_path = ensure_local_path(path)
    return await asyncio.to_thread(_stat, full_path)
