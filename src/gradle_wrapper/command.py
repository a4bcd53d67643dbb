"""Resolution of the Gradle wrapper executable."""

import logging
import os
import stat
import sys
from typing import Optional

from constants import Constants
from common.local_fs import stat_local_file
from common.logging_utils import extra_context, is_debug_enabled

logger = logging.getLogger(__name__)

_EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _host_platform() -> str:
    return sys.platform


def gradle_wrapper_file_name() -> str:
    """Return the wrapper invocation for the host OS."""
    if _host_platform() == "win32":
        return Constants.GRADLE_WRAPPER_WINDOWS
    return Constants.GRADLE_WRAPPER_UNIX


def default_gradlew_file() -> str:
    """Wrapper script path relative to the project root for the host OS."""
    return os.path.basename(gradle_wrapper_file_name())


async def prepare_gradle_command(gradlew_file: str) -> Optional[str]:
    """Return ``gradlew_file`` if it is an executable regular file, else None.

    A missing path is reported as None rather than raised.
    """
    gradlew_stat = await stat_local_file(gradlew_file)
    usable = (
        gradlew_stat is not None
        and stat.S_ISREG(gradlew_stat.st_mode)
        and bool(gradlew_stat.st_mode & _EXECUTABLE_BITS)
    )
    if not usable:
        logger.debug("Gradle wrapper %s is missing or not executable", gradlew_file)
        return None
    if is_debug_enabled(logger):
        logger.debug(
            "Gradle wrapper is executable",
            extra=extra_context(
                event="decision",
                component="command",
                action="prepare_gradle_command",
                outcome="executable",
                target=gradlew_file,
            ),
        )
    return gradlew_file
