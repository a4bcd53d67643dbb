"""Java constraint resolution for Gradle wrapper projects.

The constraint comes from the first signal that yields a value:

1. the daemon JVM pin in ``gradle/gradle-daemon-jvm.properties``
2. a ``JavaLanguageVersion.of(N)`` toolchain in the root build script
3. the Gradle/Java compatibility table
"""

import logging
import os
from typing import Optional, Tuple

from constants import Constants
from common.local_fs import local_path_exists, read_local_file
from common.logging_utils import extra_context, is_debug_enabled

from .compat import java_major_for_gradle
from .extract import extract_language_version, extract_toolchain_version
from .java_versions import java_constraint_for_major
from .models import ConstraintSource

logger = logging.getLogger(__name__)


async def get_jvm_configuration(gradlew_file: str) -> Optional[str]:
    """Return the daemon JVM ``toolchainVersion`` pinned next to the wrapper."""
    properties_file = os.path.join(
        os.path.dirname(gradlew_file),
        Constants.DAEMON_JVM_PROPERTIES_DIR,
        Constants.DAEMON_JVM_PROPERTIES_FILE,
    )
    content = await read_local_file(properties_file, Constants.FILE_ENCODING)
    return extract_toolchain_version(content)


async def get_java_language_version(gradlew_file: str) -> Optional[str]:
    """Return the toolchain ``languageVersion`` declared in the root build script.

    ``build.gradle`` is preferred when it exists; otherwise ``build.gradle.kts``
    is read, a missing file counting as no declaration.
    """
    root = os.path.dirname(gradlew_file)
    build_file = os.path.join(root, Constants.BUILD_GRADLE_FILE)
    if not await local_path_exists(build_file):
        build_file = os.path.join(root, Constants.BUILD_GRADLE_KTS_FILE)
    content = await read_local_file(build_file, Constants.FILE_ENCODING)
    return extract_language_version(content)


async def resolve_java_constraint(
    gradle_version: Optional[str], gradlew_file: str
) -> Tuple[str, ConstraintSource]:
    """Return the Java constraint together with the signal that produced it."""
    toolchain_version = await get_jvm_configuration(gradlew_file)
    if toolchain_version:
        constraint = java_constraint_for_major(toolchain_version)
        source = ConstraintSource.DAEMON_JVM
    else:
        language_version = await get_java_language_version(gradlew_file)
        if language_version:
            constraint = java_constraint_for_major(language_version)
            source = ConstraintSource.TOOLCHAIN
        else:
            constraint = java_constraint_for_major(java_major_for_gradle(gradle_version))
            source = ConstraintSource.COMPATIBILITY_TABLE

    if is_debug_enabled(logger):
        logger.debug(
            "Resolved Java constraint",
            extra=extra_context(
                event="decision",
                component="gradle_wrapper",
                action="resolve_java_constraint",
                outcome=source.value,
                gradle_version=gradle_version,
                target=gradlew_file,
                constraint=constraint,
            ),
        )
    return constraint, source


async def get_java_constraint(gradle_version: Optional[str], gradlew_file: str) -> str:
    """Return the ``^N.0.0`` Java constraint for a Gradle wrapper project.

    Args:
        gradle_version: Gradle version from the wrapper, may be empty.
        gradlew_file: Wrapper path relative to the local directory; ``""``
            means the project root.
    """
    constraint, _ = await resolve_java_constraint(gradle_version, gradlew_file)
    return constraint
