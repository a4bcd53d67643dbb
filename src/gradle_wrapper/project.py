"""Whole-project inspection: Gradle version, Java constraint and wrapper command."""

import logging
import os
from typing import Iterable, Optional

from constants import Constants
from common.local_fs import read_local_file

from .command import default_gradlew_file, prepare_gradle_command
from .extract import extract_gradle_version
from .java_versions import select_java_version
from .models import ProjectJavaReport
from .utils import resolve_java_constraint

logger = logging.getLogger(__name__)


async def inspect_project(
    gradlew_file: Optional[str] = None,
    gradle_version: Optional[str] = None,
    available_java: Optional[Iterable[str]] = None,
) -> ProjectJavaReport:
    """Inspect the Gradle wrapper project around ``gradlew_file``.

    Args:
        gradlew_file: Wrapper script path relative to the local directory;
            defaults to the host OS wrapper at the project root.
        gradle_version: Explicit Gradle version. When omitted it is read from
            ``gradle/wrapper/gradle-wrapper.properties`` next to the wrapper.
        available_java: Optional Java versions to pick a compatible one from.

    Returns:
        ProjectJavaReport describing what was found.
    """
    gradlew_file = gradlew_file or default_gradlew_file()
    distribution_url = None
    if not gradle_version:
        properties_file = os.path.join(
            os.path.dirname(gradlew_file), Constants.WRAPPER_PROPERTIES_FILE
        )
        content = await read_local_file(properties_file, Constants.FILE_ENCODING)
        distribution = extract_gradle_version(content) if content else None
        if distribution is None:
            logger.warning("No Gradle distribution found in %s", properties_file)
        else:
            gradle_version = distribution.version
            distribution_url = distribution.url

    constraint, source = await resolve_java_constraint(gradle_version, gradlew_file)
    gradle_command = await prepare_gradle_command(gradlew_file)
    if gradle_command is None:
        logger.warning("Gradle wrapper %s is not an executable file", gradlew_file)

    candidates = list(available_java or [])
    selected = select_java_version(constraint, candidates) if candidates else None
    if candidates and selected is None:
        logger.warning("No available Java version satisfies %s", constraint)

    return ProjectJavaReport(
        gradlew_file=gradlew_file,
        gradle_version=gradle_version or None,
        distribution_url=distribution_url,
        java_constraint=constraint,
        constraint_source=source,
        gradle_command=gradle_command,
        selected_java_version=selected,
        available_java=candidates,
    )
