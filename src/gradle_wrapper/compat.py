"""Gradle to Java compatibility table.

Used only when the project pins no Java version itself. Rules are ordered
from the newest Gradle release down; the first rule whose lower bound is
satisfied wins.
"""

import logging
import re
from typing import List, Optional, Tuple

from packaging import version

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled

logger = logging.getLogger(__name__)

# (lowest Gradle version, inclusive) -> Java major
GRADLE_JAVA_COMPATIBILITY: List[Tuple[version.Version, int]] = [
    (version.Version("8.5"), 21),
    (version.Version("7.3"), 17),
    (version.Version("7"), 16),
    (version.Version("5"), 11),
    (version.Version("0"), 8),
]

_NUMERIC_PREFIX = re.compile(r"^\s*v?(\d+(?:\.\d+)*)")


def parse_gradle_version(gradle_version: Optional[str]) -> Optional[version.Version]:
    """Parse the leading numeric dotted part of a Gradle version.

    ``packaging`` ignores trailing zero segments when comparing, so "7",
    "7.0" and "7.0.0" are equal. Returns None for empty or non-numeric input.
    """
    if not gradle_version:
        return None
    match = _NUMERIC_PREFIX.match(gradle_version)
    if not match:
        return None
    try:
        return version.Version(match.group(1))
    except version.InvalidVersion:
        return None


def java_major_for_gradle(gradle_version: Optional[str]) -> int:
    """Return the Java major version to use for a Gradle version.

    Unknown versions map to ``Constants.DEFAULT_JAVA_MAJOR``.
    """
    parsed = parse_gradle_version(gradle_version)
    if parsed is None:
        major = Constants.DEFAULT_JAVA_MAJOR
    else:
        major = next(java for lower, java in GRADLE_JAVA_COMPATIBILITY if parsed >= lower)
    if is_debug_enabled(logger):
        logger.debug(
            "Compatibility table lookup",
            extra=extra_context(
                event="decision",
                component="compat",
                action="java_major_for_gradle",
                outcome="default" if parsed is None else "matched",
                gradle_version=gradle_version,
                java_major=major,
            ),
        )
    return major
