"""Matching of Java runtime versions against ``^N.0.0`` constraints."""

import logging
import re
from typing import Iterable, List, Optional, Tuple, Union

import semantic_version

logger = logging.getLogger(__name__)

# 1.8.0_392 -> 8.0.392
_LEGACY_JAVA = re.compile(r"^1\.(\d+)(?:\.(\d+))?(?:_(\d+))?")
_JAVA_VERSION = re.compile(r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?")


def java_constraint_for_major(major: Union[int, str]) -> str:
    """Return the caret constraint for a Java major version."""
    return f"^{major}.0.0"


def parse_java_version(value: str) -> Optional[semantic_version.Version]:
    """Coerce a Java runtime version string into a semantic version.

    Handles bare majors ("17"), JEP 223 versions with build metadata
    ("17.0.9+9") and the legacy 1.x scheme ("1.8.0_392").
    """
    if not value:
        return None
    text = value.strip()
    legacy = _LEGACY_JAVA.match(text)
    if legacy:
        parts = (legacy.group(1), legacy.group(2) or "0", legacy.group(3) or "0")
    else:
        modern = _JAVA_VERSION.match(text)
        if not modern:
            return None
        parts = (modern.group(1), modern.group(2) or "0", modern.group(3) or "0")
    try:
        return semantic_version.Version.coerce(".".join(parts))
    except ValueError:
        return None


def _spec(constraint: str) -> Optional[semantic_version.NpmSpec]:
    try:
        return semantic_version.NpmSpec(constraint)
    except ValueError:
        logger.warning("Invalid Java constraint '%s'", constraint)
        return None


def matches_java_constraint(constraint: str, java_version: str) -> bool:
    """Return True if ``java_version`` satisfies ``constraint``."""
    spec = _spec(constraint)
    ver = parse_java_version(java_version)
    if spec is None or ver is None:
        return False
    return ver in spec


def select_java_version(constraint: str, candidates: Iterable[str]) -> Optional[str]:
    """Pick the highest candidate satisfying ``constraint``.

    Unparseable candidates are skipped. The original candidate string is
    returned, not the coerced form.
    """
    spec = _spec(constraint)
    if spec is None:
        return None
    matching: List[Tuple[semantic_version.Version, str]] = []
    for candidate in candidates:
        ver = parse_java_version(candidate)
        if ver is None:
            logger.debug("Skipping unparseable Java version '%s'", candidate)
            continue
        if ver in spec:
            matching.append((ver, candidate))
    if not matching:
        return None
    matching.sort(key=lambda item: item[0], reverse=True)
    return matching[0][1]
