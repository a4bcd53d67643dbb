"""Version extraction from wrapper properties, daemon JVM pins and build scripts.

Each extractor returns None when the text carries no usable version, so the
callers can treat "file missing", "line missing" and "no match" alike.
"""

import re
from typing import Optional

from .models import GradleDistribution

DISTRIBUTION_URL_REGEX = re.compile(
    r"^\s*distributionUrl\s*=\s*(?P<url>\S*gradle-(?P<version>\d+(?:\.\d+)*)-(?:bin|all)\.zip)\s*$",
    re.MULTILINE,
)
_DISTRIBUTION_URL_LINE = re.compile(r"^\s*distributionUrl\s*=", re.MULTILINE)

# Whole-line match: "toolchainVersion=21.0" is not a usable pin.
TOOLCHAIN_VERSION_REGEX = re.compile(
    r"^\s*toolchainVersion\s*=\s*(?P<version>\d+)\s*$",
    re.MULTILINE,
)

LANGUAGE_VERSION_REGEX = re.compile(
    r"languageVersion\s*(?:=|\.set\(|\.assign\()\s*JavaLanguageVersion\.of\(\s*(?P<version>\d+)\s*\)"
)

_COMMENT_PREFIXES = ("#", "!")


def _strip_comments(content: str) -> str:
    """Drop Java properties comment lines."""
    return "\n".join(
        line for line in content.splitlines()
        if not line.lstrip().startswith(_COMMENT_PREFIXES)
    )


def extract_gradle_version(content: str) -> Optional[GradleDistribution]:
    """Return the distribution URL and Gradle version from wrapper properties.

    Args:
        content: Text of a gradle-wrapper.properties file.

    Returns:
        GradleDistribution, or None when there is no ``distributionUrl`` line
        or its value does not name a ``gradle-<version>-(bin|all).zip`` archive.
    """
    if not content:
        return None
    text = _strip_comments(content)
    if not _DISTRIBUTION_URL_LINE.search(text):
        return None
    match = DISTRIBUTION_URL_REGEX.search(text)
    if not match:
        return None
    return GradleDistribution(url=match.group("url"), version=match.group("version"))


def extract_toolchain_version(content: Optional[str]) -> Optional[str]:
    """Return the ``toolchainVersion`` from gradle-daemon-jvm.properties text."""
    if not content:
        return None
    match = TOOLCHAIN_VERSION_REGEX.search(_strip_comments(content))
    return match.group("version") if match else None


def extract_language_version(content: Optional[str]) -> Optional[str]:
    """Return the first ``JavaLanguageVersion.of(N)`` toolchain declaration."""
    if not content:
        return None
    match = LANGUAGE_VERSION_REGEX.search(content)
    return match.group("version") if match else None
